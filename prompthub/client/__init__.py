"""
Presentation-side client for the statistics endpoints.
Requests are coalesced per key, retried once, and never polled.
"""

from .policy import FetchPolicy, OWNER_STATS_POLICY, EXTERNAL_METRICS_POLICY
from .cache import DedupingCache, FetchState
from .stats_client import StatsClient

__all__ = [
    "FetchPolicy",
    "OWNER_STATS_POLICY",
    "EXTERNAL_METRICS_POLICY",
    "DedupingCache",
    "FetchState",
    "StatsClient",
]
