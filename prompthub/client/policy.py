# prompthub/client/policy.py
from dataclasses import dataclass

@dataclass(frozen=True)
class FetchPolicy:
    """How one kind of resource is cached and retried on the client.

    There is deliberately no refresh interval: data is only fetched when a
    caller asks for it or a key is invalidated.
    """
    dedup_interval: float
    revalidate_on_focus: bool = False
    revalidate_on_reconnect: bool = False
    error_retry_count: int = 1
    error_retry_interval: float = 5.0

    def __post_init__(self):
        if self.dedup_interval < 0:
            raise ValueError("dedup_interval must be >= 0")
        if self.error_retry_count < 0:
            raise ValueError("error_retry_count must be >= 0")

OWNER_STATS_POLICY = FetchPolicy(dedup_interval=300.0)
EXTERNAL_METRICS_POLICY = FetchPolicy(dedup_interval=600.0)
