# prompthub/services/github_service.py
"""
Repository metrics from the GitHub REST API.

The public endpoint never fails: upstream problems come back as a Degraded
result carrying a zeroed snapshot plus the cause, so the page still renders
and the cause still reaches the logs.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

import aiohttp
from dateutil import parser as date_parser

from prompthub.config import settings
from prompthub.utils.logger import logger

@dataclass
class ExternalMetricsSnapshot:
    stars: int = 0
    forks: int = 0
    watchers: int = 0
    open_issues: int = 0
    language: Optional[str] = None
    last_updated: Optional[str] = None
    created_at: Optional[str] = None
    topics: List[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ExternalMetricsSnapshot":
        return cls(
            stars=int(payload.get("stargazers_count") or 0),
            forks=int(payload.get("forks_count") or 0),
            watchers=int(payload.get("watchers_count") or 0),
            open_issues=int(payload.get("open_issues_count") or 0),
            language=payload.get("language"),
            last_updated=_normalize_timestamp(payload.get("updated_at")),
            created_at=_normalize_timestamp(payload.get("created_at")),
            topics=[str(topic) for topic in payload.get("topics") or []],
        )

    def to_response(self) -> Dict[str, Any]:
        return {
            "stars": self.stars,
            "forks": self.forks,
            "watchers": self.watchers,
            "openIssues": self.open_issues,
            "language": self.language,
            "lastUpdated": self.last_updated,
            "createdAt": self.created_at,
            "topics": list(self.topics),
        }

@dataclass
class Ok:
    snapshot: ExternalMetricsSnapshot

@dataclass
class Degraded:
    snapshot: ExternalMetricsSnapshot
    cause: str

MetricsResult = Union[Ok, Degraded]

DEGRADED_MESSAGE = "GitHub data unavailable, showing defaults"

def _normalize_timestamp(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    try:
        return date_parser.isoparse(value).isoformat()
    except (ValueError, TypeError):
        return None

def result_to_response(result: MetricsResult) -> Dict[str, Any]:
    body = result.snapshot.to_response()
    if isinstance(result, Degraded):
        body["error"] = DEGRADED_MESSAGE
    return body

class GithubService:
    def __init__(self, api_url: str = None, timeout_seconds: float = None, session_factory=aiohttp.ClientSession):
        self.api_url = (api_url or settings.github_api_url).rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds or settings.github_timeout_seconds)
        self.session_factory = session_factory

    async def fetch_external_metrics(self, repo_identifier: Optional[str], auth_token: Optional[str] = None) -> MetricsResult:
        if not repo_identifier:
            # Not configured: zeros, no request
            return Ok(ExternalMetricsSnapshot())

        url = f"{self.api_url}/repos/{repo_identifier.strip('/')}"
        headers = {"Accept": "application/vnd.github.v3+json"}
        if auth_token:
            headers["Authorization"] = f"Bearer {auth_token}"

        try:
            async with self.session_factory(timeout=self.timeout) as session:
                async with session.get(url, headers=headers) as response:
                    if response.status != 200:
                        body = await response.text()
                        logger.error(f" GitHub API error: {response.status} for {repo_identifier} - {body[:200]}")
                        return Degraded(ExternalMetricsSnapshot(), f"HTTP {response.status}")
                    payload = await response.json(content_type=None)
        except asyncio.TimeoutError:
            logger.error(f" GitHub API timed out after {self.timeout.total}s: {repo_identifier}")
            return Degraded(ExternalMetricsSnapshot(), "timeout")
        except (aiohttp.ClientError, ValueError) as e:
            logger.error(f" GitHub API request failed: {repo_identifier}: {e}")
            return Degraded(ExternalMetricsSnapshot(), str(e) or e.__class__.__name__)

        try:
            snapshot = ExternalMetricsSnapshot.from_payload(payload)
        except (AttributeError, TypeError, ValueError):
            logger.error(f" Unexpected GitHub payload for {repo_identifier}: {str(payload)[:200]}")
            return Degraded(ExternalMetricsSnapshot(), "malformed payload")
        logger.info(f" GitHub stats fetched: {repo_identifier} (stars={snapshot.stars}, forks={snapshot.forks})")
        return Ok(snapshot)

github_service = GithubService()
