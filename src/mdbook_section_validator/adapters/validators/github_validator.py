"""Validate links against GitHub and arbitrary HTTP servers."""

from typing import Optional

import httpx
import structlog

from mdbook_section_validator.config import Settings
from mdbook_section_validator.core import (
    Identity,
    IssueValidator,
    OpaqueLink,
    TrackerItem,
    Verdict,
)

logger = structlog.get_logger(__name__)


class GitHubIssueValidator(IssueValidator):
    """Treat open GitHub issues/PRs and reachable URLs as still valid.
    
    Every failure (transport error, non-2xx status, unexpected body) is
    logged and reported as no longer valid.
    """
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = settings or Settings()
        self.token = settings.github_token
        self.user_agent = settings.http.user_agent
        self.timeout = settings.http.request_timeout
        self.api_base = settings.http.github_api_base.rstrip("/")
        self.transport = transport
    
    async def validate(self, issue: Identity) -> Verdict:
        """Check one identity against its remote state."""
        if isinstance(issue, TrackerItem):
            verdict = await self._github_validation_result(issue)
        elif isinstance(issue, OpaqueLink):
            verdict = await self._arbitrary_url_validation_result(issue.source_url)
        else:
            raise TypeError(f"Unknown identity: {issue!r}")
        
        logger.debug("Checked link", url=issue.source_url, verdict=verdict.value)
        return verdict
    
    async def _github_validation_result(self, issue: TrackerItem) -> Verdict:
        """Query the issue or pull request state; only "open" is valid."""
        request_url = (
            f"{self.api_base}/repos/{issue.owner}/{issue.repo}"
            f"/{issue.kind.api_resource}/{issue.number}"
        )
        
        async with self._client() as client:
            try:
                response = await client.get(request_url, headers=self._github_headers())
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPError as e:
                logger.warning("Bad response from GitHub", url=request_url, error=str(e))
                return Verdict.NO_LONGER_VALID
            except ValueError as e:
                logger.warning("Unable to parse GitHub response", url=request_url, error=str(e))
                return Verdict.NO_LONGER_VALID
        
        state = data.get("state") if isinstance(data, dict) else None
        if not isinstance(state, str):
            logger.warning("GitHub response has no state", url=request_url)
            return Verdict.NO_LONGER_VALID
        
        return Verdict.STILL_VALID if state == "open" else Verdict.NO_LONGER_VALID
    
    async def _arbitrary_url_validation_result(self, url: str) -> Verdict:
        """Probe the URL with HEAD; any 2xx is valid."""
        async with self._client() as client:
            try:
                response = await client.head(url, headers={"User-Agent": self.user_agent})
            except httpx.HTTPError as e:
                logger.warning("Link probe failed", url=url, error=str(e))
                return Verdict.NO_LONGER_VALID
        
        if response.is_success:
            return Verdict.STILL_VALID
        
        logger.warning("Link probe returned non-success status", url=url, status=response.status_code)
        return Verdict.NO_LONGER_VALID
    
    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self.transport,
        )
    
    def _github_headers(self) -> dict[str, str]:
        """Get headers for GitHub API requests."""
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        
        return headers
