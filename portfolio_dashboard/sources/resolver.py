"""Fetches the published sheet through an ordered list of mirrors."""
import asyncio
import logging
from dataclasses import dataclass, field
from urllib.parse import quote

import aiohttp

from portfolio_dashboard.models import CandidateFailure

logger = logging.getLogger(__name__)

# Template placeholders: {url} is the percent-encoded sheet URL, {raw} the URL as-is.
DEFAULT_MIRRORS = [
    "https://api.allorigins.win/raw?url={url}",
    "https://corsproxy.io/?{url}",
    "{raw}",
]

DEFAULT_MIN_LENGTH = 50


class ResolutionExhausted(Exception):
    """Raised when no candidate source returned usable text."""

    def __init__(self, failures: list[CandidateFailure]):
        self.failures = list(failures)
        super().__init__(f"Unable to fetch sheet: all {len(self.failures)} sources failed")


@dataclass(frozen=True)
class Resolution:
    """Text fetched from the first candidate that qualified."""
    url: str
    text: str
    failures: tuple[CandidateFailure, ...] = field(default_factory=tuple)


def candidate_urls(primary_url: str, mirrors: list[str]) -> list[str]:
    """Expand mirror templates into concrete URLs, preserving order.

    Args:
        primary_url: The sheet's published CSV URL
        mirrors: Templates containing {url} or {raw}

    Returns:
        List of URLs to try, duplicates removed
    """
    encoded = quote(primary_url, safe="!~*'()")
    urls: list[str] = []
    for template in mirrors:
        url = template.replace("{raw}", primary_url).replace("{url}", encoded)
        if url not in urls:
            urls.append(url)
    return urls


class SourceResolver:
    """Tries each candidate URL in turn until one returns plausible CSV text.

    A candidate qualifies when the request succeeds with a 2xx status and
    the body is longer than ``min_length`` characters. Nothing is retried
    and nothing is cached between calls.
    """

    def __init__(
        self,
        url: str,
        mirrors: list[str] | None = None,
        min_length: int = DEFAULT_MIN_LENGTH,
        timeout_seconds: float = 15.0,
        session: aiohttp.ClientSession | None = None,
    ):
        """Initialize the resolver.

        Args:
            url: Primary sheet URL
            mirrors: Ordered mirror templates (default: DEFAULT_MIRRORS)
            min_length: Bodies of this length or shorter are rejected
            timeout_seconds: Per-request transport timeout
            session: Optional shared aiohttp session (caller closes it)
        """
        self.url = url
        self.mirrors = list(mirrors) if mirrors is not None else list(DEFAULT_MIRRORS)
        self.min_length = min_length
        self.timeout_seconds = timeout_seconds
        self._session = session

    @property
    def candidates(self) -> list[str]:
        return candidate_urls(self.url, self.mirrors)

    async def resolve(self) -> Resolution:
        """Fetch the sheet from the first qualifying candidate.

        Returns:
            Resolution with the winning URL, its text, and earlier failures

        Raises:
            ResolutionExhausted: If every candidate failed
        """
        if self._session is not None:
            return await self._resolve_with(self._session)

        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            return await self._resolve_with(session)

    async def _resolve_with(self, session: aiohttp.ClientSession) -> Resolution:
        candidates = self.candidates
        failures: list[CandidateFailure] = []

        for step, url in enumerate(candidates, start=1):
            logger.debug(
                f"STEP {step}/{len(candidates)}: Trying sheet source",
                extra={
                    "extra_data": {
                        "action": "resolve_attempt",
                        "url": url,
                    }
                },
            )

            try:
                text = await self._fetch(session, url)
            except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as e:
                reason = str(e) or type(e).__name__
                logger.debug(f"Source failed: {url} ({reason})")
                failures.append(CandidateFailure(url=url, reason=reason))
                continue

            if len(text) <= self.min_length:
                reason = f"response too short ({len(text)} chars)"
                logger.debug(f"Source rejected: {url} ({reason})")
                failures.append(CandidateFailure(url=url, reason=reason))
                continue

            logger.info(f"Fetched sheet from {url} ({len(text)} chars)")
            return Resolution(url=url, text=text, failures=tuple(failures))

        logger.warning(f"All {len(candidates)} sheet sources failed")
        raise ResolutionExhausted(failures)

    async def _fetch(self, session: aiohttp.ClientSession, url: str) -> str:
        """GET a single candidate and return its body.

        Raises:
            aiohttp.ClientResponseError: If the status is outside 200-299
        """
        async with session.get(url) as response:
            if not 200 <= response.status < 300:
                raise aiohttp.ClientResponseError(
                    response.request_info,
                    response.history,
                    status=response.status,
                    message=response.reason or f"HTTP {response.status}",
                    headers=response.headers,
                )
            return await response.text()
