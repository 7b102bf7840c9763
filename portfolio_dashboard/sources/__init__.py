"""Sheet sources."""

from portfolio_dashboard.sources.resolver import (
    DEFAULT_MIRRORS,
    Resolution,
    ResolutionExhausted,
    SourceResolver,
    candidate_urls,
)

__all__ = [
    "DEFAULT_MIRRORS",
    "Resolution",
    "ResolutionExhausted",
    "SourceResolver",
    "candidate_urls",
]
