"""Error taxonomy for GitHub API calls made by the sync."""

from __future__ import annotations

from typing import Optional


class SyncError(Exception):
    """Base class for failures talking to the GitHub API."""


class TransportError(SyncError):
    """Network failure or request timeout."""


class ApiError(SyncError):
    """GitHub answered with a non-success status."""

    def __init__(self, status_code: int, message: Optional[str] = None, url: str = "") -> None:
        self.status_code = status_code
        self.message = message or ""
        self.url = url
        detail = f"GitHub API returned HTTP {status_code}"
        if url:
            detail += f" for {url}"
        if self.message:
            detail += f": {self.message}"
        super().__init__(detail)


class ParseError(SyncError):
    """Response body was not the JSON we expected."""


__all__ = ["SyncError", "TransportError", "ApiError", "ParseError"]
