"""HTTP helpers for the GitHub REST API used by the sync workflow."""

from __future__ import annotations

import sys
from typing import Any, Dict, Optional

import requests

from .config import ACCEPT_HEADER, BASE_URL, GITHUB_TOKEN, REQUEST_TIMEOUT, USER_AGENT
from .errors import ApiError, ParseError, TransportError

SESSION = requests.Session()
SESSION.headers.update(
    {
        "Accept": ACCEPT_HEADER,
        "User-Agent": USER_AGENT,
    }
)


def set_auth_header(token: Optional[str]) -> None:
    """Set or clear the SESSION Authorization header for the given token."""
    if token:
        SESSION.headers["Authorization"] = f"Bearer {token}"
    else:
        SESSION.headers.pop("Authorization", None)


def error_message(resp: requests.Response) -> str:
    """Extract GitHub's own error text from a failed response."""
    try:
        body = resp.json()
    except ValueError:
        body = {"text": (resp.text or "")[:300]}
    if not isinstance(body, dict):
        return str(body)[:300]
    return str(body.get("message") or body.get("error") or body.get("text") or "")


def log_http_error(exc: ApiError) -> None:
    """Print a short, human-readable message when GitHub returns an error."""
    print(f"[error] HTTP {exc.status_code} for {exc.url}\n  -> {exc.message}", file=sys.stderr)


def github_get(path: str, params: Optional[Dict[str, Any]] = None) -> Any:
    """GET `path` from the API and return the decoded JSON body.

    One attempt only, bounded by REQUEST_TIMEOUT. Failures are mapped onto
    TransportError, ApiError and ParseError.
    """
    url = f"{BASE_URL}{path}"
    try:
        resp = SESSION.get(url, params=params, timeout=REQUEST_TIMEOUT)
    except requests.Timeout as exc:
        raise TransportError(f"Request timeout after {REQUEST_TIMEOUT}s for {url}") from exc
    except requests.RequestException as exc:
        raise TransportError(f"Request to {url} failed: {exc}") from exc

    if not 200 <= resp.status_code < 300:
        raise ApiError(resp.status_code, error_message(resp), url)

    try:
        return resp.json()
    except ValueError as exc:
        raise ParseError(f"JSON parse error for {url}: {exc}") from exc


set_auth_header(GITHUB_TOKEN)


__all__ = [
    "SESSION",
    "set_auth_header",
    "error_message",
    "log_http_error",
    "github_get",
]
