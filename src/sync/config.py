"""Central configuration constants for the portfolio project sync."""

from __future__ import annotations

import os
from typing import Set

from src.secrets import resolve_github_token


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off"}


def _env_names(name: str, default: Set[str]) -> Set[str]:
    raw = os.getenv(name)
    if raw is None:
        return set(default)
    return {item.strip() for item in raw.split(",") if item.strip()}


GITHUB_TOKEN = resolve_github_token()
GITHUB_USERNAME = os.getenv("GITHUB_USERNAME", "miqdad-dev")
USER_AGENT = "Portfolio-Sync-Script"
ACCEPT_HEADER = "application/vnd.github.v3+json"
BASE_URL = "https://api.github.com"
PAGES_URL_TEMPLATE = "https://{username}.github.io/{repo}/"
PER_PAGE = 100
REQUEST_TIMEOUT = 10
OUTPUT_FILE = os.getenv("PROJECTS_OUTPUT_FILE", "projects.json")
EXCLUDE_FORKS = _env_flag("EXCLUDE_FORKS", True)
MIN_STARS = int(os.getenv("MIN_STARS", "0"))
EXCLUDE_REPOS = _env_names("EXCLUDE_REPOS", {"Portfolio"})
FETCH_DETAILS = _env_flag("FETCH_DETAILS", True)
MAX_TECH = 5

__all__ = [
    "GITHUB_TOKEN",
    "GITHUB_USERNAME",
    "USER_AGENT",
    "ACCEPT_HEADER",
    "BASE_URL",
    "PAGES_URL_TEMPLATE",
    "PER_PAGE",
    "REQUEST_TIMEOUT",
    "OUTPUT_FILE",
    "EXCLUDE_FORKS",
    "MIN_STARS",
    "EXCLUDE_REPOS",
    "FETCH_DETAILS",
    "MAX_TECH",
]
