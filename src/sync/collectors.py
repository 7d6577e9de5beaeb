"""Repository listing, filtering and per-repository detail enrichment."""

from __future__ import annotations

import json
import os
import sys
from typing import Any, Dict, Iterable, List

from .config import PER_PAGE
from .errors import ParseError, SyncError
from .http_client import github_get
from .models import EnrichedRepository

REPOS_ENDPOINT_TEMPLATE = "/users/{username}/repos"
REPO_DETAILS_ENDPOINT_TEMPLATE = "/repos/{username}/{repo}"


def ensure_dir(path: str) -> None:
    """Create output directories as-needed without raising for existing folders."""
    if path:
        os.makedirs(path, exist_ok=True)


def save_json(path: str, data: Any) -> None:
    """Write JSON to disk using UTF-8 and deterministic formatting."""
    ensure_dir(os.path.dirname(os.path.abspath(path)))
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")


def _require_username(username: str) -> str:
    handle = (username or "").strip()
    if not handle:
        raise ValueError("A GitHub username is required.")
    return handle


def fetch_repositories(username: str) -> List[Dict[str, Any]]:
    """List up to PER_PAGE repositories for `username`, most recently updated first."""
    handle = _require_username(username)
    data = github_get(
        REPOS_ENDPOINT_TEMPLATE.format(username=handle),
        params={"per_page": PER_PAGE, "sort": "updated"},
    )
    if not isinstance(data, list):
        raise ParseError("Invalid response from GitHub API: expected a list of repositories")
    return data


def filter_repositories(
    repos: Iterable[Dict[str, Any]],
    *,
    exclude_forks: bool,
    exclude_names: Iterable[str],
    min_stars: int = 0,
) -> List[Dict[str, Any]]:
    """Drop forks, excluded names and repos under `min_stars`, keeping input order."""
    excluded = set(exclude_names)
    kept = []
    for repo in repos:
        if exclude_forks and repo.get("fork"):
            continue
        if repo.get("name") in excluded:
            continue
        if int(repo.get("stargazers_count") or 0) < min_stars:
            continue
        kept.append(repo)
    return kept


def fetch_repository_details(username: str, repo_name: str) -> Dict[str, Any]:
    """Fetch the single-repository resource (topics, homepage, has_pages)."""
    handle = _require_username(username)
    data = github_get(REPO_DETAILS_ENDPOINT_TEMPLATE.format(username=handle, repo=repo_name))
    if not isinstance(data, dict):
        raise ParseError(f"Invalid details payload for {repo_name}")
    return data


def enrich_repository(
    username: str,
    repo: Dict[str, Any],
    *,
    fetch_details: bool = True,
) -> EnrichedRepository:
    """Pair `repo` with its details; API failures degrade to absent details."""
    if not fetch_details:
        return EnrichedRepository(repo=repo)
    name = repo.get("name") or ""
    try:
        details = fetch_repository_details(username, name)
    except SyncError as exc:
        print(f"[warn] Could not fetch details for {name}: {exc}", file=sys.stderr)
        return EnrichedRepository(repo=repo)
    return EnrichedRepository(repo=repo, details=details)


__all__ = [
    "ensure_dir",
    "save_json",
    "fetch_repositories",
    "filter_repositories",
    "fetch_repository_details",
    "enrich_repository",
]
