"""Entry points for syncing portfolio projects from GitHub into projects.json."""

from __future__ import annotations

import datetime as dt
import json
import os
import sys
from typing import Any, Dict, Iterable, List, Optional

from . import config
from .collectors import enrich_repository, fetch_repositories, filter_repositories, save_json
from .errors import ApiError, SyncError
from .http_client import log_http_error
from .models import ProjectRecord
from .projects import transform_repository

USAGE = """
GitHub Project Sync Tool

Usage:
  python run_sync.py [options]

Options:
  --help, -h     Show this help message
  --dry-run      Show what would be synced without writing files
  --verbose, -v  Show detailed output

Examples:
  python run_sync.py              # Sync projects
  python run_sync.py --dry-run    # Preview changes
"""

_EPOCH = dt.datetime.min.replace(tzinfo=dt.timezone.utc)


def _parse_timestamp(value: Optional[str]) -> dt.datetime:
    if not value:
        return _EPOCH
    try:
        parsed = dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return _EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt.timezone.utc)
    return parsed


def build_projects(
    username: str,
    repos: Iterable[Dict[str, Any]],
    *,
    fetch_details: bool = True,
    verbose: bool = False,
) -> List[ProjectRecord]:
    """Enrich and transform each repository in turn, skipping the ones that fail."""
    projects: List[ProjectRecord] = []
    for repo in repos:
        name = repo.get("name") or "<unnamed>"
        print(f"  processing: {name}")
        try:
            enriched = enrich_repository(username, repo, fetch_details=fetch_details)
            project = transform_repository(username, enriched)
        except Exception as exc:
            print(f"[warn] Error processing {name}: {exc}", file=sys.stderr)
            continue
        if verbose:
            print(f"    details: {'fetched' if enriched.has_details else 'absent'}")
            print(f"    tech: {', '.join(project.tech) or '-'}")
            print(f"    demo: {project.demo or '-'}")
        projects.append(project)
    return projects


def sort_projects(projects: Iterable[ProjectRecord]) -> List[ProjectRecord]:
    """Most stars first; equal stars fall back to the most recent update."""
    return sorted(
        projects,
        key=lambda project: (project.stars, _parse_timestamp(project.updated)),
        reverse=True,
    )


def _now_iso(now: Optional[dt.datetime] = None) -> str:
    moment = now or dt.datetime.now(dt.timezone.utc)
    return moment.astimezone(dt.timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_document(projects: List[ProjectRecord], now: Optional[dt.datetime] = None) -> Dict[str, Any]:
    records = [project.to_dict() for project in projects]
    return {
        "lastUpdated": _now_iso(now),
        "totalProjects": len(records),
        "projects": records,
    }


def print_summary(document: Dict[str, Any]) -> None:
    projects = document["projects"]
    print(f"Total projects: {document['totalProjects']}")
    print(f"Featured projects: {sum(1 for project in projects if project['featured'])}")
    print("\nProjects summary:")
    for project in projects:
        marker = " ⭐" if project["featured"] else ""
        print(f"  • {project['title']} ({', '.join(project['tech'][:3])}){marker}")


def sync_projects(
    *,
    dry_run: bool = False,
    verbose: bool = False,
    output_path: Optional[str] = None,
    username: Optional[str] = None,
) -> Dict[str, Any]:
    """Run fetch → filter → enrich → transform → sort and persist the document.

    With `dry_run` the document is printed instead of written; the output file
    is left untouched. API errors from the repository listing propagate.
    """
    username = username or config.GITHUB_USERNAME
    output_path = output_path or os.path.join(os.getcwd(), config.OUTPUT_FILE)

    print("Syncing projects from GitHub...")
    if verbose:
        auth = "authenticated" if config.GITHUB_TOKEN else "unauthenticated (no GITHUB_TOKEN)"
        print(f"Using {auth} requests, details fetch {'on' if config.FETCH_DETAILS else 'off'}")
    print(f"Fetching repositories for {username}...")
    repos = fetch_repositories(username)
    print(f"Found {len(repos)} repositories")

    filtered = filter_repositories(
        repos,
        exclude_forks=config.EXCLUDE_FORKS,
        exclude_names=config.EXCLUDE_REPOS,
        min_stars=config.MIN_STARS,
    )
    print(f"Filtered to {len(filtered)} repositories")

    projects = build_projects(
        username,
        filtered,
        fetch_details=config.FETCH_DETAILS,
        verbose=verbose,
    )
    document = build_document(sort_projects(projects))

    if dry_run:
        print("Dry run mode - no files will be written")
        print(json.dumps(document, indent=2, ensure_ascii=False))
    else:
        save_json(output_path, document)
        print(f"Successfully updated {output_path}")
    print_summary(document)
    return document


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point; unknown arguments are ignored."""
    args = sys.argv[1:] if argv is None else list(argv)
    if "--help" in args or "-h" in args:
        print(USAGE)
        sys.exit(0)

    dry_run = "--dry-run" in args
    verbose = "--verbose" in args or "-v" in args
    try:
        sync_projects(dry_run=dry_run, verbose=verbose)
    except ApiError as exc:
        log_http_error(exc)
        print("[error] Error syncing projects.", file=sys.stderr)
        sys.exit(1)
    except (SyncError, ValueError, OSError) as exc:
        print(f"[error] Error syncing projects: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
