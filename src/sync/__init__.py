"""Portfolio project sync: GitHub repositories to projects.json."""

from .runner import main, sync_projects

__all__ = ["main", "sync_projects"]
