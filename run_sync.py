"""Convenience shim to sync projects.json from GitHub."""

from __future__ import annotations

from src.sync.runner import main as sync_main


if __name__ == "__main__":
    sync_main()
