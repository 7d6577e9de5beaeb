"""Dataclasses passed between the sync stages."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class EnrichedRepository:
    """A listed repository plus its detail payload, or None when unavailable."""

    repo: Dict[str, Any]
    details: Optional[Dict[str, Any]] = None

    @property
    def has_details(self) -> bool:
        return self.details is not None

    @property
    def name(self) -> str:
        return self.repo.get("name") or ""

    @property
    def stars(self) -> int:
        return int(self.repo.get("stargazers_count") or 0)

    @property
    def raw_topics(self) -> List[str]:
        return list(self.repo.get("topics") or [])

    @property
    def detail_topics(self) -> List[str]:
        if self.details is None:
            return []
        return list(self.details.get("topics") or [])

    @property
    def topics(self) -> List[str]:
        """Detail topics win over the listing's topics."""
        if self.details is not None and self.details.get("topics") is not None:
            return self.detail_topics
        return self.raw_topics

    @property
    def has_pages(self) -> bool:
        return bool(self.details and self.details.get("has_pages"))


@dataclass
class ProjectRecord:
    id: int
    title: str
    description: str
    tech: List[str] = field(default_factory=list)
    github: str = ""
    demo: Optional[str] = None
    language: Optional[str] = None
    stars: int = 0
    topics: List[str] = field(default_factory=list)
    created: Optional[str] = None
    updated: Optional[str] = None
    featured: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["EnrichedRepository", "ProjectRecord"]
