"""Map enriched GitHub repositories onto portfolio project records."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Tuple

from .config import MAX_TECH, PAGES_URL_TEMPLATE
from .models import EnrichedRepository, ProjectRecord

# Order matters: labels are added in this order when several patterns match.
TECH_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("react", "React"),
    ("vue", "Vue.js"),
    ("angular", "Angular"),
    ("express", "Express.js"),
    ("fastapi", "FastAPI"),
    ("flask", "Flask"),
    ("django", "Django"),
    ("spring", "Spring Boot"),
    ("nextjs", "Next.js"),
    ("nuxt", "Nuxt.js"),
    ("gatsby", "Gatsby"),
    ("svelte", "Svelte"),
    ("tailwind", "TailwindCSS"),
    ("bootstrap", "Bootstrap"),
    ("jquery", "jQuery"),
    ("tensorflow", "TensorFlow"),
    ("pytorch", "PyTorch"),
    ("scikit", "Scikit-learn"),
    ("pandas", "Pandas"),
    ("numpy", "NumPy"),
    ("mysql", "MySQL"),
    ("postgresql", "PostgreSQL"),
    ("mongodb", "MongoDB"),
    ("redis", "Redis"),
    ("docker", "Docker"),
    ("kubernetes", "Kubernetes"),
    ("aws", "AWS"),
    ("azure", "Azure"),
    ("gcp", "Google Cloud"),
    ("firebase", "Firebase"),
    ("api", "REST API"),
    ("graphql", "GraphQL"),
    ("websocket", "WebSocket"),
    ("etl", "ETL"),
    ("ml", "Machine Learning"),
    ("ai", "Artificial Intelligence"),
    ("data", "Data Science"),
    ("analytics", "Analytics"),
    ("dashboard", "Dashboard"),
    ("scraper", "Web Scraping"),
    ("bot", "Bot/Automation"),
    ("blockchain", "Blockchain"),
    ("crypto", "Cryptocurrency"),
)

FEATURED_TOPIC = "featured"
TITLE_SEPARATORS = re.compile(r"[-_]+")
WORD_START = re.compile(r"\b\w")


def humanize_title(name: str) -> str:
    """'my-cool_app' -> 'My Cool App'."""
    spaced = TITLE_SEPARATORS.sub(" ", name or "").strip()
    return WORD_START.sub(lambda m: m.group(0).upper(), spaced)


def capitalize_topic(topic: str) -> str:
    return topic[:1].upper() + topic[1:]


def match_keywords(text: str) -> List[str]:
    """Return every keyword label whose pattern occurs in `text` (case-insensitive)."""
    lowered = (text or "").lower()
    return [label for pattern, label in TECH_KEYWORDS if pattern in lowered]


def detect_tech_stack(enriched: EnrichedRepository, limit: int = MAX_TECH) -> List[str]:
    """Primary language, keyword labels, then topics; deduplicated and capped."""
    repo = enriched.repo
    candidates: List[str] = []
    if repo.get("language"):
        candidates.append(repo["language"])
    candidates.extend(match_keywords(f"{repo.get('name') or ''} {repo.get('description') or ''}"))
    candidates.extend(capitalize_topic(topic) for topic in enriched.topics if topic)

    stack: List[str] = []
    for item in candidates:
        if item not in stack:
            stack.append(item)
    return stack[:limit]


def describe(repo: Dict[str, Any], tech: List[str]) -> str:
    if repo.get("description"):
        return repo["description"]
    subject = f"{repo.get('language') or 'Software'} project"
    if not tech:
        return subject
    return f"{subject} with {' and '.join(tech[:2])}"


def resolve_demo_url(username: str, enriched: EnrichedRepository) -> Optional[str]:
    """Details homepage, listing homepage, then the GitHub Pages URL if enabled."""
    if enriched.details is not None and enriched.details.get("homepage"):
        return enriched.details["homepage"]
    if enriched.repo.get("homepage"):
        return enriched.repo["homepage"]
    if enriched.has_pages:
        return PAGES_URL_TEMPLATE.format(username=username, repo=enriched.name)
    return None


def is_featured(enriched: EnrichedRepository) -> bool:
    if enriched.stars >= 1:
        return True
    return FEATURED_TOPIC in enriched.detail_topics or FEATURED_TOPIC in enriched.raw_topics


def transform_repository(username: str, enriched: EnrichedRepository) -> ProjectRecord:
    repo = enriched.repo
    tech = detect_tech_stack(enriched)
    return ProjectRecord(
        id=repo["id"],
        title=humanize_title(repo["name"]),
        description=describe(repo, tech),
        tech=tech,
        github=repo.get("html_url") or "",
        demo=resolve_demo_url(username, enriched),
        language=repo.get("language"),
        stars=enriched.stars,
        topics=enriched.topics,
        created=repo.get("created_at"),
        updated=repo.get("updated_at"),
        featured=is_featured(enriched),
    )


__all__ = [
    "TECH_KEYWORDS",
    "humanize_title",
    "match_keywords",
    "detect_tech_stack",
    "describe",
    "resolve_demo_url",
    "is_featured",
    "transform_repository",
]
