"""Tests for src.sync.projects covering titles, tech detection and record shaping.

Run with:
    pytest tests/test_projects.py --maxfail=1 -v --cov=src.sync.projects --cov-report=term-missing
"""

import pytest

from src.sync import projects
from src.sync.models import EnrichedRepository


def _repo(**overrides):
    repo = {
        "id": 7,
        "name": "my-app",
        "description": None,
        "language": "Python",
        "fork": False,
        "stargazers_count": 2,
        "topics": ["api"],
        "homepage": None,
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-02-01T00:00:00Z",
        "html_url": "https://github.com/octo/my-app",
    }
    repo.update(overrides)
    return repo


@pytest.mark.parametrize(
    "name,expected",
    [("my-app", "My App"), ("data_pipeline-v2", "Data Pipeline V2"), ("Portfolio", "Portfolio")],
)
def test_humanize_title(name, expected):
    assert projects.humanize_title(name) == expected


def test_keyword_table_is_ordered_pairs():
    assert projects.TECH_KEYWORDS[0] == ("react", "React")
    assert ("etl", "ETL") in projects.TECH_KEYWORDS
    assert projects.match_keywords("Flask REST api") == ["Flask", "REST API"]


def test_my_app_scenario():
    record = projects.transform_repository("octo", EnrichedRepository(repo=_repo()))
    assert record.title == "My App"
    # "my-app " contains no keyword pattern, so only language and topic remain.
    assert record.tech == ["Python", "Api"]
    assert record.featured is True
    assert record.description == "Python project with Python and Api"
    assert record.topics == ["api"]
    assert record.github == "https://github.com/octo/my-app"
    assert record.demo is None


def test_tech_order_dedupe_and_cap():
    repo = _repo(
        name="react-dashboard",
        description="Django api with docker and redis",
        language="Python",
        topics=["python", "react", "extra"],
    )
    tech = projects.detect_tech_stack(EnrichedRepository(repo=repo))
    assert tech[0] == "Python"
    assert len(tech) == 5
    assert len(set(tech)) == len(tech)
    assert tech == ["Python", "React", "Django", "Redis", "Docker"]


def test_tech_dedupes_topic_matching_language():
    repo = _repo(name="x", language="Go", topics=["go", "cli"])
    assert projects.detect_tech_stack(EnrichedRepository(repo=repo)) == ["Go", "Cli"]


def test_tech_without_language():
    repo = _repo(name="x", language=None, topics=[])
    assert projects.detect_tech_stack(EnrichedRepository(repo=repo)) == []
    assert projects.describe(repo, []) == "Software project"


def test_detail_topics_take_precedence():
    enriched = EnrichedRepository(repo=_repo(topics=["raw"]), details={"topics": ["cli"]})
    record = projects.transform_repository("octo", enriched)
    assert record.topics == ["cli"]
    assert "Cli" in record.tech and "Raw" not in record.tech


def test_description_kept_when_present():
    record = projects.transform_repository(
        "octo", EnrichedRepository(repo=_repo(description="A tool"))
    )
    assert record.description == "A tool"


def test_demo_url_resolution_order():
    details_home = EnrichedRepository(
        repo=_repo(homepage="https://raw.example"),
        details={"homepage": "https://details.example", "has_pages": True},
    )
    assert projects.resolve_demo_url("octo", details_home) == "https://details.example"

    raw_home = EnrichedRepository(repo=_repo(homepage="https://raw.example"), details={"homepage": ""})
    assert projects.resolve_demo_url("octo", raw_home) == "https://raw.example"

    pages = EnrichedRepository(repo=_repo(), details={"has_pages": True})
    assert projects.resolve_demo_url("octo", pages) == "https://octo.github.io/my-app/"

    assert projects.resolve_demo_url("octo", EnrichedRepository(repo=_repo())) is None


def test_featured_flag():
    assert projects.is_featured(EnrichedRepository(repo=_repo(stargazers_count=0, topics=[]))) is False
    assert projects.is_featured(
        EnrichedRepository(repo=_repo(stargazers_count=0, topics=["featured"]))
    ) is True
    assert projects.is_featured(
        EnrichedRepository(repo=_repo(stargazers_count=0, topics=[]), details={"topics": ["featured"]})
    ) is True


def test_record_serializes_to_document_shape():
    data = projects.transform_repository("octo", EnrichedRepository(repo=_repo())).to_dict()
    assert set(data) == {
        "id", "title", "description", "tech", "github", "demo", "language",
        "stars", "topics", "created", "updated", "featured",
    }
    assert data["stars"] == 2
    assert data["created"] == "2024-01-01T00:00:00Z"
