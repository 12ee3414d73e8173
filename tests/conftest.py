"""Pytest configuration and shared fixtures.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides small, fully controlled datasets and their loaded contexts.
"""

import json
import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from site_widgets.pipeline.data_loader.models import (  # noqa: E402
    SiteContext,
    parse_content,
    parse_openings,
    parse_site_config,
)


def location_doc(location_id: str, name: str) -> dict:
    return {
        "id": location_id,
        "name": name,
        "fullName": f"Beginnings School - {name}",
        "description": f"Early learning in {name}.",
        "address": {
            "street": "1 Main St",
            "city": "Seattle",
            "state": "WA",
            "zip": "98101",
        },
        "phone": "(206) 555-0100",
        "email": f"{location_id}@example.org",
    }


@pytest.fixture
def config_doc() -> dict:
    """Two locations (A=queenAnne, B=capitolHill) and two programs."""
    return {
        "locations": {
            "queenAnne": location_doc("queen-anne", "Queen Anne"),
            "capitolHill": location_doc("capitol-hill", "Capitol Hill"),
        },
        "programs": {
            "infant": {"name": "Infant", "ageRange": "6wk-12mo"},
            "toddler": {"name": "Toddler", "ageRange": "12-24mo"},
        },
    }


@pytest.fixture
def openings_doc() -> dict:
    return {
        "_lastUpdated": "Oct 1, 2026",
        "queenAnne": {
            "infant": {
                "statusText": "Open",
                "badgeColor": "green",
                "note": "Ask about sibling discount",
            }
        },
    }


@pytest.fixture
def content_doc() -> dict:
    return {
        "testimonials": [
            {"quote": "Wonderful.", "author": "Sam", "details": "Parent"},
        ],
        "enrollmentProcess": {
            "steps": [
                {"number": 1, "title": "Tour", "description": "Come visit."},
                {"number": 2, "title": "Apply", "description": "Send the form."},
            ]
        },
    }


def build_context(config: dict, openings: dict, content: dict) -> SiteContext:
    return SiteContext.create(
        parse_site_config(config), parse_openings(openings), parse_content(content)
    )


@pytest.fixture
def context(config_doc, openings_doc, content_doc) -> SiteContext:
    return build_context(config_doc, openings_doc, content_doc)


@pytest.fixture
def data_dir(tmp_path: Path, config_doc, openings_doc, content_doc) -> Path:
    """Write the three datasets to a temporary directory."""
    (tmp_path / "site-config.json").write_text(json.dumps(config_doc), encoding="utf-8")
    (tmp_path / "openings.json").write_text(json.dumps(openings_doc), encoding="utf-8")
    (tmp_path / "content.json").write_text(json.dumps(content_doc), encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_context():
    """Factory building a context from (possibly modified) raw documents."""
    return build_context
