"""Tests for dataset parsing and the immutable site context."""

import pytest

from site_widgets.exceptions import DataValidationError
from site_widgets.pipeline.data_loader.models import (
    BadgeColor,
    parse_content,
    parse_openings,
    parse_site_config,
)


def test_badge_color_known_and_default():
    assert BadgeColor.resolve("green") is BadgeColor.GREEN
    assert BadgeColor.resolve("RED ") is BadgeColor.RED
    assert BadgeColor.resolve(None) is BadgeColor.GRAY
    assert BadgeColor.resolve("") is BadgeColor.GRAY
    assert BadgeColor.resolve("chartreuse") is BadgeColor.GRAY
    assert BadgeColor.resolve(42) is BadgeColor.GRAY
    assert BadgeColor.GREEN.css_class == "badge--green"


def test_parse_site_config_keeps_program_order(config_doc):
    config_doc["programs"] = {
        "toddler": {"name": "Toddler", "ageRange": "1-2"},
        "infant": {"name": "Infant", "ageRange": "0-1"},
    }
    cfg = parse_site_config(config_doc)
    assert list(cfg.programs) == ["toddler", "infant"]
    qa = cfg.locations["queenAnne"]
    assert qa.id == "queen-anne"
    assert qa.full_name == "Beginnings School - Queen Anne"
    assert qa.address.zip == "98101"
    assert cfg.programs["infant"].age_range == "0-1"


def test_parse_site_config_passes_values_verbatim(config_doc):
    config_doc["locations"]["queenAnne"]["phone"] = "206.555.0100 ext 4"
    cfg = parse_site_config(config_doc)
    assert cfg.locations["queenAnne"].phone == "206.555.0100 ext 4"


def test_parse_site_config_rejects_bad_shapes():
    with pytest.raises(DataValidationError):
        parse_site_config([])
    with pytest.raises(DataValidationError):
        parse_site_config({"locations": ["a"], "programs": {}})
    with pytest.raises(DataValidationError):
        parse_site_config({"locations": {"a": None}, "programs": {}})


def test_parse_site_config_missing_sections_are_empty():
    cfg = parse_site_config({})
    assert dict(cfg.locations) == {}
    assert dict(cfg.programs) == {}


def test_site_config_is_read_only(config_doc):
    cfg = parse_site_config(config_doc)
    with pytest.raises(TypeError):
        cfg.programs["new"] = None  # type: ignore[index]


def test_parse_openings_skips_metadata_and_nulls():
    data = parse_openings(
        {
            "_lastUpdated": "Tuesday-ish",
            "_comment": "ignored",
            "queenAnne": {
                "infant": {"statusText": "Open", "badgeColor": "blue", "note": ""},
                "toddler": None,
            },
            "capitolHill": None,
        }
    )
    assert data.last_updated == "Tuesday-ish"
    assert list(data.buckets) == ["queenAnne"]
    opening = data.buckets["queenAnne"]["infant"]
    assert opening.status_text == "Open"
    assert opening.badge_color is BadgeColor.BLUE
    assert opening.note is None


def test_parse_openings_missing_color_defaults():
    data = parse_openings({"queenAnne": {"infant": {"statusText": "Waitlist"}}})
    assert data.buckets["queenAnne"]["infant"].badge_color is BadgeColor.GRAY
    assert data.last_updated == ""


def test_parse_openings_rejects_non_object_opening():
    with pytest.raises(DataValidationError):
        parse_openings({"queenAnne": {"infant": "Open"}})


def test_parse_content(content_doc):
    content = parse_content(content_doc)
    assert [s.number for s in content.steps] == ["1", "2"]
    assert content.testimonials[0].author == "Sam"


def test_parse_content_absent_sections():
    content = parse_content({})
    assert content.steps is None
    assert content.testimonials is None
    assert parse_content({"enrollmentProcess": {}}).steps is None
