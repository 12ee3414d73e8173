"""Global configuration constants for the project.

Defines paths, dataset filenames, widget container ids and the fixed
structured-data metadata used across the loader and the renderers.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
LOG_DIR: Path = PROJECT_ROOT / "logs"

# Dataset locations (relative to the data base URL or directory)
DEFAULT_DATA_BASE: str = str(PROJECT_ROOT / "data")
SITE_CONFIG_FILENAME: str = "site-config.json"
OPENINGS_FILENAME: str = "openings.json"
CONTENT_FILENAME: str = "content.json"

# Fetch defaults
DEFAULT_REQUEST_TIMEOUT: int = 30

# Openings metadata keys (never treated as storage buckets)
OPENINGS_METADATA_PREFIX: str = "_"
OPENINGS_LAST_UPDATED_KEY: str = "_lastUpdated"

# Display location key -> canonical openings storage bucket. Both the
# configuration keys and the dashed location ids are accepted.
LOCATION_STORAGE_KEYS: dict[str, str] = {
    "queenAnne": "queenAnne",
    "queen-anne": "queenAnne",
    "capitolHill": "capitolHill",
    "capitol-hill": "capitolHill",
}

# Badge styling
DEFAULT_BADGE_COLOR: str = "gray"
BADGE_CLASS_FORMAT: str = "badge--{color}"

# Rendering modes for the openings widget
MODE_SUMMARY: str = "summary"
MODE_FULL: str = "full"
OPENINGS_TITLE: str = "Current Openings"

# Structured data (schema.org) defaults
DEFAULT_SITE_URL: str = "https://beginningsschools.org"
SCHEMA_CONTEXT: str = "https://schema.org"
SCHEMA_BUSINESS_TYPE: str = "ChildCare"
SCHEMA_ADDRESS_COUNTRY: str = "US"
SCHEMA_OPENING_HOURS: str = "Mo-Fr 07:00-18:00"
SCHEMA_PRICE_RANGE: str = "$$"
SCHEMA_AREA_SERVED: str = "Seattle"
SCHEMA_CREDENTIAL: str = "NAEYC Accreditation"
LOCATION_URL_FORMAT: str = "{site_url}/locations/{location_id}"
STRUCTURED_DATA_SCRIPT_TYPE: str = "application/ld+json"

# Host page containers
TESTIMONIALS_SELECTOR: str = ".testimonials-carousel"
ENROLLMENT_PROCESS_CONTAINER: str = "enrollment-process"

# Page plan: (container id, mode, location filter) for every openings widget
PAGE_OPENINGS_WIDGETS: list[tuple[str, str, str | None]] = [
    ("openings-home", MODE_SUMMARY, None),
    ("openings-admissions", MODE_FULL, None),
    ("openings-queen-anne", MODE_FULL, "queenAnne"),
    ("openings-capitol-hill", MODE_FULL, "capitolHill"),
]

# Website generation defaults
TEMPLATE_PATH: Path = PROJECT_ROOT / "templates" / "index.html"
OUTPUT_HTML_FILE: Path = PROJECT_ROOT / "output" / "index.html"

# CLI defaults and logging
LOG_FILENAME_RENDER_SITE: str = "render_site.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
