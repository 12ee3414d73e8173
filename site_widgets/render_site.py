"""Render the site page: load the datasets and fill every widget container.

Loads the site configuration, openings and content datasets, renders the
openings panels, enrollment steps, testimonials and structured data into the
host HTML template, and writes the finished page.

Usage::

    python -m site_widgets.render_site --data https://beginningsschools.org/data \
        --template templates/index.html --output public/index.html
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from site_widgets.config import (
    LOG_DIR,
    LOG_FILENAME_RENDER_SITE,
    LOG_FORMAT,
    OUTPUT_HTML_FILE,
    TEMPLATE_PATH,
)
from site_widgets.pipeline.widget_renderer.runner import run_from_config

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO", enable_file: bool = True) -> None:
    """Configure console logging and, optionally, a log file under ``LOG_DIR``.

    All existing root handlers are replaced. A file handler that cannot be
    created is skipped so a read-only checkout still logs to the console.
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0,
                logging.FileHandler(LOG_DIR / LOG_FILENAME_RENDER_SITE, mode="a"),
            )
        except OSError:
            pass
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments with attributes ``template``, ``output``, ``data``,
        ``site_url`` and ``log_level``.
    """
    parser = argparse.ArgumentParser(
        description="Render the site widgets into the host HTML page."
    )
    parser.add_argument("--template", type=Path, default=TEMPLATE_PATH)
    parser.add_argument("--output", type=Path, default=OUTPUT_HTML_FILE)
    parser.add_argument(
        "--data",
        type=str,
        default=None,
        help="Base URL or directory holding the JSON datasets",
    )
    parser.add_argument("--site-url", type=str, default=None)
    parser.add_argument(
        "--log-level", type=str, default=os.environ.get("LOG_LEVEL", "INFO")
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    args = parse_arguments(argv)
    setup_logging(args.log_level, enable_file=not os.environ.get("DISABLE_FILE_LOGS"))
    ok = run_from_config(
        template_path=args.template,
        output_file=args.output,
        data_base=args.data,
        site_url=args.site_url,
    )
    # Failures were already logged where they happened.
    logger.debug("render_site finished (ok=%s)", ok)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
