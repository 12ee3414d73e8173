"""Site widgets package.

This package renders the dynamic parts of a small multi-location child-care
website. It merges three independently maintained datasets (site
configuration, enrollment openings and marketing content) into HTML
fragments written into the placeholder containers of a host page, and adds
schema.org structured data for every location.

Package Structure
-----------------
- `pipeline/data_loader/`:
    Concurrent, all-or-nothing loading of the three JSON datasets into an
    immutable `SiteContext`.
- `pipeline/widget_renderer/`:
    Pure renderers (openings panel, badges, process steps, testimonials,
    structured data), the host document wrapper and the page runner.
- `render_site.py`: Command-line entrypoint.
- `config.py`: All configuration constants, as UPPER_SNAKE_CASE.
- `exceptions.py`: Project-specific exception classes.

Examples
--------
>>> import site_widgets
>>> # See `site_widgets.render_site` for the command-line entrypoint.
"""
