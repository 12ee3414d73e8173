"""Host HTML document with named placeholder containers.

``HostDocument`` is the page the widgets are written into: a parsed HTML
template whose containers are addressed by CSS selector (usually ``#id``).
Rendering a widget replaces a container's entire inner markup; structured
data is appended to ``<head>`` as script blocks.

Example
-------
>>> doc = HostDocument.from_html('<html><head></head><body><div id="x"></div></body></html>')
>>> doc.set_inner_html("#x", "<p>Hi</p>")
True
>>> doc.inner_html("#x")
'<p>Hi</p>'
"""

from __future__ import annotations

from pathlib import Path

import soupsieve
from bs4 import BeautifulSoup, Tag

PARSER = "html.parser"
SCRIPT_KEY_ATTR = "data-widget-key"


def container_selector(container_id: str) -> str:
    """Return the CSS selector for a container id.

    The id is CSS-escaped, so ids such as ``2026-openings`` or
    ``openings:home`` select their element instead of failing to parse.

    Examples
    --------
    >>> container_selector("openings-home")
    '#openings-home'
    >>> container_selector("2026-openings")
    '#\\\\32 026-openings'
    """
    return f"#{soupsieve.escape(container_id)}"


class HostDocument:
    """Mutable page wrapper around a BeautifulSoup tree."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @classmethod
    def from_html(cls, html_text: str) -> HostDocument:
        return cls(BeautifulSoup(html_text, PARSER))

    @classmethod
    def from_file(cls, path: Path) -> HostDocument:
        with Path(path).open("r", encoding="utf-8") as fh:
            return cls.from_html(fh.read())

    def find(self, selector: str) -> Tag | None:
        return self._soup.select_one(selector)

    def has_target(self, selector: str) -> bool:
        return self.find(selector) is not None

    def set_inner_html(self, selector: str, markup: str) -> bool:
        """Replace the children of ``selector`` with ``markup``.

        Returns ``False`` when the target does not exist.
        """
        element = self.find(selector)
        if element is None:
            return False
        element.clear()
        element.append(BeautifulSoup(markup, PARSER))
        return True

    def inner_html(self, selector: str) -> str | None:
        element = self.find(selector)
        if element is None:
            return None
        return element.decode_contents()

    def _ensure_head(self) -> Tag:
        head = self._soup.head
        if head is not None:
            return head
        head = self._soup.new_tag("head")
        html_tag = self._soup.html
        if html_tag is not None:
            html_tag.insert(0, head)
        else:
            self._soup.insert(0, head)
        return head

    def append_head_script(self, text: str, script_type: str, key: str) -> Tag:
        """Append a ``<script>`` to ``<head>``, replacing one with the same key.

        ``text`` must already be safe to embed; it is inserted as-is.
        """
        head = self._ensure_head()
        for existing in head.find_all("script", attrs={SCRIPT_KEY_ATTR: key}):
            existing.decompose()
        script = self._soup.new_tag(
            "script", attrs={"type": script_type, SCRIPT_KEY_ATTR: key}
        )
        script.string = text
        head.append(script)
        return script

    def remove_head_scripts(self, key_prefix: str, keep: set[str]) -> int:
        """Drop ``<head>`` scripts keyed under ``key_prefix`` but not in ``keep``.

        Returns the number of scripts removed.
        """
        head = self._soup.head
        if head is None:
            return 0
        stale = [
            script
            for script in head.find_all("script", attrs={SCRIPT_KEY_ATTR: True})
            if script[SCRIPT_KEY_ATTR].startswith(key_prefix)
            and script[SCRIPT_KEY_ATTR] not in keep
        ]
        for script in stale:
            script.decompose()
        return len(stale)

    def head_scripts(self, script_type: str) -> list[str]:
        head = self._soup.head
        if head is None:
            return []
        # get_text() skips script bodies on recent bs4 releases.
        return [
            str(s.string or "")
            for s in head.find_all("script", attrs={"type": script_type})
        ]

    def to_html(self) -> str:
        return str(self._soup)
