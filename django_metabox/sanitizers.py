"""Cleaning applied to every submitted meta value before it is stored.

All sanitizers accept any value (``None`` and non-strings are coerced), never
raise, and are idempotent: ``f(f(x)) == f(x)``.
"""
from __future__ import annotations

import re

from django.utils.html import strip_tags

__all__ = ["sanitize_text", "sanitize_textarea", "sanitize_html"]

_LINE_BREAKS = re.compile(r"[\r\n\t]+")
_SPACES = re.compile(r" {2,}")
_TRAILING_SPACES = re.compile(r"[ \t]+(?=\n)|(?<=\n)[ \t]+")

_UNSAFE_ELEMENTS = re.compile(
    r"<(script|style|iframe|object|embed)\b[^>]*>.*?</\1\s*>|<(script|style|iframe|object|embed)\b[^>]*/?>",
    re.IGNORECASE | re.DOTALL,
)
_OPEN_TAG = re.compile(r"""<(?P<name>[a-zA-Z][^\s/>]*)(?P<attrs>(?:"[^"]*"|'[^']*'|[^'"<>])*)>""")
# Browsers accept "/" as well as whitespace before an attribute name.
_ATTRIBUTE = re.compile(
    r"""(?P<sep>[\s/]+)(?P<name>[^\s/>="']+)(?P<value>\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>"']*))?"""
)
_URL_ATTRIBUTES = ("href", "src", "action", "formaction", "xlink:href")
_IGNORED_URL_CHARS = re.compile(r"[\s\x00-\x1f]+")


def _as_text(value) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def sanitize_text(value) -> str:
    """Single-line text: no markup, no line breaks, single spaces, trimmed."""
    text = strip_tags(_as_text(value))
    text = _LINE_BREAKS.sub(" ", text)
    text = _SPACES.sub(" ", text)
    return text.strip()


def sanitize_textarea(value) -> str:
    """Multi-line text: no markup, line breaks kept, trimmed."""
    text = strip_tags(_as_text(value)).replace("\r\n", "\n").replace("\r", "\n")
    text = _TRAILING_SPACES.sub("", text)
    return text.strip()


def _clean_attribute(match) -> str:
    name = match["name"].lower()
    if name.startswith("on"):
        return ""
    if name in _URL_ATTRIBUTES and match["value"]:
        url = match["value"].split("=", 1)[1].strip().strip("\"'")
        if _IGNORED_URL_CHARS.sub("", url).lower().startswith("javascript:"):
            return f'{match["sep"]}{match["name"]}="#"'
    return match.group(0)


def _clean_tag(match) -> str:
    attrs = _ATTRIBUTE.sub(_clean_attribute, match["attrs"])
    return f"<{match['name']}{attrs}>"


def sanitize_html(value) -> str:
    """Rich text: markup kept, active content removed."""
    html = _as_text(value)
    previous = None
    # Removing one element can reveal another, so loop until stable.
    while previous != html:
        previous = html
        html = _UNSAFE_ELEMENTS.sub("", html)
        html = _OPEN_TAG.sub(_clean_tag, html)
    return html.strip()
