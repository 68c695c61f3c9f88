"""
Attribute tokenizer for media markup.

Extracts attributes from the opening tag of an HTML fragment without a full
markup parser, so hand-authored and malformed content never raises. Also
classifies generic (global) attributes that are carried through untouched,
and reads hyperlink attributes with BeautifulSoup.
"""

import html
import logging
import re
from typing import Dict, Optional

from bs4 import BeautifulSoup

from ..utils import sanitize, ALPHAEXT, RAW

logger = logging.getLogger(__name__)

# https://developer.mozilla.org/en-US/docs/Web/HTML/Global_attributes
GLOBAL_ATTRIBUTES = frozenset([
    "accesskey",
    "autocapitalize",
    "class",
    "contenteditable",
    "contextmenu",
    "dir",
    "draggable",
    "dropzone",
    "hidden",
    "id",
    "is",
    "itemid",
    "itemprop",
    "itemref",
    "itemscope",
    "itemtype",
    "lang",
    "role",
    "slot",
    "spellcheck",
    "style",
    "tabindex",
    "title",
    "translate",
])

_TAG_NAME_RE = re.compile(r"^</?\s*([A-Za-z][A-Za-z0-9-]*)")
_EMBED_TAG_RE = re.compile(r"^\s*<(video|audio|a)\b", re.IGNORECASE)
_QUOTED_ATTR_RE = re.compile(
    r"""(?<![^\s/"'])([^\s"'=<>/]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""",
    re.DOTALL,
)
_BARE_ATTR_RE = re.compile(r"^([A-Za-z_][\w:.-]*)(?:=([^\s\"'=<>`]*))?$")


def is_global_attribute(name: str) -> bool:
    """
    Check whether an attribute is a generic markup attribute.

    Covers the global attributes plus custom data and ARIA attributes.

    Example:
        >>> is_global_attribute("class"), is_global_attribute("data-foo")
        (True, True)
        >>> is_global_attribute("aria-label"), is_global_attribute("role")
        (True, True)
        >>> is_global_attribute("poster")
        False
    """
    return name in GLOBAL_ATTRIBUTES or name.startswith(("data-", "aria-"))


def get_embed_tag_type(markup: str) -> Optional[str]:
    """Return 'video', 'audio' or 'a' when the markup opens with that tag."""
    match = _EMBED_TAG_RE.match(markup or "")
    return match.group(1).lower() if match else None


def _opening_tag(markup: str) -> str:
    """
    Get the opening tag of a fragment, without its angle brackets.

    Scans to the first '>' outside a quoted value. An unterminated tag
    yields the rest of the fragment.
    """
    markup = markup.lstrip()
    if not markup.startswith("<"):
        return ""
    quote = None
    for index in range(1, len(markup)):
        char = markup[index]
        if quote:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == ">":
            return markup[1:index]
    return markup[1:]


def _attribute_name(raw: str) -> str:
    return sanitize(raw.lower(), ALPHAEXT)


def _attribute_value(raw: str) -> str:
    return sanitize(html.unescape(raw), RAW)


def tokenize_tag(markup: str) -> Dict[str, str]:
    """
    Extract the attributes of the opening tag of a markup fragment.

    Quoted ``name="value"`` pairs are consumed first; the remaining tokens are
    then read as valueless attributes (empty string value). The tag name
    itself is never reported as an attribute. Names are lower-cased and
    sanitised, values are entity-decoded. When a name repeats, the first
    valued occurrence wins.

    Args:
        markup: HTML fragment starting with a tag, e.g. '<video controls src="a.mp4">'

    Returns:
        Dictionary of attribute name -> value

    Example:
        >>> tokenize_tag('<video src="clip.mp4" controls>')
        {'src': 'clip.mp4', 'controls': ''}
    """
    attributes: Dict[str, str] = {}
    tag = _opening_tag(markup or "")
    name_match = _TAG_NAME_RE.match(tag)
    if not name_match:
        return attributes
    body = tag[name_match.end():]

    def _consume(match: re.Match) -> str:
        name = _attribute_name(match.group(1))
        value = match.group(2) if match.group(2) is not None else match.group(3)
        if name and name not in attributes:
            attributes[name] = _attribute_value(value)
        return " "

    body = _QUOTED_ATTR_RE.sub(_consume, body)

    for token in body.split():
        token = token.strip("/")
        match = _BARE_ATTR_RE.match(token)
        if not match:
            if token:
                logger.debug(f"Skipping malformed attribute token: {token!r}")
            continue
        name = _attribute_name(match.group(1))
        if name and name not in attributes:
            attributes[name] = _attribute_value(match.group(2) or "")

    return attributes


def parse_anchor_attributes(markup: str) -> Dict[str, str]:
    """
    Read the attributes of the first <a> element in a fragment.

    Multi-valued attributes such as ``class`` are joined with spaces.

    Example:
        >>> parse_anchor_attributes('<a href="v.mp4" class="a b">Clip</a>')
        {'href': 'v.mp4', 'class': 'a b'}
    """
    soup = BeautifulSoup(markup or "", "html.parser")
    anchor = soup.find("a")
    if anchor is None:
        return {}

    attributes: Dict[str, str] = {}
    for name, value in anchor.attrs.items():
        if isinstance(value, list):
            value = " ".join(value)
        key = _attribute_name(name)
        if key:
            attributes[key] = sanitize(value, RAW)
    return attributes
