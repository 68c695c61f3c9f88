"""
Shared utility functions for EmbedKit.

Provides the input sanitisation primitive, URL classification helpers,
PHP-compatible numeric helpers used by geometry resolution, and a small
markup renderer.
"""

import logging
import math
import mimetypes
import posixpath
import re
from decimal import Decimal, ROUND_HALF_UP
from html import escape
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import parse_qs, unquote, urlsplit

from . import constants

logger = logging.getLogger(__name__)

# Sanitisation rules.
URL = "url"
ALPHAEXT = "alphaext"
RAW = "raw"

URL_SCHEMES = ("http", "https", "ftp", "ftps", "rtmp", "rtmps", "rtmpe", "rtmpt")

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")
_LEADING_FLOAT_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_UNSAFE_URL_RE = re.compile(r"[\s<>\"\\^`{|}\x00-\x1f\x7f]")


def sanitize(value: Any, rule: str) -> str:
    """
    Clean a value according to a sanitisation rule.

    Never raises; returns an empty string when nothing acceptable is left.

    Rules:
        URL: absolute URL with a known scheme, or a relative URL.
        ALPHAEXT: letters, digits, underscore and hyphen only.
        RAW: text with control characters removed.

    Example:
        >>> sanitize("data-my_attr!", ALPHAEXT)
        'data-my_attr'
        >>> sanitize("javascript:alert(1)", URL)
        ''
    """
    if value is None:
        return ""
    text = str(value)
    if rule == RAW:
        return _CONTROL_RE.sub("", text)
    if rule == ALPHAEXT:
        return re.sub(r"[^A-Za-z0-9_-]", "", text)
    if rule == URL:
        return _clean_url(text)
    logger.debug(f"Unknown sanitisation rule: {rule}")
    return ""


def _clean_url(text: str) -> str:
    text = text.strip()
    if not text or _UNSAFE_URL_RE.search(text):
        return ""
    try:
        parts = urlsplit(text)
    except ValueError:
        return ""
    if parts.scheme:
        if parts.scheme.lower() not in URL_SCHEMES or not parts.netloc:
            return ""
    elif text.startswith("//") and not parts.netloc:
        return ""
    return text


def is_valid_url(value: Any) -> bool:
    """
    Check whether a value is a syntactically valid absolute URL.

    Example:
        >>> is_valid_url("https://example.com/poster.jpg")
        True
        >>> is_valid_url("/poster.jpg")
        False
    """
    if not isinstance(value, str) or not value or _UNSAFE_URL_RE.search(value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def get_scheme(url: str) -> str:
    try:
        return urlsplit(url).scheme.lower()
    except ValueError:
        return ""


def get_filename(url: str) -> str:
    """
    Get the file name a URL refers to.

    Uses the ``file`` query parameter when present (slash arguments
    disabled), otherwise the last path component. Percent-encoding is decoded.

    Example:
        >>> get_filename("https://example.com/media/My%20Clip.mp4?t=1")
        'My Clip.mp4'
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return ""
    query = parse_qs(parts.query)
    path = query["file"][0] if query.get("file") else parts.path
    return unquote(posixpath.basename(path))


def get_extension(url: str) -> str:
    filename = get_filename(url)
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].lower()


def get_mimetype(url: str) -> str:
    extension = get_extension(url)
    if extension in constants.MIMETYPES:
        return constants.MIMETYPES[extension]
    guessed, _ = mimetypes.guess_type(f"file.{extension}") if extension else (None, None)
    return guessed or "application/octet-stream"


def classify_url(url: str) -> Dict[str, str]:
    """
    Get file extension and MIME type of a media URL.

    Example:
        >>> classify_url("https://example.com/live/stream.m3u8")
        {'extension': 'm3u8', 'mimetype': 'application/x-mpegURL'}
    """
    return {
        "extension": get_extension(url),
        "mimetype": get_mimetype(url),
    }


def get_media_type(url: str) -> Optional[str]:
    """Return 'audio' or 'video' for URLs of those media groups, else None."""
    family = get_mimetype(url).split("/", 1)[0]
    if family in ("audio", "video"):
        return family
    return None


def is_numeric(value: Any) -> bool:
    """
    Check whether a value is a number or a numeric string.

    Percentages, values with units and values out of float range are not
    numeric.

    Example:
        >>> is_numeric("400"), is_numeric(400), is_numeric("50%")
        (True, True, False)
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)) or (isinstance(value, str) and _NUMERIC_RE.match(value)):
        try:
            return math.isfinite(float(value))
        except OverflowError:
            return False
    return False


def to_number(value: Any) -> Union[int, float]:
    """Convert a numeric value to int when integral, float otherwise."""
    number = float(value)
    return int(number) if number.is_integer() else number


def leading_float(value: Any) -> float:
    """Parse the leading number of a value, e.g. 30.0 for "30%"; 0.0 if none."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    match = _LEADING_FLOAT_RE.match(str(value))
    return float(match.group(0)) if match else 0.0


def round_half_up(value: float) -> int:
    """Round halves away from zero (2.5 -> 3), unlike the builtin round()."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Format a float without a trailing '.0', e.g. 30.0 -> '30'."""
    return str(to_number(value))


def render_tag(tag: str, content: str = "", attributes: Optional[Mapping[str, Any]] = None) -> str:
    """
    Render an element with escaped attributes around already-safe content.

    Attributes with a None value are skipped.

    Example:
        >>> render_tag("span", "x", {"id": "a&b"})
        '<span id="a&amp;b">x</span>'
    """
    rendered = ""
    for name, value in (attributes or {}).items():
        if value is None:
            continue
        rendered += f' {escape(str(name))}="{escape(str(value))}"'
    return f"<{tag}{rendered}>{content}</{tag}>"
