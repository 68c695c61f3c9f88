"""
Player option extraction from media markup.

Maps native <video>/<audio> tag attributes and nested <track> elements, or
``data-jwplayer-*`` attributes of a hyperlink, onto one normalized
PlayerOptions structure. Extraction is best effort: anything that fails a
shape check is dropped rather than reported.
"""

import logging
import re
from typing import Dict, List, Mapping, Optional

from .. import constants
from ..models import MediaKind, MediaUrl, PlayerOptions, TrackDescriptor
from ..utils import is_valid_url, sanitize, URL
from .tokenizer import get_embed_tag_type, is_global_attribute, tokenize_tag

logger = logging.getLogger(__name__)

# Tag attribute -> player option. Width and height are not mapped, the
# embed call supplies the size.
VIDEO_TAG_OPTIONS = {
    "autoplay": "autostart",
    "controls": "controls",
    "loop": "repeat",
    "muted": "mute",
    "poster": "image",
}

AUDIO_TAG_OPTIONS = {
    "autoplay": "autostart",
    "controls": "controls",
    "loop": "repeat",
    "muted": "mute",
}

TAG_OPTIONS = {
    MediaKind.VIDEO: VIDEO_TAG_OPTIONS,
    MediaKind.AUDIO: AUDIO_TAG_OPTIONS,
}

# Native boolean attributes are true whenever present.
BOOLEAN_TAG_ATTRIBUTES = ("autoplay", "controls", "loop", "muted")

VALID_TRACK_KINDS = ("subtitles", "captions", "chapters")

_TRACK_TAG_RE = re.compile(r"<track\b[^>]*>", re.IGNORECASE)
_SUBTITLES_SPLIT_RE = re.compile(r"[,;] ")


def _global_attributes(attributes: Mapping[str, str]) -> Dict[str, str]:
    return {name: value for name, value in attributes.items() if is_global_attribute(name)}


def map_tag_options(kind: MediaKind, attributes: Mapping[str, str]) -> PlayerOptions:
    """
    Map native media tag attributes to player options.

    A poster is kept only when it survives URL sanitisation.

    Example:
        >>> options = map_tag_options(MediaKind.VIDEO, {"loop": "", "poster": "/p.jpg"})
        >>> options["repeat"], options["image"]
        (True, '/p.jpg')
    """
    options = PlayerOptions()
    for attribute, option in TAG_OPTIONS[kind].items():
        if attribute not in attributes:
            continue
        if attribute in BOOLEAN_TAG_ATTRIBUTES:
            options[option] = True
        else:
            options[option] = attributes[attribute]

    if "image" in options:
        image = sanitize(options["image"], URL)
        if image:
            options["image"] = MediaUrl(image)
        else:
            logger.debug(f"Ignoring invalid poster URL: {options['image']!r}")
            options.pop("image")
    return options


def build_track(attributes: Mapping[str, str]) -> Optional[TrackDescriptor]:
    """
    Build a track from <track> attributes, or None when it is unusable.

    Subtitles are treated as captions. A ``default`` attribute always turns
    the track into the default captions track, whatever its kind.
    """
    source = sanitize(attributes.get("src"), URL)
    if not source:
        logger.debug("Dropping track without a usable source")
        return None

    kind = (attributes.get("kind") or "").strip().lower()
    if kind and kind not in VALID_TRACK_KINDS:
        logger.debug(f"Dropping track with unsupported kind: {kind}")
        return None

    label = attributes.get("label") or None
    srclang = attributes.get("srclang")
    if srclang:
        label = f"{label} ({srclang})" if label else srclang

    track = TrackDescriptor(file=source, label=label)
    track.kind = "chapters" if kind == "chapters" else "captions"

    if "default" in attributes:
        track.kind = "captions"
        track.default = True
    return track


def extract_tracks(markup: str) -> List[TrackDescriptor]:
    """
    Extract caption and chapter tracks from media markup, in document order.

    Example:
        >>> html = '<video><track src="en.vtt" srclang="en" label="English" default></video>'
        >>> extract_tracks(html)[0].label
        'English (en)'
    """
    tracks = []
    for track_html in _TRACK_TAG_RE.findall(markup or ""):
        track = build_track(tokenize_tag(track_html))
        if track is not None:
            tracks.append(track)
    return tracks


def get_options_from_media_tag(markup: str) -> PlayerOptions:
    """
    Parse a <video> or <audio> element into player options.

    Global attributes found on the tag are kept in ``global_attributes``;
    nested tracks become the ``subtitles`` option.
    """
    tag_type = get_embed_tag_type(markup)
    if tag_type not in ("video", "audio"):
        return PlayerOptions()

    attributes = tokenize_tag(markup)
    options = map_tag_options(MediaKind.from_tag(tag_type), attributes)
    options.global_attributes = _global_attributes(attributes)

    tracks = extract_tracks(markup)
    if tracks:
        options["subtitles"] = tracks
    return options


def parse_subtitles(value: str) -> List[TrackDescriptor]:
    """
    Parse the inline subtitles syntax of a link attribute.

    Tracks are separated by ", " or "; " and are written either as
    "Label: URL" or as a bare URL.

    Example:
        >>> tracks = parse_subtitles("English: https://x/en.vtt, https://x/fr.vtt")
        >>> [(t.label, t.file) for t in tracks]
        [('English', 'https://x/en.vtt'), (None, 'https://x/fr.vtt')]
    """
    tracks = []
    for entry in _SUBTITLES_SPLIT_RE.split(value):
        parts = entry.split(": ", 1)
        if len(parts) == 2:
            label, source = parts[0].strip(), parts[1]
        else:
            label, source = None, parts[0]
        source = sanitize(source, URL)
        if not source:
            logger.debug(f"Dropping subtitles entry without a usable URL: {entry!r}")
            continue
        tracks.append(TrackDescriptor(file=source, label=label or None))
    return tracks


def map_link_options(attributes: Mapping[str, str]) -> PlayerOptions:
    """
    Map hyperlink attributes to player options.

    ``data-jwplayer-<option>`` attributes become options; values that are
    absolute URLs become MediaUrl. Other global attributes are passed through.

    Example:
        >>> options = map_link_options({"data-jwplayer-mediaid": "abc", "class": "x"})
        >>> options["mediaid"], options.global_attributes
        ('abc', {'class': 'x'})
    """
    options = PlayerOptions()
    prefix = constants.LINK_OPTION_PREFIX
    for name, value in attributes.items():
        if name.startswith(prefix):
            option = name[len(prefix):]
            if not option:
                continue
            value = str(value).strip()
            if option == "subtitles":
                options[option] = parse_subtitles(value)
            elif is_valid_url(value) and sanitize(value, URL):
                options[option] = MediaUrl(sanitize(value, URL))
            else:
                options[option] = value
        elif is_global_attribute(name):
            options.global_attributes[name] = value
    return options
