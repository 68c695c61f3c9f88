"""
Markup parsing package.

Turns <video>/<audio> elements and hyperlink attributes into normalized
player options, including caption tracks and pass-through global attributes.
"""

from .tokenizer import (
    GLOBAL_ATTRIBUTES,
    is_global_attribute,
    get_embed_tag_type,
    tokenize_tag,
    parse_anchor_attributes,
)

from .options import (
    map_tag_options,
    build_track,
    extract_tracks,
    get_options_from_media_tag,
    parse_subtitles,
    map_link_options,
)

__all__ = [
    # Tokenizer
    "GLOBAL_ATTRIBUTES",
    "is_global_attribute",
    "get_embed_tag_type",
    "tokenize_tag",
    "parse_anchor_attributes",

    # Option mapping
    "map_tag_options",
    "build_track",
    "extract_tracks",
    "get_options_from_media_tag",
    "parse_subtitles",
    "map_link_options",
]
