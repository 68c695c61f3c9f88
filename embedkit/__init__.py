"""
EmbedKit - Media Embed Configuration Toolkit

Converts embedded media references found in rendered content (HTML5
<video>/<audio> elements, or links carrying ``data-jwplayer-*`` attributes)
into a normalized player configuration: sources, caption tracks, poster,
dimensions and playback options.

Features:
- Tokenize media tag attributes from loosely structured markup
- Extract caption and chapter tracks
- Parse link attribute options, including inline subtitle lists
- Classify progressive, streaming and adaptive sources
- Resolve width, height and aspect ratio from options and defaults
- Assemble the final setup payload and placeholder markup

Example usage:
    >>> from embedkit import JWPlayerEngine, PlayerConfig
    >>>
    >>> engine = JWPlayerEngine(PlayerConfig.from_mapping({"licensekey": "KEY"}))
    >>> result = engine.embed(
    ...     urls=["https://example.com/video.mp4"],
    ...     options={"originaltext": '<video controls poster="https://example.com/p.jpg"></video>'},
    ... )
    >>> result.configuration.to_dict()["setupdata"]["width"]
    400
"""

import logging

__version__ = "0.1.0"
__author__ = "EmbedKit Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core utility functions
from .utils import (
    sanitize,
    is_valid_url,
    classify_url,
    get_extension,
    get_filename,
    get_mimetype,
    get_media_type,
    is_numeric,
    render_tag,
)

# Markup parsing
from .markup import (
    GLOBAL_ATTRIBUTES,
    is_global_attribute,
    tokenize_tag,
    parse_anchor_attributes,
    map_tag_options,
    extract_tracks,
    get_options_from_media_tag,
    parse_subtitles,
    map_link_options,
)

# Source and geometry resolution
from .geometry import (
    classify_source,
    resolve_sources,
    resolve_geometry,
    resolve,
    Resolution,
    ResolvedSources,
)

# Data models
from .models import (
    MediaKind,
    SourceClass,
    MediaUrl,
    TrackDescriptor,
    SourceDescriptor,
    PlayerOptions,
    PlaylistItem,
    Geometry,
    EmbedConfiguration,
    EmbedResult,
    PageRequirements,
    PlayerConfig,
)

# Player engines
from .players import MediaPlayer, JWPlayerEngine, get_player

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Utility functions
    "sanitize",
    "is_valid_url",
    "classify_url",
    "get_extension",
    "get_filename",
    "get_mimetype",
    "get_media_type",
    "is_numeric",
    "render_tag",

    # Markup parsing
    "GLOBAL_ATTRIBUTES",
    "is_global_attribute",
    "tokenize_tag",
    "parse_anchor_attributes",
    "map_tag_options",
    "extract_tracks",
    "get_options_from_media_tag",
    "parse_subtitles",
    "map_link_options",

    # Resolution
    "classify_source",
    "resolve_sources",
    "resolve_geometry",
    "resolve",
    "Resolution",
    "ResolvedSources",

    # Models
    "MediaKind",
    "SourceClass",
    "MediaUrl",
    "TrackDescriptor",
    "SourceDescriptor",
    "PlayerOptions",
    "PlaylistItem",
    "Geometry",
    "EmbedConfiguration",
    "EmbedResult",
    "PageRequirements",
    "PlayerConfig",

    # Players
    "MediaPlayer",
    "JWPlayerEngine",
    "get_player",
]
