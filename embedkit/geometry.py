"""
Source and geometry resolution for EmbedKit.

Classifies media URLs into progressive, streaming and adaptive sources,
orders them for the player, and resolves the final player width and height
(or aspect ratio) from per-call values, explicit options and configured
defaults.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import unquote

from . import constants
from .models import Dimension, Geometry, PlayerConfig, PlayerOptions, SourceClass, SourceDescriptor
from .utils import (
    classify_url,
    format_number,
    get_media_type,
    get_scheme,
    is_numeric,
    leading_float,
    round_half_up,
    to_number,
)

logger = logging.getLogger(__name__)


@dataclass
class ResolvedSources:
    """Ordered sources plus the rendering hints they require."""
    sources: List[SourceDescriptor] = field(default_factory=list)
    hints: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_streams(self) -> bool:
        return any(source.is_stream for source in self.sources)

    @property
    def is_audio(self) -> bool:
        return bool(self.sources) and get_media_type(self.sources[0].file) == "audio"


@dataclass
class Resolution:
    """Result of resolving sources and geometry for one embed."""
    sources: List[SourceDescriptor]
    geometry: Geometry
    hints: Dict[str, Any]

    @property
    def has_streams(self) -> bool:
        return any(source.is_stream for source in self.sources)


def classify_source(url: str) -> SourceClass:
    """
    Classify a media URL by delivery method.

    Example:
        >>> classify_source("https://example.com/a.mpd")
        <SourceClass.ADAPTIVE: 'adaptive'>
        >>> classify_source("rtmp://example.com/live/stream")
        <SourceClass.STREAMING: 'streaming'>
    """
    extension = classify_url(url)["extension"]
    if extension in constants.ADAPTIVE_EXTENSIONS:
        return SourceClass.ADAPTIVE
    if get_scheme(url) == constants.RTMP_SCHEME or extension in constants.SEGMENTED_EXTENSIONS:
        return SourceClass.STREAMING
    return SourceClass.PROGRESSIVE


def resolve_sources(urls: Sequence[str], options: Optional[PlayerOptions] = None) -> ResolvedSources:
    """
    Build the ordered source list for a set of media URLs.

    Streaming and adaptive sources come first, progressive ones after, each
    group keeping its order of appearance. Adaptive sources set the ``dash``
    hint; streaming sources set ``primary: flash`` unless the options already
    choose a rendering mode.

    Example:
        >>> result = resolve_sources(["https://x/a.mp4", "https://x/b.m3u8"])
        >>> [source.file for source in result.sources]
        ['https://x/b.m3u8', 'https://x/a.mp4']
    """
    options = options or PlayerOptions()
    streams: List[SourceDescriptor] = []
    progressive: List[SourceDescriptor] = []
    hints: Dict[str, Any] = {}

    for url in urls:
        info = classify_url(str(url))
        source = SourceDescriptor(
            file=unquote(str(url)),
            mimetype=info["mimetype"],
            source_class=classify_source(str(url)),
        )
        # Help the player to recognise mov files.
        if info["extension"] == "mov":
            source.type = "mp4"

        if source.source_class is SourceClass.ADAPTIVE:
            hints["dash"] = True
            streams.append(source)
        elif source.source_class is SourceClass.STREAMING:
            if "primary" not in options:
                hints["primary"] = "flash"
            streams.append(source)
        else:
            progressive.append(source)

        logger.debug(f"Source {source.file} classified as {source.source_class.value}")

    return ResolvedSources(sources=streams + progressive, hints=hints)


def _is_finite(value: Any) -> bool:
    return math.isfinite(leading_float(value))


def resolve_width(width: Any, options: PlayerOptions, config: PlayerConfig, is_audio: bool = False) -> Dimension:
    """
    Resolve the player width.

    Priority: audio control bar width, explicit ``width`` option, per-call
    width, responsive default, configured fixed default. Values out of float
    range count as absent.
    """
    if is_audio:
        return constants.AUDIO_WIDTH
    if "width" in options and _is_finite(options["width"]):
        width = options["width"]
    if not width or width == "0" or not _is_finite(width):
        width = constants.VIDEO_WIDTH_RESPONSIVE if config.is_responsive else config.default_width
    if is_numeric(width):
        return round_half_up(float(width))
    return str(width)


def resolve_height(
    width: Dimension,
    height: Any,
    options: PlayerOptions,
    is_audio: bool = False,
) -> Geometry:
    """
    Resolve height or aspect ratio for an already resolved width.

    Exactly one of ``height`` and ``aspect_ratio`` is set on the result.

    Example:
        >>> resolve_height(400, 0, PlayerOptions()).height
        225
        >>> resolve_height("100%", "30%", PlayerOptions()).aspect_ratio
        '100:30'
    """
    geometry = Geometry(width=width)
    if is_audio:
        geometry.height = constants.AUDIO_HEIGHT
        return geometry
    if "height" in options and _is_finite(options["height"]):
        height = options["height"]

    if height and height != "0" and _is_finite(height):
        if is_numeric(height):
            geometry.height = to_number(height)
            return geometry
        if not is_numeric(width):
            geometry.aspect_ratio = f"100:{format_number(leading_float(height))}"
            return geometry
        # Percentage height of a fixed width.
        computed = float(width) * leading_float(height) / 100
        if math.isfinite(computed):
            geometry.height = round_half_up(computed)
            return geometry
        logger.debug(f"Height {height} of width {width} out of range, using default")

    if is_numeric(width):
        geometry.height = round_half_up(
            float(width) * constants.VIDEO_ASPECTRATIO_H / constants.VIDEO_ASPECTRATIO_W
        )
    elif "aspectratio" in options:
        geometry.aspect_ratio = str(options["aspectratio"])
    else:
        geometry.aspect_ratio = f"{constants.VIDEO_ASPECTRATIO_W}:{constants.VIDEO_ASPECTRATIO_H}"
    return geometry


def resolve_geometry(
    width: Any,
    height: Any,
    options: PlayerOptions,
    config: PlayerConfig,
    is_audio: bool = False,
) -> Geometry:
    """
    Resolve final player geometry.

    A percentage width moves onto the surrounding block (``block_width``)
    and the player itself fills it at 100%.
    """
    resolved_width = resolve_width(width, options, config, is_audio=is_audio)
    geometry = resolve_height(resolved_width, height, options, is_audio=is_audio)
    if not is_numeric(resolved_width):
        geometry.block_width = resolved_width
        geometry.width = "100%"
    logger.debug(
        f"Geometry: width={geometry.width}, height={geometry.height}, "
        f"aspectratio={geometry.aspect_ratio}, block={geometry.block_width}"
    )
    return geometry


def resolve(
    urls: Sequence[str],
    options: Optional[PlayerOptions] = None,
    config: Optional[PlayerConfig] = None,
    width: Any = 0,
    height: Any = 0,
) -> Resolution:
    """
    Resolve ordered sources, geometry and rendering hints for an embed.

    Audio content, detected from the first ordered source, always gets the
    compact control bar size.

    Args:
        urls: Media URLs in order of preference
        options: Player options extracted from markup
        config: Platform configuration snapshot
        width: Per-call width; 0 to use the default
        height: Per-call height; 0 to use the default

    Returns:
        Resolution with sources, geometry and hints

    Example:
        >>> resolution = resolve(["https://x/clip.mp4"], width=0, height=0)
        >>> resolution.geometry.width, resolution.geometry.height
        (400, 225)
    """
    options = options or PlayerOptions()
    config = config or PlayerConfig()
    resolved = resolve_sources(urls, options)
    geometry = resolve_geometry(width, height, options, config, is_audio=resolved.is_audio)
    return Resolution(sources=resolved.sources, geometry=geometry, hints=resolved.hints)
