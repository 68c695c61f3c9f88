"""
Data models for EmbedKit.

Defines the core data structures used throughout the package: media kinds,
player options, tracks, sources, playlist items, resolved geometry, the final
embed configuration and the platform configuration snapshot.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from . import constants

logger = logging.getLogger(__name__)

# Integer/float pixels or a percentage string such as "50%".
Dimension = Union[int, float, str]


class MediaKind(Enum):
    """Kind of HTML5 media tag an embed originates from."""
    VIDEO = "video"
    AUDIO = "audio"

    @classmethod
    def from_tag(cls, name: str) -> "MediaKind":
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(f"Unsupported media tag: {name}")


class SourceClass(Enum):
    """Delivery class of a media source."""
    PROGRESSIVE = "progressive"
    STREAMING = "streaming"  # HLS, SMIL, RTMP
    ADAPTIVE = "adaptive"    # DASH manifest


class MediaUrl(str):
    """A URL option value that passed URL sanitisation."""


@dataclass
class TrackDescriptor:
    """Represents a timed text track (captions or chapters)."""
    file: str
    label: Optional[str] = None
    kind: str = "captions"
    default: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"file": self.file}
        if self.label is not None:
            data["label"] = self.label
        data["kind"] = self.kind
        if self.default:
            data["default"] = True
        return data


@dataclass
class SourceDescriptor:
    """Represents one playable source of a playlist item."""
    file: str
    mimetype: Optional[str] = None
    source_class: SourceClass = SourceClass.PROGRESSIVE
    type: Optional[str] = None  # player type hint, e.g. "mp4" for .mov

    @property
    def is_stream(self) -> bool:
        return self.source_class is not SourceClass.PROGRESSIVE

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"file": self.file}
        if self.type:
            data["type"] = self.type
        return data


@dataclass
class PlayerOptions:
    """
    Normalized player options extracted from a media tag or link attributes.

    ``values`` holds player option name -> typed value (bool, str, MediaUrl,
    list of TrackDescriptor). ``global_attributes`` holds generic markup
    attributes carried through to the final markup untouched.
    """
    values: Dict[str, Any] = field(default_factory=dict)
    global_attributes: Dict[str, str] = field(default_factory=dict)

    def __contains__(self, name: str) -> bool:
        return self.values.get(name) is not None

    def __getitem__(self, name: str) -> Any:
        return self.values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self.values[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        value = self.values.get(name)
        return default if value is None else value

    def pop(self, name: str, default: Any = None) -> Any:
        return self.values.pop(name, default)

    @property
    def subtitles(self) -> List[TrackDescriptor]:
        return list(self.values.get("subtitles") or [])


@dataclass(frozen=True)
class PlaylistItem:
    """Single playlist entry handed to the player."""
    sources: Tuple[SourceDescriptor, ...]
    title: Optional[str] = None
    description: Optional[str] = None
    mediaid: Optional[str] = None
    image: Optional[str] = None
    tracks: Tuple[TrackDescriptor, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"sources": [source.to_dict() for source in self.sources]}
        for key in ("title", "description", "mediaid", "image"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.tracks:
            data["tracks"] = [track.to_dict() for track in self.tracks]
        return data


@dataclass
class Geometry:
    """
    Resolved player dimensions.

    Exactly one of ``height`` and ``aspect_ratio`` is set. ``block_width`` is
    the width of the surrounding block when the player width is a percentage.
    """
    width: Dimension
    height: Optional[Dimension] = None
    aspect_ratio: Optional[str] = None
    block_width: Optional[str] = None


@dataclass
class EmbedConfiguration:
    """Final payload handed to the page-script injector."""
    player_id: str
    setup: Dict[str, Any]
    log_context: Any = None
    log_events: List[str] = field(default_factory=list)
    download_button: Optional[Dict[str, str]] = None

    @property
    def playlist(self) -> List[Dict[str, Any]]:
        return self.setup.get("playlist", [])

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "playerid": self.player_id,
            "setupdata": self.setup,
        }
        if self.download_button:
            data["downloadbtn"] = self.download_button
        data["logcontext"] = self.log_context
        data["logevents"] = list(self.log_events)
        return data


@dataclass
class EmbedResult:
    """Embed configuration plus the placeholder markup it belongs to."""
    configuration: EmbedConfiguration
    markup: str


@dataclass
class PageRequirements:
    """Player library location and license for the page injector."""
    library_url: str
    license_key: str = ""


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _to_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return [str(item).strip() for item in value if str(item).strip()]


def _default_extensions() -> List[str]:
    supported = (
        constants.VIDEO_EXTENSIONS
        + constants.AUDIO_EXTENSIONS
        + constants.STREAMING_EXTENSIONS
    )
    return [ext for ext in supported if ext not in constants.DEFAULT_DISABLED_EXTENSIONS]


@dataclass
class PlayerConfig:
    """Platform configuration snapshot used for a single embed call."""
    hosting_method: str = constants.HOSTING_CLOUD
    license_key: str = ""
    enabled_extensions: List[str] = field(default_factory=_default_extensions)
    support_rtmp: bool = False
    enabled_events: List[str] = field(default_factory=lambda: list(constants.DEFAULT_ENABLED_EVENTS))
    default_poster: Optional[str] = None
    download_button: bool = False
    display_style: str = constants.DISPLAY_FIXED
    skin: str = ""
    custom_skin_css: str = ""
    empty_title: bool = False
    google_analytics: bool = False
    ga_idstring: str = constants.DEFAULT_GA_IDSTRING
    ga_label: str = constants.DEFAULT_GA_LABEL
    default_width: int = constants.VIDEO_WIDTH
    wwwroot: str = ""
    self_hosted_path: Optional[str] = None

    # Platform setting name -> (field name, converter)
    _KEYS = {
        "hostingmethod": ("hosting_method", str),
        "licensekey": ("license_key", str),
        "enabledextensions": ("enabled_extensions", _to_list),
        "supportrtmp": ("support_rtmp", _to_bool),
        "enabledevents": ("enabled_events", _to_list),
        "defaultposter": ("default_poster", str),
        "downloadbutton": ("download_button", _to_bool),
        "displaystyle": ("display_style", str),
        "skin": ("skin", str),
        "customskincss": ("custom_skin_css", str),
        "emptytitle": ("empty_title", _to_bool),
        "googleanalytics": ("google_analytics", _to_bool),
        "gaidstring": ("ga_idstring", str),
        "galabel": ("ga_label", str),
        "media_default_width": ("default_width", int),
        "wwwroot": ("wwwroot", str),
        "selfhostedpath": ("self_hosted_path", str),
    }

    @property
    def is_responsive(self) -> bool:
        return self.display_style == constants.DISPLAY_RESPONSIVE

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> "PlayerConfig":
        """
        Build a config from a plain key -> value settings snapshot.

        Keys use the platform's setting names (``hostingmethod``,
        ``displaystyle``, ...). Empty or missing values keep the built-in
        default; unknown keys are ignored.

        Example:
            >>> config = PlayerConfig.from_mapping({"displaystyle": "responsive"})
            >>> config.is_responsive
            True
        """
        kwargs: Dict[str, Any] = {}
        for key, value in settings.items():
            if key not in cls._KEYS:
                logger.debug(f"Ignoring unknown setting: {key}")
                continue
            if value is None or value == "":
                continue
            name, convert = cls._KEYS[key]
            try:
                kwargs[name] = convert(value)
            except (TypeError, ValueError):
                logger.debug(f"Ignoring invalid value for {key}: {value!r}")
        return cls(**kwargs)
