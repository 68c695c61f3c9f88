"""
JW Player engine.

Turns media markup and URLs into a JW Player setup configuration and the
placeholder markup the page injector substitutes with the player.
"""

import logging
import os
import re
import uuid
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence
from urllib.parse import unquote

from .. import constants
from ..geometry import Resolution, classify_source, resolve
from ..markup import (
    get_embed_tag_type,
    get_options_from_media_tag,
    map_link_options,
    parse_anchor_attributes,
)
from ..models import (
    EmbedConfiguration,
    EmbedResult,
    Geometry,
    MediaUrl,
    PageRequirements,
    PlayerConfig,
    PlayerOptions,
    PlaylistItem,
    SourceClass,
)
from ..utils import get_extension, render_tag
from .base import MediaPlayer

logger = logging.getLogger(__name__)

# Option keys of the embed call.
OPTION_ORIGINAL_TEXT = "originaltext"
OPTION_HTML_ATTRIBUTES = "htmlattributes"

# Player options copied to the setup as they are.
PASSTHROUGH_OPTIONS = ("autostart", "mute", "controls", "repeat")


def _random_id() -> str:
    return uuid.uuid4().hex[:12]


class JWPlayerEngine(MediaPlayer):
    """
    JW Player embed engine.

    Holds the platform configuration snapshot for the embeds it produces;
    each embed call is independent of the previous ones.
    """

    def __init__(
        self,
        config: Optional[PlayerConfig] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        super().__init__(name="jwplayer")
        self.config = config or PlayerConfig()
        self._id_factory = id_factory or _random_id

    def get_player_options(
        self,
        original_text: str,
        html_attributes: Optional[Mapping[str, str]] = None,
    ) -> PlayerOptions:
        """
        Extract player options from the markup the embed originates from.

        <video> and <audio> elements are tokenized; for <a> elements the
        given attributes are used, or read from the markup when not given.
        """
        tag_type = get_embed_tag_type(original_text)
        if tag_type in ("video", "audio"):
            return get_options_from_media_tag(original_text)
        if tag_type == "a":
            if not html_attributes:
                html_attributes = parse_anchor_attributes(original_text)
            return map_link_options(html_attributes)
        return PlayerOptions()

    def embed(
        self,
        urls: Sequence[str],
        name: str = "",
        width: Any = 0,
        height: Any = 0,
        options: Optional[dict] = None,
        log_context: Any = None,
    ) -> EmbedResult:
        """
        Generate the embed configuration and placeholder markup.

        Args:
            urls: Media URLs, in order of preference
            name: Display name; '' to use the file name
            width: Width; 0 to use the default
            height: Height; 0 to use the default
            options: Embed options, ``originaltext`` holds the source markup
                and ``htmlattributes`` the link attributes when already known
            log_context: Identifier of the page context events are logged against

        Returns:
            EmbedResult with the configuration and the markup

        Example:
            >>> engine = JWPlayerEngine(PlayerConfig(license_key="KEY"))
            >>> result = engine.embed(
            ...     ["https://example.com/clip.mp4"],
            ...     options={"originaltext": '<video controls src="https://example.com/clip.mp4"></video>'},
            ... )
            >>> result.configuration.setup["height"]
            225
        """
        options = options or {}
        player_options = self.get_player_options(
            options.get(OPTION_ORIGINAL_TEXT) or "",
            options.get(OPTION_HTML_ATTRIBUTES),
        )
        return self.embed_player(urls, name, width, height, player_options, log_context=log_context)

    def embed_player(
        self,
        urls: Sequence[str],
        name: str,
        width: Any,
        height: Any,
        player_options: PlayerOptions,
        log_context: Any = None,
    ) -> EmbedResult:
        """Assemble configuration and markup from already extracted options."""
        resolution = self.resolve(urls, player_options, width, height)
        configuration = self.build_configuration(urls, name, player_options, resolution, log_context)
        markup = self.render_markup(configuration.player_id, resolution.geometry, player_options.global_attributes)
        logger.info(f"Embedding player {configuration.player_id} with {len(resolution.sources)} source(s)")
        return EmbedResult(configuration=configuration, markup=markup)

    def resolve(
        self,
        urls: Sequence[str],
        options: Optional[PlayerOptions] = None,
        width: Any = 0,
        height: Any = 0,
    ) -> Resolution:
        return resolve(urls, options, self.config, width=width, height=height)

    def classify(self, url: str) -> SourceClass:
        return classify_source(url)

    def _build_playlist_item(
        self,
        urls: Sequence[str],
        name: str,
        options: PlayerOptions,
        resolution: Resolution,
    ) -> PlaylistItem:
        # Title: explicit option, then title attribute, then file name.
        title = None
        if "title" in options:
            title = str(options["title"])
        elif "title" in options.global_attributes:
            title = str(options.global_attributes["title"])
        elif not self.config.empty_title:
            title = self.get_name(name, urls)

        mediaid = None
        if str(options.get("mediaid", "")).strip():
            mediaid = str(options["mediaid"])

        image = None
        if isinstance(options.get("image"), MediaUrl):
            image = unquote(options["image"])
        elif self.config.default_poster:
            image = self.config.default_poster

        description = options.get("description")
        return PlaylistItem(
            sources=tuple(resolution.sources),
            title=title,
            description=str(description) if description is not None else None,
            mediaid=mediaid,
            image=image,
            tracks=tuple(options.subtitles),
        )

    def _player_id(self, options: PlayerOptions) -> str:
        mediaid = str(options.get("mediaid", "")).strip()
        if mediaid:
            return constants.PLAYER_ID_PREFIX + re.sub(r"\s+", "", mediaid)
        return constants.PLAYER_ID_PREFIX + self._id_factory()

    def build_configuration(
        self,
        urls: Sequence[str],
        name: str,
        options: PlayerOptions,
        resolution: Resolution,
        log_context: Any = None,
    ) -> EmbedConfiguration:
        """
        Merge options, resolved sources and geometry, and platform defaults
        into the final embed configuration.

        Options that are absent simply leave their setup key out. With no
        sources the playlist is empty.
        """
        setup: Dict[str, Any] = {}
        setup.update(resolution.hints)

        if resolution.sources:
            item = self._build_playlist_item(urls, name, options, resolution)
            setup["playlist"] = [item.to_dict()]
        else:
            logger.debug("No sources to embed, playlist left empty")
            setup["playlist"] = []

        geometry = resolution.geometry
        setup["width"] = geometry.width
        if geometry.height is not None:
            setup["height"] = geometry.height
        else:
            setup["aspectratio"] = geometry.aspect_ratio

        for option in PASSTHROUGH_OPTIONS:
            if option in options:
                setup[option] = options[option]
        if isinstance(options.get("hlslabels"), dict):
            setup["hlslabels"] = dict(options["hlslabels"])
        if "androidhls" in options:
            setup["androidhls"] = options["androidhls"]
        if "primary" in options:
            # Explicit rendering mode overrides the streaming default.
            setup["primary"] = options["primary"]

        if self.config.custom_skin_css:
            setup["skin"] = self.config.custom_skin_css
        elif self.config.skin:
            setup["skin"] = self.config.skin

        if self.config.google_analytics:
            setup["ga"] = {
                "idstring": options.get("gaidstring", self.config.ga_idstring),
                "label": options.get("galabel", self.config.ga_label),
            }

        download_button = None
        if self.config.download_button and not resolution.has_streams:
            download_button = {
                "img": self.config.wwwroot + constants.DOWNLOAD_ICON_PATH,
                "tttext": constants.DOWNLOAD_TOOLTIP,
            }

        return EmbedConfiguration(
            player_id=self._player_id(options),
            setup=setup,
            log_context=log_context,
            log_events=self.get_supported_events(),
            download_button=download_button,
        )

    def render_markup(self, player_id: str, geometry: Geometry, global_attributes: Mapping[str, str]) -> str:
        """
        Render the placeholder markup for a player.

        Example:
            >>> JWPlayerEngine().render_markup("p1", Geometry(width=400, height=225), {})
            '<span class="jwplayer_media"><span class="jwplayer_playerblock"><span id="p1"><!--LINKFALLBACK--></span></span></span>'
        """
        attributes = dict(global_attributes)
        if attributes.get("class"):
            attributes["class"] = f"{attributes['class']} {constants.PLAYER_CLASS}"
        else:
            attributes["class"] = constants.PLAYER_CLASS

        block_attributes = {"class": constants.PLAYER_BLOCK_CLASS}
        if geometry.block_width:
            block_attributes["style"] = f"width: {geometry.block_width};"

        player = render_tag("span", constants.LINK_PLACEHOLDER, {"id": player_id})
        block = render_tag("span", player, block_attributes)
        return render_tag("span", block, attributes)

    def list_supported_extensions(self) -> List[str]:
        return (
            constants.VIDEO_EXTENSIONS
            + constants.AUDIO_EXTENSIONS
            + constants.STREAMING_EXTENSIONS
        )

    def list_supported_events(self) -> List[str]:
        return list(constants.SUPPORTED_EVENTS)

    def get_supported_extensions(self) -> List[str]:
        return list(self.config.enabled_extensions)

    def get_supported_events(self) -> List[str]:
        return list(self.config.enabled_events)

    def list_supported_urls(self, urls: Sequence[str]) -> List[str]:
        """
        Keep URLs this player can embed.

        RTMP URLs are kept only when RTMP support is enabled, whatever their
        extension.
        """
        result = []
        extensions = self.get_supported_extensions()
        for url in urls:
            if self.is_rtmp(url):
                if self.config.support_rtmp:
                    result.append(url)
            elif get_extension(url) in extensions:
                result.append(url)
        return result

    def get_embeddable_markers(self) -> List[str]:
        markers = super().get_embeddable_markers()
        if self.config.support_rtmp:
            markers.append("rtmp://")
        return markers

    def get_rank(self) -> int:
        return 1

    def is_enabled(self) -> bool:
        """
        Check the player can be used.

        Cloud hosting needs a license key; self hosting needs a license key
        and a readable player library.
        """
        if not self.config.license_key:
            logger.debug("Player disabled: no license key")
            return False
        if self.config.hosting_method == constants.HOSTING_SELF:
            path = self.config.self_hosted_path
            if not path or not os.path.isfile(path) or not os.access(path, os.R_OK):
                logger.debug(f"Player disabled: self-hosted library not readable: {path}")
                return False
        return True

    def setup(self) -> PageRequirements:
        """Player library location and license key for the page."""
        if self.config.hosting_method == constants.HOSTING_SELF:
            library_url = self.config.wwwroot + constants.JWPLAYER_SELF_HOSTED_PATH
        else:
            library_url = constants.JWPLAYER_CLOUD_URL.format(version=constants.JWPLAYER_CLOUD_VERSION)
        return PageRequirements(library_url=library_url, license_key=self.config.license_key)
