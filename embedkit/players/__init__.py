"""Player engines with a pluggable interface."""

from typing import Optional

from .base import MediaPlayer
from .jwplayer import JWPlayerEngine
from ..models import PlayerConfig

_PLAYERS = {
    "jwplayer": JWPlayerEngine,
}


def get_player(name: str = "jwplayer", config: Optional[PlayerConfig] = None) -> MediaPlayer:
    """Create the player engine registered under ``name``."""
    try:
        player_class = _PLAYERS[name]
    except KeyError:
        raise ValueError(f"Unsupported media player: {name}")
    return player_class(config=config)


__all__ = [
    "MediaPlayer",
    "JWPlayerEngine",
    "get_player",
]
