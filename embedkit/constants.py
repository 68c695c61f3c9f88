"""
Built-in defaults for EmbedKit.

These values are used whenever the platform configuration does not supply
its own. Geometry defaults mirror the stock JW Player embed behaviour.
"""

# Current version of the CDN-hosted JW Player library.
JWPLAYER_CLOUD_VERSION = "7.10.1"
JWPLAYER_CLOUD_URL = "https://ssl.p.jwpcdn.com/player/v/{version}/jwplayer"
JWPLAYER_SELF_HOSTED_PATH = "/media/player/jwplayer/jwplayer/jwplayer"
DOWNLOAD_ICON_PATH = "/media/player/jwplayer/pix/download.png"
DOWNLOAD_TOOLTIP = "Download video"

# Size and aspect ratio defaults.
VIDEO_WIDTH = 400
VIDEO_WIDTH_RESPONSIVE = "100%"
VIDEO_ASPECTRATIO_W = 16
VIDEO_ASPECTRATIO_H = 9
AUDIO_WIDTH = 400
AUDIO_HEIGHT = 30

# Markup.
LINK_PLACEHOLDER = "<!--LINKFALLBACK-->"
PLAYER_ID_PREFIX = "media_jwplayer_media_"
PLAYER_CLASS = "jwplayer_media"
PLAYER_BLOCK_CLASS = "jwplayer_playerblock"
LINK_OPTION_PREFIX = "data-jwplayer-"

HOSTING_CLOUD = "cloud"
HOSTING_SELF = "self"
DISPLAY_FIXED = "fixed"
DISPLAY_RESPONSIVE = "responsive"

VIDEO_EXTENSIONS = ["mp4", "m4v", "f4v", "mov", "flv", "webm", "ogv"]
AUDIO_EXTENSIONS = ["aac", "m4a", "f4a", "mp3", "ogg", "oga"]
STREAMING_EXTENSIONS = ["m3u8", "smil", "mpd"]

# DASH and HLS need a premium license, so they are not enabled by default.
DEFAULT_DISABLED_EXTENSIONS = ["mpd", "m3u8"]

ADAPTIVE_EXTENSIONS = ["mpd"]
SEGMENTED_EXTENSIONS = ["m3u8", "smil"]
RTMP_SCHEME = "rtmp"

SUPPORTED_EVENTS = [
    "playAttempt",
    "play",
    "buffer",
    "pause",
    "idle",
    "complete",
    "error",
    "setupError",
    "seek",
    "visualQuality",
    "levelsChanged",
    "audioTrackChanged",
    "captionsChanged",
]
DEFAULT_ENABLED_EVENTS = ["play", "pause", "complete"]

SKINS = ["beelden", "bekle", "five", "glow", "roundster", "six", "stormtrooper", "vapor"]

DEFAULT_GA_IDSTRING = "file"
DEFAULT_GA_LABEL = "file"

# Known media types; anything else goes through mimetypes.
MIMETYPES = {
    "mp4": "video/mp4",
    "m4v": "video/mp4",
    "f4v": "video/mp4",
    "mov": "video/quicktime",
    "flv": "video/x-flv",
    "webm": "video/webm",
    "ogv": "video/ogg",
    "aac": "audio/aac",
    "m4a": "audio/mp4",
    "f4a": "audio/mp4",
    "mp3": "audio/mp3",
    "ogg": "audio/ogg",
    "oga": "audio/ogg",
    "m3u8": "application/x-mpegURL",
    "smil": "application/smil+xml",
    "mpd": "application/dash+xml",
    "vtt": "text/vtt",
    "srt": "text/plain",
}
