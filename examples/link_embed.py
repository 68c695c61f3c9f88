"""
Link embedding example for EmbedKit.

Demonstrates data-jwplayer-* link options, streaming source ordering and
responsive sizing.
"""

import json
import logging

from embedkit import JWPlayerEngine, PlayerConfig

LINK_HTML = (
    '<a href="https://example.com/live/master.m3u8" title="Live lecture" '
    'data-jwplayer-subtitles="English: https://example.com/en.vtt, https://example.com/fr.vtt" '
    'data-jwplayer-mediaid="live-lecture" '
    'data-jwplayer-aspectratio="4:3">Live lecture</a>'
)


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    config = PlayerConfig.from_mapping({
        "licensekey": "YOUR-LICENSE-KEY",
        "displaystyle": "responsive",
        "enabledextensions": "mp4,m3u8",
    })
    engine = JWPlayerEngine(config)

    urls = [
        "https://example.com/live/fallback.mp4",
        "https://example.com/live/master.m3u8",
    ]
    urls = engine.list_supported_urls(urls)
    print(f"Supported URLs: {urls}")

    result = engine.embed(urls, options={"originaltext": LINK_HTML})
    setup = result.configuration.setup

    # Stream first, progressive fallback second
    print([source["file"] for source in setup["playlist"][0]["sources"]])
    print(f"width={setup['width']} aspectratio={setup.get('aspectratio')}")
    print(json.dumps(result.configuration.to_dict(), indent=2))

if __name__ == "__main__":
    main()
