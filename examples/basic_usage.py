"""
Basic EmbedKit usage example.

Demonstrates turning an HTML5 video element into a player setup payload.
"""

import json

from embedkit import JWPlayerEngine, PlayerConfig

VIDEO_HTML = (
    '<video controls class="lecture" poster="https://example.com/poster.jpg">\n'
    '  <source src="https://example.com/lecture.mp4" type="video/mp4">\n'
    '  <track src="https://example.com/en.vtt" kind="subtitles" srclang="en" label="English" default>\n'
    '  <track src="https://example.com/chapters.vtt" kind="chapters">\n'
    '</video>'
)


def main():
    # Platform settings snapshot
    config = PlayerConfig.from_mapping({
        "licensekey": "YOUR-LICENSE-KEY",
        "displaystyle": "fixed",
        "downloadbutton": "1",
    })
    engine = JWPlayerEngine(config)

    if not engine.is_enabled():
        print("Player is not enabled, check hosting method and license key")
        return

    print("Embedding video...")
    result = engine.embed(
        urls=["https://example.com/lecture.mp4"],
        options={"originaltext": VIDEO_HTML},
        log_context=1,
    )

    print(json.dumps(result.configuration.to_dict(), indent=2))
    print(f"\nPlaceholder markup:\n{result.markup}")

if __name__ == "__main__":
    main()
