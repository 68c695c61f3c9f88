import pytest

from embedkit.models import PlayerConfig, PlayerOptions
from embedkit.players import JWPlayerEngine, get_player


def _engine(**config):
    return JWPlayerEngine(PlayerConfig(**config), id_factory=lambda: "fixedid")


def _embed(engine, urls, originaltext="", **kwargs):
    return engine.embed(urls, options={"originaltext": originaltext}, **kwargs)


def test_embed_video_tag():
    engine = _engine()
    markup = (
        '<video class="lesson" title="Intro lesson" poster="https://x/poster.jpg" controls autoplay>'
        '<source src="https://x/intro.mp4">'
        '<track src="https://x/en.vtt" srclang="en" label="English" default>'
        "</video>"
    )
    result = _embed(engine, ["https://x/intro.mp4"], markup, log_context=42)
    config = result.configuration

    assert config.player_id == "media_jwplayer_media_fixedid"
    assert config.setup == {
        "playlist": [{
            "sources": [{"file": "https://x/intro.mp4"}],
            "title": "Intro lesson",
            "image": "https://x/poster.jpg",
            "tracks": [
                {"file": "https://x/en.vtt", "label": "English (en)", "kind": "captions", "default": True},
            ],
        }],
        "width": 400,
        "height": 225,
        "autostart": True,
        "controls": True,
    }
    assert config.log_context == 42
    assert config.log_events == ["play", "pause", "complete"]
    assert config.download_button is None

    assert result.markup == (
        '<span class="lesson jwplayer_media" title="Intro lesson">'
        '<span class="jwplayer_playerblock">'
        '<span id="media_jwplayer_media_fixedid"><!--LINKFALLBACK--></span>'
        "</span></span>"
    )


def test_embed_link_with_attributes():
    engine = _engine()
    html_attributes = {
        "href": "https://x/clip.mp4",
        "data-jwplayer-subtitles": "English: https://x/en.vtt, https://x/fr.vtt",
        "data-jwplayer-mediaid": "ab c",
        "data-jwplayer-description": "Clip description",
        "style": "margin: 0",
    }
    result = engine.embed(
        ["https://x/clip.mp4"],
        options={"originaltext": '<a href="https://x/clip.mp4">Clip</a>', "htmlattributes": html_attributes},
    )
    config = result.configuration
    item = config.playlist[0]

    assert config.player_id == "media_jwplayer_media_abc"
    assert item["mediaid"] == "ab c"
    assert item["description"] == "Clip description"
    assert item["title"] == "clip.mp4"
    assert item["tracks"] == [
        {"file": "https://x/en.vtt", "label": "English", "kind": "captions"},
        {"file": "https://x/fr.vtt", "kind": "captions"},
    ]
    assert 'style="margin: 0"' in result.markup
    assert 'id="media_jwplayer_media_abc"' in result.markup


def test_embed_link_parses_markup_without_attributes():
    engine = _engine()
    markup = (
        '<a href="https://x/clip.mp4" title="From link" '
        'data-jwplayer-image="https://x/p%20one.jpg">Clip</a>'
    )
    result = _embed(engine, ["https://x/clip.mp4"], markup)
    item = result.configuration.playlist[0]
    assert item["title"] == "From link"
    assert item["image"] == "https://x/p one.jpg"


def test_title_priority():
    urls = ["https://x/My%20Lecture.mp4"]
    engine = _engine()
    assert _embed(engine, urls).configuration.playlist[0]["title"] == "My Lecture.mp4"
    assert engine.embed(urls, name="Lecture").configuration.playlist[0]["title"] == "Lecture"

    options = PlayerOptions(values={"title": "Explicit"}, global_attributes={"title": "Attribute"})
    result = engine.embed_player(urls, "", 0, 0, options)
    assert result.configuration.playlist[0]["title"] == "Explicit"

    empty = _engine(empty_title=True)
    assert "title" not in _embed(empty, urls).configuration.playlist[0]
    result = _embed(empty, urls, '<video title="Kept"></video>')
    assert result.configuration.playlist[0]["title"] == "Kept"


def test_default_poster():
    engine = _engine(default_poster="https://site/poster.png")
    item = _embed(engine, ["https://x/a.mp4"]).configuration.playlist[0]
    assert item["image"] == "https://site/poster.png"

    item = _embed(engine, ["https://x/a.mp4"], '<video poster="https://x/own.jpg">').configuration.playlist[0]
    assert item["image"] == "https://x/own.jpg"


def test_text_image_option_falls_back_to_default_poster():
    engine = _engine(default_poster="https://site/poster.png")
    options = PlayerOptions(values={"image": "not a url"})
    result = engine.embed_player(["https://x/a.mp4"], "", 0, 0, options)
    assert result.configuration.playlist[0]["image"] == "https://site/poster.png"


def test_streams_first_with_hints():
    engine = _engine()
    result = engine.embed(["https://x/progressive.mp4", "https://x/stream.m3u8"])
    setup = result.configuration.setup
    assert setup["primary"] == "flash"
    assert [source["file"] for source in setup["playlist"][0]["sources"]] == [
        "https://x/stream.m3u8",
        "https://x/progressive.mp4",
    ]


def test_dash_hint():
    setup = _engine().embed(["https://x/a.mpd", "https://x/a.mp4"]).configuration.setup
    assert setup["dash"] is True
    assert "primary" not in setup


def test_explicit_primary_overrides_default():
    engine = _engine()
    options = PlayerOptions(values={"primary": "html5"})
    result = engine.embed_player(["https://x/a.m3u8"], "", 0, 0, options)
    assert result.configuration.setup["primary"] == "html5"


def test_download_button():
    engine = _engine(download_button=True, wwwroot="https://site")
    config = engine.embed(["https://x/a.mp4"]).configuration
    assert config.download_button == {
        "img": "https://site/media/player/jwplayer/pix/download.png",
        "tttext": "Download video",
    }
    assert config.to_dict()["downloadbtn"] == config.download_button

    streamed = engine.embed(["https://x/a.mp4", "https://x/a.m3u8"]).configuration
    assert streamed.download_button is None
    assert "downloadbtn" not in streamed.to_dict()

    assert _engine().embed(["https://x/a.mp4"]).configuration.download_button is None


def test_skin_and_analytics():
    engine = _engine(skin="six", google_analytics=True)
    setup = engine.embed(["https://x/a.mp4"]).configuration.setup
    assert setup["skin"] == "six"
    assert setup["ga"] == {"idstring": "file", "label": "file"}

    engine = _engine(skin="six", custom_skin_css="https://site/skin.css", google_analytics=True)
    options = PlayerOptions(values={"gaidstring": "title", "galabel": "mediaid"})
    setup = engine.embed_player(["https://x/a.mp4"], "", 0, 0, options).configuration.setup
    assert setup["skin"] == "https://site/skin.css"
    assert setup["ga"] == {"idstring": "title", "label": "mediaid"}

    assert "ga" not in _engine().embed(["https://x/a.mp4"]).configuration.setup


def test_playback_options_passthrough():
    options = PlayerOptions(values={
        "autostart": "true",
        "mute": True,
        "repeat": True,
        "androidhls": "true",
        "hlslabels": {"1500": "High"},
    })
    setup = _engine().embed_player(["https://x/a.mp4"], "", 0, 0, options).configuration.setup
    assert setup["autostart"] == "true"
    assert setup["mute"] is True
    assert setup["repeat"] is True
    assert setup["androidhls"] == "true"
    assert setup["hlslabels"] == {"1500": "High"}

    options = PlayerOptions(values={"hlslabels": "not a mapping"})
    setup = _engine().embed_player(["https://x/a.mp4"], "", 0, 0, options).configuration.setup
    assert "hlslabels" not in setup


def test_percentage_geometry_markup():
    result = _engine().embed(["https://x/a.mp4"], width="50%", height="30%")
    setup = result.configuration.setup
    assert setup["width"] == "100%"
    assert setup["aspectratio"] == "100:30"
    assert "height" not in setup
    assert '<span class="jwplayer_playerblock" style="width: 50%;">' in result.markup


def test_audio_embed_uses_control_bar_size():
    result = _engine(display_style="responsive").embed(["https://x/a.mp3"], width=800, height=600)
    setup = result.configuration.setup
    assert setup["width"] == 400
    assert setup["height"] == 30


def test_embed_without_sources():
    result = _engine().embed([])
    config = result.configuration
    assert config.setup["playlist"] == []
    assert config.to_dict()["playerid"] == "media_jwplayer_media_fixedid"
    assert "media_jwplayer_media_fixedid" in result.markup


def test_random_player_ids_differ():
    engine = JWPlayerEngine()
    first = engine.embed(["https://x/a.mp4"]).configuration.player_id
    second = engine.embed(["https://x/a.mp4"]).configuration.player_id
    assert first.startswith("media_jwplayer_media_")
    assert first != second


def test_global_attributes_are_escaped():
    result = _engine().embed(
        ["https://x/a.mp4"],
        options={"originaltext": '<video title="a &quot;b&quot; &lt;c&gt;"></video>'},
    )
    assert 'title="a &quot;b&quot; &lt;c&gt;"' in result.markup


def test_supported_lists():
    engine = _engine()
    extensions = engine.list_supported_extensions()
    assert extensions[:2] == ["mp4", "m4v"]
    assert {"m3u8", "smil", "mpd"} <= set(extensions)
    assert len(engine.list_supported_events()) == 13
    assert "mpd" not in engine.get_supported_extensions()
    assert "m3u8" not in engine.get_supported_extensions()


def test_list_supported_urls():
    urls = ["https://x/a.mp4", "https://x/a.mpd", "https://x/a.txt", "rtmp://x/live/a"]
    assert _engine().list_supported_urls(urls) == ["https://x/a.mp4"]
    assert _engine(support_rtmp=True).list_supported_urls(urls) == ["https://x/a.mp4", "rtmp://x/live/a"]


def test_embeddable_markers():
    assert "rtmp://" not in _engine().get_embeddable_markers()
    markers = _engine(support_rtmp=True, enabled_extensions=["mp4"]).get_embeddable_markers()
    assert markers == [".mp4", "rtmp://"]


def test_is_enabled(tmp_path):
    assert not _engine().is_enabled()
    assert _engine(license_key="KEY").is_enabled()
    assert not _engine(hosting_method="self", license_key="KEY").is_enabled()

    library = tmp_path / "jwplayer.js"
    library.write_text("// player", encoding="utf-8")
    engine = _engine(hosting_method="self", license_key="KEY", self_hosted_path=str(library))
    assert engine.is_enabled()
    assert not _engine(hosting_method="self", self_hosted_path=str(library)).is_enabled()


def test_setup_page_requirements():
    requirements = _engine(license_key="KEY").setup()
    assert requirements.library_url == "https://ssl.p.jwpcdn.com/player/v/7.10.1/jwplayer"
    assert requirements.license_key == "KEY"

    requirements = _engine(hosting_method="self", wwwroot="https://site").setup()
    assert requirements.library_url == "https://site/media/player/jwplayer/jwplayer/jwplayer"


def test_rank_and_classify():
    engine = _engine()
    assert engine.get_rank() == 1
    assert engine.classify("https://x/a.m3u8").value == "streaming"


def test_get_player():
    player = get_player("jwplayer", PlayerConfig(license_key="KEY"))
    assert isinstance(player, JWPlayerEngine)
    assert player.is_enabled()
    with pytest.raises(ValueError):
        get_player("flowplayer")


def test_out_of_range_link_width_uses_default():
    link = '<a href="https://x/a.mp4" data-jwplayer-width="1e400">Clip</a>'
    setup = _embed(_engine(), ["https://x/a.mp4"], link).configuration.setup
    assert setup["width"] == 400
    assert setup["height"] == 225


def test_out_of_range_call_height_uses_default():
    setup = _engine().embed(["https://x/a.mp4"], width=400, height="1e400%").configuration.setup
    assert setup["height"] == 225
    assert "aspectratio" not in setup


def test_aria_attributes_reach_markup():
    markup = '<video aria-label="Lecture recording" role="region" controls></video>'
    result = _embed(_engine(), ["https://x/a.mp4"], markup)
    assert 'aria-label="Lecture recording"' in result.markup
    assert 'role="region"' in result.markup
