from embedkit.markup.tokenizer import (
    get_embed_tag_type,
    is_global_attribute,
    parse_anchor_attributes,
    tokenize_tag,
)


def test_is_global_attribute():
    assert is_global_attribute("class")
    assert is_global_attribute("aria-label")
    assert is_global_attribute("aria-describedby")
    assert is_global_attribute("role")
    assert is_global_attribute("data-anything")
    assert is_global_attribute("itemprop")
    assert not is_global_attribute("poster")
    assert not is_global_attribute("src")


def test_tokenize_quoted_and_bare_attributes():
    attributes = tokenize_tag('<video src="clip.mp4" poster="p.jpg" controls muted>')
    assert attributes == {
        "src": "clip.mp4",
        "poster": "p.jpg",
        "controls": "",
        "muted": "",
    }


def test_tokenize_counts_exclude_tag_name():
    markup = '<video a="1" b="2" c="3" loop autoplay></video>'
    attributes = tokenize_tag(markup)
    assert len(attributes) == 5
    assert "video" not in attributes


def test_tokenize_is_case_insensitive_for_names():
    attributes = tokenize_tag('<VIDEO Poster="P.jpg" CONTROLS>')
    assert attributes == {"poster": "P.jpg", "controls": ""}


def test_tokenize_decodes_entities():
    attributes = tokenize_tag('<video title="Tom &amp; Jerry &quot;live&quot;">')
    assert attributes["title"] == 'Tom & Jerry "live"'


def test_tokenize_keeps_hyphenated_names():
    attributes = tokenize_tag('<video data-player-id="42" class="big">')
    assert attributes == {"data-player-id": "42", "class": "big"}


def test_tokenize_reads_only_opening_tag():
    markup = '<video controls><source src="a.mp4"><track src="en.vtt" default></video>'
    assert tokenize_tag(markup) == {"controls": ""}


def test_tokenize_value_may_contain_angle_bracket():
    attributes = tokenize_tag('<video title="a > b" loop>')
    assert attributes == {"title": "a > b", "loop": ""}


def test_tokenize_self_closing_track():
    attributes = tokenize_tag('<track kind="captions" src="en.vtt" default />')
    assert attributes == {"kind": "captions", "src": "en.vtt", "default": ""}


def test_tokenize_first_occurrence_wins():
    attributes = tokenize_tag('<video title="one" title="two" title>')
    assert attributes == {"title": "one"}


def test_tokenize_malformed_markup_does_not_raise():
    assert tokenize_tag("") == {}
    assert tokenize_tag("no tag here") == {}
    assert tokenize_tag("<") == {}
    assert tokenize_tag('<video src="unterminated controls') == {"controls": ""}
    # Stray tokens are skipped, valid ones still read.
    assert tokenize_tag('<video 500 "x" controls') == {"controls": ""}


def test_tokenize_unquoted_value():
    assert tokenize_tag("<video width=500 controls>") == {"width": "500", "controls": ""}


def test_tokenize_sanitizes_names():
    attributes = tokenize_tag('<video dat!a="x">')
    assert attributes == {"data": "x"}


def test_get_embed_tag_type():
    assert get_embed_tag_type("<video controls>") == "video"
    assert get_embed_tag_type("<AUDIO>") == "audio"
    assert get_embed_tag_type('<a href="x.mp4">x</a>') == "a"
    assert get_embed_tag_type("<abbr>") is None
    assert get_embed_tag_type("") is None


def test_parse_anchor_attributes():
    markup = (
        '<a href="https://x/clip.mp4" class="one two" '
        'data-jwplayer-description="Tom &amp; Jerry">Clip</a>'
    )
    attributes = parse_anchor_attributes(markup)
    assert attributes == {
        "href": "https://x/clip.mp4",
        "class": "one two",
        "data-jwplayer-description": "Tom & Jerry",
    }


def test_parse_anchor_attributes_without_anchor():
    assert parse_anchor_attributes("<span>nothing</span>") == {}
