from datetime import timedelta

import pytest

from captionkit.exceptions import CaptionNotFoundError, TrackNotFoundError
from captionkit.models import (
    Caption,
    CaptionManifest,
    CaptionPart,
    CaptionTrack,
    CaptionTrackInfo,
    Language,
)


def _track_info(code, auto=False, name=None):
    return CaptionTrackInfo(
        url=f"https://example.com/{code}",
        language=Language(code, name or code.upper()),
        is_auto_generated=auto,
    )


def test_language_equality_by_code():
    assert Language("en", "English") == Language("en", "English (auto-generated)")
    assert Language("en", "English") != Language("de", "English")
    assert hash(Language("en", "a")) == hash(Language("en", "b"))
    assert str(Language("en", "English")) == "en (English)"


@pytest.mark.parametrize("url,code,name", [
    ("", "en", "English"),
    ("https://example.com", "", "English"),
    ("https://example.com", "en", ""),
])
def test_track_info_rejects_empty_fields(url, code, name):
    with pytest.raises(ValueError):
        CaptionTrackInfo(url=url, language=Language(code, name))


def test_caption_invariants():
    with pytest.raises(ValueError):
        Caption("", timedelta(0), timedelta(seconds=1))
    with pytest.raises(ValueError):
        Caption("text", timedelta(seconds=-1), timedelta(seconds=1))
    with pytest.raises(ValueError):
        Caption("text", timedelta(0), timedelta(seconds=-1))
    with pytest.raises(ValueError):
        CaptionPart("", timedelta(0))


def test_caption_parts_stored_as_tuple_and_end():
    caption = Caption(
        "Hello world",
        timedelta(seconds=1),
        timedelta(seconds=2),
        [CaptionPart("Hello", timedelta(0)), CaptionPart("world", timedelta(milliseconds=600))],
    )
    assert isinstance(caption.parts, tuple)
    assert caption.end == timedelta(seconds=3)
    assert caption.get_part_by_time(timedelta(milliseconds=100)).text == "world"
    assert caption.try_get_part_by_time(timedelta(seconds=1)) is None
    with pytest.raises(CaptionNotFoundError):
        caption.get_part_by_time(timedelta(seconds=1))


def test_manifest_lookup_by_language():
    manifest = CaptionManifest((
        _track_info("en", auto=True),
        _track_info("en"),
        _track_info("pt-BR"),
    ))
    assert len(manifest) == 3
    assert manifest[2].language.code == "pt-BR"
    assert manifest.get_by_language("en").is_auto_generated is True
    assert manifest.get_by_language("EN", auto_generated=False).is_auto_generated is False
    assert manifest.try_get_by_language("pt-br") is manifest[2]
    assert manifest.try_get_by_language("fr") is None
    with pytest.raises(TrackNotFoundError):
        manifest.get_by_language("pt-BR", auto_generated=True)


def test_manifest_filter_keeps_order():
    manifest = CaptionManifest([_track_info("de"), _track_info("en", auto=True), _track_info("fr")])
    assert [t.language.code for t in manifest.filter(auto_generated=False)] == ["de", "fr"]
    assert [t.language.code for t in manifest.filter(auto_generated=True)] == ["en"]
    assert len(manifest.filter()) == 3


def test_track_lookup_by_time():
    first = Caption("one", timedelta(seconds=0), timedelta(seconds=2))
    second = Caption("two", timedelta(seconds=5), timedelta(seconds=1))
    track = CaptionTrack([first, second])

    assert track.get_by_time(timedelta(seconds=2)) is first
    assert track.get_by_time(timedelta(seconds=5.5)) is second
    assert track.try_get_by_time(timedelta(seconds=3)) is None
    with pytest.raises(CaptionNotFoundError):
        track.get_by_time(timedelta(seconds=10))
    assert list(track) == [first, second]
