import io
import threading

import pytest

from captionkit.client import ClosedCaptionClient
from captionkit.exceptions import ExtractionError, OperationCancelledError, TrackNotFoundError
from captionkit.models import DownloadConfig
from captionkit.youtube.bridge import PlayerResponse, TrackDocument
from captionkit.youtube.controller import YouTubeController

VIDEO_ID = "dQw4w9WgXcQ"
EN_URL = "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en"
DE_URL = "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=de"

PLAYER_CONTENT = {
    "playabilityStatus": {"status": "OK"},
    "videoDetails": {"videoId": VIDEO_ID},
    "captions": {"playerCaptionsTracklistRenderer": {"captionTracks": [
        {"baseUrl": EN_URL, "languageCode": "en", "name": {"simpleText": "English"}, "kind": "asr"},
        {"baseUrl": DE_URL, "languageCode": "de", "name": {"simpleText": "German"}},
    ]}},
}

DOCUMENTS = {
    EN_URL: {"events": [
        {"tStartMs": 0, "dDurationMs": 2500, "segs": [{"utf8": "Hello"}]},
        {"tStartMs": 1000, "dDurationMs": 500, "segs": [{"utf8": "\n"}]},
        {"tStartMs": 2500, "dDurationMs": 1000, "segs": [{"utf8": "World"}]},
    ]},
    DE_URL: {"events": [
        {"tStartMs": 0, "dDurationMs": 100, "segs": [{"utf8": " "}]},
    ]},
}


class FakeYouTube:
    def __init__(self):
        self.video_ids = []

    def fetch_player_metadata(self, video_id):
        self.video_ids.append(video_id)
        return PlayerResponse(PLAYER_CONTENT)

    def fetch_track_payload(self, url):
        return TrackDocument(DOCUMENTS[url])


@pytest.fixture
def fake():
    return FakeYouTube()


@pytest.fixture
def client(fake):
    return ClosedCaptionClient(metadata_fetcher=fake, payload_fetcher=fake)


def test_default_collaborator_is_youtube_controller():
    client = ClosedCaptionClient()
    assert isinstance(client.resolver.metadata_fetcher, YouTubeController)
    assert client.parser.payload_fetcher is client.resolver.metadata_fetcher


def test_get_manifest_accepts_url(client, fake):
    manifest = client.get_manifest(f"https://youtu.be/{VIDEO_ID}")
    assert fake.video_ids == [VIDEO_ID]
    assert [t.language.code for t in manifest] == ["en", "de"]


def test_get_manifest_rejects_invalid_video(client, fake):
    with pytest.raises(ValueError):
        client.get_manifest("https://example.com/watch")
    assert fake.video_ids == []


def test_write_to_stream(client):
    track_info = client.get_manifest(VIDEO_ID).get_by_language("en")
    sink = io.StringIO()
    reports = []

    client.write_to(track_info, sink, progress_callback=reports.append)

    assert sink.getvalue() == (
        "1\n00:00:00,000 --> 00:00:02,500\nHello\n\n"
        "2\n00:00:02,500 --> 00:00:03,500\nWorld\n\n"
    )
    assert reports == [0.5, 1.0]


def test_all_captions_dropped_writes_nothing(client):
    track_info = client.get_manifest(VIDEO_ID).get_by_language("de")
    sink = io.StringIO()
    reports = []

    client.write_to(track_info, sink, progress_callback=reports.append)

    assert sink.getvalue() == ""
    assert reports == []


def test_download_to_truncates_existing_file(client, tmp_path):
    track_info = client.get_manifest(VIDEO_ID).get_by_language("en")
    output = tmp_path / "nested" / "en.srt"
    output.parent.mkdir()
    output.write_text("stale content that must disappear\n" * 10, encoding="utf-8")

    client.download_to(track_info, str(output))

    assert output.read_text(encoding="utf-8").startswith("1\n00:00:00,000 --> 00:00:02,500\nHello\n\n2\n")
    assert "stale" not in output.read_text(encoding="utf-8")


def test_download_to_keeps_partial_output_on_cancel(client, tmp_path):
    track_info = client.get_manifest(VIDEO_ID).get_by_language("en")
    output = tmp_path / "en.srt"
    cancel_event = threading.Event()

    with pytest.raises(OperationCancelledError):
        client.download_to(
            track_info,
            str(output),
            progress_callback=lambda fraction: cancel_event.set(),
            cancel_event=cancel_event,
        )

    assert output.read_text(encoding="utf-8") == "1\n00:00:00,000 --> 00:00:02,500\nHello\n\n"


def test_download_to_propagates_extraction_error(tmp_path):
    class BrokenYouTube(FakeYouTube):
        def fetch_track_payload(self, url):
            return TrackDocument({"events": [{"segs": [{"utf8": "no timing"}]}]})

    broken = BrokenYouTube()
    client = ClosedCaptionClient(metadata_fetcher=broken, payload_fetcher=broken)
    track_info = client.get_manifest(VIDEO_ID)[0]

    with pytest.raises(ExtractionError, match="caption offset"):
        client.download_to(track_info, str(tmp_path / "out.srt"))
    assert (tmp_path / "out.srt").read_text(encoding="utf-8") == ""


def test_download_from_config(client, tmp_path):
    output = tmp_path / "captions" / "en.srt"
    path = client.download_from_config(DownloadConfig(
        video=f"https://www.youtube.com/watch?v={VIDEO_ID}",
        output_path=str(output),
        language="en",
    ))

    assert path == str(output)
    assert output.read_text(encoding="utf-8").count(" --> ") == 2


def test_download_from_config_without_matching_track(client, tmp_path):
    with pytest.raises(TrackNotFoundError):
        client.download_from_config(DownloadConfig(
            video=VIDEO_ID,
            output_path=str(tmp_path / "en.srt"),
            language="en",
            auto_generated=False,
        ))
    assert not (tmp_path / "en.srt").exists()


def test_write_to_with_cancelled_event_skips_fetch(tmp_path):
    class CountingYouTube(FakeYouTube):
        def __init__(self):
            super().__init__()
            self.payload_urls = []

        def fetch_track_payload(self, url):
            self.payload_urls.append(url)
            return super().fetch_track_payload(url)

    counting = CountingYouTube()
    client = ClosedCaptionClient(metadata_fetcher=counting, payload_fetcher=counting)
    track_info = client.get_manifest(VIDEO_ID).get_by_language("en")
    cancel_event = threading.Event()
    cancel_event.set()
    sink = io.StringIO()

    with pytest.raises(OperationCancelledError):
        client.write_to(track_info, sink, cancel_event=cancel_event)

    assert counting.payload_urls == []
    assert sink.getvalue() == ""
