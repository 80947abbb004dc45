"""
HTTP transport for captionkit.

Talks to YouTube's innertube player endpoint for caption track metadata and
to the timedtext endpoint for caption payloads. Implements both the
MetadataFetcher and the TrackPayloadFetcher interfaces.
"""

import logging
from typing import Optional

import requests

from ..exceptions import VideoUnavailableError
from ..models import ClientConfig
from ..utils import set_query_parameter
from .bridge import PlayerResponse, TrackDocument

logger = logging.getLogger(__name__)

PLAYER_URL = "https://www.youtube.com/youtubei/v1/player"


class YouTubeController:
    """
    Fetches raw caption data from YouTube over HTTP.

    A single requests.Session is reused for all calls. Like the session
    itself, a controller should not be shared between threads.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize YouTube controller.

        Args:
            config: Client configuration (default: ClientConfig())
            session: Optional requests session to reuse
        """
        self.config = config or ClientConfig()
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": self.config.user_agent,
            "Accept-Language": f"{self.config.hl},en;q=0.9",
        })

    def _build_player_payload(self, video_id: str) -> dict:
        return {
            "videoId": video_id,
            "contentCheckOk": True,
            "context": {
                "client": {
                    "clientName": self.config.client_name,
                    "clientVersion": self.config.client_version,
                    "hl": self.config.hl,
                    "gl": self.config.gl,
                    "utcOffsetMinutes": 0,
                },
            },
        }

    def fetch_player_metadata(self, video_id: str) -> PlayerResponse:
        """
        Fetch the innertube player response for a video.

        Args:
            video_id: YouTube video ID

        Returns:
            PlayerResponse exposing the caption track records

        Raises:
            VideoUnavailableError: If YouTube reports the video as unplayable
            requests.RequestException: On transport failure
        """
        logger.debug(f"Requesting player metadata for: {video_id}")

        response = self.session.post(
            PLAYER_URL,
            json=self._build_player_payload(video_id),
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
        )
        response.raise_for_status()

        player_response = PlayerResponse(response.json())
        if not player_response.is_available:
            reason = player_response.playability_error or "no reason given"
            raise VideoUnavailableError(f"Video '{video_id}' is not available: {reason}")

        return player_response

    def fetch_track_payload(self, url: str) -> TrackDocument:
        """
        Fetch a caption track document in json3 format.

        Args:
            url: Track URL from the manifest

        Returns:
            TrackDocument exposing the raw caption entries

        Raises:
            requests.RequestException: On transport failure
        """
        track_url = set_query_parameter(url, "fmt", "json3")
        logger.debug(f"Downloading caption track from: {track_url[:100]}...")

        response = self.session.get(
            track_url,
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
        )
        response.raise_for_status()

        return TrackDocument(response.json())
