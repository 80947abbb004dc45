"""
List caption tracks example.

Prints every caption track available for a YouTube video.
"""

import logging

from captionkit import ClosedCaptionClient

# Configure logging to see captionkit internal logs
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

def main():
    youtube_url = "https://www.youtube.com/watch?v=eSPJsnYY6_4"

    client = ClosedCaptionClient()
    manifest = client.get_manifest(youtube_url)

    print(f"Found {len(manifest)} caption tracks")
    for track_info in manifest:
        kind = "auto" if track_info.is_auto_generated else "manual"
        print(f"  {track_info.language} [{kind}]")

if __name__ == "__main__":
    main()
