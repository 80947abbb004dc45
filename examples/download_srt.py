"""
SRT download example.

Downloads the English captions of a YouTube video to an SRT file, printing
progress. The write is cancelled if it takes longer than ten seconds.
"""

import threading

from captionkit import ClosedCaptionClient, OperationCancelledError

def main():
    youtube_url = "https://www.youtube.com/watch?v=eSPJsnYY6_4"
    output_path = "local/captions/en.srt"

    client = ClosedCaptionClient()
    manifest = client.get_manifest(youtube_url)

    # Prefer manual captions, fall back to auto-generated ones
    track_info = manifest.try_get_by_language("en", auto_generated=False)
    if track_info is None:
        track_info = manifest.get_by_language("en")

    def on_progress(fraction):
        print(f"\rWriting captions: {fraction:.0%}", end="")

    cancel_event = threading.Event()
    timer = threading.Timer(10.0, cancel_event.set)
    timer.start()

    try:
        client.download_to(
            track_info,
            output_path,
            progress_callback=on_progress,
            cancel_event=cancel_event,
        )
        print(f"\nSaved to {output_path}")
    except OperationCancelledError as e:
        print(f"\n{e}")
    finally:
        timer.cancel()

if __name__ == "__main__":
    main()
