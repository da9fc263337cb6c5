"""Facade - real-world example: downloading and converting a video.

``YouTubeDownloader`` hides a video API client and a conversion library
behind a single ``download_video`` call. The subsystems work on in-memory
placeholders instead of real network and media tooling.
"""

from typing import List


class YouTube:
    def __init__(self, api_key: str):
        self.api_key = api_key

    def fetch_video(self, url: str) -> str:
        return f"video-data:{url}"

    def save_as(self, video: str, path: str) -> str:
        return path


class FFMpegVideo:
    def __init__(self, path: str):
        self.path = path
        self.operations: List[str] = []

    def filters(self) -> "FFMpegVideo":
        self.operations.append("filters")
        return self

    def resize(self) -> "FFMpegVideo":
        self.operations.append("resize")
        return self

    def synchronize(self) -> "FFMpegVideo":
        self.operations.append("synchronize")
        return self

    def frame(self, seconds: int) -> "FFMpegVideo":
        self.operations.append(f"frame:{seconds}")
        return self

    def save(self, path: str) -> "FFMpegVideo":
        self.operations.append(f"save:{path}")
        return self


class FFMpeg:
    @classmethod
    def create(cls) -> "FFMpeg":
        return cls()

    def open(self, path: str) -> FFMpegVideo:
        return FFMpegVideo(path)


class YouTubeDownloader:
    """Facade over the video API and the conversion library."""

    def __init__(self, youtube_api_key: str):
        self.youtube = YouTube(youtube_api_key)
        self.ffmpeg = FFMpeg.create()

    def download_video(self, url: str) -> FFMpegVideo:
        print("Fetching video metadata from youtube...")
        video = self.youtube.fetch_video(url)

        print("Saving video file to a temporary file...")
        path = self.youtube.save_as(video, "video.mpg")

        print("Processing source video...")
        source = self.ffmpeg.open(path)

        print("Normalizing and resizing the video to smaller dimensions...")
        source.filters().resize().synchronize()

        print("Capturing preview image...")
        source.frame(10).save("screen.jpg")

        print("Saving video in target formats...")
        source.save("video.mp4").save("video.wmv").save("video.webm")

        print("Done!")
        return source


def client_code(facade: YouTubeDownloader) -> None:
    facade.download_video("https://www.youtube.com/watch?v=QH2-TGUlwu4")


def main() -> None:
    client_code(YouTubeDownloader("APIKEY-XXXXXXXXX"))


if __name__ == "__main__":
    main()
