"""Proxy - real-world example: a caching downloader.

``CachingDownloader`` keeps the same interface as ``SimpleDownloader`` and
serves repeated downloads of a URL from its cache. Pages come from an
in-memory site so the example runs offline.
"""

from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional

from design_patterns.domain.core.exceptions import ResourceNotFoundError

OFFLINE_SITE: Dict[str, str] = {
    "http://example.com/": (
        "<!doctype html>\n"
        "<html>\n"
        "<head>\n"
        "    <title>Example Domain</title>\n"
        "</head>\n"
        "<body>\n"
        "<div>\n"
        "    <h1>Example Domain</h1>\n"
        "    <p>This domain is for use in illustrative examples in documents.</p>\n"
        "</div>\n"
        "</body>\n"
        "</html>\n"
    ),
}


class Downloader(ABC):
    @abstractmethod
    def download(self, url: str) -> str:
        pass


class SimpleDownloader(Downloader):
    """The real subject: fetches every request from the site."""

    def __init__(self, site: Optional[Mapping[str, str]] = None):
        self.site = OFFLINE_SITE if site is None else site

    def download(self, url: str) -> str:
        print("Downloading a file from the Internet.")
        if url not in self.site:
            raise ResourceNotFoundError("Page", url, f"Page {url} not found")
        result = self.site[url]
        print(f"Downloaded bytes: {len(result.encode('utf-8'))}")
        return result


class CachingDownloader(Downloader):
    """Caching proxy over a SimpleDownloader."""

    def __init__(self, downloader: SimpleDownloader):
        self.downloader = downloader
        self.cache: Dict[str, str] = {}

    def download(self, url: str) -> str:
        if url not in self.cache:
            print("CacheProxy MISS. ", end="")
            self.cache[url] = self.downloader.download(url)
        else:
            print("CacheProxy HIT. Retrieving result from cache.")
        return self.cache[url]


def client_code(subject: Downloader) -> None:
    subject.download("http://example.com/")

    # Duplicate download requests could be cached for a speed gain.
    subject.download("http://example.com/")


def main() -> None:
    print("Executing client code with real subject:")
    real_subject = SimpleDownloader()
    client_code(real_subject)

    print()

    print("Executing the same client code with a proxy:")
    client_code(CachingDownloader(real_subject))


if __name__ == "__main__":
    main()
