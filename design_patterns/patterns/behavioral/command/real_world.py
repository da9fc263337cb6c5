"""Command - real-world example: a web scraping queue.

Scraping tasks are commands. They are serialised into an SQLite-backed queue
and executed one by one; running a command can enqueue further commands
(genres lead to genre pages, genre pages lead to movies and next pages).

Pages are served from an in-memory copy of the site so the example runs
offline and always produces the same output.
"""

import base64
import pickle
import re
import sqlite3
import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

from design_patterns.domain.core.exceptions import ResourceNotFoundError

GENRES_URL = "https://www.imdb.com/feature/genre/"
COMEDY_URL = "https://www.imdb.com/search/title?genres=comedy"
DRAMA_URL = "https://www.imdb.com/search/title?genres=drama"


def _movie_page(title: str) -> str:
    return f'<html><body><h1 itemprop="name" class="">{title}</h1></body></html>'


def _genre_page(movie_ids, has_next: bool) -> str:
    links = "".join(
        f'<a href="/title/{movie_id}/?ref_=adv_li_tt">{movie_id}</a>\n' for movie_id in movie_ids
    )
    next_link = '<a href="#next" class="lister-page-next">Next &#187;</a>\n' if has_next else ""
    return f"<html><body>\n{links}{next_link}</body></html>"


OFFLINE_SITE: Dict[str, str] = {
    GENRES_URL: (
        "<html><body>\n"
        f'<a href="{COMEDY_URL}">Comedy</a>\n'
        f'<a href="{DRAMA_URL}">Drama</a>\n'
        "</body></html>"
    ),
    f"{COMEDY_URL}&page=1": _genre_page(["tt0107048", "tt0118715"], has_next=True),
    f"{COMEDY_URL}&page=2": _genre_page(["tt0088763"], has_next=False),
    f"{DRAMA_URL}&page=1": _genre_page(["tt0111161"], has_next=False),
    "https://www.imdb.com/title/tt0107048/": _movie_page("Groundhog Day"),
    "https://www.imdb.com/title/tt0118715/": _movie_page("The Big Lebowski"),
    "https://www.imdb.com/title/tt0088763/": _movie_page("Back to the Future"),
    "https://www.imdb.com/title/tt0111161/": _movie_page("The Shawshank Redemption"),
}


def fetch_page(url: str) -> str:
    """Return the HTML of a page of the offline site."""
    try:
        return OFFLINE_SITE[url]
    except KeyError:
        raise ResourceNotFoundError("Page", url, f"Page {url} not found") from None


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def get_id(self) -> Optional[int]:
        pass

    @abstractmethod
    def get_status(self) -> int:
        pass


class WebScrapingCommand(Command):
    """Base scraping command: download a page, parse it, mark itself complete."""

    def __init__(self, url: str):
        self.id: Optional[int] = None
        self.status = 0
        self.url = url

    def get_id(self) -> Optional[int]:
        return self.id

    def get_status(self) -> int:
        return self.status

    def get_url(self) -> str:
        return self.url

    def execute(self) -> None:
        html = self.download()
        self.parse(html)
        self.complete()

    def download(self) -> str:
        html = fetch_page(self.get_url())
        print(f"WebScrapingCommand: Downloaded {self.get_url()}")
        return html

    @abstractmethod
    def parse(self, html: str) -> None:
        pass

    def complete(self) -> None:
        self.status = 1
        Queue.get().complete_command(self)


class IMDBGenresScrapingCommand(WebScrapingCommand):
    """Fetches the list of genres and schedules a scrape of each one."""

    def __init__(self):
        super().__init__(GENRES_URL)

    def parse(self, html: str) -> None:
        genres = re.findall(r'href="(https://www\.imdb\.com/search/title\?genres=.*?)"', html)
        print(f"IMDBGenresScrapingCommand: Discovered {len(genres)} genres.")

        for genre in genres:
            Queue.get().add(IMDBGenrePageScrapingCommand(genre))


class IMDBGenrePageScrapingCommand(WebScrapingCommand):
    """Fetches one page of a genre's movie list and the next page, if any."""

    def __init__(self, url: str, page: int = 1):
        super().__init__(url)
        self.page = page

    def get_url(self) -> str:
        return f"{self.url}&page={self.page}"

    def parse(self, html: str) -> None:
        movie_paths = re.findall(r'href="(/title/.*?/)\?ref_=adv_li_tt"', html)
        print(f"IMDBGenrePageScrapingCommand: Discovered {len(movie_paths)} movies.")

        for movie_path in movie_paths:
            Queue.get().add(IMDBMovieScrapingCommand(f"https://www.imdb.com{movie_path}"))

        if re.search(r"Next &#187;</a>", html):
            Queue.get().add(IMDBGenrePageScrapingCommand(self.url, self.page + 1))


class IMDBMovieScrapingCommand(WebScrapingCommand):
    """Parses a movie page."""

    def parse(self, html: str) -> None:
        match = re.search(r'<h1 itemprop="name" class="">(.*?)</h1>', html)
        title = match.group(1) if match else "(untitled)"
        print(f"IMDBMovieScrapingCommand: Parsed movie {title}.")


class Queue:
    """
    Command queue backed by SQLite.

    Commands are stored pickled and base64-encoded. ``Queue.get()`` returns
    the shared queue; the default database lives in memory.
    """

    _instance: Optional["Queue"] = None
    _lock = threading.RLock()

    def __init__(self, database: str = ":memory:"):
        self.db = sqlite3.connect(database)
        self.db.execute(
            'CREATE TABLE IF NOT EXISTS "commands" ('
            '"id" INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL, '
            '"command" TEXT, '
            '"status" INTEGER)'
        )
        self.db.commit()

    @classmethod
    def get(cls) -> "Queue":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            if cls._instance is not None:
                cls._instance.db.close()
            cls._instance = None

    def is_empty(self) -> bool:
        (count,) = self.db.execute('SELECT COUNT("id") FROM "commands" WHERE status = 0').fetchone()
        return count == 0

    def add(self, command: Command) -> None:
        payload = base64.b64encode(pickle.dumps(command)).decode("ascii")
        self.db.execute(
            "INSERT INTO commands (command, status) VALUES (?, ?)",
            (payload, command.get_status()),
        )
        self.db.commit()

    def get_command(self) -> Command:
        record = self.db.execute(
            'SELECT "id", "command" FROM "commands" WHERE "status" = 0 ORDER BY "id" LIMIT 1'
        ).fetchone()
        command = pickle.loads(base64.b64decode(record[1]))
        command.id = record[0]
        return command

    def complete_command(self, command: Command) -> None:
        self.db.execute(
            "UPDATE commands SET status = ? WHERE id = ?",
            (command.get_status(), command.get_id()),
        )
        self.db.commit()

    def work(self) -> None:
        while not self.is_empty():
            command = self.get_command()
            command.execute()


def main() -> None:
    queue = Queue.get()

    if queue.is_empty():
        queue.add(IMDBGenresScrapingCommand())

    queue.work()


if __name__ == "__main__":
    main()
