"""Prototype - real-world example: copying a blog page.

A copied page is a draft: its title is prefixed with "Copy of", it keeps the
author but registers with them as a new page, loses the original's comments
and gets a fresh creation date.
"""

import copy
from datetime import datetime
from typing import Any, Callable, Dict, List

import yaml


class Author:
    def __init__(self, name: str):
        self.name = name
        self.pages: List["Page"] = []

    def add_to_page(self, page: "Page") -> None:
        self.pages.append(page)


class Page:
    def __init__(self, title: str, body: str, author: Author,
                 clock: Callable[[], datetime] = datetime.now):
        self.title = title
        self.body = body
        self.author = author
        self.comments: List[str] = []
        self._clock = clock
        self.date = clock()
        self.author.add_to_page(self)

    def add_comment(self, comment: str) -> None:
        self.comments.append(comment)

    def __copy__(self) -> "Page":
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone.title = f"Copy of {self.title}"
        clone.comments = []
        clone.date = self._clock()
        clone.author.add_to_page(clone)
        return clone

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "body": self.body,
            "author": {
                "name": self.author.name,
                "pages": [page.title for page in self.author.pages],
            },
            "comments": list(self.comments),
            "date": self.date.isoformat(),
        }


def client_code(clock: Callable[[], datetime] = datetime.now) -> Page:
    author = Author("John Smith")
    page = Page("Tip of the day", "Keep calm and carry on.", author, clock)

    page.add_comment("Nice tip, thanks!")

    draft = copy.copy(page)
    print("Dump of the clone. Note that the author is now referencing two objects.\n")
    print(yaml.safe_dump(draft.to_dict(), default_flow_style=False, sort_keys=False), end="")
    return draft


def main(clock: Callable[[], datetime] = datetime.now) -> None:
    client_code(clock)


if __name__ == "__main__":
    main()
