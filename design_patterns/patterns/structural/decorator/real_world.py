"""Decorator - real-world example: filtering and formatting user content.

Text filters wrap one another so a website can choose, per input field, how
much sanitising and formatting the submitted text gets.
"""

import re
from abc import ABC, abstractmethod


class InputFormat(ABC):
    @abstractmethod
    def format_text(self, text: str) -> str:
        pass


class TextInput(InputFormat):
    """Returns the text untouched."""

    def format_text(self, text: str) -> str:
        return text


class TextFormat(InputFormat):
    """Base decorator; delegates formatting to the wrapped format."""

    def __init__(self, input_format: InputFormat):
        self.input_format = input_format

    def format_text(self, text: str) -> str:
        return self.input_format.format_text(text)


class PlainTextFilter(TextFormat):
    """Strips every HTML tag."""

    def format_text(self, text: str) -> str:
        text = super().format_text(text)
        return re.sub(r"<[^>]*>", "", text)


class DangerousHTMLTagsFilter(TextFormat):
    """Removes dangerous tags and attributes only."""

    dangerous_tag_patterns = [
        re.compile(r"<script.*?>([\s\S]*)?</script>", re.IGNORECASE),
    ]

    dangerous_attributes = ["onclick", "onkeypress"]

    def format_text(self, text: str) -> str:
        text = super().format_text(text)

        for pattern in self.dangerous_tag_patterns:
            text = pattern.sub("", text)

        for attribute in self.dangerous_attributes:
            attribute_re = re.compile(f"{attribute}=", re.IGNORECASE)
            text = re.sub(r"<(.*?)>",
                          lambda match: f"<{attribute_re.sub('', match.group(1))}>",
                          text)

        return text


class MarkdownFormat(TextFormat):
    """Renders a small Markdown subset: headers, paragraphs, bold and italics."""

    def format_text(self, text: str) -> str:
        text = super().format_text(text)

        chunks = text.split("\n\n")
        for index, chunk in enumerate(chunks):
            if re.match(r"^#+", chunk):
                chunks[index] = re.sub(r"^(#+)(.*?)$", self._header, chunk)
            else:
                chunks[index] = f"<p>{chunk}</p>"
        text = "\n\n".join(chunks)

        text = re.sub(r"__(.*?)__", r"<strong>\1</strong>", text)
        text = re.sub(r"\*\*(.*?)\*\*", r"<strong>\1</strong>", text)
        text = re.sub(r"_(.*?)_", r"<em>\1</em>", text)
        text = re.sub(r"\*(.*?)\*", r"<em>\1</em>", text)

        return text

    @staticmethod
    def _header(match: "re.Match") -> str:
        level = len(match.group(1))
        return f"<h{level}>{match.group(2).strip()}</h{level}>"


DANGEROUS_COMMENT = (
    "Hello! Nice blog post!\n"
    "Please visit my <a href='http://www.iwillhackyou.com'>homepage</a>.\n"
    '<script src="http://www.iwillhackyou.com/script.js">\n'
    "  performXSSAttack();\n"
    "</script>"
)

DANGEROUS_FORUM_POST = (
    "# Welcome\n"
    "\n"
    "This is my first post on this **gorgeous** forum.\n"
    "\n"
    '<script src="http://www.iwillhackyou.com/script.js">\n'
    "  performXSSAttack();\n"
    "</script>"
)


def display_comment_as_a_website(input_format: InputFormat, text: str) -> None:
    print(input_format.format_text(text), end="")


def main() -> None:
    naive_input = TextInput()
    print("Website renders comments without filtering (unsafe):")
    display_comment_as_a_website(naive_input, DANGEROUS_COMMENT)
    print("\n\n")

    filtered_input = PlainTextFilter(naive_input)
    print("Website renders comments after stripping all tags (safe):")
    display_comment_as_a_website(filtered_input, DANGEROUS_COMMENT)
    print("\n\n")

    print("Website renders a forum post without filtering and formatting (unsafe, ugly):")
    display_comment_as_a_website(naive_input, DANGEROUS_FORUM_POST)
    print("\n\n")

    markdown = MarkdownFormat(TextInput())
    filtered_input = DangerousHTMLTagsFilter(markdown)
    print("Website renders a forum post after translating markdown markup"
          " and filtering some dangerous HTML tags and attributes (safe, pretty):")
    display_comment_as_a_website(filtered_input, DANGEROUS_FORUM_POST)
    print("\n\n")


if __name__ == "__main__":
    main()
