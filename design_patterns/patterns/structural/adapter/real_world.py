"""Adapter - real-world example: sending alerts through Slack.

The application sends notifications through the ``Notification`` interface.
``SlackNotification`` adapts a third-party Slack client to that interface so
the same alerting code can post into a chat.
"""

import re
from abc import ABC, abstractmethod

_TAG_RE = re.compile(r"<[^>]*>")


def strip_tags(text: str) -> str:
    """Remove HTML tags, keeping the text between them."""
    return _TAG_RE.sub("", text)


class Notification(ABC):
    @abstractmethod
    def send(self, title: str, message: str) -> None:
        pass


class EmailNotification(Notification):
    """
    Notification through email.

    Prints the email it would send instead of handing it to a mail server.
    """

    def __init__(self, admin_email: str):
        self.admin_email = admin_email

    def send(self, title: str, message: str) -> None:
        print(f"Sent email with title '{title}' to '{self.admin_email}' that says '{message}'.")


class SlackApi:
    """Third-party client with an interface of its own."""

    def __init__(self, login: str, api_key: str):
        self.login = login
        self.api_key = api_key

    def log_in(self) -> None:
        print(f"Logged in to a slack account '{self.login}'.")

    def send_message(self, chat_id: str, message: str) -> None:
        print(f"Posted following message into the '{chat_id}' chat: '{message}'.")


class SlackNotification(Notification):
    """Adapts SlackApi to the Notification interface."""

    def __init__(self, slack: SlackApi, chat_id: str):
        self.slack = slack
        self.chat_id = chat_id

    def send(self, title: str, message: str) -> None:
        slack_message = f"#{title}# {strip_tags(message)}"
        self.slack.log_in()
        self.slack.send_message(self.chat_id, slack_message)


def client_code(notification: Notification) -> None:
    notification.send(
        "Website is down!",
        "<strong style='color:red;font-size: 50px;'>Alert!</strong> "
        "Our website is not responding. Call admins and bring it up!",
    )


def main() -> None:
    print("Client code is designed correctly and works with email notifications:")
    client_code(EmailNotification("developers@example.com"))
    print("\n")

    print("The same client code can work with other classes via adapter:")
    slack_api = SlackApi("example.com", "XXXXXXXX")
    client_code(SlackNotification(slack_api, "Example.com Developers"))


if __name__ == "__main__":
    main()
