"""Observer - real-world example: a user repository that publishes events.

Observers subscribe to a named event group or to every event through the
``"*"`` group. A logger writes each event to a file and an onboarding
notifier reacts to new users.
"""

import json
import secrets
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

DEFAULT_OUTPUT_DIR = Path(tempfile.gettempdir()) / "design-patterns"


class Observer:
    def update(self, repository: "UserRepository", event: str, data: Any = None) -> None:
        raise NotImplementedError


class User:
    def __init__(self):
        self.attributes: Dict[str, Any] = {}

    def update(self, data: Dict[str, Any]) -> None:
        self.attributes.update(data)


class UserRepository:
    """The subject. Keeps users and notifies observers per event group."""

    def __init__(self):
        self.users: Dict[str, User] = {}
        self._observers: Dict[str, List[Observer]] = {"*": []}

    def _init_event_group(self, event: str = "*") -> None:
        self._observers.setdefault(event, [])

    def _get_event_observers(self, event: str = "*") -> List[Observer]:
        self._init_event_group(event)
        group = self._observers[event]
        everyone = self._observers["*"] if event != "*" else []
        return group + everyone

    def attach(self, observer: Observer, event: str = "*") -> None:
        self._init_event_group(event)
        self._observers[event].append(observer)

    def detach(self, observer: Observer, event: str = "*") -> None:
        self._init_event_group(event)
        self._observers[event] = [s for s in self._observers[event] if s is not observer]

    def notify(self, event: str = "*", data: Any = None) -> None:
        print(f"UserRepository: Broadcasting the '{event}' event.")
        for observer in self._get_event_observers(event):
            observer.update(self, event, data)

    def initialize(self, filename: str) -> None:
        print("UserRepository: Loading user records from a file.")
        self.notify("users:init", filename)

    def create_user(self, data: Dict[str, Any]) -> User:
        print("UserRepository: Creating a user.")

        user = User()
        user.update(data)

        user_id = secrets.token_hex(16)
        user.update({"id": user_id})
        self.users[user_id] = user

        self.notify("users:created", user)

        return user

    def update_user(self, user: User, data: Dict[str, Any]) -> Optional[User]:
        print("UserRepository: Updating a user.")

        user_id = user.attributes["id"]
        if user_id not in self.users:
            return None

        user = self.users[user_id]
        user.update(data)

        self.notify("users:updated", user)

        return user

    def delete_user(self, user: User) -> None:
        print("UserRepository: Deleting a user.")

        user_id = user.attributes["id"]
        if user_id not in self.users:
            return

        del self.users[user_id]

        self.notify("users:deleted", user)


class Logger(Observer):
    """Appends every event to a log file, starting from an empty file."""

    def __init__(self, filename: Union[str, Path]):
        self.filename = Path(filename)
        if self.filename.exists():
            self.filename.unlink()

    def update(self, repository: UserRepository, event: str, data: Any = None) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        payload = json.dumps(data, default=lambda value: vars(value))
        with open(self.filename, "a", encoding="utf-8") as log_file:
            log_file.write(f"{timestamp}: '{event}' with data '{payload}'\n")

        print(f"Logger: I've written '{event}' entry to the log.")


class OnboardingNotification(Observer):
    def __init__(self, admin_email: str):
        self.admin_email = admin_email

    def update(self, repository: UserRepository, event: str, data: Any = None) -> None:
        # Sending the email is out of scope; announce it instead.
        print("OnboardingNotification: The notification has been emailed!")


def main(output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR) -> None:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    repository = UserRepository()
    repository.attach(Logger(output_dir / "log.txt"), "*")
    repository.attach(OnboardingNotification("1@example.com"), "users:created")

    repository.initialize(str(output_dir / "users.csv"))

    user = repository.create_user({
        "name": "John Smith",
        "email": "john99@example.com",
    })

    repository.delete_user(user)


if __name__ == "__main__":
    main()
