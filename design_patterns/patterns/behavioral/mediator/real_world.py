"""Mediator - real-world example: an application-wide event dispatcher.

Components never call each other. They trigger events on the shared
``EventDispatcher`` and subscribe to the events they care about, either per
event name or to every event through the ``"*"`` group.
"""

import json
import secrets
import tempfile
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

DEFAULT_OUTPUT_DIR = Path(tempfile.gettempdir()) / "design-patterns"


class Observer:
    """Anything that can receive events from the dispatcher."""

    def update(self, event: str, emitter: object, data: Any = None) -> None:
        raise NotImplementedError


class EventDispatcher:
    """The mediator: routes events from emitters to their subscribers."""

    def __init__(self):
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

    def trigger(self, event: str, emitter: object, data: Any = None) -> None:
        print(f"EventDispatcher: Broadcasting the '{event}' event.")
        for observer in self._get_event_observers(event):
            observer.update(event, emitter, data)


@lru_cache(maxsize=None)
def events() -> EventDispatcher:
    """The shared dispatcher; call ``events.cache_clear()`` to start over."""
    return EventDispatcher()


class User:
    def __init__(self):
        self.attributes: Dict[str, Any] = {}

    def update(self, data: Dict[str, Any]) -> None:
        self.attributes.update(data)

    def delete(self) -> None:
        # The user does not know about the repository; the dispatcher relays.
        print("User: I can now delete myself without worrying about the repository.")
        events().trigger("users:deleted", self, self)


class UserRepository(Observer):
    def __init__(self):
        self.users: Dict[str, User] = {}
        events().attach(self, "users:deleted")

    def update(self, event: str, emitter: object, data: Any = None) -> None:
        if event == "users:deleted":
            if emitter is self:
                return
            self.delete_user(data, True)

    def initialize(self, filename: str) -> None:
        print("UserRepository: Loading user records from a file.")
        events().trigger("users:init", self, filename)

    def create_user(self, data: Dict[str, Any], silent: bool = False) -> User:
        print("UserRepository: Creating a user.")

        user = User()
        user.update(data)

        user_id = secrets.token_hex(16)
        user.update({"id": user_id})
        self.users[user_id] = user

        if not silent:
            events().trigger("users:created", self, user)

        return user

    def update_user(self, user: User, data: Dict[str, Any], silent: bool = False) -> Optional[User]:
        print("UserRepository: Updating a user.")

        user_id = user.attributes["id"]
        if user_id not in self.users:
            return None

        user = self.users[user_id]
        user.update(data)

        if not silent:
            events().trigger("users:updated", self, user)

        return user

    def delete_user(self, user: User, silent: bool = False) -> None:
        print("UserRepository: Deleting a user.")

        user_id = user.attributes["id"]
        if user_id not in self.users:
            return

        del self.users[user_id]

        if not silent:
            events().trigger("users:deleted", self, user)


def _json_default(value: Any) -> Any:
    return vars(value)


class Logger(Observer):
    """Appends every event it receives to a log file."""

    def __init__(self, filename: Union[str, Path]):
        self.filename = Path(filename)
        if self.filename.exists():
            self.filename.unlink()

    def update(self, event: str, emitter: object, data: Any = None) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        entry = f"{timestamp}: '{event}' with data '{json.dumps(data, default=_json_default)}'\n"
        with open(self.filename, "a", encoding="utf-8") as log_file:
            log_file.write(entry)

        print(f"Logger: I've written '{event}' entry to the log.")


class OnboardingNotification(Observer):
    def __init__(self, admin_email: str):
        self.admin_email = admin_email

    def update(self, event: str, emitter: object, data: Any = None) -> None:
        print("OnboardingNotification: The notification has been emailed!")


def main(output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR) -> None:
    # Each run wires its own components to a fresh dispatcher.
    events.cache_clear()

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    repository = UserRepository()
    events().attach(repository, "facebook:update")

    logger = Logger(output_dir / "log.txt")
    events().attach(logger, "*")

    onboarding = OnboardingNotification("1@example.com")
    events().attach(onboarding, "users:created")

    repository.initialize(str(output_dir / "users.csv"))

    user = repository.create_user({
        "name": "John Smith",
        "email": "john99@example.com",
    })

    user.delete()


if __name__ == "__main__":
    main()
