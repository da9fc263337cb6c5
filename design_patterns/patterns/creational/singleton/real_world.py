"""Singleton - real-world example: a logger and a configuration store.

Both share one singleton base, and each class gets its own single instance.
"""

import threading
from datetime import date
from typing import Callable, Dict, Type

from design_patterns.domain.core.exceptions import ResourceNotFoundError, SingletonError


def _refuse_unpickle(cls: Type["Singleton"]) -> "Singleton":
    raise SingletonError(f"Cannot unserialize singleton {cls.__name__}")


class Singleton:
    """Keeps one instance per subclass, created lazily under a lock."""

    _instances: Dict[type, "Singleton"] = {}
    _lock = threading.RLock()

    def __new__(cls, *args, **kwargs):
        raise SingletonError(f"Cannot instantiate {cls.__name__} directly, use get_instance()")

    @classmethod
    def get_instance(cls):
        if cls not in Singleton._instances:
            with Singleton._lock:
                if cls not in Singleton._instances:
                    instance = object.__new__(cls)
                    instance.__init__()
                    Singleton._instances[cls] = instance
        return Singleton._instances[cls]

    @classmethod
    def reset_instances(cls) -> None:
        with Singleton._lock:
            Singleton._instances.clear()

    def __copy__(self):
        raise SingletonError(f"Cannot copy singleton {type(self).__name__}")

    def __deepcopy__(self, memo):
        raise SingletonError(f"Cannot copy singleton {type(self).__name__}")

    def __reduce__(self):
        return _refuse_unpickle, (type(self),)


class Logger(Singleton):
    """Writes dated messages to standard output."""

    today: Callable[[], date] = date.today

    def write_log(self, message: str) -> None:
        print(f"{type(self).today().isoformat()}: {message}")

    @classmethod
    def log(cls, message: str) -> None:
        cls.get_instance().write_log(message)


class Config(Singleton):
    """Application-wide key/value settings."""

    def __init__(self):
        self._hashmap: Dict[str, str] = {}

    def get_value(self, key: str) -> str:
        if key not in self._hashmap:
            raise ResourceNotFoundError("Config key", key, f"Config key '{key}' is not set")
        return self._hashmap[key]

    def set_value(self, key: str, value: str) -> None:
        self._hashmap[key] = value


def main() -> None:
    Logger.log("Started!")

    l1 = Logger.get_instance()
    l2 = Logger.get_instance()
    if l1 is l2:
        Logger.log("Logger has a single instance.")
    else:
        Logger.log("Loggers are different.")

    config1 = Config.get_instance()
    login = "test_login"
    password = "test_password"
    config1.set_value("login", login)
    config1.set_value("password", password)

    config2 = Config.get_instance()
    if login == config2.get_value("login") and password == config2.get_value("password"):
        Logger.log("Config singleton also works fine.")

    Logger.log("Finished!")


if __name__ == "__main__":
    main()
