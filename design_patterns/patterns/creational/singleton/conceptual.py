"""Singleton - conceptual example.

Singleton ensures a class has only one instance and provides a global
access point to it. Each subclass gets its own single instance.
"""

import threading
from typing import Dict, Type

from design_patterns.domain.core.exceptions import SingletonError


def _refuse_unpickle(cls: Type["Singleton"]) -> "Singleton":
    raise SingletonError(f"Cannot unserialize a singleton: {cls.__name__}")


class Singleton:
    """
    Base class whose subclasses are only reachable through get_instance().

    Calling the class directly, copying an instance or unpickling one raises
    SingletonError.
    """

    _instances: Dict[type, "Singleton"] = {}
    _lock = threading.RLock()

    def __new__(cls, *args, **kwargs):
        raise SingletonError(f"Cannot instantiate {cls.__name__} directly, use get_instance()")

    @classmethod
    def get_instance(cls) -> "Singleton":
        """Get the single instance of this class, creating it on first use."""
        if cls not in Singleton._instances:
            with Singleton._lock:
                if cls not in Singleton._instances:
                    instance = object.__new__(cls)
                    instance.__init__()
                    Singleton._instances[cls] = instance
        return Singleton._instances[cls]

    @classmethod
    def reset_instances(cls) -> None:
        """Forget every instance (used by tests)."""
        with Singleton._lock:
            Singleton._instances.clear()

    def __copy__(self):
        raise SingletonError(f"Cannot copy singleton {type(self).__name__}")

    def __deepcopy__(self, memo):
        raise SingletonError(f"Cannot copy singleton {type(self).__name__}")

    def __reduce__(self):
        return _refuse_unpickle, (type(self),)

    def some_business_logic(self) -> None:
        """Any singleton can hold business logic executed on its instance."""


def client_code() -> None:
    s1 = Singleton.get_instance()
    s2 = Singleton.get_instance()

    if s1 is s2:
        print("Singleton works, both variables contain the same instance.")
    else:
        print("Singleton failed, variables contain different instances.")


def main() -> None:
    client_code()


if __name__ == "__main__":
    main()
