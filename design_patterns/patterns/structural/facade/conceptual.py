"""Facade - conceptual example.

Facade provides a simple interface to a complex subsystem, exposing only the
features a client actually cares about.
"""

from typing import Optional


class Subsystem1:
    """
    One part of the subsystem. It accepts requests from the facade or the
    client directly and is not aware of the facade.
    """

    def operation1(self) -> str:
        return "Subsystem1: Ready!"

    def operation_n(self) -> str:
        return "Subsystem1: Go!"


class Subsystem2:
    def operation1(self) -> str:
        return "Subsystem2: Get ready!"

    def operation_z(self) -> str:
        return "Subsystem2: Fire!"


class Facade:
    """
    Delegates client requests to the right subsystem objects and manages
    their lifecycle. Existing subsystem objects can be passed in, otherwise
    the facade creates its own.
    """

    def __init__(self, subsystem1: Optional[Subsystem1] = None,
                 subsystem2: Optional[Subsystem2] = None):
        self._subsystem1 = subsystem1 or Subsystem1()
        self._subsystem2 = subsystem2 or Subsystem2()

    def operation(self) -> str:
        results = [
            "Facade initializes subsystems:",
            self._subsystem1.operation1(),
            self._subsystem2.operation1(),
            "Facade orders subsystems to perform the action:",
            self._subsystem1.operation_n(),
            self._subsystem2.operation_z(),
        ]
        return "\n".join(results)


def client_code(facade: Facade) -> None:
    print(facade.operation())


def main() -> None:
    subsystem1 = Subsystem1()
    subsystem2 = Subsystem2()
    client_code(Facade(subsystem1, subsystem2))


if __name__ == "__main__":
    main()
