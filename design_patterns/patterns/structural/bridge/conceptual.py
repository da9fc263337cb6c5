"""Bridge - conceptual example.

Bridge splits a large class, or a set of closely related classes, into two
separate hierarchies: abstraction and implementation. Both can then be
developed independently of each other.
"""

from abc import ABC, abstractmethod


class Implementation(ABC):
    """
    Interface for all implementation classes.

    It does not have to match the Abstraction's interface. Typically it
    provides primitive operations and the Abstraction builds higher-level
    operations on top of them.
    """

    @abstractmethod
    def operation_implementation(self) -> str:
        pass


class ConcreteImplementationA(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationA: Here's the result on the platform A."


class ConcreteImplementationB(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationB: Here's the result on the platform B."


class Abstraction:
    """Control part of the hierarchy; delegates the work to an Implementation."""

    def __init__(self, implementation: Implementation):
        self.implementation = implementation

    def operation(self) -> str:
        return ("Abstraction: Base operation with:\n"
                f"{self.implementation.operation_implementation()}")


class ExtendedAbstraction(Abstraction):
    """Extends the Abstraction without changing the implementation classes."""

    def operation(self) -> str:
        return ("ExtendedAbstraction: Extended operation with:\n"
                f"{self.implementation.operation_implementation()}")


def client_code(abstraction: Abstraction) -> None:
    # Client code depends only on the Abstraction class.
    print(abstraction.operation())


def main() -> None:
    client_code(Abstraction(ConcreteImplementationA()))

    print()

    client_code(ExtendedAbstraction(ConcreteImplementationB()))


if __name__ == "__main__":
    main()
