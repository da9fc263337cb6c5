"""Decorator - conceptual example.

Decorator attaches new behaviour to objects by placing them inside wrapper
objects that implement the same interface. Wrappers can be stacked.
"""

from abc import ABC, abstractmethod


class Component(ABC):
    """Interface shared by the wrapped object and its wrappers."""

    @abstractmethod
    def operation(self) -> str:
        pass


class ConcreteComponent(Component):
    """Default implementation of the operations, before any decoration."""

    def operation(self) -> str:
        return "ConcreteComponent"


class Decorator(Component):
    """
    Base decorator: follows the component interface and delegates all work
    to the wrapped component.
    """

    def __init__(self, component: Component):
        self._component = component

    @property
    def component(self) -> Component:
        return self._component

    def operation(self) -> str:
        return self._component.operation()


class ConcreteDecoratorA(Decorator):
    def operation(self) -> str:
        return f"ConcreteDecoratorA({self.component.operation()})"


class ConcreteDecoratorB(Decorator):
    def operation(self) -> str:
        return f"ConcreteDecoratorB({self.component.operation()})"


def client_code(component: Component) -> None:
    print(f"RESULT: {component.operation()}", end="")


def main() -> None:
    simple = ConcreteComponent()
    print("Client: I've got a simple component:")
    client_code(simple)
    print("\n")

    decorator1 = ConcreteDecoratorA(simple)
    decorator2 = ConcreteDecoratorB(decorator1)
    print("Client: Now I've got a decorated component:")
    client_code(decorator2)
    print()


if __name__ == "__main__":
    main()
