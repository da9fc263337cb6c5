"""Composite - conceptual example.

Composite composes objects into tree structures and lets clients treat
individual objects and compositions of objects uniformly.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class Component(ABC):
    """
    Common operations for simple and complex objects of a composition.

    Child-management methods are declared here so clients never need to
    check concrete classes; leaves simply ignore them.
    """

    def __init__(self):
        self._parent: Optional["Component"] = None

    @property
    def parent(self) -> Optional["Component"]:
        return self._parent

    @parent.setter
    def parent(self, parent: Optional["Component"]) -> None:
        self._parent = parent

    def add(self, component: "Component") -> None:
        pass

    def remove(self, component: "Component") -> None:
        pass

    def is_composite(self) -> bool:
        return False

    @abstractmethod
    def operation(self) -> str:
        pass


class Leaf(Component):
    """End object of a composition; does the actual work."""

    def operation(self) -> str:
        return "Leaf"


class Composite(Component):
    """Complex component that delegates the work to its children."""

    def __init__(self):
        super().__init__()
        self._children: List[Component] = []

    @property
    def children(self) -> List[Component]:
        return list(self._children)

    def add(self, component: Component) -> None:
        self._children.append(component)
        component.parent = self

    def remove(self, component: Component) -> None:
        self._children = [child for child in self._children if child is not component]
        component.parent = None

    def is_composite(self) -> bool:
        return True

    def operation(self) -> str:
        results = [child.operation() for child in self._children]
        return f"Branch({'+'.join(results)})"


def client_code(component: Component) -> None:
    print(f"RESULT: {component.operation()}", end="")


def client_code2(component1: Component, component2: Component) -> None:
    # Child management lives on the base class, so no type checks are needed.
    if component1.is_composite():
        component1.add(component2)

    print(f"RESULT: {component1.operation()}", end="")


def main() -> None:
    simple = Leaf()
    print("Client: I get a simple component:")
    client_code(simple)
    print("\n")

    tree = Composite()

    branch1 = Composite()
    branch1.add(Leaf())
    branch1.add(Leaf())

    branch2 = Composite()
    branch2.add(Leaf())

    tree.add(branch1)
    tree.add(branch2)

    print("Client: Now I get a composite tree:")
    client_code(tree)
    print("\n")

    print("Client: I can merge two components without checking their classes:")
    client_code2(tree, simple)
    print()


if __name__ == "__main__":
    main()
