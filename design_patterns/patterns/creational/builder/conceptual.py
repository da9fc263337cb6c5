"""Builder - conceptual example.

Builder constructs complex objects step by step. The same construction code
can produce different representations, and the Director captures the
popular construction sequences so they can be reused.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class Product1:
    """
    The object being built.

    Products built by different builders do not have to share an interface,
    which is why getting the result lives on the concrete builder.
    """

    def __init__(self):
        self.parts: List[str] = []

    def list_parts(self) -> None:
        print(f"Product parts: {', '.join(self.parts)}\n")


class Builder(ABC):
    """Declares the steps that create the different parts of a product."""

    @abstractmethod
    def produce_part_a(self) -> None:
        pass

    @abstractmethod
    def produce_part_b(self) -> None:
        pass

    @abstractmethod
    def produce_part_c(self) -> None:
        pass


class ConcreteBuilder1(Builder):
    """
    Implements the construction steps for one product representation.

    A fresh builder instance holds a blank product ready for assembly.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._product = Product1()

    def produce_part_a(self) -> None:
        self._product.parts.append("PartA1")

    def produce_part_b(self) -> None:
        self._product.parts.append("PartB1")

    def produce_part_c(self) -> None:
        self._product.parts.append("PartC1")

    def get_product(self) -> Product1:
        """Return the built product and start over with a blank one."""
        result = self._product
        self.reset()
        return result


class Director:
    """Executes building steps in a particular sequence."""

    def __init__(self):
        self._builder: Optional[Builder] = None

    def set_builder(self, builder: Builder) -> None:
        self._builder = builder

    def build_minimal_viable_product(self) -> None:
        self._builder.produce_part_a()

    def build_full_featured_product(self) -> None:
        self._builder.produce_part_a()
        self._builder.produce_part_b()
        self._builder.produce_part_c()


def client_code(director: Director) -> None:
    builder = ConcreteBuilder1()
    director.set_builder(builder)

    print("Standard basic product:")
    director.build_minimal_viable_product()
    builder.get_product().list_parts()

    print("Standard full featured product:")
    director.build_full_featured_product()
    builder.get_product().list_parts()

    # The builder also works without a director.
    print("Custom product:")
    builder.produce_part_a()
    builder.produce_part_c()
    builder.get_product().list_parts()


def main() -> None:
    client_code(Director())


if __name__ == "__main__":
    main()
