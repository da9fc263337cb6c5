"""Abstract Factory - conceptual example.

Abstract Factory lets you produce families of related objects without
specifying their concrete classes. Each concrete factory produces one
variant of every product in the family, and the products of one family are
guaranteed to be compatible with each other.
"""

from abc import ABC, abstractmethod


class AbstractProductA(ABC):
    """Base interface of the first product of the family."""

    @abstractmethod
    def useful_function_a(self) -> str:
        pass


class ConcreteProductA1(AbstractProductA):
    def useful_function_a(self) -> str:
        return "The result of the product A1."


class ConcreteProductA2(AbstractProductA):
    def useful_function_a(self) -> str:
        return "The result of the product A2."


class AbstractProductB(ABC):
    """
    Base interface of the second product of the family.

    Products can do their own thing, but they can also collaborate with the
    first product. The factory makes sure collaborators share a variant.
    """

    @abstractmethod
    def useful_function_b(self) -> str:
        pass

    @abstractmethod
    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        pass


class ConcreteProductB1(AbstractProductB):
    def useful_function_b(self) -> str:
        return "The result of the product B1."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"The result of the B1 collaborating with the ({result})"


class ConcreteProductB2(AbstractProductB):
    def useful_function_b(self) -> str:
        return "The result of the product B2."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"The result of the B2 collaborating with the ({result})"


class AbstractFactory(ABC):
    """
    Declares a set of methods returning different abstract products.

    The products of a family are related by a high-level theme or concept
    and can collaborate among themselves.
    """

    @abstractmethod
    def create_product_a(self) -> AbstractProductA:
        pass

    @abstractmethod
    def create_product_b(self) -> AbstractProductB:
        pass


class ConcreteFactory1(AbstractFactory):
    """Produces the products of variant 1."""

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    """Produces the products of variant 2."""

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB2()


def client_code(factory: AbstractFactory) -> None:
    """Works with factories and products only through their abstract types."""
    product_a = factory.create_product_a()
    product_b = factory.create_product_b()

    print(product_b.useful_function_b())
    print(product_b.another_useful_function_b(product_a))


def main() -> None:
    print("Client: Testing client code with the first factory type:")
    client_code(ConcreteFactory1())

    print()

    print("Client: Testing the same client code with the second factory type:")
    client_code(ConcreteFactory2())


if __name__ == "__main__":
    main()
