"""Factory Method - conceptual example.

Factory Method provides an interface for creating objects in a superclass
while letting subclasses alter the type of objects that will be created.
"""

from abc import ABC, abstractmethod


class Product(ABC):
    """Operations every product created by a creator must implement."""

    @abstractmethod
    def operation(self) -> str:
        pass


class ConcreteProduct1(Product):
    def operation(self) -> str:
        return "{Result of the ConcreteProduct1}"


class ConcreteProduct2(Product):
    def operation(self) -> str:
        return "{Result of the ConcreteProduct2}"


class Creator(ABC):
    """
    Declares the factory method that returns a new product.

    Despite its name, the creator's primary responsibility is not creating
    products. It usually holds business logic that relies on the product
    returned by the factory method, and subclasses change that logic
    indirectly by overriding the factory method.
    """

    @abstractmethod
    def factory_method(self) -> Product:
        pass

    def some_operation(self) -> str:
        product = self.factory_method()
        return f"Creator: The same creator's code has just worked with {product.operation()}"


class ConcreteCreator1(Creator):
    # The signature still returns the abstract product type, which keeps the
    # creator independent of concrete product classes.
    def factory_method(self) -> Product:
        return ConcreteProduct1()


class ConcreteCreator2(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct2()


def client_code(creator: Creator) -> None:
    print("Client: I'm not aware of the creator's class, but it still works.")
    print(creator.some_operation())


def main() -> None:
    print("App: Launched with the ConcreteCreator1.")
    client_code(ConcreteCreator1())

    print("\n")

    print("App: Launched with the ConcreteCreator2.")
    client_code(ConcreteCreator2())


if __name__ == "__main__":
    main()
