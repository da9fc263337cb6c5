"""Template Method - conceptual example.

Template Method defines the skeleton of an algorithm in the superclass and
lets subclasses override specific steps without changing its structure.
"""

from abc import ABC, abstractmethod


class AbstractClass(ABC):
    """
    Defines the template method and declares its steps.

    Steps come in three kinds: base operations implemented here, required
    operations every subclass must implement, and hooks that subclasses may
    override but do not have to.
    """

    def template_method(self) -> None:
        """The skeleton of the algorithm."""
        self.base_operation1()
        self.required_operations1()
        self.base_operation2()
        self.hook1()
        self.required_operations2()
        self.base_operation3()
        self.hook2()

    def base_operation1(self) -> None:
        print("AbstractClass says: I am doing the bulk of the work")

    def base_operation2(self) -> None:
        print("AbstractClass says: But I let subclasses override some operations")

    def base_operation3(self) -> None:
        print("AbstractClass says: But I am doing the bulk of the work anyway")

    @abstractmethod
    def required_operations1(self) -> None:
        pass

    @abstractmethod
    def required_operations2(self) -> None:
        pass

    # Hooks are extension points with empty default bodies.
    def hook1(self) -> None:
        pass

    def hook2(self) -> None:
        pass


class ConcreteClass1(AbstractClass):
    def required_operations1(self) -> None:
        print("ConcreteClass1 says: Implemented Operation1")

    def required_operations2(self) -> None:
        print("ConcreteClass1 says: Implemented Operation2")


class ConcreteClass2(AbstractClass):
    def required_operations1(self) -> None:
        print("ConcreteClass2 says: Implemented Operation1")

    def required_operations2(self) -> None:
        print("ConcreteClass2 says: Implemented Operation2")

    def hook1(self) -> None:
        print("ConcreteClass2 says: Overridden Hook1")


def client_code(abstract_class: AbstractClass) -> None:
    abstract_class.template_method()


def main() -> None:
    print("Same client code can work with different subclasses:")
    client_code(ConcreteClass1())
    print()

    print("Same client code can work with different subclasses:")
    client_code(ConcreteClass2())


if __name__ == "__main__":
    main()
