"""Strategy - conceptual example.

Strategy defines a family of algorithms, puts each of them into a separate
class, and makes their objects interchangeable.
"""

from abc import ABC, abstractmethod
from typing import List


class Strategy(ABC):
    """Operations common to all supported versions of an algorithm."""

    @abstractmethod
    def do_algorithm(self, data: List[str]) -> List[str]:
        pass


class Context:
    """
    Holds a reference to one strategy object and delegates the work to it.

    The context does not know the concrete class of its strategy, so the
    strategy can be replaced at runtime.
    """

    def __init__(self, strategy: Strategy):
        self._strategy = strategy

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: Strategy) -> None:
        self._strategy = strategy

    def do_some_business_logic(self) -> None:
        print("Context: Sorting data using the strategy (not sure how it'll do it)")
        result = self._strategy.do_algorithm(["a", "b", "c", "d", "e"])
        print(",".join(result))


class ConcreteStrategyA(Strategy):
    def do_algorithm(self, data: List[str]) -> List[str]:
        return sorted(data)


class ConcreteStrategyB(Strategy):
    def do_algorithm(self, data: List[str]) -> List[str]:
        return list(reversed(sorted(data)))


def main() -> None:
    context = Context(ConcreteStrategyA())
    print("Client: Strategy is set to normal sorting.")
    context.do_some_business_logic()
    print()

    print("Client: Strategy is set to reverse sorting.")
    context.strategy = ConcreteStrategyB()
    context.do_some_business_logic()


if __name__ == "__main__":
    main()
