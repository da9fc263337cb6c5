"""State - conceptual example.

State lets an object alter its behaviour when its internal state changes.
The object delegates its state-specific work to a state object and swaps
that object on transitions.
"""

from abc import ABC, abstractmethod
from typing import Optional


class Context:
    """
    Defines the interface clients use, and keeps a reference to the current
    state object.
    """

    _state: Optional["State"] = None

    def __init__(self, state: "State"):
        self.transition_to(state)

    def transition_to(self, state: "State") -> None:
        print(f"Context: Transition to {type(state).__name__}")
        self._state = state
        self._state.context = self

    @property
    def state(self) -> "State":
        return self._state

    def request1(self) -> None:
        self._state.handle1()

    def request2(self) -> None:
        self._state.handle2()


class State(ABC):
    """
    Base state. Keeps a back reference to the context so states can trigger
    transitions.
    """

    _context: Optional[Context] = None

    @property
    def context(self) -> Context:
        return self._context

    @context.setter
    def context(self, context: Context) -> None:
        self._context = context

    @abstractmethod
    def handle1(self) -> None:
        pass

    @abstractmethod
    def handle2(self) -> None:
        pass


class ConcreteStateA(State):
    def handle1(self) -> None:
        print("ConcreteStateA handles request1.")
        print("ConcreteStateA wants to change the state of the context.")
        self.context.transition_to(ConcreteStateB())

    def handle2(self) -> None:
        print("ConcreteStateA handles request2.")


class ConcreteStateB(State):
    def handle1(self) -> None:
        print("ConcreteStateB handles request1.")

    def handle2(self) -> None:
        print("ConcreteStateB handles request2.")
        print("ConcreteStateB wants to change the state of the context.")
        self.context.transition_to(ConcreteStateA())


def main() -> None:
    context = Context(ConcreteStateA())
    context.request1()
    context.request2()


if __name__ == "__main__":
    main()
