"""Chain of Responsibility - conceptual example.

Chain of Responsibility passes a request along a chain of handlers. Each
handler either processes the request or hands it to the next one.
"""

from abc import ABC, abstractmethod
from typing import Optional


class Handler(ABC):
    """Interface for building the chain and executing a request."""

    @abstractmethod
    def set_next(self, handler: "Handler") -> "Handler":
        pass

    @abstractmethod
    def handle(self, request: str) -> Optional[str]:
        pass


class AbstractHandler(Handler):
    """Default chaining behaviour shared by every concrete handler."""

    _next_handler: Optional[Handler] = None

    def set_next(self, handler: Handler) -> Handler:
        self._next_handler = handler
        # Returning the handler allows linking handlers like
        # monkey.set_next(squirrel).set_next(dog)
        return handler

    def handle(self, request: str) -> Optional[str]:
        if self._next_handler:
            return self._next_handler.handle(request)
        return None


class MonkeyHandler(AbstractHandler):
    def handle(self, request: str) -> Optional[str]:
        if request == "Banana":
            return f"Monkey: I'll eat the {request}."
        return super().handle(request)


class SquirrelHandler(AbstractHandler):
    def handle(self, request: str) -> Optional[str]:
        if request == "Nut":
            return f"Squirrel: I'll eat the {request}."
        return super().handle(request)


class DogHandler(AbstractHandler):
    def handle(self, request: str) -> Optional[str]:
        if request == "MeatBall":
            return f"Dog: I'll eat the {request}."
        return super().handle(request)


def client_code(handler: Handler) -> None:
    """Usually works with a single handler and does not know it is part of a chain."""
    for food in ["Nut", "Banana", "Cup of coffee"]:
        print(f"Client: Who wants a {food}?")
        result = handler.handle(food)
        if result:
            print(f"  {result}")
        else:
            print(f"  {food} was left untouched.")


def main() -> None:
    monkey = MonkeyHandler()
    squirrel = SquirrelHandler()
    dog = DogHandler()

    monkey.set_next(squirrel).set_next(dog)

    # The client can send a request to any handler, not only the first one.
    print("Chain: Monkey > Squirrel > Dog\n")
    client_code(monkey)
    print()

    print("Subchain: Squirrel > Dog\n")
    client_code(squirrel)


if __name__ == "__main__":
    main()
