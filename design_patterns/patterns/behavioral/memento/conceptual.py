"""Memento - conceptual example.

Memento saves and restores the previous state of an object without
revealing the details of its implementation.
"""

import random
from abc import ABC, abstractmethod
from datetime import datetime
from string import ascii_letters
from typing import Callable, List, Optional


class Memento(ABC):
    """
    Metadata access for the caretaker.

    The caretaker can read a memento's name and date but not the state the
    originator stored in it.
    """

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_date(self) -> str:
        pass


class ConcreteMemento(Memento):
    def __init__(self, state: str, clock: Callable[[], datetime] = datetime.now):
        self._state = state
        self._date = clock().strftime("%Y-%m-%d %H:%M:%S")

    def get_state(self) -> str:
        """The originator uses this method when restoring its state."""
        return self._state

    def get_name(self) -> str:
        return f"{self._date} / ({self._state[0:9]}...)"

    def get_date(self) -> str:
        return self._date


class Originator:
    """
    Holds some important state that may change over time, and knows how to
    save it into a memento and restore it from one.
    """

    _state: Optional[str] = None

    def __init__(self, state: str, rng: Optional[random.Random] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self._rng = rng or random.Random()
        self._clock = clock
        self._state = state
        print(f"Originator: My initial state is: {self._state}")

    def do_something(self) -> None:
        print("Originator: I'm doing something important.")
        self._state = self._generate_random_string(30)
        print(f"Originator: and my state has changed to: {self._state}")

    def _generate_random_string(self, length: int = 10) -> str:
        return "".join(self._rng.sample(ascii_letters, length))

    def save(self) -> ConcreteMemento:
        return ConcreteMemento(self._state, self._clock)

    def restore(self, memento: ConcreteMemento) -> None:
        self._state = memento.get_state()
        print(f"Originator: My state has changed to: {self._state}")

    @property
    def state(self) -> str:
        return self._state


class Caretaker:
    """
    Works with mementos only through the base Memento interface, so it never
    depends on the concrete memento class.
    """

    def __init__(self, originator: Originator):
        self._mementos: List[Memento] = []
        self._originator = originator

    def backup(self) -> None:
        print("\nCaretaker: Saving Originator's state...")
        self._mementos.append(self._originator.save())

    def undo(self) -> None:
        if not self._mementos:
            return

        memento = self._mementos.pop()
        print(f"Caretaker: Restoring state to: {memento.get_name()}")
        self._originator.restore(memento)

    def show_history(self) -> None:
        print("Caretaker: Here's the list of mementos:")
        for memento in self._mementos:
            print(memento.get_name())


def main(rng: Optional[random.Random] = None) -> None:
    originator = Originator("Super-duper-super-puper-super.", rng)
    caretaker = Caretaker(originator)

    caretaker.backup()
    originator.do_something()

    caretaker.backup()
    originator.do_something()

    caretaker.backup()
    originator.do_something()

    print()
    caretaker.show_history()

    print("\nClient: Now, let's rollback!\n")
    caretaker.undo()

    print("\nClient: Once more!\n")
    caretaker.undo()


if __name__ == "__main__":
    main()
