"""Observer - conceptual example.

Observer defines a subscription mechanism that notifies multiple objects
about events happening to the object they observe.
"""

import random
from abc import ABC, abstractmethod
from typing import List, Optional


class Subject(ABC):
    """Interface for managing subscribers."""

    @abstractmethod
    def attach(self, observer: "Observer") -> None:
        pass

    @abstractmethod
    def detach(self, observer: "Observer") -> None:
        pass

    @abstractmethod
    def notify(self) -> None:
        pass


class ConcreteSubject(Subject):
    """
    Owns some important state and notifies observers when it changes.

    The random source is injectable so runs can be reproduced.
    """

    _state: Optional[int] = None

    def __init__(self, rng: Optional[random.Random] = None):
        self._observers: List["Observer"] = []
        self._rng = rng or random.Random()

    @property
    def state(self) -> Optional[int]:
        return self._state

    def attach(self, observer: "Observer") -> None:
        print("Subject: Attached an observer.")
        self._observers.append(observer)

    def detach(self, observer: "Observer") -> None:
        self._observers.remove(observer)
        print("Subject: Detached an observer.")

    def notify(self) -> None:
        print("Subject: Notifying observers...")
        for observer in self._observers:
            observer.update(self)

    def some_business_logic(self) -> None:
        """Business logic that changes the state, then tells everyone."""
        print("\nSubject: I'm doing something important.")
        self._state = self._rng.randint(0, 10)

        print(f"Subject: My state has just changed to: {self._state}")
        self.notify()


class Observer(ABC):
    @abstractmethod
    def update(self, subject: ConcreteSubject) -> None:
        pass


class ConcreteObserverA(Observer):
    def update(self, subject: ConcreteSubject) -> None:
        if subject.state < 3:
            print("ConcreteObserverA: Reacted to the event")


class ConcreteObserverB(Observer):
    def update(self, subject: ConcreteSubject) -> None:
        if subject.state == 0 or subject.state >= 2:
            print("ConcreteObserverB: Reacted to the event")


def main(rng: Optional[random.Random] = None) -> None:
    subject = ConcreteSubject(rng)

    observer_a = ConcreteObserverA()
    subject.attach(observer_a)

    observer_b = ConcreteObserverB()
    subject.attach(observer_b)

    subject.some_business_logic()
    subject.some_business_logic()

    subject.detach(observer_a)

    subject.some_business_logic()


if __name__ == "__main__":
    main()
