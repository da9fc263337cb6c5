"""Flyweight - conceptual example.

Flyweight fits more objects into memory by sharing the common parts of their
state (the intrinsic, shared state) between many objects, and passing the
unique, extrinsic state in from outside.
"""

import json
from typing import Dict, List


class Flyweight:
    """Stores the shared state; receives the unique state through operation()."""

    def __init__(self, shared_state: List[str]):
        self._shared_state = shared_state

    def operation(self, unique_state: List[str]) -> None:
        s = json.dumps(self._shared_state)
        u = json.dumps(unique_state)
        print(f"Flyweight: Displaying shared ({s}) and unique ({u}) state.")


class FlyweightFactory:
    """
    Creates and manages flyweights.

    A client asking for a flyweight gets an existing instance when one with
    the same shared state is known, and a new one otherwise.
    """

    def __init__(self, initial_flyweights: List[List[str]]):
        self._flyweights: Dict[str, Flyweight] = {}
        for state in initial_flyweights:
            self._flyweights[self.get_key(state)] = Flyweight(state)

    @staticmethod
    def get_key(state: List[str]) -> str:
        return "_".join(sorted(state))

    def get_flyweight(self, shared_state: List[str]) -> Flyweight:
        key = self.get_key(shared_state)

        if key not in self._flyweights:
            print("FlyweightFactory: Can't find a flyweight, creating new one.")
            self._flyweights[key] = Flyweight(shared_state)
        else:
            print("FlyweightFactory: Reusing existing flyweight.")

        return self._flyweights[key]

    def __len__(self) -> int:
        return len(self._flyweights)

    def list_flyweights(self) -> None:
        print(f"\nFlyweightFactory: I have {len(self._flyweights)} flyweights:")
        print("\n".join(self._flyweights))


def add_car_to_police_database(factory: FlyweightFactory, plates: str, owner: str,
                               brand: str, model: str, color: str) -> None:
    print("\nClient: Adding a car to database.")
    flyweight = factory.get_flyweight([brand, model, color])
    # The client code stores or calculates the extrinsic state and passes it
    # to the flyweight's methods.
    flyweight.operation([plates, owner])


def main() -> None:
    factory = FlyweightFactory([
        ["Chevrolet", "Camaro2018", "pink"],
        ["Mercedes Benz", "C300", "black"],
        ["Mercedes Benz", "C500", "red"],
        ["BMW", "M5", "red"],
        ["BMW", "X6", "white"],
    ])

    factory.list_flyweights()

    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "M5", "red")
    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "X1", "red")

    factory.list_flyweights()


if __name__ == "__main__":
    main()
