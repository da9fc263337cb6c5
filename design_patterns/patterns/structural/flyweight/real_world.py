"""Flyweight - real-world example: a cat database.

Many cats share the same breed, picture, colour and coat. Those attributes
live in shared ``CatVariation`` flyweights, while each ``Cat`` keeps only its
name, age and owner.
"""

import csv
import hashlib
from pathlib import Path
from typing import Dict, List, Optional, Union

from design_patterns.data import CATS_CSV


class CatVariation:
    """Shared (intrinsic) state of many cats."""

    def __init__(self, breed: str, image: str, color: str, texture: str, fur: str, size: str):
        self.breed = breed
        self.image = image
        self.color = color
        self.texture = texture
        self.fur = fur
        self.size = size

    def render_profile(self, name: str, age: str, owner: str) -> None:
        print(f"= {name} =")
        print(f"Age: {age}")
        print(f"Owner: {owner}")
        print(f"Breed: {self.breed}")
        print(f"Image: {self.image}")
        print(f"Color: {self.color}")
        print(f"Texture: {self.texture}")


class Cat:
    """Unique (extrinsic) state, plus a reference to a shared variation."""

    def __init__(self, name: str, age: str, owner: str, variation: CatVariation):
        self.name = name
        self.age = age
        self.owner = owner
        self.variation = variation

    def matches(self, query: Dict[str, str]) -> bool:
        """Check every query field against the cat first, then its variation."""
        for key, value in query.items():
            if key in ("name", "age", "owner"):
                if getattr(self, key) != value:
                    return False
            elif hasattr(self.variation, key):
                if getattr(self.variation, key) != value:
                    return False
            else:
                return False
        return True

    def render(self) -> None:
        self.variation.render_profile(self.name, self.age, self.owner)


class CatDataBase:
    """Flyweight factory and context store."""

    def __init__(self):
        self.cats: List[Cat] = []
        self.variations: Dict[str, CatVariation] = {}

    def add_cat(self, name: str, age: str, owner: str, breed: str, image: str,
                color: str, texture: str, fur: str, size: str) -> Cat:
        variation = self.get_variation(breed, image, color, texture, fur, size)
        cat = Cat(name, age, owner, variation)
        self.cats.append(cat)
        print(f"CatDataBase: Added a cat ({name}, {breed}).")
        return cat

    def get_variation(self, breed: str, image: str, color: str,
                      texture: str, fur: str, size: str) -> CatVariation:
        key = self.get_key([breed, image, color, texture, fur, size])

        if key not in self.variations:
            self.variations[key] = CatVariation(breed, image, color, texture, fur, size)

        return self.variations[key]

    @staticmethod
    def get_key(data: List[str]) -> str:
        return hashlib.md5("_".join(data).encode("utf-8")).hexdigest()

    def find_cat(self, query: Dict[str, str]) -> Optional[Cat]:
        for cat in self.cats:
            if cat.matches(query):
                return cat
        print("CatDataBase: Sorry, your query does not yield any results.")
        return None

    def load_csv(self, path: Union[str, Path]) -> None:
        with open(path, newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            for row in reader:
                row = {key.lower(): value for key, value in row.items()}
                self.add_cat(row["name"], row["age"], row["owner"], row["breed"], row["image"],
                             row["color"], row["texture"], row["fur"], row["size"])


def main(csv_path: Union[str, Path] = CATS_CSV) -> None:
    db = CatDataBase()

    print('Client: Let\'s see what we have in "cats.csv".')
    db.load_csv(csv_path)

    print('\nClient: Let\'s look for a cat named "Siri".')
    cat = db.find_cat({"name": "Siri"})
    if cat:
        cat.render()

    print('\nClient: Let\'s look for a cat named "Bob".')
    cat = db.find_cat({"name": "Bob"})
    if cat:
        cat.render()


if __name__ == "__main__":
    main()
