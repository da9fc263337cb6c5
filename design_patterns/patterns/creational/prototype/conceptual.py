"""Prototype - conceptual example.

Prototype copies existing objects without making the code depend on their
classes. In Python the cloning hook is ``__copy__``, which lets the class
decide what a copy of itself means.
"""

import copy
from typing import Any, Optional


class SelfReferencingEntity:
    """A component that points back at the prototype owning it."""

    def __init__(self):
        self.parent: Optional["Prototype"] = None

    def set_parent(self, parent: "Prototype") -> None:
        self.parent = parent


class Prototype:
    """
    Object with fields of three kinds: a primitive, a nested component and a
    component holding a back reference.

    A shallow copy would share the nested objects with the original, so
    ``__copy__`` clones them and relinks the back reference to the clone.
    """

    def __init__(self, primitive: Any, component: Any, circular_reference: SelfReferencingEntity):
        self.primitive = primitive
        self.component = component
        self.circular_reference = circular_reference

    def __copy__(self) -> "Prototype":
        component = copy.deepcopy(self.component)

        # The memo makes deepcopy reuse the new prototype instead of cloning
        # the original a second time through the back reference.
        new = self.__class__.__new__(self.__class__)
        circular_reference = copy.deepcopy(self.circular_reference, {id(self): new})
        circular_reference.set_parent(new)

        new.__dict__.update(self.__dict__)
        new.component = component
        new.circular_reference = circular_reference
        return new


def client_code() -> None:
    p1 = Prototype(245, [1, {1, 2, 3}, [1, 2, 3]], SelfReferencingEntity())
    p1.circular_reference.set_parent(p1)

    p2 = copy.copy(p1)

    if p1.primitive == p2.primitive:
        print("Primitive field values have been carried over to a clone. Yay!")
    else:
        print("Primitive field values have not been copied. Booo!")

    if p1.component is p2.component:
        print("Simple component has not been cloned. Booo!")
    else:
        print("Simple component has been cloned. Yay!")

    if p1.circular_reference is p2.circular_reference:
        print("Component with back reference has not been cloned. Booo!")
    else:
        print("Component with back reference has been cloned. Yay!")

    if p1.circular_reference.parent is p2.circular_reference.parent:
        print("Component with back reference is linked to original object. Booo!")
    else:
        print("Component with back reference is linked to the clone. Yay!")


def main() -> None:
    client_code()


if __name__ == "__main__":
    main()
