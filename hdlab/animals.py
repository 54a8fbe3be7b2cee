"""Three ways to treat unrelated animal types alike.

Shown are a common abstract base class, a plain list holding objects of any
type, and a type-erasing wrapper that owns a private copy of any object
offering ``make_noise`` and ``id``.
"""

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class _Noisy(Protocol):
    def make_noise(self) -> str: ...

    def id(self) -> int: ...


class NoisyAnimal(ABC):
    """Common interface of animals that make a noise and carry a type id."""

    @abstractmethod
    def make_noise(self) -> str:
        """Return the noise the animal makes."""

    @abstractmethod
    def id(self) -> int:
        """Return the id of the animal's kind."""


@dataclass
class Cat(NoisyAnimal):
    """A cat; its kind has id 1."""

    name: str = "No name"
    cat_int: int = 1
    cat_double: float = 1.0

    def make_noise(self) -> str:
        return "Cat says meow."

    def id(self) -> int:
        return 1

    def extra(self) -> float:
        """A member only cats have."""
        return 1.0


@dataclass
class Dog(NoisyAnimal):
    """A dog; its kind has id 2."""

    name: str = "No name"
    dog_int: int = 2

    def make_noise(self) -> str:
        return "Dog says wow."

    def id(self) -> int:
        return 2


class TypeErased:
    """Value wrapper around any object with ``make_noise`` and ``id``.

    The wrapper keeps its own copy of the object, so later changes to the
    original do not show through, and copying the wrapper copies the object.
    """

    __slots__ = ("_obj",)

    def __init__(self, obj: Any) -> None:
        if isinstance(obj, TypeErased):
            obj = obj._obj
        elif not isinstance(obj, _Noisy):
            raise TypeError(
                f"{type(obj).__name__} does not provide make_noise() and id()"
            )
        self._obj = copy.deepcopy(obj)

    def make_noise(self) -> str:
        return self._obj.make_noise()

    def id(self) -> int:
        return self._obj.id()

    def __copy__(self) -> "TypeErased":
        return TypeErased(self._obj)

    def __deepcopy__(self, memo: dict) -> "TypeErased":
        return TypeErased(self._obj)

    def __repr__(self) -> str:
        return f"TypeErased({self._obj!r})"


def _sample_animals() -> tuple[Cat, Cat, Dog]:
    return Cat(), Cat("Pussy"), Dog("Knut")


def _print_names(c1: Cat, c2: Cat, d1: Dog) -> None:
    print(f"cat c1.my_name: {c1.name}")
    print(f"cat c2.my_name: {c2.name}")
    print(f"dog d1.my_name: {d1.name}")
    print()


def demo_inheritance() -> None:
    """Dispatch on the concrete class of objects sharing a base class."""
    c1, c2, d1 = _sample_animals()
    print("\n\nUsing classical inheritance...\n")
    _print_names(c1, c2, d1)

    animals: list[NoisyAnimal] = [c1, c2, d1]
    for e in animals:
        if isinstance(e, Cat):
            print("e does contain a cat.")
            print(f"c->my_name: {e.name}")
        elif isinstance(e, Dog):
            print("e does contain a dog.")
            print(f"d->my_name: {e.name}")


def demo_any() -> None:
    """Dispatch on the exact type of objects kept in an untyped list."""
    c1, c2, d1 = _sample_animals()
    print("\n\nUsing a list of any type...\n")
    _print_names(c1, c2, d1)

    items: list[Any] = [copy.copy(c1), copy.copy(c2), copy.copy(d1)]
    for e in items:
        if type(e) is Cat:
            print("e does contain a cat.")
            print(f"c.my_name: {e.name}")
        elif type(e) is Dog:
            print("e does contain a dog.")
            print(f"d.my_name: {e.name}")


def demo_type_erased() -> None:
    """Use animals through the common interface of the type-erasing wrapper."""
    print("\n\nUsing manual type erasure...\n")
    c1, c2, d1 = _sample_animals()
    _print_names(c1, c2, d1)

    animals = [TypeErased(c1), TypeErased(c2), TypeErased(d1)]
    for e in animals:
        if e.id() == 1:
            print("e does contain a cat.")
        elif e.id() == 2:
            print("e does contain a dog.")
        print(f"{e.make_noise()} My id is {e.id()}.")


def main(argv: list[str] | None = None) -> int:
    """Run the three demonstrations in turn."""
    demo_inheritance()
    demo_any()
    demo_type_erased()
    return 0