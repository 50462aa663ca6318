"""A small list of people, printed as given and then ordered by age."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from operator import attrgetter


@dataclass
class Person:
    """A person with a name and an age."""

    name: str
    age: int


def compare_by_age(a: Person, b: Person) -> bool:
    """Return True when ``a`` is strictly younger than ``b``."""
    return a.age < b.age


def sort_by_age(people: Iterable[Person]) -> list[Person]:
    """Return a new list of the people ordered from youngest to oldest."""
    return sorted(people, key=attrgetter("age"))


def format_people(people: Iterable[Person]) -> str:
    """Render one line per person in the form ``<name> Age is <age>``."""
    return "".join(f"{person.name} Age is {person.age}\n" for person in people)


def default_people() -> list[Person]:
    """Return the sample list of people used by the command."""
    return [
        Person("Arjun", 20),
        Person("Bhuvan", 15),
        Person("Charan", 25),
        Person("Dheeraj", 23),
    ]


def main(argv: list[str] | None = None) -> int:
    """Print the sample people, then print them again sorted by age."""
    parser = argparse.ArgumentParser(
        description="List people and then list them sorted by age."
    )
    parser.parse_args(argv)

    people = default_people()
    out = sys.stdout
    out.write("People list:\n")
    out.write(format_people(people))
    out.write("\nSorted by age:\n")
    out.write(format_people(sort_by_age(people)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())