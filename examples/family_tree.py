#!/usr/bin/env python3
"""
Family tree example showing how to build on TreeKit's general Tree.

This example demonstrates:
- Subclassing Tree to carry extra data (the second parent)
- Custom value rendering for the root node
- The box-drawing output format

Expected output:
    John Doe
    | 
    Jane Doe
    ├─Alice Doe
    └─Bob Doe
"""

import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treekit import Tree


class Person:
    """A family member."""

    def __init__(self, first_name: str, last_name: str, age: int):
        self.first_name = first_name
        self.middle_name: Optional[str] = None
        self.last_name = last_name
        self.age = age
        self.gender: Optional[bool] = None

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Family(Tree[Person]):
    """A family rooted at the mother, with the father shown above."""

    def __init__(self, mother: Person, father: Person,
                 children: Optional[List[Tree[Person]]] = None):
        super().__init__(mother, children)
        self.mother = mother
        self.father = father

    def to_string(self, renderer=None) -> str:
        return f"{self.father}\n| \n{super().to_string(lambda person: str(person))}"


def build_family() -> Family:
    """Build the Doe family."""
    family = Family(Person("Jane", "Doe", 30), Person("John", "Doe", 32))
    family.add(Person("Alice", "Doe", 5))
    family.add(Person("Bob", "Doe", 3))
    return family


def main():
    """Print the Doe family tree."""
    print(build_family())
    return 0


if __name__ == "__main__":
    sys.exit(main())
