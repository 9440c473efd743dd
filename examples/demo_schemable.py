#!/usr/bin/env python3
"""
Demo: One schema, several interpreters.

A schema written against the capability interface runs unchanged with any
interpreter that provides the same vocabulary. Here the textual-signature
interpreter ``s`` is paired with a toy interpreter that produces example values.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from static_schema import interpret, make_schema, s


class ExampleSchemable:
    """Toy interpreter: builds an example value for each shape."""

    URI = "Example"
    string = "text"
    number = 0
    boolean = False

    def literals(self, values):
        return values[0]

    def type(self, fields):
        return dict(fields)

    def array(self, item):
        return [item]


Person = make_schema(lambda S: S.type({
    "name": S.string,
    "age": S.number,
    "role": S.literals(["admin", "user"]),
    "tags": S.array(S.string),
}))


def main():
    print("=" * 60)
    print("static-schema Demo: Capability Interface")
    print("=" * 60)

    print("\nSignature:")
    print(f"  {interpret(Person, s)()}")

    print("\nExample value:")
    print(f"  {interpret(Person, ExampleSchemable())}")


if __name__ == "__main__":
    main()
