#!/usr/bin/env python3
"""
Demo: Recursive schemas with lazy.

This demonstrates rendering self-referential and mutually recursive schemas:
- The first render of a recursive node is fully expanded
- Self-references inside the expansion collapse to a reference name
- Later renders return the name alone
- The namer's declaration table tells what each name stands for
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from static_schema import RefNamer, array, lazy, literals, number, render, string, type_, union


def main():
    print("=" * 60)
    print("static-schema Demo: Recursive Schemas")
    print("=" * 60)

    namer = RefNamer()

    # Self-referential tree
    Tree = lazy(lambda: type_({"value": number, "children": array(Tree)}))

    print("\nTree (first render):")
    print(f"  {render(Tree, namer=namer)}")
    print("Tree (second render):")
    print(f"  {render(Tree, namer=namer)}")

    # Mutually recursive expression grammar
    Expr = lazy(lambda: union([Num, BinOp]))
    Num = type_({"kind": literals(["num"]), "value": number})
    BinOp = lazy(lambda: type_({
        "kind": literals(["binop"]),
        "op": literals(["+", "-", "*", "/"]),
        "left": Expr,
        "right": Expr,
    }))

    print("\nExpr:")
    print(f"  {render(Expr, namer=namer)}")

    print("\nDeclarations:")
    for name, expansion in namer.declarations.items():
        print(f"  type {name} = {expansion};")

    print("\nPlain records need no namer:")
    print(f"  {type_({'id': number, 'name': string})()}")


if __name__ == "__main__":
    main()
