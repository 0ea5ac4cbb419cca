"""Example client driver for compositetree.

The functions here only ever talk to the Node interface; concrete classes are
named solely to construct the sample trees in ``run_demo``.
"""

import argparse
import sys
from typing import List, Optional, TextIO

from .api import render_tree
from .config import CompositeConfig
from .core.leaf import Leaf
from .core.node import Node
from .testing.fixtures import build_sample_tree


def describe(component: Node) -> str:
    """Describe any node, simple or complex, through its result."""
    return f"RESULT: {component.operation()}"


def attach_and_describe(container: Node, component: Node) -> str:
    """Attach component when container accepts children, then describe it.

    Asking is_composite() replaces any check on concrete classes, so this works
    for every node variant.
    """
    if container.is_composite():
        container.add(component)
    return describe(container)


def run_demo(out: Optional[TextIO] = None,
             config: Optional[CompositeConfig] = None,
             outline: bool = False) -> None:
    """Walk through the sample scenario, writing results to out (stdout by default)."""
    if out is None:
        out = sys.stdout

    simple = Leaf(name="simple", config=config)
    print("Client: I've got a simple component:", file=out)
    print(describe(simple), file=out)
    print(file=out)

    sample = build_sample_tree(config)
    print("Client: Now I've got a composite tree:", file=out)
    print(describe(sample.root), file=out)
    print(file=out)

    print("Client: I don't need to check the component classes even when managing the tree:",
          file=out)
    print(attach_and_describe(sample.root, simple), file=out)

    if outline:
        print(file=out)
        print(render_tree(sample.root), file=out)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the compositetree-demo command."""
    parser = argparse.ArgumentParser(
        description="Build sample composite trees and print their results."
    )
    parser.add_argument("--strict", action="store_true",
                        help="reject cycles and double ownership while building")
    parser.add_argument("--outline", action="store_true",
                        help="print an indented outline of the final tree")
    args = parser.parse_args(argv)

    config = CompositeConfig.strict() if args.strict else None
    run_demo(config=config, outline=args.outline)
    return 0


if __name__ == "__main__":
    sys.exit(main())
