#!/usr/bin/env python3
"""
Custom payload example: folding sizes over a composite tree.

``operation()`` renders marker strings; real adopters usually want their own
values. ``fold`` combines any payload with the same order-preserving shape.
This example models a small project tree where leaves are files with sizes.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from compositetree import Branch, Leaf, fold, get_path, get_tree_stats, find_nodes


class FileLeaf(Leaf):
    """A leaf carrying a byte size."""

    def __init__(self, name: str, size: int):
        super().__init__(name=name)
        self.size = size


def build_project() -> Branch:
    project = Branch(name="project")

    src = Branch(name="src")
    src.add(FileLeaf("main.py", 1200))
    src.add(FileLeaf("util.py", 800))

    docs = Branch(name="docs")
    docs.add(FileLeaf("index.md", 300))

    project.add(src)
    project.add(docs)
    project.add(FileLeaf("README.md", 150))
    return project


def main():
    project = build_project()

    total = fold(project, lambda leaf: leaf.size, lambda branch, sizes: sum(sizes))
    print(f"Total size: {total} bytes")

    largest = fold(project,
                   lambda leaf: (leaf.size, leaf.name),
                   lambda branch, values: max(values) if values else (0, None))
    print(f"Largest file: {largest[1]} ({largest[0]} bytes)")

    print(f"Structure: {project.operation()}")

    stats = get_tree_stats(project)
    print(f"Nodes: {stats['total_nodes']} ({stats['leaf_nodes']} files)")

    for node in find_nodes(project, lambda n: n.name and n.name.endswith(".md")):
        print("  markdown:", "/".join(get_path(node)))


if __name__ == "__main__":
    main()
