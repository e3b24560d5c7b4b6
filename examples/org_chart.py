#!/usr/bin/env python3
"""Demo script for FlatTreeLib: an org chart stored as flat rows.

Shows list -> tree assembly with a post-visit listener, walking with
pre/post callbacks, and flattening back into a filtered list.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from flattreelib import MappingRecordAdapter, build_tree, flatten_tree, iter_tree, walk_tree

ROWS = [
    {"id": 1, "manager": None, "name": "Ada", "title": "CEO"},
    {"id": 2, "manager": 1, "name": "Grace", "title": "CTO"},
    {"id": 3, "manager": 1, "name": "Linus", "title": "CFO"},
    {"id": 4, "manager": 2, "name": "Barbara", "title": "Engineer"},
    {"id": 5, "manager": 2, "name": "Ken", "title": "Engineer"},
    {"id": 6, "manager": 3, "name": "Margaret", "title": "Accountant"},
]


def demo_assembly(adapter):
    """Build the tree and compute team sizes bottom-up."""
    print("\n=== Assembly ===")
    team_size = {}

    def tally(depth, row):
        team_size[row["id"]] = 1 + sum(team_size[c["id"]] for c in row["children"])

    tree = build_tree(ROWS, adapter, on_visit=tally)
    for row, depth in iter_tree(tree, adapter.get_children):
        print(f"{'  ' * depth}{row['name']} ({row['title']}) - team of {team_size[row['id']]}")
    return tree


def demo_walk(tree, adapter):
    """Print an indented outline with open/close markers."""
    print("\n=== Walk ===")
    depth = [0]

    def enter(row):
        print(f"{'  ' * depth[0]}<{row['name']}>")
        depth[0] += 1

    def leave(row):
        depth[0] -= 1
        print(f"{'  ' * depth[0]}</{row['name']}>")

    walk_tree(tree, adapter.get_children, pre_visit=enter, post_visit=leave)


def demo_flatten(tree, adapter):
    """Pull every engineer out of the tree, in pre-order."""
    print("\n=== Flatten ===")
    engineers = flatten_tree(tree, adapter, include_if=lambda r: r["title"] == "Engineer")
    print("Engineers:", ", ".join(r["name"] for r in engineers))


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    adapter = MappingRecordAdapter(parent_field="manager", root_parent=None)
    tree = demo_assembly(adapter)
    demo_walk(tree, adapter)
    demo_flatten(tree, adapter)
    return 0


if __name__ == "__main__":
    sys.exit(main())
