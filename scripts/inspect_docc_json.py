"""Inspect DocC JSON node kinds to aid rendering."""

from __future__ import annotations

import argparse
import json
from collections import Counter
from pathlib import Path
from typing import Any

from docc2md import convert_documentation


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect DocC JSON node types, section kinds, and keys.")
    parser.add_argument("file", help="Local DocC JSON file path")
    parser.add_argument("--source-url", default="", help="Source URL or documentation path used when rendering")
    parser.add_argument("--render", action="store_true", help="Also print the rendered Markdown")
    args = parser.parse_args()

    path = Path(args.file)
    if not path.is_file():
        parser.error(f"JSON file not found: {path}")

    payload = path.read_text(encoding="utf-8")
    types, kinds, keys = collect_stats(json.loads(payload))

    print("Node types:")
    for name, count in types.most_common():
        print(f"{name}: {count}")

    print("\nSection kinds:")
    for name, count in kinds.most_common():
        print(f"{name}: {count}")

    print("\nKeys:")
    for name, count in keys.most_common():
        print(f"{name}: {count}")

    if args.render:
        print()
        print(convert_documentation(payload, args.source_url or path.stem))


def collect_stats(data: Any) -> tuple[Counter, Counter, Counter]:
    types = Counter()
    kinds = Counter()
    keys = Counter()

    # Iterative walk; reference tables can be large and deeply nested.
    stack = [data]
    while stack:
        node = stack.pop()
        if isinstance(node, dict):
            node_type = node.get("type")
            if isinstance(node_type, str):
                types[node_type] += 1
            node_kind = node.get("kind")
            if isinstance(node_kind, str):
                kinds[node_kind] += 1
            for key, value in node.items():
                keys[key] += 1
                stack.append(value)
        elif isinstance(node, list):
            stack.extend(node)
    return types, kinds, keys


if __name__ == "__main__":
    main()
