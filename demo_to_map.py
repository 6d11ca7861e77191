#!/usr/bin/env python3
"""
Demo: convert an example record into a plain mapping.

Prints the mapping as YAML to show the output is made of plain dicts,
lists and leaf values.
"""

import yaml

from recordmap import Struct, to_map
from recordmap.examples import build_example_service


def main():
    service = build_example_service(replicas=3)

    print("=" * 80)
    print("RECORD TO MAP DEMO")
    print("=" * 80)

    mapping = to_map(service)
    print(yaml.safe_dump(mapping, sort_keys=False))

    s = Struct(service)
    print("-" * 80)
    print(f"Record: {s.name()}")
    print(f"Fields: {', '.join(s.names())}")
    print(f"Has zero fields: {s.has_zero()}")
    print("=" * 80)


if __name__ == "__main__":
    main()
