#!/usr/bin/env python3
"""Enforce package file length limits."""

from __future__ import annotations

import argparse
from pathlib import Path


def _count_loc(path: Path) -> int:
    with path.open("r", encoding="utf-8") as handle:
        return sum(1 for _ in handle)


def find_violations(root: Path, *, soft: int, hard: int) -> tuple[list[tuple[str, int]], list[tuple[str, int]]]:
    """Return (soft, hard) limit violations for Python files under root."""
    violations_soft: list[tuple[str, int]] = []
    violations_hard: list[tuple[str, int]] = []
    for path in sorted(root.rglob("*.py")):
        loc = _count_loc(path)
        if loc > hard:
            violations_hard.append((str(path), loc))
        elif loc > soft:
            violations_soft.append((str(path), loc))
    return violations_soft, violations_hard


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check package Python file LOC limits.")
    parser.add_argument("--root", default="cgmath")
    parser.add_argument("--soft", type=int, default=300)
    parser.add_argument("--hard", type=int, default=450)
    args = parser.parse_args(argv)

    violations_soft, violations_hard = find_violations(Path(args.root), soft=args.soft, hard=args.hard)

    if violations_soft:
        print("Soft LOC limit exceeded:")
        for path, loc in violations_soft:
            print(f"  {path}: {loc} LOC (soft limit {args.soft})")

    if violations_hard:
        print("Hard LOC limit exceeded:")
        for path, loc in violations_hard:
            print(f"  {path}: {loc} LOC (hard limit {args.hard})")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
