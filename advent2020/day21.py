"""Allergen assessment: work out which ingredient holds which allergen."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

DEFAULT_INPUT = Path("data/day21.txt")

Food = tuple[list[str], list[str]]


def parse_foods(text: str) -> list[Food]:
    """Return (ingredients, allergens) for each food line."""
    foods: list[Food] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        ingredients, separator, allergens = line.partition(" (contains ")
        if not separator:
            raise ValueError(f"food lists no allergens: {line!r}")
        foods.append((ingredients.split(), allergens.replace(")", "").split(", ")))
    return foods


def allergen_candidates(foods: Iterable[Food]) -> dict[str, set[str]]:
    """Map each allergen to the ingredients found in every food listing it."""
    candidates: dict[str, set[str]] = {}
    for ingredients, allergens in foods:
        present = set(ingredients)
        for allergen in allergens:
            if allergen in candidates:
                candidates[allergen] &= present
            else:
                candidates[allergen] = set(present)
    return candidates


def resolve_allergens(candidates: Mapping[str, Iterable[str]]) -> dict[str, str]:
    """Settle each allergen on one ingredient by repeated elimination."""
    remaining = {allergen: set(names) for allergen, names in candidates.items()}
    resolved: dict[str, str] = {}
    while remaining:
        settled = {
            allergen: next(iter(names))
            for allergen, names in remaining.items()
            if len(names) == 1
        }
        if not settled:
            raise ValueError("allergens cannot be resolved to single ingredients")
        if len(set(settled.values())) != len(settled):
            raise ValueError("two allergens settle on the same ingredient")
        for allergen, ingredient in settled.items():
            resolved[allergen] = ingredient
            del remaining[allergen]
        taken = set(settled.values())
        for names in remaining.values():
            names -= taken
    return resolved


def count_safe_ingredients(foods: Sequence[Food]) -> int:
    """How many times ingredients holding no allergen appear in the foods."""
    dangerous = set(resolve_allergens(allergen_candidates(foods)).values())
    counts = Counter(name for ingredients, _ in foods for name in ingredients)
    return sum(count for name, count in counts.items() if name not in dangerous)


def canonical_dangerous_list(foods: Sequence[Food]) -> str:
    """Dangerous ingredients, ordered by their allergen, joined by commas."""
    resolved = resolve_allergens(allergen_candidates(foods))
    return ",".join(resolved[allergen] for allergen in sorted(resolved))


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    foods = parse_foods(_read_input(argv))
    print(f"Part1: {count_safe_ingredients(foods)}")
    print(f"Part2: {canonical_dangerous_list(foods)}")


if __name__ == "__main__":
    main()