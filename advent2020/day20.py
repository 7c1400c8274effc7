"""Jurassic jigsaw: assemble image tiles and look for sea monsters."""

from __future__ import annotations

import math
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

DEFAULT_INPUT = Path("data/day20.txt")

Tile = list[str]

_MONSTER = (
    "                  # ",
    "#    ##    ##    ###",
    " #  #  #  #  #  #   ",
)
_MONSTER_WIDTH = len(_MONSTER[0])
_MONSTER_CELLS = tuple(
    (row, column)
    for row, line in enumerate(_MONSTER)
    for column, ch in enumerate(line)
    if ch == "#"
)

_TOP, _LEFT, _BOTTOM, _RIGHT = range(4)


def parse_tiles(text: str) -> dict[int, Tile]:
    """Map each tile id to its rows."""
    tiles: dict[int, Tile] = {}
    lines = iter(text.splitlines())
    for line in lines:
        if "Tile" not in line:
            continue
        header = line.replace(":", "").split(" ")
        if len(header) < 2:
            raise ValueError(f"malformed tile header: {line!r}")
        rows: Tile = []
        for row in lines:
            if not row:
                break
            rows.append(row)
        if not rows:
            raise ValueError(f"tile {header[1]} has no rows")
        tiles[int(header[1])] = rows
    return tiles


def rotate_tile(tile: Sequence[str]) -> Tile:
    """Rotate a tile 90 degrees clockwise."""
    return ["".join(column) for column in zip(*reversed(tile))]


def flip_tile(tile: Sequence[str]) -> Tile:
    """Mirror a tile left to right."""
    return [row[::-1] for row in tile]


def all_orientations(tile: Sequence[str]) -> list[Tile]:
    """The four rotations of the tile, then the four of its mirror image."""
    orientations: list[Tile] = []
    for start in (list(tile), flip_tile(tile)):
        current = start
        orientations.append(current)
        for _ in range(3):
            current = rotate_tile(current)
            orientations.append(current)
    return orientations


def tile_edges(tile: Sequence[str]) -> tuple[str, str, str, str]:
    """Top, left, bottom and right edges, read top to bottom or left to right."""
    left = "".join(row[0] for row in tile)
    right = "".join(row[-1] for row in tile)
    return tile[0], left, tile[-1], right


def _edge_variants(tile: Sequence[str]) -> set[str]:
    edges = tile_edges(tile)
    return set(edges) | {edge[::-1] for edge in edges}


def _neighbours(tiles: Mapping[int, Tile]) -> dict[int, list[int]]:
    variants = {tile_id: _edge_variants(tile) for tile_id, tile in tiles.items()}
    result: dict[int, list[int]] = {}
    for tile_id, tile in tiles.items():
        found = []
        for edge in tile_edges(tile):
            match = next(
                (other for other in tiles if other != tile_id and edge in variants[other]),
                None,
            )
            if match is not None:
                found.append(match)
        result[tile_id] = found
    return result


def find_corner_tiles(tiles: Mapping[int, Tile]) -> list[int]:
    """Ids of tiles with exactly two edges shared with other tiles."""
    return [tile_id for tile_id, found in _neighbours(tiles).items() if len(found) == 2]


def _arrange(tiles: Mapping[int, Tile]) -> list[list[Tile]]:
    neighbours = _neighbours(tiles)
    corners = [tile_id for tile_id, found in neighbours.items() if len(found) == 2]
    if not corners:
        raise ValueError("no corner tile found")
    corner = corners[-1]
    variants = {tile_id: _edge_variants(tile) for tile_id, tile in tiles.items()}

    def faces_neighbours(orientation: Tile) -> bool:
        edges = tile_edges(orientation)
        return all(
            edges[_RIGHT] in variants[n] or edges[_BOTTOM] in variants[n]
            for n in neighbours[corner]
        )

    start = next((o for o in all_orientations(tiles[corner]) if faces_neighbours(o)), None)
    if start is None:
        raise ValueError("no orientation fits the corner tile")

    placed = {corner}

    def extend(tile_id: int, tile: Tile, edge: int, opposite: int) -> list[tuple[int, Tile]]:
        chain = [(tile_id, tile)]
        while True:
            current_id, current = chain[-1]
            wanted = tile_edges(current)[edge]
            following = next(
                (
                    (other, orientation)
                    for other in neighbours[current_id]
                    if other not in placed
                    for orientation in all_orientations(tiles[other])
                    if tile_edges(orientation)[opposite] == wanted
                ),
                None,
            )
            if following is None:
                return chain
            placed.add(following[0])
            chain.append(following)

    column = extend(corner, start, _BOTTOM, _TOP)
    rows = [[tile for _, tile in extend(tile_id, tile, _RIGHT, _LEFT)] for tile_id, tile in column]
    if len({len(row) for row in rows}) != 1:
        raise ValueError("tiles do not form a rectangle")
    return rows


def assemble_image(tiles: Mapping[int, Tile]) -> list[str]:
    """Join the arranged tiles into one image with every tile border removed."""
    image: list[str] = []
    for row in _arrange(tiles):
        height = len(row[0])
        for line in range(1, height - 1):
            image.append("".join(tile[line][1:-1] for tile in row))
    return image


def find_sea_monsters(image: Sequence[str]) -> int:
    """Count sea monsters in the image as it stands.

    Only monsters whose top row lies above the last three image rows count.
    """
    if not image:
        return 0
    width = len(image[0])
    return sum(
        1
        for top in range(len(image) - 3)
        for left in range(width - _MONSTER_WIDTH + 1)
        if all(image[top + row][left + column] == "#" for row, column in _MONSTER_CELLS)
    )


def water_roughness(tiles: Mapping[int, Tile]) -> int:
    """Number of ``#`` cells in the image that belong to no sea monster."""
    image = assemble_image(tiles)
    for orientation in all_orientations(image):
        monsters = find_sea_monsters(orientation)
        if monsters:
            return sum(row.count("#") for row in image) - len(_MONSTER_CELLS) * monsters
    raise ValueError("no sea monsters found in any orientation")


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    tiles = parse_tiles(_read_input(argv))
    print(f"Part1: {math.prod(find_corner_tiles(tiles))}")
    try:
        print(f"Part2: {water_roughness(tiles)}")
    except ValueError:
        pass


if __name__ == "__main__":
    main()