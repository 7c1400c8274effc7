from advent2020.day17 import (
    count_active_neighbours,
    neighbours,
    parse_cubes,
    simulate,
)

EXAMPLE = ".#.\n..#\n###\n"


def test_parse_cubes_example():
    cubes = parse_cubes(EXAMPLE)
    assert cubes == {(0, 1, 0, 0), (1, 2, 0, 0), (2, 0, 0, 0), (2, 1, 0, 0), (2, 2, 0, 0)}


def test_three_d_neighbour_count():
    assert len(set(neighbours((0, 0, 0, 0), four_d=False))) == 26


def test_four_d_neighbours_are_distinct_and_adjacent():
    cube = (1, 2, 3, 4)
    found = neighbours(cube, four_d=True)
    assert len(set(found)) == len(found)
    assert cube not in found
    assert all(max(abs(a - b) for a, b in zip(n, cube)) == 1 for n in found)


def test_three_d_neighbours_are_subset_of_four_d():
    cube = (1, 2, 3, 0)
    assert set(neighbours(cube, False)) < set(neighbours(cube, True))


def test_three_d_neighbours_keep_w_at_zero():
    assert {n[3] for n in neighbours((1, 2, 3, 4), four_d=False)} == {0}


def test_count_active_neighbours_matches_membership():
    cubes = parse_cubes(EXAMPLE)
    for cube in cubes:
        expected = sum(n in cubes for n in neighbours(cube, False))
        assert count_active_neighbours(cube, cubes, False) == expected


def test_zero_cycles_changes_nothing():
    cubes = parse_cubes(EXAMPLE)
    assert simulate(cubes, 0, four_d=False) == cubes


def test_lone_cube_dies():
    assert simulate({(0, 0, 0, 0)}, 1, four_d=True) == set()


def test_simulation_does_not_mutate_input():
    cubes = parse_cubes(EXAMPLE)
    snapshot = set(cubes)
    simulate(cubes, 2, four_d=False)
    assert cubes == snapshot


def test_cycles_compose():
    cubes = parse_cubes(EXAMPLE)
    assert simulate(cubes, 2, False) == simulate(simulate(cubes, 1, False), 1, False)


def test_example_three_dimensions():
    assert len(simulate(parse_cubes(EXAMPLE), 6, four_d=False)) == 112


def test_example_four_dimensions():
    assert len(simulate(parse_cubes(EXAMPLE), 6, four_d=True)) == 848