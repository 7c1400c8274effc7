# advent2020

Solutions to all twenty-five days of the 2020 Advent of Code puzzles. Every
day lives in its own module (`advent2020.day01` to `advent2020.day25`). Each
one can be imported as a library or run as a console command that reads your
puzzle input and prints the answers.

## Installation

```
pip install .
```

Python 3.10 or newer is required. The package has no runtime dependencies.

## Command line

Each day installs its own command. Give it the path of your puzzle input:

```
advent2020-day01 data/day01.txt
advent2020-day13 data/day13.txt
advent2020-day25 data/day25.txt
```

Without an argument a command reads `data/dayNN.txt` relative to the current
directory. If the file cannot be opened the command exits with the message
`failed opening file: ...`.

The commands print lines of the form `Part1: ...` and `Part2: ...`. Some days
differ:

- Day 13 also prints `Part2 (Alternative): ...`, the same answer found by
  stepping through the buses one at a time.
- Day 20 prints `Part2` only when sea monsters are found in some orientation
  of the assembled image.
- Day 25 has only one part.

## Library use

The solving functions take parsed data or raw puzzle text. Their results are
returned, not printed, and malformed input raises `ValueError`:

```python
from advent2020 import day01, day08, day15

entries = day01.parse_entries("1721\n979\n366\n299\n675\n1456\n")
print(day01.find_pair_product(entries))    # 514579
print(day01.find_triple_product(entries))  # 241861950

program = day08.parse_program(open("data/day08.txt").read())
accumulator, terminated = day08.run_boot_code(program)
print(day08.repair_program(program))

print(day15.play_memory_game([0, 3, 6], 2020))  # 436
```

## Overview of the days

| Day | Module | Main entry points |
|-----|--------|-------------------|
| 1 | `day01` | `parse_entries`, `find_pair_product`, `find_triple_product` |
| 2 | `day02` | `PasswordEntry`, `parse_entries` |
| 3 | `day03` | `Forest`, `product_of_slopes` |
| 4 | `day04` | `parse_passports`, `has_required_fields`, `is_credentials_valid`, `within_range`, `count_passports` |
| 5 | `day05` | `decode_partition`, `seat_id`, `highest_seat_id`, `find_my_seat` |
| 6 | `day06` | `parse_groups`, `count_any_yes`, `count_all_yes` |
| 7 | `day07` | `parse_rules`, `can_hold`, `count_holders`, `count_contained` |
| 8 | `day08` | `Operation`, `Instruction`, `parse_program`, `run_boot_code`, `repair_program` |
| 9 | `day09` | `find_breaking_number`, `find_contiguous_set`, `encryption_weakness` |
| 10 | `day10` | `joltage_differences`, `difference_product`, `count_arrangements`, `count_arrangements_by_chains`, `tribonacci` |
| 11 | `day11` | `Direction`, `parse_seats`, `visible_occupied`, `stable_occupied_count` |
| 12 | `day12` | `Instruction`, `parse_navigation`, `rotate_heading`, `navigate_ship`, `rotate_waypoint_clockwise`, `rotate_waypoint_anticlockwise`, `navigate_waypoint` |
| 13 | `day13` | `parse_notes`, `earliest_bus`, `crt`, `earliest_sequence_time` |
| 14 | `day14` | `apply_value_mask`, `floating_addresses`, `run_version1`, `run_version2` |
| 15 | `day15` | `parse_numbers`, `play_memory_game` |
| 16 | `day16` | `Bound`, `Notes`, `parse_notes`, `find_invalid_tickets`, `determine_fields`, `departure_product` |
| 17 | `day17` | `parse_cubes`, `neighbours`, `count_active_neighbours`, `simulate` |
| 18 | `day18` | `reverse_expression`, `shunting_yard`, `shunting_yard_with_precedence`, `evaluate`, `evaluate_line` |
| 19 | `day19` | `parse_input`, `build_pattern`, `count_matches`, `count_matches_with_loops` |
| 20 | `day20` | `parse_tiles`, `rotate_tile`, `flip_tile`, `all_orientations`, `tile_edges`, `find_corner_tiles`, `assemble_image`, `find_sea_monsters`, `water_roughness` |
| 21 | `day21` | `parse_foods`, `allergen_candidates`, `resolve_allergens`, `count_safe_ingredients`, `canonical_dangerous_list` |
| 22 | `day22` | `parse_decks`, `score`, `play_combat`, `play_recursive_combat` |
| 23 | `day23` | `parse_cups`, `play_crab_cups`, `labels_after_one`, `play_crab_cups_linked` |
| 24 | `day24` | `Direction`, `parse_directions`, `move_to_tile`, `tile_neighbours`, `initial_black_tiles`, `count_black_tiles`, `count_black_tiles_after_days` |
| 25 | `day25` | `find_loop_size`, `transform`, `encryption_key` |

Some second parts need a lot of computation. Day 15 runs thirty million turns
and day 23 runs ten million moves over a million cups. Expect those commands
to take a while.

## Running the tests

```
pip install ".[test]"
pytest
```