# easysolve

Short solutions to well-known introductory programming puzzles: string
handling, integer arithmetic and simple list processing. Each solution is a
plain Python function that takes ordinary values and returns a result. A
command-line front end reads a puzzle's input in its usual text form and
prints the answer.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Library use

The functions are grouped into three modules:

- `easysolve.strings`: `compare_ignore_case`, `is_girl`, `stones_to_remove`,
  `queue_after`, `capitalize_word`, `bitplusplus`, `helpful_maths`,
  `is_translation`, `count_distinct_letters`, `is_pangram`, `fix_word_case`,
  `xor_digits`, `hulk_feelings`, `abbreviate`, `match_winner`, `is_dangerous`.
- `easysolve.numbers`: `is_nearly_lucky`, `moves_to_divisible`,
  `damaged_dragons`, `orange_fraction`, `next_beautiful_year`,
  `alternating_sum`, `can_split_watermelon`, `max_dominoes`, `banana_loan`,
  `elephant_steps`, `years_until_heavier`, `wrong_subtract`, `min_bills`.
- `easysolve.arrays`: `is_easy`, `tram_capacity`, `gift_givers`,
  `swaps_to_line_up`, `advancers`, `horseshoes_to_buy`, `problems_solved`,
  `matrix_moves`, `count_groups`, `free_rooms`, `can_pass_all`,
  `fence_width`, `total_faces`.

```python
from easysolve.strings import abbreviate, fix_word_case, hulk_feelings
from easysolve.numbers import max_dominoes, min_bills

abbreviate("localization")   # "l10n"
abbreviate("word")           # "word"
fix_word_case("HoUse")       # "house"
hulk_feelings(2)             # "I hate that I love it"
max_dominoes(2, 4)           # 4
min_bills(125)               # 3
```

Invalid input raises `ValueError`, for example `helpful_maths("")`,
`hulk_feelings(0)`, `xor_digits` with strings of different lengths,
`orange_fraction([])`, or `matrix_moves` on a matrix without a 1.

## Command line

```
easysolve PROBLEM [INPUT]
```

`PROBLEM` is a problem code such as `4A` (case does not matter). `INPUT` is a
file holding the problem's input; when it is omitted or `-`, standard input is
read. The answer is printed to standard output. An unknown code, malformed
input or an unreadable file prints a message to standard error and exits
with status 1.

```
echo 8 | easysolve 4A
YES
```

Known codes: 4A, 41A, 50A, 59A, 61A, 71A, 96A, 110A, 112A, 116A, 136A, 144A,
148A, 158A, 200B, 228A, 231A, 236A, 263A, 266A, 266B, 271A, 281A, 282A, 339A,
344A, 443A, 467A, 469A, 486A, 520A, 546A, 617A, 677A, 705A, 734A, 785A, 791A,
977A, 996A, 1030A, 1328A.

From Python, `easysolve.cli.solve(problem, text)` takes the same code and input
text and returns the text the command would print; `easysolve.cli.main(argv)`
runs the command with the given argument list and returns its exit status.