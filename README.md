# drillrunner

`drillrunner` is a small library around a directory of programming exercises.
It offers:

* `drillrunner.ui` – coloured status lines for a terminal;
* `drillrunner.project` – a builder for the `rust-project.json` file that lets
  an editor's language server see every exercise file;
* `drillrunner.drills` – worked, tested solutions to many of the exercises,
  grouped by theme.

It has no runtime dependencies.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Terminal output: `drillrunner.ui`

* `warn(message)` prints a red line prefixed with a warning sign.
* `success(message)` prints a green line prefixed with a check mark.
* `bold(text)` and `blue(text)` return the text wrapped in ANSI styling.
* `no_emoji()` tells whether the `NO_EMOJI` environment variable is set; when
  it is, `warn` and `success` use plain `!` and `✓` markers.

When `NO_COLOR` is set, no ANSI codes are added.

## Language-server project file: `drillrunner.project`

```python
from drillrunner.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()             # RUST_SRC_PATH, or ask `rustc --print sysroot`
project.exercises_to_json("./exercises")
if project.crates:
    project.write_to_disk("./rust-project.json")
```

Every `.rs` file below the given root becomes a `Crate` with edition `2021`,
no dependencies and the `test` cfg enabled. `add_path(path)` adds a single
file (files without the `.rs` extension are skipped) and `to_json()` returns
the compact JSON text. `get_sysroot_src()` runs `rustc` only when
`RUST_SRC_PATH` is unset.

## Worked drills: `drillrunner.drills`

| Module | Contents |
| --- | --- |
| `basics` | apple pricing, `bigger`, `foo_if_fizz`, `animal_habitat`, `sale_price`, `is_even`, `square`, string trimming and replacing |
| `quizzes` | `transformer` with `Command` / `Append`, and `ReportCard.render()` for numeric or letter grades |
| `errors` | `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger`, `parse_pos_nonzero` and their error types |
| `containers` | fruit baskets, `build_scores_table` with `Team`, `vec_loop`, `vec_map`, `maybe_icecream` |
| `messages` | a `State` driven by `ChangeColor`, `Echo`, `Move` and `Quit` messages |
| `iteration` | capitalising words, `divide` with `DivideByZeroError` / `NotDivisibleError`, `factorial`, counting `Progress` values |
| `shipping` | colour structs, `Order` templates, `Package` fees, `Rectangle` |
| `traits` | `append_bar`, `Licensed` software, `Wrapper`, `longest` |
| `pointers` | `Cons` lists, a copy-on-write `Cow` with `abs_all`, threaded `offset_sums`, and `send_tx` with a two-producer `Queue` |

```python
from drillrunner.drills.basics import calculate_price_of_apples
from drillrunner.drills.quizzes import Append, Command, transformer
from drillrunner.drills.errors import parse_pos_nonzero

calculate_price_of_apples(41)                       # 41
transformer([("hello", Command.UPPERCASE), ("foo", Append(2))])
                                                    # ['HELLO', 'foobarbar']
parse_pos_nonzero("42")                             # PositiveNonzeroInteger(value=42)
parse_pos_nonzero("0")                              # raises ParsePosNonzeroError
```

Failures are raised as exceptions: `ValueError` subclasses for bad input,
`DivisionError` subclasses for inexact division, and `OverflowError` where a
result would not fit the fixed width the drill works with.

## What it does not do

There is no command-line program. The package does not read an exercise list,
compile, run, test or lint exercises, track which exercises are done, reset
them, or watch a directory for edits; it only provides the pieces above. The
type-conversion drills are not included.