# drillrunner

`drillrunner` holds the building blocks of a terminal course of small
programming exercises: coloured status messages and progress indicators, a
generator for the `rust-project.json` file that lets an editor's language
server understand the exercise files, and worked solutions to the course's
drills written as plain Python functions and classes.

It needs nothing beyond the standard library.

```
pip install drillrunner
```

## Terminal output: `drillrunner.ui`

- `bold`, `red`, `green`, `blue` wrap text in ANSI colour codes.
- `warn(message)` prints a red line prefixed with `⚠️`; `success(message)`
  prints a green line prefixed with `✅`. When the `NO_EMOJI` environment
  variable is set (to any value) the prefixes become `!` and `✓`;
  `no_emoji()` reports whether it is set.
- `Spinner(message)` animates a spinner next to a message in a background
  thread, but only when its stream is a terminal. Use `start()`,
  `set_message()` and `finish_and_clear()`, or use it as a context manager.
- `ProgressBar(total, position)` draws `Progress: [###>---] pos/len` with a
  60-character bar; `inc(amount)` advances it and redraws it on a terminal,
  `render()` returns the line as text.

```python
from drillrunner.ui import Spinner, success

with Spinner("Compiling intro1...") as spinner:
    spinner.set_message("Running intro1...")
success("Successfully ran intro1")
```

## Editor support: `drillrunner.project`

`RustAnalyzerProject` collects one crate entry (edition 2021, `cfg` set to
`test`) for each exercise file and writes them as compact JSON.

```python
from drillrunner.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()           # runs `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk()             # ./rust-project.json by default
```

`path_to_json(path)` adds a crate when the text after the first dot of
`path` is `rs`; `exercises_to_json(root)` calls it for every entry below
`root`, in sorted order. `to_dict()` returns the data that is written.
`get_sysroot_src()` needs `rustc` on the `PATH`.

## Worked drills: `drillrunner.drills`

- `basics` – apple pricing, even numbers, sale prices, `bigger`,
  `foo_if_fizz`, `longest`, and small string functions (`trim_me`,
  `compose_me`, `replace_me`, `is_a_color_word`).
- `errors` – `generate_nametag_text`, `total_cost` and `purchase` with
  strict integer parsing, `PositiveNonzeroInteger` raising `CreationError`,
  and `parse_pos_nonzero` raising `ParsePosNonzeroError`.
- `concurrency` – `offset_sums` over a thread pool, `count_jobs` with a
  lock, and `send_tx` / `receive_all` passing a `Queue`'s values from two
  threads over a channel.
- `collections` – fruit baskets, `build_scores_table` of `Team` results,
  list doubling, `capitalize_*`, `divide` with `NotDivisibleError` and
  `DivideByZeroError`, `factorial` limited to 64 bits, and `Progress`
  counting over maps.
- `structures` – a message-driven `MachineState`, colour and order records,
  `Package` fees, `append_bar`, `Licensed` software, `Wrapper`, a `Cons`
  list, `maybe_icecream`, `abs_all`, the `transformer` string machine with
  `Command`, and `ReportCard`.

```python
from drillrunner.drills.errors import parse_pos_nonzero, ParsePosNonzeroError

parse_pos_nonzero("42").value        # 42
try:
    parse_pos_nonzero("-555")
except ParsePosNonzeroError as err:
    err.creation                     # CreationKind.NEGATIVE
```

## What this package does not do

There is no command-line program. The package does not read a course's
exercise list, compile or run exercise files, verify them in order, watch
them for changes, give hints, list progress or reset exercises; it only
provides the pieces described above. The drills on type conversions are not
included.