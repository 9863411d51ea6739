# zustlings

A collection of small exercises you solve one at a time from the terminal.
Each exercise is a source file containing a deliberate mistake and a marker
comment:

```
// I AM NOT DONE
```

Fix the file until it compiles (or its tests pass), then delete the marker
to move on to the next exercise.

## Installing

```
pip install .
```

Running the test suite needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Setting up an exercise directory

`zustlings` must be run from a directory holding an `info.toml` file that
lists the exercises in their recommended order:

```toml
[[exercises]]
name = "variables1"
path = "homeworks/homework4/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with `let`."

[[exercises]]
name = "if1"
path = "homeworks/homework4/if/if1.rs"
mode = "test"
hint = "Use an `if` expression that returns a value."
```

`mode` is one of:

- `compile` – build the file with `rustc` and run the program;
- `test` – build the file with `rustc --test` and run its tests;
- `clippy` – build the file, then lint it with `cargo clippy`, treating
  warnings as errors (a `Cargo.toml` is written to
  `./exercises/clippy/Cargo.toml` for this).

`rustc` must be on your `PATH`. `zustlings` exits with status 1 if
`info.toml` is not in the current directory or if `rustc --version` does not
run successfully.

## Usage

Run with no arguments for a short introduction:

```
zustlings
```

Commands:

```
zustlings verify            # check every exercise in order, stop at the first failing one
zustlings run variables1    # build and run (or test) a single exercise
zustlings run next          # run the first exercise that still has its marker
zustlings hint variables1   # print the hint for an exercise
zustlings reset variables1  # run `git stash -- <path>` for the exercise
zustlings list              # table of names, paths and Done/Pending status, with progress
zustlings paths             # print the path of every exercise
zustlings lsp               # write rust-project.json for rust-analyzer
zustlings watch             # verify, then re-verify whenever ./exercises changes
zustlings homework 4        # the same, for the exercises of ./homeworks/homework4
zustlings --version         # print the version
```

`--nocapture` shows the output of test-mode exercises:

```
zustlings --nocapture run if1
```

`list` takes these options:

- `-p`, `--paths` – print only the paths;
- `-n`, `--names` – print only the names;
- `-f`, `--filter PATTERNS` – comma-separated patterns matched against names
  and paths;
- `-u`, `--unsolved` – only exercises still pending;
- `-s`, `--solved` – only exercises already done.

`watch` takes an optional exercise name to start from, and `-s` /
`--solutions` to use the same exercises under `solutions/` instead of
`exercises/`.

`lsp` takes the standard library location from `RUST_SRC_PATH`, or asks
`rustc --print sysroot`, and adds one crate for every `.rs` file under
`exercises/`.

### Watch mode

`zustlings watch` and `zustlings homework <number>` verify the selected
exercises, then keep watching the files. For `homework`, an exercise is
selected when the third component of its path (for example `variables` in
`homeworks/homework4/variables/variables1.rs`) names an entry of
`./homeworks/homework<number>`.

Each time a `.rs` file is saved, the exercise it belongs to and every
exercise listed after it are checked again, followed by any other exercise
that still has its marker. While watching you can type:

- `hint` – show the hint for the exercise you are stuck on;
- `clear` – clear the screen;
- `quit` – leave watch mode;
- `help` – list these commands.

When every selected exercise passes and has its marker removed, watch mode
ends with a finish-line banner.

### Progress markers

An exercise counts as done as soon as its `I AM NOT DONE` comment is gone.
While it is still present, a successful run prints the lines around the
marker so you can find it quickly. Set the `NO_EMOJI` environment variable
to replace emoji in the output with plain characters.

## Extra programs

```
zustlings-sudoku
```

checks a built-in solved 9×9 grid: that every row, column and 3×3 box holds
1 to 9 exactly once, and that a built-in partially filled grid agrees with it.
The `zustlings.sudoku` module offers the `Sudoku` class and `check_solution`
for your own grids.

```
zustlings-wordle
```

is a five-letter word guessing game with six guesses, read from standard
input. The server commits to the SHA-256 hash of its secret word before the
first guess, and the player checks that the hash stays the same every round.
Letters are marked as correct, present elsewhere in the word, or missing.

## What this package does not do

- It ships no exercises and no `info.toml`; you provide the exercise
  directory.
- It does not compile anything itself: building, testing and linting are
  done by running `rustc` and `cargo` from your `PATH`.
- In the Wordle game the server and player run in one process and the
  player's check is a plain hash comparison; no proof of how a guess was
  scored is produced or verified.