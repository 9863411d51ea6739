"""Command-line entry point: list, run, verify and watch exercises."""

from __future__ import annotations

import argparse
import dataclasses
import math
import subprocess
import sys
from pathlib import Path
from typing import Iterable, Sequence

from .exercise import Exercise, load_exercises
from .project import RustAnalyzerProject
from .run import RunFailed, reset, run
from .ui import no_emoji
from .verify import VerificationFailed, verify
from .watch import WatchStatus, homework_exercises, watch

VERSION = "4.7.0"
INFO_FILE = "info.toml"
EXERCISES_BASE = Path("exercises")
SOLUTIONS_BASE = Path("solutions")

DEFAULT_OUT = """Thanks for installing Zustlings!

How Zustlings works

1. The central concept behind Zustlings is that you solve exercises. These
   exercises usually have some sort of syntax error in them, which will cause
   them to fail compilation or testing. Sometimes there's a logic error instead
   of a syntax error. No matter what error, it's your job to find it and fix it!
   You'll know when you fixed it because then, the exercise will compile and
   Zustlings will be able to move on to the next exercise.
2. If you run Zustlings in watch mode (which we recommend), it'll automatically
   start with the first exercise. Don't get confused by an error message popping
   up as soon as you run Zustlings! This is part of the exercise that you're
   supposed to solve, so open the exercise file in an editor and start your
   detective work!
3. If you're stuck on an exercise, there is a helpful hint you can view by typing
   'hint' (in watch mode), or running `zustlings hint exercise_name`.

Got all that? Great! To get started, run `zustlings watch` in order to get the first
exercise. Make sure to have your editor open!"""

FINISH_LINE = """+----------------------------------------------------+
|       You made it to the End of this Homework!     |
+----------------------------------------------------+

We hope you enjoyed learning about the various aspects of Rust!
If you noticed any issues, please don't hesitate to report them.
You can also contribute your own exercises to help the greater community!"""


class ExerciseNotFound(LookupError):
    """Raised when no exercise matches the requested name."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def find_exercise(name: str, exercises: Sequence[Exercise]) -> Exercise:
    """Find an exercise by name; ``next`` means the first unfinished one."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise ExerciseNotFound(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise ExerciseNotFound(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool = False,
    names: bool = False,
    filters: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> list[str]:
    """Lines of the exercise listing, ending with the progress summary."""
    lines: list[str] = []
    if not paths and not names:
        lines.append(f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}")

    patterns = [f for f in (filters or "").lower().split(",") if f.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        matches_filter = any(p in exercise.name or p in fname for p in patterns)
        done = exercise.looks_done()
        if done:
            done_count += 1
        status = "Done" if done else "Pending"
        wanted = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if wanted and (matches_filter or filters is None):
            if paths:
                lines.append(fname)
            elif names:
                lines.append(exercise.name)
            else:
                lines.append(f"{exercise.name:<17}\t{fname:<46}\t{status:<7}")

    total = len(exercises)
    percentage = done_count / total * 100.0 if total else math.nan
    lines.append(
        f"Progress: You completed {done_count} / {total} exercises ({percentage:.1f} %)."
    )
    return lines


def exercises_solution(exercises: Iterable[Exercise]) -> list[Exercise]:
    """The same exercises pointed at the solutions directory."""
    return [
        dataclasses.replace(
            exercise, path=SOLUTIONS_BASE / Path(exercise.path).relative_to(EXERCISES_BASE)
        )
        for exercise in exercises
    ]


def rustc_exists() -> bool:
    """Whether ``rustc --version`` runs successfully."""
    try:
        result = subprocess.run(["rustc", "--version"], stdout=subprocess.DEVNULL)
    except OSError:
        return False
    return result.returncode == 0


class _UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        raise _UsageError(message)


def _build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(
        prog="zustlings",
        description="A collection of small exercises to prepare you for Zero Knowledge Rust",
    )
    parser.add_argument("--nocapture", action="store_true", help="show outputs from the test exercises")
    parser.add_argument("-v", "--version", action="store_true", help="show the executable version")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("verify", help="Verifies all exercises according to the recommended order")

    watch_parser = sub.add_parser("watch", help="Reruns `verify` when files were edited")
    watch_parser.add_argument("start", nargs="?", help="start from this exercise")
    watch_parser.add_argument("-s", "--solutions", action="store_true", help="use solutions directory")

    for name, text in (
        ("run", "Runs/Tests a single exercise"),
        ("reset", 'Resets a single exercise using "git stash -- <filename>"'),
        ("hint", "Returns a hint for the given exercise"),
    ):
        sub.add_parser(name, help=text).add_argument("name", help="the name of the exercise")

    homework_parser = sub.add_parser("homework", help="Watches the exercises of one homework")
    homework_parser.add_argument("name", help="the day of the homework")

    list_parser = sub.add_parser("list", help="Lists the exercises available")
    list_parser.add_argument("-p", "--paths", action="store_true", help="show only the paths of the exercises")
    list_parser.add_argument("-n", "--names", action="store_true", help="show only the names of the exercises")
    list_parser.add_argument("-f", "--filter", default=None, help="comma separated patterns to match exercise names")
    list_parser.add_argument("-u", "--unsolved", action="store_true", help="display only exercises not yet solved")
    list_parser.add_argument("-s", "--solved", action="store_true", help="display only exercises that have been solved")

    sub.add_parser("paths", help="Prints the path of every exercise")
    sub.add_parser("lsp", help="Enable rust-analyzer for exercises")
    return parser


def _report_watch(status_source) -> int:
    try:
        status = status_source()
    except OSError as error:
        print(f"Error: Could not watch your progress. Error message was {error!r}.")
        print("Most likely you've run out of disk space or your 'inotify limit' has been reached.")
        return 1
    if status is WatchStatus.FINISHED:
        emoji = "★" if no_emoji() else "🎉"
        print(f"{emoji} All exercises completed! {emoji}")
        print(f"\n{FINISH_LINE}\n")
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `zustlings watch` again"
        )
    return 0


def _list(args: argparse.Namespace, exercises: list[Exercise]) -> int:
    lines = list_exercises(
        exercises, args.paths, args.names, args.filter, args.unsolved, args.solved
    )
    try:
        for line in lines:
            sys.stdout.write(line + "\n")
        sys.stdout.flush()
    except BrokenPipeError:
        return 0
    except OSError:
        return 1
    return 0


def _lsp() -> int:
    project = RustAnalyzerProject()
    try:
        project.get_sysroot_src()
    except OSError:
        print("Couldn't find toolchain path, do you have `rustc` installed?")
        return 1
    project.exercises_to_json()
    if not project.crates:
        print("Failed find any exercises, make sure you're in the `zustlings` folder")
        return 0
    try:
        project.write_to_disk()
    except OSError:
        print("Failed to write rust-project.json to disk for rust-analyzer")
        return 0
    print("Successfully generated rust-project.json")
    print("rust-analyzer will now parse exercises, restart your language server or editor")
    return 0


def _watch(args: argparse.Namespace, exercises: list[Exercise], verbose: bool) -> int:
    if args.solutions:
        exercises = exercises_solution(exercises)
    if args.start is not None:
        index = next((i for i, e in enumerate(exercises) if e.name == args.start), None)
        if index is None:
            print(f"Exercise {args.start} not found.")
            return 1
        exercises = exercises[index:]
    return _report_watch(lambda: watch(exercises, verbose, "./exercises", "rs"))


def _homework(name: str, exercises: list[Exercise], verbose: bool) -> int:
    try:
        selected = homework_exercises(exercises, f"./homeworks/homework{name}")
    except FileNotFoundError as error:
        print(error)
        return 1
    return _report_watch(lambda: watch(selected, verbose, "./homeworks", "rs"))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError:
        return 1

    if args.version:
        print(f"v{VERSION}")
        return 0

    if not Path(INFO_FILE).exists():
        print(f"{parser.prog} must be run from the zustlings directory")
        print("Try `cd zustlings/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(INFO_FILE)
    verbose = args.nocapture

    if args.command is None:
        print(f"{DEFAULT_OUT}\n")
        return 0

    try:
        match args.command:
            case "list":
                return _list(args, exercises)
            case "paths":
                for exercise in exercises:
                    print(exercise.path)
                return 0
            case "run":
                run(find_exercise(args.name, exercises), verbose)
                return 0
            case "reset":
                reset(find_exercise(args.name, exercises))
                return 0
            case "hint":
                print(find_exercise(args.name, exercises).hint)
                return 0
            case "verify":
                verify(exercises, verbose)
                return 0
            case "lsp":
                return _lsp()
            case "watch":
                return _watch(args, exercises, verbose)
            case "homework":
                return _homework(args.name, exercises, verbose)
    except ExerciseNotFound as error:
        print(error.message)
        return 1
    except (RunFailed, VerificationFailed):
        return 1
    return 1


if __name__ == "__main__":
    sys.exit(main())