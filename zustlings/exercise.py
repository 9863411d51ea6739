"""Exercises: their description, completion state, compilation and running."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
RUSTC_COLOR_ARGS = ("--color", "always")
CLIPPY_CARGO_TOML_PATH = Path("./exercises/clippy/Cargo.toml")


def temp_file_path() -> str:
    """A temporary binary path unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def _remove(path: str) -> None:
    try:
        os.remove(path)
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state; an empty context means the exercise is done."""

    context: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str
    success: bool = True


class CompilationError(Exception):
    """Raised when an exercise fails to compile."""

    def __init__(self, exercise: "Exercise", output: ExerciseOutput) -> None:
        super().__init__(f"compilation of {exercise} failed")
        self.exercise = exercise
        self.output = output


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _execute(args: Sequence[str]) -> subprocess.CompletedProcess:
    return subprocess.run(list(args), capture_output=True)


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
        success=result.returncode == 0,
    )


@dataclass(frozen=True)
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __str__(self) -> str:
        return str(self.path)

    def state(self) -> State:
        """Inspect the source for the pending marker and its surroundings."""
        source = Path(self.path).read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise ValueError(f"marker in {self.path} does not sit on a single line")

        low, high = max(matched - CONTEXT, 0), matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines)
                if low <= i <= high
            )
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed."""
        return self.state().done()

    def compile(self) -> "CompiledExercise":
        """Build the exercise; raise CompilationError on failure."""
        binary = temp_file_path()
        source = str(self.path)
        match self.mode:
            case Mode.COMPILE:
                result = _execute(["rustc", source, "-o", binary, *RUSTC_COLOR_ARGS])
            case Mode.TEST:
                result = _execute(
                    ["rustc", "--test", source, "-o", binary, *RUSTC_COLOR_ARGS]
                )
            case Mode.CLIPPY:
                result = self._clippy(binary)
        if result.returncode == 0:
            return CompiledExercise(self, binary)
        _remove(binary)
        raise CompilationError(self, _output(result))

    def _clippy(self, binary: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2018"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        CLIPPY_CARGO_TOML_PATH.write_text(cargo_toml, encoding="utf-8")
        manifest = str(CLIPPY_CARGO_TOML_PATH)
        # Build a runnable binary too; clippy reports the same failures if this fails.
        _execute(["rustc", str(self.path), "-o", binary, *RUSTC_COLOR_ARGS])
        # Clippy misses lints on cached builds unless the target is cleaned first.
        _execute(["cargo", "clean", "--manifest-path", manifest, *RUSTC_COLOR_ARGS])
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                manifest,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ]
        )


class CompiledExercise:
    """A built exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise, binary: str) -> None:
        self.exercise = exercise
        self.binary = binary

    def run(self) -> ExerciseOutput:
        """Run the binary; ``success`` tells whether it exited cleanly."""
        args = [self.binary]
        if self.exercise.mode is Mode.TEST:
            args.append("--show-output")
        return _output(_execute(args))

    def close(self) -> None:
        _remove(self.binary)

    def __enter__(self) -> "CompiledExercise":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def load_exercises(path: str | os.PathLike) -> list[Exercise]:
    """Read the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    try:
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in data["exercises"]
        ]
    except (KeyError, TypeError) as error:
        raise ValueError(f"malformed exercise list in {path}: {error}") from error