"""Running a single exercise, and resetting it through git."""

from __future__ import annotations

import subprocess

from .exercise import CompilationError, Exercise, Mode
from .ui import success, warn
from .verify import VerificationFailed, test


class RunFailed(Exception):
    """Raised when an exercise fails to build, run or pass its tests."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Build and run (or test) one exercise; raise RunFailed on failure."""
    match exercise.mode:
        case Mode.TEST:
            try:
                test(exercise, verbose)
            except VerificationFailed as error:
                raise RunFailed(exercise) from error
        case Mode.COMPILE | Mode.CLIPPY:
            _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    print(f'Compiling: "{exercise.name}"')
    try:
        compiled = exercise.compile()
    except CompilationError as error:
        warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
        print(error.output.stderr)
        raise RunFailed(exercise) from error

    with compiled:
        output = compiled.run()

    if output.success:
        print(output.stdout)
        success(f"Successfully ran {exercise}")
        return

    print(output.stdout)
    print(output.stderr)
    warn(f"Ran {exercise} with errors")
    raise RunFailed(exercise)


def reset(exercise: Exercise) -> subprocess.Popen:
    """Start ``git stash -- <path>`` for the exercise and return the process."""
    try:
        return subprocess.Popen(["git", "stash", "--", str(exercise.path)])
    except OSError as error:
        raise RunFailed(exercise) from error