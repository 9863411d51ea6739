"""Checking exercises in order, stopping at the first one that is not finished."""

from __future__ import annotations

from typing import Iterable

from .exercise import CompilationError, CompiledExercise, Exercise, Mode
from .ui import bold, colored, no_emoji, success, warn


class VerificationFailed(Exception):
    """Raised when an exercise fails to build, run, test, or is still pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"verification of {exercise} failed")
        self.exercise = exercise


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first failure."""
    for exercise in exercises:
        match exercise.mode:
            case Mode.TEST:
                finished = _compile_and_test(exercise, interactive=True, verbose=verbose)
            case Mode.COMPILE:
                finished = _compile_and_run_interactively(exercise)
            case Mode.CLIPPY:
                finished = _compile_only(exercise)
        if not finished:
            raise VerificationFailed(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Build and run an exercise's test harness without prompting."""
    _compile_and_test(exercise, interactive=False, verbose=verbose)


def _compile(exercise: Exercise) -> CompiledExercise:
    try:
        return exercise.compile()
    except CompilationError as error:
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(error.output.stderr)
        raise VerificationFailed(exercise) from error


def _compile_only(exercise: Exercise) -> bool:
    _compile(exercise).close()
    success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _compile(exercise) as compiled:
        print(f'Compiling: "{exercise.name}"')
        output = compiled.run()

    if not output.success:
        warn(f"Ran {exercise} with errors")
        print(output.stdout)
        print(output.stderr)
        raise VerificationFailed(exercise)

    success(f"Successfully ran {exercise}!")
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, *, interactive: bool, verbose: bool) -> bool:
    with _compile(exercise) as compiled:
        output = compiled.run()

    if not output.success:
        warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
        print(output.stdout)
        raise VerificationFailed(exercise)

    if verbose:
        print(output.stdout)
    success(f"Successfully tested {exercise}")
    if interactive:
        return prompt_for_completion(exercise, None)
    return True


def _separator() -> str:
    return bold("====================")


def prompt_for_completion(exercise: Exercise, output: str | None = None) -> bool:
    """Return True if the exercise is done; otherwise show where the marker sits."""
    state = exercise.state()
    if state.done():
        return True

    plain = no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if plain
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    match exercise.mode:
        case Mode.COMPILE:
            message = "The code is compiling!"
        case Mode.TEST:
            message = "The code is compiling, and the tests pass!"
        case Mode.CLIPPY:
            message = clippy_message

    print()
    print(f"~*~ {message} ~*~" if plain else f"🎉 🎉  {message} 🎉 🎉")
    print()

    if output is not None:
        print("Output:")
        print(_separator())
        print(output)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(
        "or jump into the next one by removing the "
        f"{bold('`I AM NOT DONE`')} comment:"
    )
    print()
    for context_line in state.context:
        text = bold(context_line.line) if context_line.important else context_line.line
        number = colored(bold(f"{context_line.number:>2}"), "blue")
        print(f"{number} {colored('|', 'blue')}  {text}")

    return False