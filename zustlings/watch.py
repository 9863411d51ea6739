"""Watch mode: re-verify exercises whenever their files change."""

from __future__ import annotations

import enum
import os
import queue
import sys
import threading
from pathlib import Path
from typing import IO, Iterable, Sequence

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise
from .verify import VerificationFailed, verify

WELCOME = (
    "Welcome to watch mode! You can type 'help' to get an overview of the "
    "commands you can use here."
)
HELP = "\n".join(
    [
        "Commands available to you in watch mode:",
        "  hint  - prints the current exercise's hint",
        "  clear - clears the screen",
        "  quit  - quits watch mode",
        "  help  - displays this help message",
        "",
        "Watch mode automatically re-evaluates the current exercise",
        "when you edit a file's contents.",
    ]
)
CLEAR = "\x1b[2J\x1b[1;1H"
# Full terminal reset; works in UNIX and newer Windows terminals.
RESET_SCREEN = "\x1bc"
MISSING_HOMEWORK = "Can't find homework. Have you run the wrong homework number?"


class WatchStatus(enum.Enum):
    """How a watch session ended."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"


class WatchShell:
    """The small command shell that runs next to the file watcher."""

    def __init__(self, hint: str | None = None, stream: IO[str] | None = None) -> None:
        self.hint = hint
        self.should_quit = threading.Event()
        self._stream = stream

    def handle(self, command: str) -> str | None:
        """Carry out one command and return the text to show, if any."""
        command = command.strip()
        match command:
            case "hint":
                return self.hint
            case "clear":
                return CLEAR
            case "quit":
                self.should_quit.set()
                return "Bye!"
            case "help":
                return HELP
            case _:
                return f"unknown command: {command}"

    def start(self) -> threading.Thread:
        """Greet the user and read commands on a background thread."""
        print(WELCOME)
        thread = threading.Thread(target=self._loop, daemon=True)
        thread.start()
        return thread

    def _loop(self) -> None:
        stream = self._stream if self._stream is not None else sys.stdin
        try:
            for line in stream:
                reply = self.handle(line)
                if reply is not None:
                    print(reply)
        except (OSError, ValueError) as error:
            print(f"error reading command: {error}")


def homework_exercises(
    exercises: Iterable[Exercise], homework_dir: str | os.PathLike
) -> list[Exercise]:
    """Keep the exercises whose sub-directory appears in ``homework_dir``."""
    try:
        names = {entry.name for entry in os.scandir(homework_dir)}
    except FileNotFoundError as error:
        raise FileNotFoundError(MISSING_HOMEWORK) from error

    selected = []
    for exercise in exercises:
        elements = Path(exercise.path).as_posix().split("/")
        if len(elements) > 3 and elements[2] in names:
            selected.append(exercise)
    return selected


def _ends_with(path: Path, suffix: Path) -> bool:
    tail = [part for part in Path(suffix).parts if part != "."]
    parts = list(path.parts)
    return bool(tail) and len(tail) <= len(parts) and parts[-len(tail):] == tail


def pending_after_change(
    exercises: Sequence[Exercise], changed_path: str | os.PathLike
) -> list[Exercise]:
    """Exercises to re-check after ``changed_path`` was edited.

    First the changed exercise and every one listed after it, then every
    other exercise that still looks unfinished.
    """
    changed = Path(changed_path)
    start = next(
        (i for i, e in enumerate(exercises) if _ends_with(changed, e.path)),
        len(exercises),
    )
    from_changed = list(exercises[start:])
    others = [
        e for e in exercises if not _ends_with(changed, e.path) and not e.looks_done()
    ]
    return from_changed + others


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, events: "queue.Queue[str]") -> None:
        super().__init__()
        self._events = events

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(os.fsdecode(event.src_path))

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)


def watch(
    exercises: Iterable[Exercise],
    verbose: bool = False,
    directory: str | os.PathLike = "./exercises",
    extension: str = "rs",
) -> WatchStatus:
    """Verify the exercises, then re-verify on every change until done or quit."""
    exercises = list(exercises)
    events: "queue.Queue[str]" = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(events), os.fspath(directory), recursive=True)
    observer.start()
    try:
        print(RESET_SCREEN, flush=True)
        try:
            verify(exercises, verbose)
            return WatchStatus.FINISHED
        except VerificationFailed as failure:
            shell = WatchShell(hint=failure.exercise.hint)

        shell.start()
        while not shell.should_quit.is_set():
            try:
                changed = Path(events.get(timeout=1))
            except queue.Empty:
                continue
            if changed.suffix != f".{extension}" or not changed.exists():
                continue
            filepath = changed.resolve()
            pending = pending_after_change(exercises, filepath)
            print(RESET_SCREEN, flush=True)
            try:
                verify(pending, verbose)
                return WatchStatus.FINISHED
            except VerificationFailed as failure:
                shell.hint = failure.exercise.hint
        return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()