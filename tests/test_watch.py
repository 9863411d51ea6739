import io
from pathlib import Path

import pytest

from zustlings.exercise import Exercise, Mode
from zustlings.watch import (
    CLEAR,
    HELP,
    WatchShell,
    WatchStatus,
    homework_exercises,
    pending_after_change,
    watch,
)


def _exercise(name, path):
    return Exercise(name=name, path=Path(path), mode=Mode.COMPILE, hint=f"hint {name}")


def test_hint_returns_current_hint():
    shell = WatchShell(hint="use a loop")
    assert shell.handle("  hint\n") == "use a loop"


def test_hint_without_hint_returns_none():
    assert WatchShell().handle("hint") is None


def test_clear_returns_escape_sequence():
    assert WatchShell().handle("clear") == "\x1b[2J\x1b[1;1H"
    assert WatchShell().handle("clear") == CLEAR


def test_quit_sets_flag():
    shell = WatchShell()
    assert not shell.should_quit.is_set()
    assert shell.handle("quit\n") == "Bye!"
    assert shell.should_quit.is_set()


def test_help_lists_commands():
    reply = WatchShell().handle("help")
    assert reply == HELP
    assert reply.startswith("Commands available to you in watch mode:")
    assert "  quit  - quits watch mode" in reply


def test_unknown_command():
    assert WatchShell().handle(" dance \n") == "unknown command: dance"


def test_start_reads_commands_from_stream(capsys):
    shell = WatchShell(hint="use a loop", stream=io.StringIO("hint\nquit\n"))
    thread = shell.start()
    thread.join(timeout=5)
    assert not thread.is_alive()
    assert shell.should_quit.is_set()
    out = capsys.readouterr().out
    assert "Welcome to watch mode!" in out
    assert "use a loop" in out
    assert "Bye!" in out


def test_homework_exercises_filters_by_subdirectory(tmp_path):
    homework = tmp_path / "homework4"
    (homework / "functions").mkdir(parents=True)
    (homework / "if").mkdir()
    inside = _exercise("functions1", "homeworks/homework4/functions/functions1.rs")
    if_one = _exercise("if1", "homeworks/homework4/if/if1.rs")
    outside = _exercise("variables1", "homeworks/homework5/variables/variables1.rs")
    short = _exercise("short", "homeworks/functions.rs")
    result = homework_exercises([inside, outside, short, if_one], homework)
    assert result == [inside, if_one]


def test_homework_exercises_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError, match="wrong homework number"):
        homework_exercises([], tmp_path / "homework99")


@pytest.fixture
def three_exercises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    folder = tmp_path / "exercises"
    folder.mkdir()
    (folder / "a.rs").write_text("// I AM NOT DONE\n", encoding="utf-8")
    (folder / "b.rs").write_text("fn main() {}\n", encoding="utf-8")
    (folder / "c.rs").write_text("// I AM NOT DONE\n", encoding="utf-8")
    return [
        _exercise("a", "exercises/a.rs"),
        _exercise("b", "exercises/b.rs"),
        _exercise("c", "exercises/c.rs"),
    ]


def test_pending_after_change_starts_at_changed(tmp_path, three_exercises):
    a, b, c = three_exercises
    result = pending_after_change(three_exercises, tmp_path / "exercises" / "b.rs")
    assert result == [b, c, a, c]


def test_pending_after_change_unknown_file(tmp_path, three_exercises):
    a, _, c = three_exercises
    result = pending_after_change(three_exercises, tmp_path / "other" / "z.rs")
    assert result == [a, c]


def test_pending_after_change_first_exercise(tmp_path, three_exercises):
    a, b, c = three_exercises
    result = pending_after_change(three_exercises, tmp_path / "exercises" / "a.rs")
    assert result[:3] == [a, b, c]
    assert a not in result[3:]


def test_watch_finishes_when_nothing_to_verify(tmp_path):
    assert watch([], directory=tmp_path, extension="rs") is WatchStatus.FINISHED