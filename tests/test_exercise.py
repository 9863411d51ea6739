import os
import subprocess
from pathlib import Path
from unittest import mock

import pytest

from zustlings.exercise import (
    CompilationError,
    CompiledExercise,
    ContextLine,
    Exercise,
    Mode,
    State,
    load_exercises,
    temp_file_path,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


def _exercise(tmp_path, name, text, mode=Mode.COMPILE):
    path = tmp_path / f"{name}.rs"
    path.write_text(text)
    return Exercise(name=name, path=path, mode=mode, hint="")


def _fake_run(returncode=0, stdout=b"", stderr=b"", calls=None):
    def run(args, **kwargs):
        if calls is not None:
            calls.append(list(args))
        return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)

    return run


def test_pending_state(tmp_path):
    exercise = _exercise(tmp_path, "pending_exercise", PENDING)
    expected = (
        ContextLine(line="// fake_exercise", number=1, important=False),
        ContextLine(line="", number=2, important=False),
        ContextLine(line="// I AM NOT DONE", number=3, important=True),
        ContextLine(line="", number=4, important=False),
        ContextLine(line="fn main() {", number=5, important=False),
    )
    assert exercise.state() == State(expected)
    assert not exercise.looks_done()


def test_finished_exercise(tmp_path):
    exercise = _exercise(tmp_path, "finished_exercise", FINISHED)
    assert exercise.state() == State()
    assert exercise.state().done()
    assert exercise.looks_done()


def test_cairo_exercises_without_marker_are_done(tmp_path):
    for name in ("compilePass", "testPass"):
        path = tmp_path / f"{name}.cairo"
        path.write_text("fn main() {\n}\n")
        exercise = Exercise(name=name, path=path, mode=Mode.COMPILE, hint="")
        assert exercise.state() == State()


def test_marker_at_top_clamps_context(tmp_path):
    exercise = _exercise(tmp_path, "top", "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n")
    state = exercise.state()
    assert [c.number for c in state.context] == [1, 2, 3]
    assert state.context[0].important


def test_triple_slash_marker_counts(tmp_path):
    exercise = _exercise(tmp_path, "doc", "///   I  AM NOT   DONE\n")
    assert not exercise.looks_done()


def test_marker_must_start_a_line(tmp_path):
    exercise = _exercise(tmp_path, "inline", "let x = 1; // I AM NOT DONE\n")
    assert exercise.looks_done()


def test_missing_file_raises(tmp_path):
    exercise = Exercise(name="ghost", path=tmp_path / "ghost.rs", mode=Mode.COMPILE)
    with pytest.raises(FileNotFoundError):
        exercise.state()


def test_display_is_path(tmp_path):
    exercise = _exercise(tmp_path, "shown", FINISHED)
    assert str(exercise) == str(tmp_path / "shown.rs")


def test_temp_file_path_contains_pid():
    path = temp_file_path()
    assert path.startswith("./temp_")
    assert str(os.getpid()) in path
    assert temp_file_path() == path


def test_clean(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path(temp_file_path()).touch()
    exercise = _exercise(tmp_path, "example", PENDING)
    with mock.patch("subprocess.run", side_effect=_fake_run()):
        compiled = exercise.compile()
    compiled.close()
    assert not Path(temp_file_path()).exists()


def test_context_manager_cleans(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = _exercise(tmp_path, "example", PENDING)
    with mock.patch("subprocess.run", side_effect=_fake_run()):
        with exercise.compile() as compiled:
            Path(compiled.binary).touch()
            assert Path(compiled.binary).exists()
    assert not Path(temp_file_path()).exists()


def test_exercise_with_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = _exercise(tmp_path, "exercise_with_output", FINISHED, Mode.TEST)
    calls = []
    fake = _fake_run(stdout=b"THIS TEST TOO SHALL PASS\n", calls=calls)
    with mock.patch("subprocess.run", side_effect=fake):
        with exercise.compile() as compiled:
            out = compiled.run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert out.success
    assert calls[0][:2] == ["rustc", "--test"]
    assert calls[-1][-1] == "--show-output"


def test_failed_run_reports_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = _exercise(tmp_path, "fails", FINISHED)
    with mock.patch("subprocess.run", side_effect=_fake_run()):
        compiled = exercise.compile()
    with mock.patch("subprocess.run", side_effect=_fake_run(returncode=101, stderr=b"panicked")):
        out = compiled.run()
    assert not out.success
    assert out.stderr == "panicked"


def test_compile_failure_raises_and_cleans(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path(temp_file_path()).touch()
    exercise = _exercise(tmp_path, "compFailure", "fn main() {\n    let\n}\n")
    with mock.patch("subprocess.run", side_effect=_fake_run(returncode=1, stderr=b"boom")):
        with pytest.raises(CompilationError) as info:
            exercise.compile()
    assert info.value.output.stderr == "boom"
    assert info.value.exercise is exercise
    assert not Path(temp_file_path()).exists()


def test_clippy_writes_manifest(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "clippy").mkdir(parents=True)
    exercise = _exercise(tmp_path, "clippy1", FINISHED, Mode.CLIPPY)
    calls = []
    with mock.patch("subprocess.run", side_effect=_fake_run(calls=calls)):
        compiled = exercise.compile()
    assert isinstance(compiled, CompiledExercise)
    manifest = (tmp_path / "exercises" / "clippy" / "Cargo.toml").read_text()
    assert 'name = "clippy1"' in manifest
    assert 'path = "clippy1.rs"' in manifest
    assert [call[:2] for call in calls] == [
        ["rustc", str(exercise.path)],
        ["cargo", "clean"],
        ["cargo", "clippy"],
    ]
    assert calls[-1][-4:] == ["-D", "warnings", "-D", "clippy::float_cmp"]


def test_load_exercises(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text(
        '[[exercises]]\nname = "testFailure"\npath = "testFailure.rs"\n'
        'mode = "test"\nhint = "Hello!"\n\n'
        '[[exercises]]\nname = "compSuccess"\npath = "compSuccess.rs"\n'
        'mode = "compile"\nhint = ""\n'
    )
    exercises = load_exercises(info)
    assert [e.name for e in exercises] == ["testFailure", "compSuccess"]
    assert exercises[0].mode is Mode.TEST
    assert exercises[0].hint == "Hello!"
    assert exercises[1].path == Path("compSuccess.rs")


def test_load_exercises_rejects_unknown_mode(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text('[[exercises]]\nname = "x"\npath = "x.rs"\nmode = "lint"\nhint = ""\n')
    with pytest.raises(ValueError):
        load_exercises(info)


def test_load_exercises_rejects_missing_field(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text('[[exercises]]\nname = "x"\nmode = "test"\nhint = ""\n')
    with pytest.raises(ValueError):
        load_exercises(info)