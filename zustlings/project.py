"""Generating a rust-project.json so rust-analyzer understands the exercises."""

from __future__ import annotations

import glob
import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One standalone crate entry in rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """The content of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [asdict(crate) for crate in self.crates],
        }

    def write_to_disk(self, path: str | os.PathLike = "./rust-project.json") -> None:
        """Write the project description as compact JSON."""
        data = json.dumps(self.to_dict(), separators=(",", ":"))
        Path(path).write_text(data, encoding="utf-8")

    def _add_path(self, path: str) -> None:
        _, dot, extension = path.partition(".")
        if dot and extension == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root: str | os.PathLike = "exercises") -> None:
        """Add a crate for every .rs file found below ``root``."""
        pattern = os.path.join(os.fspath(root), "**", "*")
        for path in sorted(glob.glob(pattern, recursive=True, include_hidden=True)):
            self._add_path(path)

    def get_sysroot_src(self) -> None:
        """Find the standard library sources, from RUST_SRC_PATH or rustc."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return

        result = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        output = (result.stdout or b"").decode("utf-8", errors="replace")
        words = output.split()
        toolchain = words[0] if words else output

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )