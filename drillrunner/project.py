"""Generation of rust-project.json so rust-analyzer understands the exercises."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def path_to_json(self, path: str) -> None:
        """Add a crate when the text after the first dot of path is 'rs'."""
        _, sep, ext = path.partition(".")
        if sep and ext == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root: str | os.PathLike = "exercises") -> None:
        """Add a crate for every .rs file below root."""
        for entry in sorted(Path(root).glob("**/*")):
            self.path_to_json(str(entry))

    def get_sysroot_src(self) -> None:
        """Ask rustc for the toolchain and derive the standard library sources."""
        completed = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        text = completed.stdout.decode("utf-8", errors="replace")
        parts = text.split()
        toolchain = parts[0] if parts else text
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(
            Path(toolchain).joinpath("lib", "rustlib", "src", "rust", "library")
        )

    def to_dict(self) -> dict:
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [asdict(crate) for crate in self.crates],
        }

    def write_to_disk(self, path: str | os.PathLike = "./rust-project.json") -> None:
        """Write the project as compact JSON."""
        payload = json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
        Path(path).write_text(payload, encoding="utf-8")