"""
Shared fixtures for cljrun tests.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from cljrun.domain.run_config import BuildContext


class RecordingLauncher:
    """Stands in for the JVM launcher and remembers each call."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[dict] = []
        self._error = error

    def __call__(
        self,
        source_directories,
        output_directory,
        classpath_elements,
        entry_point,
        arguments,
    ) -> None:
        self.calls.append(
            {
                "source_directories": tuple(source_directories),
                "output_directory": output_directory,
                "classpath_elements": tuple(classpath_elements),
                "entry_point": entry_point,
                "arguments": list(arguments),
            }
        )
        if self._error is not None:
            raise self._error


@pytest.fixture
def launcher():
    return RecordingLauncher()


@pytest.fixture
def build_context(tmp_path):
    return BuildContext(
        source_directories=(tmp_path / "src",),
        output_directory=tmp_path / "classes",
        classpath_elements=("lib/clojure.jar",),
    )


@pytest.fixture
def script_files(tmp_path):
    """Create a.clj and b.clj and return their paths as strings."""
    paths = []
    for name in ("a.clj", "b.clj"):
        path = tmp_path / name
        path.write_text(f'(println "{name}")\n', encoding="utf-8")
        paths.append(str(path))
    return paths


@pytest.fixture
def loader_dir(tmp_path) -> Path:
    path = tmp_path / "loaders"
    path.mkdir()
    return path


@pytest.fixture
def make_launcher():
    return RecordingLauncher
