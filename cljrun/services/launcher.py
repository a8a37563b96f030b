from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Sequence

from cljrun.core.logging import get_logger

logger = get_logger("cljrun.launcher")


def build_classpath(
    source_directories: Sequence[Path],
    output_directory: Path,
    classpath_elements: Sequence[str],
) -> str:
    entries = [str(path) for path in source_directories]
    entries.append(str(output_directory))
    entries.extend(str(element) for element in classpath_elements)
    return os.pathsep.join(entry for entry in entries if entry)


class JavaLauncher:
    """Start a JVM on the assembled classpath and wait for it to exit."""

    def __init__(
        self,
        java_executable: str = "java",
        vm_args: Sequence[str] = (),
        cwd: Path | None = None,
    ) -> None:
        self._java_executable = java_executable
        self._vm_args = list(vm_args)
        self._cwd = cwd

    def build_command(
        self,
        source_directories: Sequence[Path],
        output_directory: Path,
        classpath_elements: Sequence[str],
        entry_point: str,
        arguments: Sequence[str],
    ) -> list[str]:
        classpath = build_classpath(
            source_directories, output_directory, classpath_elements
        )
        return [
            self._java_executable,
            *self._vm_args,
            "-cp",
            classpath,
            entry_point,
            *arguments,
        ]

    def __call__(
        self,
        source_directories: Sequence[Path],
        output_directory: Path,
        classpath_elements: Sequence[str],
        entry_point: str,
        arguments: Sequence[str],
    ) -> None:
        command = self.build_command(
            source_directories,
            output_directory,
            classpath_elements,
            entry_point,
            arguments,
        )
        logger.debug("Launching %s", " ".join(command))
        try:
            subprocess.run(command, cwd=self._cwd, check=True)
        except FileNotFoundError as exc:
            raise RuntimeError(
                f"Java executable not found: {self._java_executable}"
            ) from exc
        except subprocess.CalledProcessError as exc:
            raise RuntimeError(
                f"{entry_point} exited with code {exc.returncode}"
            ) from exc
