from pathlib import Path
from typing import Protocol, Sequence


class RunWithClasspath(Protocol):
    def __call__(
        self,
        source_directories: Sequence[Path],
        output_directory: Path,
        classpath_elements: Sequence[str],
        entry_point: str,
        arguments: Sequence[str],
    ) -> None: ...
