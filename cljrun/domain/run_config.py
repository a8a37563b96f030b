from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Sequence

CLOJURE_MAIN = "clojure.main"


class RunMode(Enum):
    SCRIPT = "script"
    MAIN_CLASS = "main_class"


@dataclass(frozen=True)
class RunConfig:
    """Options for a single run, resolved once before anything executes."""

    script: str | None = None
    scripts: tuple[str, ...] | None = None
    main_class: str | None = None
    args: str | None = None


@dataclass(frozen=True)
class BuildContext:
    """Classpath inputs supplied by the caller."""

    source_directories: tuple[Path, ...] = ()
    output_directory: Path = Path("target/classes")
    classpath_elements: tuple[str, ...] = ()


@dataclass(frozen=True)
class LaunchRequest:
    entry_point: str
    arguments: tuple[str, ...]


def split_arguments(args: str | None) -> list[str]:
    # Single-space split with no quoting. Leading and inner empty entries are
    # kept, trailing ones dropped; "" still yields one empty argument.
    if args is None:
        return []
    parts = args.split(" ")
    if args == "":
        return parts
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def make_run_config(
    *,
    script: str | None = None,
    scripts: Sequence[str] | None = None,
    main_class: str | None = None,
    args: str | None = None,
) -> RunConfig:
    return RunConfig(
        script=script,
        scripts=tuple(scripts) if scripts is not None else None,
        main_class=main_class,
        args=args,
    )
