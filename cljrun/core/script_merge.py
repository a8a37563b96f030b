from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Sequence

from cljrun.core.errors import ConfigurationError
from cljrun.core.validation import check_script_paths

LOADER_PREFIX = "run"
LOADER_SUFFIX = ".clj"


def load_directive(path: str) -> str:
    return f'(load-file "{path}")'


def merge_scripts(
    script: str | None,
    scripts: Sequence[str] | None,
    *,
    temp_dir: Path | None = None,
) -> str:
    """Return a single entry path that loads ``script`` followed by ``scripts``.

    With no ``scripts`` the original string comes back untouched. Otherwise a
    fresh ``run*.clj`` loader is written and its path returned. The loader is
    left in place after the run.
    """
    error = check_script_paths(script, scripts)
    if error is not None:
        raise error
    if scripts is None:
        return script

    paths = [script, *scripts]
    try:
        fd, loader_path = tempfile.mkstemp(
            prefix=LOADER_PREFIX,
            suffix=LOADER_SUFFIX,
            dir=str(temp_dir) if temp_dir is not None else None,
        )
        # newline="" keeps os.linesep as written on every platform.
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            for path in paths:
                handle.write(load_directive(path))
                handle.write(os.linesep)
    except OSError as exc:
        detail = str(exc.filename) if exc.filename else None
        raise ConfigurationError(
            code="io_error", message=exc.strerror or str(exc), detail=detail
        ) from exc
    return loader_path
