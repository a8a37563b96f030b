from __future__ import annotations

from pathlib import Path
from typing import Sequence

from cljrun.core.errors import ConfigurationError
from cljrun.domain.run_config import RunConfig, RunMode


def check_script_paths(
    script: str | None,
    scripts: Sequence[str] | None,
) -> ConfigurationError | None:
    """Check script inputs before any loader file is written.

    A lone ``script`` is accepted as-is, so classpath locators such as
    ``@/build/run.clj`` pass through. Once ``scripts`` is given, every entry,
    including ``script``, must name an existing path.
    """
    if script is None or not script.strip():
        return ConfigurationError(code="script_undefined", message="<script> is undefined")
    if scripts is None:
        return None
    if len(scripts) == 0:
        return ConfigurationError(
            code="scripts_empty",
            message="<scripts> is defined but has no <script> entries",
        )
    for entry in [script, *scripts]:
        if entry is None or not entry.strip():
            return ConfigurationError(
                code="script_blank", message="<script> entry cannot be empty"
            )
        if not Path(entry).exists():
            return ConfigurationError(
                code="script_missing", message=f"{entry} cannot be found"
            )
    return None


def validate_run_config(config: RunConfig) -> RunMode | ConfigurationError:
    if config.script is not None and config.main_class is not None:
        return ConfigurationError(
            code="both_modes",
            message="Specify either 'script' or 'mainClass' - not both.",
        )
    if config.script is None and config.main_class is None:
        return ConfigurationError(
            code="no_mode", message="Specify either 'script' or 'mainClass'."
        )
    if config.main_class is not None:
        return RunMode.MAIN_CLASS
    error = check_script_paths(config.script, config.scripts)
    if error is not None:
        return error
    return RunMode.SCRIPT
