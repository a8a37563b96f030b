from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from cljrun.core.config import RuntimeConfig
from cljrun.core.settings_model import RunSettings, UserDefaults
from cljrun.core.settings_store import SettingsStore
from cljrun.domain.run_config import BuildContext, RunConfig, make_run_config


@dataclass(frozen=True)
class CliOverrides:
    """Values given on the command line; ``None`` means not given."""

    script: str | None = None
    scripts: list[str] | None = None
    main_class: str | None = None
    args: str | None = None
    source_directories: list[str] | None = None
    output_directory: str | None = None
    classpath_elements: list[str] = field(default_factory=list)


def _first(*values: str | None) -> str | None:
    for value in values:
        if value is not None:
            return value
    return None


def build_run_config(
    overrides: CliOverrides,
    settings: RunSettings,
    runtime: RuntimeConfig,
) -> RunConfig:
    """Pick each option from the CLI, then the settings file, then the environment."""
    return make_run_config(
        script=_first(overrides.script, settings.script, runtime.script),
        scripts=overrides.scripts if overrides.scripts is not None else settings.scripts,
        main_class=_first(overrides.main_class, settings.mainClass, runtime.main_class),
        args=_first(overrides.args, settings.args, runtime.args),
    )


def build_context(
    overrides: CliOverrides,
    store: SettingsStore,
    settings: RunSettings,
    defaults: UserDefaults,
) -> BuildContext:
    if overrides.source_directories is not None:
        source_directories = [Path(item) for item in overrides.source_directories]
    elif settings.sourceDirectories is not None:
        source_directories = [store.resolve_path(item) for item in settings.sourceDirectories]
    else:
        source_directories = [Path(item) for item in defaults.sourceDirectories]

    if overrides.output_directory is not None:
        output_directory = Path(overrides.output_directory)
    elif settings.outputDirectory is not None:
        output_directory = store.resolve_path(settings.outputDirectory)
    else:
        output_directory = Path(defaults.outputDirectory)

    # Classpath elements accumulate: user defaults, project file, then CLI.
    classpath_elements = [
        *defaults.classpathElements,
        *settings.classpathElements,
        *overrides.classpath_elements,
    ]

    return BuildContext(
        source_directories=tuple(source_directories),
        output_directory=output_directory,
        classpath_elements=tuple(classpath_elements),
    )
