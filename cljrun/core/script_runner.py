from __future__ import annotations

from pathlib import Path

from cljrun.core.errors import ConfigurationError, wrap_error
from cljrun.core.logging import get_logger, log_event
from cljrun.core.protocols import RunWithClasspath
from cljrun.core.script_merge import merge_scripts
from cljrun.core.validation import validate_run_config
from cljrun.domain.run_config import (
    CLOJURE_MAIN,
    BuildContext,
    LaunchRequest,
    RunConfig,
    RunMode,
    split_arguments,
)

logger = get_logger("cljrun.runner")


class ScriptRunner:
    """Run Clojure scripts or a main class against a build context."""

    def __init__(
        self,
        context: BuildContext,
        launcher: RunWithClasspath,
        temp_dir: Path | None = None,
    ) -> None:
        self.context = context
        self._launcher = launcher
        self._temp_dir = temp_dir

    def prepare(self, config: RunConfig) -> LaunchRequest:
        """Validate ``config`` and resolve the entry point and arguments.

        In script mode this may write the merged loader file.
        """
        outcome = validate_run_config(config)
        if isinstance(outcome, ConfigurationError):
            raise outcome

        if outcome is RunMode.SCRIPT:
            try:
                path = merge_scripts(
                    config.script, config.scripts, temp_dir=self._temp_dir
                )
            except ConfigurationError:
                raise
            except Exception as exc:
                raise wrap_error(exc, code="io_error") from exc
            logger.debug("Running clojure:run against %s", path)
            arguments = [path, *split_arguments(config.args)]
            return LaunchRequest(entry_point=CLOJURE_MAIN, arguments=tuple(arguments))

        return LaunchRequest(
            entry_point=config.main_class,
            arguments=tuple(split_arguments(config.args)),
        )

    def run(self, config: RunConfig) -> LaunchRequest:
        request = self.prepare(config)
        log_event(
            logger,
            "run_started",
            entry_point=request.entry_point,
            argument_count=len(request.arguments),
        )
        try:
            self._launcher(
                self.context.source_directories,
                self.context.output_directory,
                self.context.classpath_elements,
                request.entry_point,
                list(request.arguments),
            )
        except ConfigurationError:
            raise
        except Exception as exc:
            raise wrap_error(exc, code="launch_failed") from exc
        log_event(logger, "run_finished", entry_point=request.entry_point)
        return request
