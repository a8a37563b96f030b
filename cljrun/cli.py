from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Sequence

from platformdirs import user_config_path

from cljrun import __version__
from cljrun.core.config import get_runtime_config
from cljrun.core.errors import ConfigurationError, format_error
from cljrun.core.logging import configure_logging
from cljrun.core.script_runner import ScriptRunner
from cljrun.core.settings_store import (
    PROJECT_SETTINGS_FILENAME,
    USER_SETTINGS_FILENAME,
    SettingsStore,
)
from cljrun.services.launcher import JavaLauncher
from cljrun.services.run_setup import CliOverrides, build_context, build_run_config

APP_NAME = "cljrun"
APP_AUTHOR = "cljrun"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cljrun",
        description="Run Clojure scripts or a main class on the project classpath.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Print version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser(
        "run",
        help="Run a script (or several) through clojure.main, or a main class.",
    )
    run_parser.add_argument(
        "--config",
        help=f"Project settings file (default: ./{PROJECT_SETTINGS_FILENAME}).",
    )
    run_parser.add_argument(
        "--script",
        help="Main script path, or an @-prefixed classpath resource.",
    )
    run_parser.add_argument(
        "--scripts",
        nargs="*",
        help="Additional script files loaded after --script. Each must exist.",
    )
    run_parser.add_argument(
        "--main-class",
        dest="main_class",
        help="Fully qualified name of the class to run instead of a script.",
    )
    run_parser.add_argument(
        "--args",
        help="Space separated arguments passed to the script or main class.",
    )
    run_parser.add_argument(
        "--source-dir",
        dest="source_directories",
        action="append",
        help="Source directory to put on the classpath (repeat for multiple).",
    )
    run_parser.add_argument(
        "--output-dir",
        dest="output_directory",
        help="Compiled classes directory (default: target/classes).",
    )
    run_parser.add_argument(
        "--classpath",
        dest="classpath_elements",
        action="append",
        default=[],
        help="Extra classpath element (repeat for multiple).",
    )
    run_parser.add_argument(
        "--java",
        dest="java_executable",
        help="Java executable used to launch the program.",
    )
    run_parser.add_argument(
        "--log-level",
        dest="log_level",
        help="Logging level (default from CLJRUN_LOG_LEVEL, else info).",
    )
    run_parser.set_defaults(handler=handle_run)

    config_parser = subparsers.add_parser(
        "print-config",
        help="Print resolved runtime config and settings files to stdout.",
    )
    config_parser.add_argument(
        "--config",
        help=f"Project settings file (default: ./{PROJECT_SETTINGS_FILENAME}).",
    )
    config_parser.set_defaults(handler=handle_print_config)

    return parser


def _user_settings_path() -> Path:
    return Path(user_config_path(APP_NAME, APP_AUTHOR)) / USER_SETTINGS_FILENAME


def _project_settings_path(value: str | None) -> Path:
    if value:
        return Path(value).expanduser()
    return Path.cwd() / PROJECT_SETTINGS_FILENAME


def handle_run(args: argparse.Namespace) -> None:
    runtime = get_runtime_config()
    configure_logging(
        level=args.log_level or runtime.log_level,
        format_name=runtime.log_format,
    )

    overrides = CliOverrides(
        script=args.script,
        scripts=args.scripts,
        main_class=args.main_class,
        args=args.args,
        source_directories=args.source_directories,
        output_directory=args.output_directory,
        classpath_elements=list(args.classpath_elements),
    )

    try:
        store = SettingsStore(_project_settings_path(args.config))
        settings = store.load()
        defaults = SettingsStore(_user_settings_path()).load_user_defaults()
        config = build_run_config(overrides, settings, runtime)
        context = build_context(overrides, store, settings, defaults)
        launcher = JavaLauncher(
            java_executable=args.java_executable or runtime.java_executable,
            vm_args=runtime.vm_arg_list(),
        )
        ScriptRunner(context, launcher).run(config)
    except ConfigurationError as exc:
        raise SystemExit(format_error(exc)) from exc


def handle_print_config(args: argparse.Namespace) -> None:
    project_path = _project_settings_path(args.config)
    user_path = _user_settings_path()
    try:
        settings = SettingsStore(project_path).load()
        defaults = SettingsStore(user_path).load_user_defaults()
    except ConfigurationError as exc:
        raise SystemExit(format_error(exc)) from exc
    payload = {
        "runtime": get_runtime_config().model_dump(),
        "settings_path": str(project_path),
        "settings": settings.model_dump(),
        "user_settings_path": str(user_path),
        "user_settings": defaults.model_dump(),
    }
    print(json.dumps(payload, indent=2))


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "handler", None) is None:
        parser.print_help()
        raise SystemExit(2)

    args.handler(args)


if __name__ == "__main__":
    main()
