"""
Tests for pure run configuration checks and argument splitting.
"""
from __future__ import annotations

import pytest

from cljrun.core.errors import ConfigurationError, format_error, wrap_error
from cljrun.core.validation import validate_run_config
from cljrun.domain.run_config import RunMode, make_run_config, split_arguments


class TestValidateRunConfig:

    @pytest.mark.parametrize(
        "extra",
        [{}, {"scripts": []}, {"scripts": ["x.clj"]}, {"args": "a b"}],
    )
    def test_both_modes_rejected(self, extra):
        config = make_run_config(script="a.clj", main_class="com.example.Main", **extra)
        outcome = validate_run_config(config)
        assert isinstance(outcome, ConfigurationError)
        assert outcome.code == "both_modes"
        assert "not both" in outcome.message

    def test_no_mode_rejected(self):
        outcome = validate_run_config(make_run_config(args="x"))
        assert isinstance(outcome, ConfigurationError)
        assert outcome.code == "no_mode"
        assert outcome.message == "Specify either 'script' or 'mainClass'."

    def test_script_mode(self):
        assert validate_run_config(make_run_config(script="a.clj")) is RunMode.SCRIPT

    def test_main_class_mode(self):
        config = make_run_config(main_class="com.example.Main")
        assert validate_run_config(config) is RunMode.MAIN_CLASS

    def test_empty_script_counts_as_script_mode_but_fails(self):
        outcome = validate_run_config(make_run_config(script=""))
        assert isinstance(outcome, ConfigurationError)
        assert outcome.code == "script_undefined"

    def test_missing_extra_script(self, tmp_path, script_files):
        missing = str(tmp_path / "gone.clj")
        outcome = validate_run_config(
            make_run_config(script=script_files[0], scripts=[missing])
        )
        assert isinstance(outcome, ConfigurationError)
        assert outcome.code == "script_missing"
        assert missing in outcome.message


class TestSplitArguments:

    def test_split_on_spaces(self):
        assert split_arguments("foo bar baz") == ["foo", "bar", "baz"]

    def test_none_gives_empty_list(self):
        assert split_arguments(None) == []

    def test_no_quoting(self):
        assert split_arguments('"a b" c') == ['"a', 'b"', "c"]

    def test_double_space_keeps_empty_entry(self):
        assert split_arguments("a  b") == ["a", "", "b"]

    def test_trailing_spaces_dropped(self):
        assert split_arguments("a b ") == ["a", "b"]
        assert split_arguments("foo bar  ") == ["foo", "bar"]

    def test_leading_space_kept(self):
        assert split_arguments(" a") == ["", "a"]

    def test_only_spaces_gives_empty_list(self):
        assert split_arguments(" ") == []

    def test_empty_string_gives_one_empty_argument(self):
        assert split_arguments("") == [""]


class TestErrors:

    def test_wrap_keeps_identity(self):
        error = ConfigurationError(code="no_mode", message="nope")
        assert wrap_error(error, code="launch_failed") is error

    def test_wrap_other_exception_keeps_message(self):
        wrapped = wrap_error(RuntimeError("boom"), code="launch_failed")
        assert wrapped.code == "launch_failed"
        assert wrapped.message == "boom"

    def test_format_error(self):
        error = ConfigurationError(code="io_error", message="Disk full", detail="/tmp/x")
        assert format_error(error) == "[io_error] Disk full (/tmp/x)"
