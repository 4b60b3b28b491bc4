"""Tests for render modes, format specs and stack snapshots."""

from __future__ import annotations

import pytest

from causerr import DecoratedError, IdentifiedError, Mode, StackTrace, wrap, wrap_with_id
from causerr.config import Settings


class TestRender:
    def test_default_mode(self):
        err = wrap_with_id(0, RuntimeError("err"), "error")
        assert err.render(Mode.DEFAULT) == "#0: error\nerr"

    def test_display_matches_default(self):
        err = wrap_with_id(0, "err", "error")
        assert err.render(Mode.DISPLAY) == err.render(Mode.DEFAULT)

    def test_message_only_heading(self):
        err = wrap("err", "error")
        assert err.render("default") == "error\nerr"
        assert err.render("quoted") == 'error\n"err"'

    def test_quoted_mode_escapes_cause(self):
        err = wrap_with_id(5, 'say "hi"\n', "error")
        assert err.render(Mode.QUOTED) == '#5: error\n"say \\"hi\\"\\n"'

    def test_detailed_mode_includes_stack(self):
        err = wrap_with_id(0, "err", "error")
        out = err.render(Mode.DETAILED)
        assert out.startswith("#0: error\nerr\n")
        assert "test_formatting.py" in out
        assert "test_detailed_mode_includes_stack" in out

    def test_string_mode_names(self):
        err = wrap_with_id(1, "err", "error")
        for mode in Mode:
            assert err.render(mode.value) == err.render(mode)

    @pytest.mark.parametrize("mode", ["bogus", "", "DETAILED", 3])
    def test_unknown_mode_renders_nothing(self, mode):
        assert wrap_with_id(1, "err", "error").render(mode) == ""


class TestFormatSpec:
    def test_specs_map_to_modes(self):
        err = wrap_with_id(2, "err", "error")
        assert f"{err:v}" == err.render(Mode.DEFAULT)
        assert f"{err:s}" == err.render(Mode.DISPLAY)
        assert f"{err:q}" == err.render(Mode.QUOTED)
        assert f"{err:+v}".startswith("#2: error\nerr\n")

    def test_empty_spec_is_str(self):
        err = wrap_with_id(2, "disk full", "cannot save file")
        assert f"{err}" == "disk full (2: cannot save file)"
        assert format(err) == str(err)

    def test_plus_flag_only_changes_v(self):
        err = wrap_with_id(3, "disk full", "m")
        assert format(err, "+s") == err.render(Mode.DISPLAY)
        assert format(err, "+q") == err.render(Mode.QUOTED)
        assert format(err, "+q") == '#3: m\n"disk full"'

    def test_unknown_spec_renders_nothing(self):
        assert format(wrap("err", "error"), "x") == ""


class TestStackTrace:
    def test_innermost_frame_is_call_site(self):
        err = wrap("err", "error")
        assert err.stack.frames[-1].name == "test_innermost_frame_is_call_site"

    def test_innermost_frame_with_id(self):
        err = wrap_with_id(1, "err", "error")
        assert err.stack.frames[-1].name == "test_innermost_frame_with_id"

    def test_innermost_frame_for_direct_construction(self):
        err = IdentifiedError(1, "err", "error")
        assert err.stack.frames[-1].name == "test_innermost_frame_for_direct_construction"

    def test_subclass_passing_stack_keeps_call_site(self):
        class SaveError(DecoratedError):
            def __init__(self, cause):
                super().__init__(cause, "cannot save file", stack=StackTrace.capture(skip=1))

        err = SaveError("disk full")
        assert err.stack.frames[-1].name == "test_subclass_passing_stack_keeps_call_site"
        assert str(err) == "disk full (cannot save file)"

    def test_stack_limit_from_settings(self, monkeypatch):
        monkeypatch.setattr("causerr.core.settings", Settings(stack_limit=2))
        err = wrap("err", "error")
        assert len(err.stack) == 2
        assert err.stack.frames[-1].name == "test_stack_limit_from_settings"

    def test_non_positive_limit_keeps_everything(self):
        full = StackTrace.capture()
        unlimited = StackTrace.capture(limit=0)
        assert len(unlimited) == len(full)

    def test_empty_stack_formats_to_empty_string(self):
        assert StackTrace().format() == ""
