"""Tests for shared CLI helpers."""
from pathlib import Path

import pytest

from rig import cli_support
from rig.cli_support import collect_params, get_output_dir, parse_param_assignments


class TestParseParamAssignments:

    def test_equals_and_colon(self):
        assert parse_param_assignments(["name=demo", "package:com.example"]) == {
            "name": "demo",
            "package": "com.example",
        }

    def test_value_may_contain_separator(self):
        assert parse_param_assignments(["url=http://x/?a=b"]) == {"url": "http://x/?a=b"}

    def test_empty_value(self):
        assert parse_param_assignments(["flag="]) == {"flag": ""}

    def test_missing_separator(self):
        with pytest.raises(ValueError):
            parse_param_assignments(["novalue"])


class TestGetOutputDir:

    def test_absolute_output(self, tmp_path):
        assert get_output_dir(str(tmp_path / "Out Dir"), "ignored") == tmp_path / "Out Dir"

    def test_relative_output_is_normalized(self):
        assert get_output_dir("My Output", "ignored", cwd=Path("/work")) == Path("/work/my-output")

    def test_defaults_to_project_name(self):
        assert get_output_dir(None, "Rig Generated Project", cwd=Path("/work")) == Path(
            "/work/rig-generated-project"
        )


class TestCollectParams:

    def test_prompts_each_parameter(self, monkeypatch):
        answers = iter(["New Name", "  "])
        asked = []

        def fake_prompt(text, default=None, show_default=True):
            asked.append((text, default))
            return next(answers)

        monkeypatch.setattr(cli_support.typer, "prompt", fake_prompt)

        params = collect_params({"name": "Old", "package": "com.example"})

        assert params == {"name": "New Name", "package": "com.example"}
        assert asked == [("name", "Old"), ("package", "com.example")]

    def test_name_override_skips_prompt(self, monkeypatch):
        asked = []

        def fake_prompt(text, default=None, show_default=True):
            asked.append(text)
            return default

        monkeypatch.setattr(cli_support.typer, "prompt", fake_prompt)

        params = collect_params({"name": "Old", "version": "0.1.0"}, name="Given")

        assert params == {"name": "Given", "version": "0.1.0"}
        assert asked == ["version"]
