"""Tests for the command line interface."""

from __future__ import annotations

import json

import pytest

from iconshape_codegen import __version__
from iconshape_codegen.cli import create_parser, main
from iconshape_codegen.core import generator
from iconshape_codegen.core.generator import IconGenerator
from iconshape_codegen.core.templates import TemplateEngine
from iconshape_codegen.logging_config import reset_logging
from tests.conftest import NO_VIEWBOX_SVG, write_icon


@pytest.fixture(autouse=True)
def clean_logging():
    yield
    reset_logging()


class TestParser:
    def test_filter_flags_default_to_unset(self):
        args = create_parser().parse_args(["icons"])
        assert args.strip_fill is None
        assert args.g_force_fill_currentcolor is None

    def test_filter_flags(self):
        args = create_parser().parse_args(["icons", "--strip-fill", "--allow-fill-currentcolor"])
        assert args.strip_fill is True
        assert args.allow_fill_currentcolor is True

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMain:
    def test_code_written_to_stdout(self, icon_dir, capsys):
        assert main([str(icon_dir)]) == 0
        out = capsys.readouterr().out
        assert out == IconGenerator().generate(icon_dir).code

    def test_output_file(self, icon_dir, tmp_path, capsys):
        output = tmp_path / "fe.rs"
        assert main([str(icon_dir), "--prefix", "Fe", "-o", str(output)]) == 0

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[Fe] Generated 2 icon(s)" in captured.err
        assert "pub struct FeArrowLeft;" in output.read_text(encoding="utf-8")

    def test_prefix_selects_dialect(self, tmp_path, capsys):
        write_icon(tmp_path, "alert-16.svg")
        write_icon(tmp_path, "alert-24.svg")
        assert main([str(tmp_path), "--prefix", "Go"]) == 0
        out = capsys.readouterr().out
        assert out.count("pub struct") == 1
        assert "pub struct GoAlert;" in out

    def test_explicit_dialect(self, tmp_path, capsys):
        write_icon(tmp_path, "alert-16.svg")
        write_icon(tmp_path, "alert-24.svg")
        assert main([str(tmp_path), "--dialect", "octicons"]) == 0
        assert "pub struct Alert;" in capsys.readouterr().out

    def test_filter_flag_applied(self, icon_dir, capsys):
        write_icon(icon_dir, "filled.svg", '<svg viewBox="0 0 1 1"><path fill="red" d="M0 0"/></svg>')
        assert main([str(icon_dir), "--strip-fill"]) == 0
        assert 'fill: "red"' not in capsys.readouterr().out

    def test_config_file(self, icon_dir, tmp_path, capsys):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"prefix": "Cf", "jobs": 2}), encoding="utf-8")
        assert main([str(icon_dir), "--config", str(config)]) == 0
        assert "pub struct CfAlertCircle;" in capsys.readouterr().out

    def test_verbose_metadata(self, icon_dir, capsys):
        assert main([str(icon_dir), "--verbose"]) == 0
        assert "Icon Count" in capsys.readouterr().err

    def test_warnings_reported(self, tmp_path, capsys):
        write_icon(tmp_path, "a/alert.svg")
        write_icon(tmp_path, "b/alert.svg")
        assert main([str(tmp_path)]) == 0
        assert "Warnings" in capsys.readouterr().err

    def test_list_dialects(self, capsys):
        assert main(["--list-dialects"]) == 0
        out = capsys.readouterr().out
        for key in ("default", "octicons", "material", "ionicons"):
            assert key in out


class TestErrors:
    def test_source_required(self, capsys):
        assert main([]) == 1
        assert "Source directory required" in capsys.readouterr().err

    def test_missing_source(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing")]) == 1
        assert "Generation failed" in capsys.readouterr().err

    def test_unknown_dialect(self, icon_dir, capsys):
        assert main([str(icon_dir), "--dialect", "nope"]) == 1
        assert "Unknown dialect" in capsys.readouterr().err

    def test_invalid_jobs(self, icon_dir, capsys):
        assert main([str(icon_dir), "--jobs", "0"]) == 1
        assert "jobs" in capsys.readouterr().err

    def test_invalid_dialect_in_config_file(self, icon_dir, tmp_path, capsys):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"dialect": 5}), encoding="utf-8")
        assert main([str(icon_dir), "--config", str(config)]) == 1
        assert "'dialect' must be a string" in capsys.readouterr().err

    def test_invalid_output_file_in_config_file(self, icon_dir, tmp_path, capsys):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"output_file": ["a.rs"]}), encoding="utf-8")
        assert main([str(icon_dir), "--config", str(config)]) == 1
        assert "output_file" in capsys.readouterr().err

    def test_broken_template(self, icon_dir, monkeypatch, capsys):
        engine = TemplateEngine()
        engine.add_template("preamble.rs.j2", "{{ missing }}")
        engine.add_template("icon.rs.j2", "{{ icon.name }}")
        monkeypatch.setattr(generator, "create_template_engine", lambda: engine)

        assert main([str(icon_dir)]) == 1
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "preamble.rs.j2" in err

    def test_missing_viewbox_writes_nothing(self, tmp_path, capsys):
        source = tmp_path / "icons"
        write_icon(source, "bad.svg", NO_VIEWBOX_SVG)
        output = tmp_path / "icons.rs"

        assert main([str(source), "-o", str(output)]) == 1
        assert "Generation failed" in capsys.readouterr().err
        assert not output.exists()
