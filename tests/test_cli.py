"""Tests for the f7ui CLI."""

import pytest
from typer.testing import CliRunner

from f7ui import __version__
from f7ui.cli import typer_app
from f7ui.cli.utils import UILoadError, load_ui, parse_ui_ref

runner = CliRunner()

UI_MODULE = """
from f7ui import f7_navbar, f7_single_layout

ui = f7_single_layout("Hello from the app", navbar=f7_navbar(title="Demo"))
"""

PAGE_MODULE = """
from f7ui import f7_navbar, f7_page, f7_single_layout


def ui():
    return f7_page(
        f7_single_layout("Built page", navbar=f7_navbar(title="Demo")),
        title="Own title",
    )
"""


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A working directory with importable UI modules."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.syspath_prepend(str(tmp_path))
    return tmp_path


def write_module(project, name, source):
    (project / f"{name}.py").write_text(source)
    return name


def test_version():
    result = runner.invoke(typer_app, ["--version"])
    assert result.exit_code == 0
    assert f"f7ui {__version__}" in result.output


def test_colors():
    result = runner.invoke(typer_app, ["colors"])
    assert result.exit_code == 0
    assert result.output.split() == [
        "red",
        "green",
        "blue",
        "pink",
        "yellow",
        "orange",
        "purple",
        "deeppurple",
        "lightblue",
        "teal",
        "lime",
        "deeporange",
        "gray",
        "white",
        "black",
    ]


class TestRender:
    def test_render_to_stdout(self, project):
        module = write_module(project, "cli_stdout_app", UI_MODULE)
        result = runner.invoke(typer_app, ["render", f"{module}:ui"])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("<!DOCTYPE html>")
        assert "Hello from the app" in result.output

    def test_config_file_is_applied(self, project):
        module = write_module(project, "cli_config_app", UI_MODULE)
        (project / "f7ui.yaml").write_text("title: From config\ninit:\n  theme: dark\n")
        result = runner.invoke(typer_app, ["render", f"{module}:ui"])
        assert result.exit_code == 0, result.output
        assert "<title>From config</title>" in result.output
        assert "theme-dark" in result.output

    def test_explicit_config_path(self, project):
        module = write_module(project, "cli_explicit_app", UI_MODULE)
        (project / "other.yaml").write_text("title: Other\n")
        result = runner.invoke(typer_app, ["render", f"{module}:ui", "-c", "other.yaml"])
        assert result.exit_code == 0, result.output
        assert "<title>Other</title>" in result.output

    def test_page_is_not_wrapped(self, project):
        """A callable returning a full page is rendered as is."""
        module = write_module(project, "cli_page_app", PAGE_MODULE)
        (project / "f7ui.yaml").write_text("title: From config\n")
        result = runner.invoke(typer_app, ["render", f"{module}:ui"])
        assert result.exit_code == 0, result.output
        assert "<title>Own title</title>" in result.output
        assert result.output.count("<html>") == 1

    def test_write_output_and_assets(self, project):
        module = write_module(project, "cli_output_app", UI_MODULE)
        output = project / "www" / "index.html"
        result = runner.invoke(
            typer_app, ["render", f"{module}:ui", "-o", str(output), "--copy-assets"]
        )
        assert result.exit_code == 0, result.output
        assert "Wrote page to" in result.output
        assert output.read_text().startswith("<!DOCTYPE html>")
        assert (project / "www" / "f7ui-assets" / "f7ui-bindings.js").exists()

    def test_copy_assets_needs_output(self, project):
        module = write_module(project, "cli_noout_app", UI_MODULE)
        result = runner.invoke(typer_app, ["render", f"{module}:ui", "--copy-assets"])
        assert result.exit_code == 1

    def test_missing_config_file(self, project):
        module = write_module(project, "cli_missing_cfg_app", UI_MODULE)
        result = runner.invoke(typer_app, ["render", f"{module}:ui", "-c", "nope.yaml"])
        assert result.exit_code == 1

    def test_invalid_config(self, project):
        module = write_module(project, "cli_bad_cfg_app", UI_MODULE)
        (project / "f7ui.yaml").write_text("init:\n  skin: windows\n")
        result = runner.invoke(typer_app, ["render", f"{module}:ui"])
        assert result.exit_code == 1

    def test_unknown_module(self, project):
        result = runner.invoke(typer_app, ["render", "no_such_module_xyz:ui"])
        assert result.exit_code == 1


# =============================================================================
# UI loading
# =============================================================================


def test_parse_ui_ref():
    assert parse_ui_ref("app:ui") == ("app", "ui")
    assert parse_ui_ref("pkg.app:build") == ("pkg.app", "build")
    for ref in ["app", "app:", ":ui"]:
        with pytest.raises(UILoadError, match="MODULE:ATTR"):
            parse_ui_ref(ref)


def test_load_ui_missing_attribute(project):
    module = write_module(project, "cli_attr_app", UI_MODULE)
    with pytest.raises(UILoadError, match="no attribute 'page'"):
        load_ui(f"{module}:page", cwd=project)


def test_load_ui_calls_factories(project):
    module = write_module(project, "cli_factory_app", PAGE_MODULE)
    page = load_ui(f"{module}:ui", cwd=project)
    assert page.name == "html"
