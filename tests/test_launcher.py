"""Tests for the selection boundary, rendering and CLI."""

import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import Mock, patch

import typer
from typer.testing import CliRunner

from desktop_catalog import cli
from desktop_catalog.cache import CatalogCache
from desktop_catalog.config import Config
from desktop_catalog.launcher import (
    ApplicationNotFound,
    Launcher,
    annotate_comment,
    print_command,
    spawn_entry,
)
from desktop_catalog.models import AppEntry
from desktop_catalog.output.render import render_listing
from tests.helpers import app_body, write_entry


class LauncherTestCase(unittest.TestCase):
    """Fixture with one visible and one hidden entry."""
    
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name) / "applications"
        write_entry(self.dir, "editor.desktop", app_body(name="editor", exec_line="editor %F", Comment="Edit text"))
        write_entry(self.dir, "browser.desktop", app_body(name="Browser", exec_line="browser %u"))
        write_entry(self.dir, "daemon.desktop", app_body(name="Daemon", exec_line="daemon", NoDisplay="true"))
        self.cache = CatalogCache([self.dir])
    
    def tearDown(self):
        self.tmp.cleanup()


class TestLauncher(LauncherTestCase):
    """Test listing and running entries."""
    
    def test_list_apps_excludes_hidden(self):
        """Test that hidden entries are left out by default."""
        apps = Launcher(self.cache).list_apps()
        self.assertEqual(list(apps), ["Browser", "editor"])
    
    def test_list_apps_include_hidden(self):
        """Test that include_hidden returns everything, sorted by name."""
        apps = Launcher(self.cache).list_apps(include_hidden=True)
        self.assertEqual(list(apps), ["Browser", "Daemon", "editor"])
        self.assertFalse(apps["Daemon"].visible)
    
    def test_run_selected_uses_action(self):
        """Test that the pluggable action receives the entry."""
        action = Mock()
        entry = Launcher(self.cache, action=action).run_selected("editor")
        action.assert_called_once_with(entry)
        self.assertEqual(entry.exec_template, "editor %F")
    
    def test_run_selected_hidden_entry(self):
        """Test that hidden entries can still be run by name."""
        action = Mock()
        Launcher(self.cache, action=action).run_selected("Daemon")
        action.assert_called_once()
    
    def test_run_selected_unknown(self):
        """Test that an unknown name raises ApplicationNotFound."""
        action = Mock()
        with self.assertRaises(ApplicationNotFound) as ctx:
            Launcher(self.cache, action=action).run_selected("Nope")
        self.assertIsInstance(ctx.exception, LookupError)
        self.assertEqual(ctx.exception.name, "Nope")
        action.assert_not_called()
    
    def test_action_failure_propagates(self):
        """Test that launch failures reach the caller unchanged."""
        action = Mock(side_effect=OSError("cannot start"))
        with self.assertRaises(OSError):
            Launcher(self.cache, action=action).run_selected("editor")
        action.assert_called_once()
    
    def test_custom_annotation(self):
        """Test that the annotation strategy is replaceable."""
        launcher = Launcher(self.cache, annotate=lambda entry: entry.exec_template.upper())
        self.assertEqual(launcher.annotate(launcher.list_apps()["Browser"]), "BROWSER %U")
    
    def test_from_config(self):
        """Test building a launcher from configuration."""
        config = Config(application_dirs=[str(self.dir)], action="print")
        launcher = Launcher.from_config(config)
        self.assertIs(launcher.action, print_command)
        self.assertEqual(launcher.cache.search_path, [str(self.dir)])
        self.assertIn("Browser", launcher.list_apps())


class TestActions(unittest.TestCase):
    """Test the built-in action and annotation functions."""
    
    def test_spawn_entry(self):
        """Test that the default action spawns the synthesized command."""
        entry = AppEntry(display_name="App", exec_template="app %U --flag", working_dir="/srv")
        with patch("desktop_catalog.launcher.spawn") as spawn:
            spawn_entry(entry)
        spawn.assert_called_once_with("app --flag", cwd="/srv")
    
    def test_print_command(self):
        """Test that the print action writes the command line."""
        entry = AppEntry(display_name="App", exec_template="app %f -x")
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            print_command(entry)
        self.assertEqual(buffer.getvalue(), "app -x\n")
    
    def test_annotate_comment(self):
        """Test the default annotation."""
        self.assertEqual(annotate_comment(AppEntry(display_name="A", exec_template="a", comment="Hi")), "Hi")
        self.assertEqual(annotate_comment(AppEntry(display_name="A", exec_template="a")), "")


class TestRender(unittest.TestCase):
    """Test listing output."""
    
    def test_render_listing(self):
        """Test that names and annotations appear in the table."""
        apps = {
            "Editor": AppEntry(display_name="Editor", exec_template="e", comment="[b]Edit[/b]"),
            "Daemon": AppEntry(display_name="Daemon", exec_template="d", visible=False),
        }
        output = render_listing(apps, {"Editor": "[b]Edit[/b]"}, color=False)
        self.assertIn("Editor", output)
        self.assertIn("[b]Edit[/b]", output)
        self.assertIn("Daemon (hidden)", output)
    
    def test_render_empty(self):
        """Test output for an empty catalog."""
        self.assertIn("No applications found", render_listing({}, {}, color=False))


class TestCli(LauncherTestCase):
    """Test the command line front-end."""
    
    def setUp(self):
        super().setUp()
        self.app = typer.Typer()
        self.app.command()(cli.run)
        self.runner = CliRunner()
        self.config = Config(application_dirs=[str(self.dir)])
        patcher = patch("desktop_catalog.cli.load_config", return_value=self.config)
        patcher.start()
        self.addCleanup(patcher.stop)
        logging_patcher = patch("desktop_catalog.cli.configure_logging")
        logging_patcher.start()
        self.addCleanup(logging_patcher.stop)
    
    def test_list(self):
        """Test listing visible applications."""
        result = self.runner.invoke(self.app, [])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Browser", result.output)
        self.assertIn("Edit text", result.output)
        self.assertNotIn("Daemon", result.output)
    
    def test_list_include_hidden(self):
        """Test that --include-hidden shows hidden entries."""
        result = self.runner.invoke(self.app, ["--include-hidden"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Daemon", result.output)
    
    def test_run_selected(self):
        """Test launching an application by name."""
        with patch("desktop_catalog.launcher.spawn") as spawn:
            result = self.runner.invoke(self.app, ["Browser"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(spawn.call_args.args[0], "browser")
    
    def test_unknown_application(self):
        """Test exit code for an unknown name."""
        result = self.runner.invoke(self.app, ["Nope"])
        self.assertEqual(result.exit_code, 2)
    
    def test_launch_failure(self):
        """Test exit code when the process cannot be started."""
        with patch("desktop_catalog.launcher.spawn", side_effect=OSError("boom")):
            result = self.runner.invoke(self.app, ["Browser"])
        self.assertEqual(result.exit_code, 3)


if __name__ == "__main__":
    unittest.main()
