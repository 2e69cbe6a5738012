import json
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from foldergen.cli import app


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_generate_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            result = self.runner.invoke(app, ["generate", td])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("Success", result.output)

            assets = Path(td)
            self.assertTrue((assets / "Client" / "Scripts" / "RemoveMe.txt").is_file())
            self.assertTrue((assets / "Plugins" / "RemoveMe.txt").is_file())

    def test_generate_selected_without_placeholder(self):
        with tempfile.TemporaryDirectory() as td:
            result = self.runner.invoke(
                app, ["generate", td, "--root", "", "--categories", "scripts,fonts", "--placeholder", ""]
            )
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertTrue((Path(td) / "Scripts").is_dir())
            self.assertTrue((Path(td) / "Fonts").is_dir())
            self.assertEqual(list((Path(td) / "Scripts").iterdir()), [])
            self.assertFalse((Path(td) / "Images").exists())

    def test_empty_categories_is_noop(self):
        with tempfile.TemporaryDirectory() as td:
            result = self.runner.invoke(app, ["generate", td, "--categories", ""])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("Nothing selected", result.output)
            self.assertEqual(list(Path(td).iterdir()), [])

    def test_unknown_category(self):
        with tempfile.TemporaryDirectory() as td:
            result = self.runner.invoke(app, ["generate", td, "--categories", "Textures"])
            self.assertEqual(result.exit_code, 2)
            self.assertEqual(list(Path(td).iterdir()), [])

    def test_failure_exit_code(self):
        with tempfile.TemporaryDirectory() as td:
            (Path(td) / "Client").write_text("in the way", encoding="utf-8")
            result = self.runner.invoke(app, ["generate", td, "--categories", "Scripts"])
            self.assertEqual(result.exit_code, 1)
            self.assertIn("Error", result.output)

    def test_dry_run_touches_nothing(self):
        with tempfile.TemporaryDirectory() as td:
            result = self.runner.invoke(app, ["generate", td, "--categories", "Images", "--dry-run"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("[placeholder]", result.output)
            self.assertIn("7 action(s)", result.output)
            self.assertEqual(list(Path(td).iterdir()), [])

    def test_settings_file_roundtrip(self):
        with tempfile.TemporaryDirectory() as td, tempfile.TemporaryDirectory() as cfg:
            settings = Path(cfg) / "nested" / "settings.json"

            # A missing settings file starts from defaults and gets created on save.
            result = self.runner.invoke(
                app,
                ["generate", td, "--root", "Game", "--categories", "Sounds",
                 "--no-placeholder", "--settings", str(settings), "--save-settings"],
            )
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertTrue(settings.is_file())
            self.assertIn("Settings saved", result.output)

            # Second run takes every option from the saved file.
            result = self.runner.invoke(app, ["generate", td, "--settings", str(settings), "--save-settings"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertTrue((Path(td) / "Game" / "Sounds").is_dir())
            self.assertFalse((Path(td) / "Game" / "Scripts").exists())

            saved = json.loads(settings.read_text(encoding="utf-8"))
            self.assertEqual(saved["categories"], ["Sounds"])
            self.assertFalse(saved["placeholder_enabled"])

    def test_corrupt_settings_file(self):
        with tempfile.TemporaryDirectory() as td, tempfile.TemporaryDirectory() as cfg:
            settings = Path(cfg) / "settings.json"
            settings.write_text("{broken", encoding="utf-8")
            result = self.runner.invoke(app, ["generate", td, "--settings", str(settings)])
            self.assertEqual(result.exit_code, 2)
            self.assertEqual(list(Path(td).iterdir()), [])

    def test_invalid_root_name_exits_with_error(self):
        with tempfile.TemporaryDirectory() as td:
            result = self.runner.invoke(app, ["generate", td, "--root", "Cli\0ent", "--categories", "Scripts"])
            self.assertEqual(result.exit_code, 1, result.output)
            self.assertNotIsInstance(result.exception, ValueError)
            self.assertEqual(result.output.count("Error"), 1)

    def test_list(self):
        result = self.runner.invoke(app, ["list"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("StreamingAssets", result.output)
        self.assertIn("Plugins", result.output)

    def test_version(self):
        result = self.runner.invoke(app, ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("foldergen", result.output)


if __name__ == "__main__":
    unittest.main()
