"""Tests for CLI argument handling and startup wiring."""

from __future__ import annotations

import json
import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from filman import cli
from filman.runtime.config import KeyBindings


class CliTests(unittest.TestCase):
    def _main(self, argv: list[str], default_path: Path | None = None) -> mock.MagicMock:
        with mock.patch("sys.argv", ["filman", *argv]), mock.patch(
            "filman.cli.run_browser"
        ) as run_mock, mock.patch("filman.runtime.config.DEFAULT_CONFIG_PATH", Path("/nonexistent/filman.json")):
            cli.main(default_path=default_path)
        return run_mock

    def test_starts_in_default_path_when_no_argument(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()

            run_mock = self._main([], default_path=root)

        run_mock.assert_called_once_with(
            root,
            KeyBindings(),
            focus=None,
            style="monokai",
            no_color=False,
        )

    def test_file_argument_starts_in_parent_focused_on_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "notes.txt"
            target.write_text("x", encoding="utf-8")

            run_mock = self._main([str(target), "--no-color", "--style", "friendly"])

        args, kwargs = run_mock.call_args
        self.assertEqual(args[0], root)
        self.assertEqual(kwargs["focus"], target)
        self.assertEqual(kwargs["style"], "friendly")
        self.assertTrue(kwargs["no_color"])

    def test_missing_path_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"

            with self.assertRaises(SystemExit) as ctx:
                self._main([str(missing)])

        self.assertEqual(str(ctx.exception), f"Path not found: {missing}")

    def test_config_file_bindings_are_passed_to_runtime(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            config = root / "config.json"
            config.write_text(json.dumps({"keys": {"simple": {"x": ":paste"}}}), encoding="utf-8")

            run_mock = self._main([str(root), "--config", str(config)])

        bindings = run_mock.call_args.args[1]
        self.assertEqual(bindings.commands_for("x"), (":paste",))

    def test_bad_config_is_fatal_before_runtime_starts(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            config = root / "config.json"
            config.write_text('{"keys": {"simple": {"xy": ":paste"}}}', encoding="utf-8")

            with mock.patch("sys.argv", ["filman", str(root), "--config", str(config)]), mock.patch(
                "filman.cli.run_browser"
            ) as run_mock:
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()

        run_mock.assert_not_called()
        self.assertIn("Invalid configuration", str(ctx.exception))

    def test_resolve_start_for_directory_has_no_focus(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()

            self.assertEqual(cli.resolve_start(root), (root, None))

    def test_resolve_start_collapses_parent_components(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            child = root / "child"
            child.mkdir()
            (child / "notes.txt").write_text("x", encoding="utf-8")

            self.assertEqual(cli.resolve_start(child / ".."), (root, None))
            self.assertEqual(
                cli.resolve_start(child / ".." / "child" / "notes.txt"),
                (child, child / "notes.txt"),
            )

    def test_log_file_enables_debug_logging(self) -> None:
        with mock.patch("filman.cli.logging.basicConfig") as basic_mock:
            cli.configure_logging(Path("/tmp/filman.log"))
            cli.configure_logging(None)

        basic_mock.assert_called_once()
        self.assertEqual(basic_mock.call_args.kwargs["level"], logging.DEBUG)
        self.assertEqual(basic_mock.call_args.kwargs["filename"], "/tmp/filman.log")


if __name__ == "__main__":
    unittest.main()
