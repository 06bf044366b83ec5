"""Command-line contract tests.

The confirmed directory is the only thing written to stdout; quitting
writes nothing.
"""

from __future__ import annotations

import asyncio
import os
import tempfile
import unittest
from unittest import mock

from click.testing import CliRunner

from dirpick import cli
from dirpick.browser import PathPickerApp


def _headless_run(*keys: str):
    """Replacement for ``PathPickerApp.run`` that drives the app with ``keys``."""

    def run(app: PathPickerApp):
        async def drive():
            async with app.run_test(size=(80, 24)) as pilot:
                await pilot.press(*keys)
            return app.return_value

        return asyncio.run(drive())

    return run


class CliOutputTests(unittest.TestCase):
    def test_confirm_prints_exactly_the_path(self) -> None:
        runner = CliRunner()
        with mock.patch("dirpick.cli.PathPickerApp") as app_cls:
            app_cls.return_value.run.return_value = "/home/user/docs"
            result = runner.invoke(cli.main, [])

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, "/home/user/docs\n")

    def test_quit_prints_nothing(self) -> None:
        runner = CliRunner()
        with mock.patch("dirpick.cli.PathPickerApp") as app_cls:
            app_cls.return_value.run.return_value = None
            result = runner.invoke(cli.main, [])

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, "")

    def test_defaults_to_current_working_directory(self) -> None:
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmp:
            previous = os.getcwd()
            try:
                os.chdir(tmp)
                expected = os.getcwd()
                with mock.patch("dirpick.cli.PathPickerApp") as app_cls:
                    app_cls.return_value.run.return_value = None
                    runner.invoke(cli.main, [])
            finally:
                os.chdir(previous)

        app_cls.assert_called_once_with(start_path=expected, sort=False)

    def test_start_dir_and_sort_are_passed_through(self) -> None:
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("dirpick.cli.PathPickerApp") as app_cls:
                app_cls.return_value.run.return_value = None
                result = runner.invoke(cli.main, [tmp, "--sort"])

        self.assertEqual(result.exit_code, 0)
        app_cls.assert_called_once_with(start_path=os.path.realpath(tmp), sort=True)

    def test_missing_start_dir_is_a_usage_error(self) -> None:
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("dirpick.cli.PathPickerApp") as app_cls:
                result = runner.invoke(cli.main, [os.path.join(tmp, "missing")])

        self.assertEqual(result.exit_code, 2)
        app_cls.assert_not_called()

    def test_app_failure_exits_with_error(self) -> None:
        runner = CliRunner()
        with mock.patch("dirpick.cli.PathPickerApp") as app_cls:
            app_cls.return_value.run.side_effect = RuntimeError("boom")
            result = runner.invoke(cli.main, [])

        self.assertEqual(result.exit_code, 1)
        app_cls.return_value.run.assert_called_once()


class CliWithRealAppTests(unittest.TestCase):
    def test_confirm_writes_only_the_directory_line(self) -> None:
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmp:
            root = os.path.realpath(tmp)
            os.mkdir(os.path.join(root, "alpha"))
            with mock.patch.object(PathPickerApp, "run", autospec=True, side_effect=_headless_run("right", "enter")):
                result = runner.invoke(cli.main, [root])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, os.path.join(root, "alpha") + "\n")

    def test_quit_writes_nothing(self) -> None:
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.object(PathPickerApp, "run", autospec=True, side_effect=_headless_run("down", "q")):
                result = runner.invoke(cli.main, [tmp])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "")


if __name__ == "__main__":
    unittest.main()
