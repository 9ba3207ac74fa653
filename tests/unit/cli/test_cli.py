"""CLI flag resolution and listing-order tests for ``lazyls.cli``."""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyls import cli
from lazyls.flags import DirOrderFlag, Flags, SortFlag, SortOrder


def _run(argv: list[str], defaults: Flags | None = None, default_path: Path | None = None) -> str:
    stdout = io.StringIO()
    with (
        mock.patch.object(sys, "argv", ["lazyls", *argv]),
        mock.patch("lazyls.config.load_sort_flags", return_value=defaults or Flags()),
        mock.patch.object(sys, "stdout", stdout),
    ):
        cli.main(default_path=default_path)
    return stdout.getvalue()


class ResolveFlagsTests(unittest.TestCase):
    def _resolve(self, argv: list[str], defaults: Flags) -> Flags:
        return cli.resolve_flags(cli.build_parser().parse_args(argv), defaults)

    def test_no_sort_options_keep_defaults(self) -> None:
        defaults = Flags(DirOrderFlag.LAST, SortFlag.SIZE, SortOrder.REVERSE)
        self.assertEqual(self._resolve([], defaults), defaults)

    def test_last_sort_key_option_wins(self) -> None:
        self.assertIs(self._resolve(["-t", "-S"], Flags()).sort_by, SortFlag.SIZE)
        self.assertIs(self._resolve(["-S", "--sort", "time"], Flags()).sort_by, SortFlag.TIME)
        self.assertIs(self._resolve(["--sort", "size", "-t"], Flags()).sort_by, SortFlag.TIME)

    def test_grouping_and_reverse(self) -> None:
        flags = self._resolve(["--group-directories-first", "-r"], Flags())
        self.assertIs(flags.directory_order, DirOrderFlag.FIRST)
        self.assertIs(flags.sort_order, SortOrder.REVERSE)
        flags = self._resolve(["--group-dirs", "none"], Flags(directory_order=DirOrderFlag.FIRST))
        self.assertIs(flags.directory_order, DirOrderFlag.NONE)

    def test_unknown_sort_word_is_rejected_by_parser(self) -> None:
        with mock.patch.object(sys, "stderr", io.StringIO()), self.assertRaises(SystemExit):
            cli.build_parser().parse_args(["--sort", "extension"])


class MainListingTests(unittest.TestCase):
    def test_lists_directory_with_dirs_first_and_reverse_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.txt").touch()
            (root / "z.txt").touch()
            (root / "b-dir").mkdir()
            (root / "y-dir").mkdir()
            (root / ".hidden").touch()

            output = _run(["--no-color", "--group-dirs", "first", "-r", str(root)])

        self.assertEqual(output.splitlines(), ["y-dir/", "b-dir/", "z.txt", "a.txt"])

    def test_defaults_to_current_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "only.txt").touch()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                output = _run(["--no-color"])
            finally:
                os.chdir(previous_cwd)

        self.assertEqual(output, "only.txt\n")

    def test_persisted_defaults_apply_without_flags(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "small").write_bytes(b"x")
            (root / "large").write_bytes(b"x" * 100)

            output = _run(["--no-color", str(root)], defaults=Flags(sort_by=SortFlag.SIZE))

        self.assertEqual(output.splitlines(), ["large", "small"])

    def test_all_flag_includes_hidden_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".hidden").touch()
            (root / "shown").touch()

            output = _run(["--no-color", "-a", str(root)])

        self.assertEqual(output.splitlines(), [".hidden", "shown"])

    def test_multiple_directories_get_headers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            first = root / "one"
            second = root / "two"
            first.mkdir()
            second.mkdir()
            (first / "a").touch()
            (second / "b").touch()

            output = _run(["--no-color", str(first), str(second)])

        self.assertEqual(output, f"{first}:\na\n\n{second}:\nb\n")

    def test_missing_path_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with self.assertRaisesRegex(SystemExit, "Path not found"):
                _run([str(missing)])

    def test_save_defaults_persists_resolved_flags(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            with mock.patch("lazyls.config.save_sort_flags") as save_sort_flags:
                _run(["--no-color", "--save-defaults", "-t", str(root)])

        save_sort_flags.assert_called_once_with(Flags(sort_by=SortFlag.TIME))


if __name__ == "__main__":
    unittest.main()
