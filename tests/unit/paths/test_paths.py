"""Tests for resolving the CLI path argument."""

from __future__ import annotations

import os
import sys
import tempfile
import unittest
from pathlib import Path

from dirsbytime.errors import NotADirectoryPathError, PathResolutionError
from dirsbytime.paths import resolve_directory


class ResolveDirectoryTests(unittest.TestCase):
    def test_normalizes_dot_dot_components(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "inner").mkdir()

            resolved = resolve_directory(str(root / "inner" / ".." / "." / "inner"))

            self.assertEqual(resolved, root / "inner")

    def test_follows_symlinked_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "target"
            target.mkdir()
            link = root / "link"
            link.symlink_to(target, target_is_directory=True)

            self.assertEqual(resolve_directory(str(link)), target)

    def test_none_uses_default_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            self.assertEqual(resolve_directory(None, default_path=root), root)

    def test_none_without_default_uses_current_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                resolved = resolve_directory(None)
            finally:
                os.chdir(previous_cwd)

            self.assertEqual(resolved, root)

    def test_missing_path_reports_raw_input(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            raw = os.path.join(tmp, "nope", "..", "missing")
            with self.assertRaises(PathResolutionError) as ctx:
                resolve_directory(raw)

            self.assertEqual(ctx.exception.raw_path, raw)
            self.assertIn(raw, str(ctx.exception))
            self.assertIn("invalid or does not exist", str(ctx.exception))

    def test_empty_string_is_invalid(self) -> None:
        with self.assertRaises(PathResolutionError):
            resolve_directory("")

    def test_regular_file_reports_resolved_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "f.txt"
            target.write_text("x\n", encoding="utf-8")

            with self.assertRaises(NotADirectoryPathError) as ctx:
                resolve_directory(str(root / "." / "f.txt"))

            self.assertEqual(ctx.exception.resolved, target)
            self.assertIn(str(target), str(ctx.exception))
            self.assertIn("exists but is not a directory", str(ctx.exception))

    def test_embedded_nul_byte_is_invalid(self) -> None:
        with self.assertRaises(PathResolutionError) as ctx:
            resolve_directory("bad\0path")

        self.assertEqual(ctx.exception.raw_path, "bad\0path")

    @unittest.skipUnless(sys.platform.startswith("linux"), "removing the working directory requires Linux")
    def test_deleted_working_directory_is_invalid(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            doomed = Path(tmp).resolve() / "doomed"
            doomed.mkdir()
            previous_cwd = Path.cwd()
            try:
                os.chdir(doomed)
                doomed.rmdir()
                with self.assertRaises(PathResolutionError) as ctx:
                    resolve_directory(None)
            finally:
                os.chdir(previous_cwd)

            self.assertIn("invalid or does not exist", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
