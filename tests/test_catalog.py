"""
Module: test_catalog.py

Tests for executable discovery in the configured search paths
"""

import os
import stat

from runmenu.core.catalog import CatalogEntry, load_catalog


def labels(entries):
    return [e.name for e in entries]


class TestLoadCatalog:
    """Scanning directories for executables"""

    def test_keeps_only_executable_regular_files(self, tmp_path, make_file, exec_mode):
        """Files without any exec bit and subdirectories are left out"""
        make_file(tmp_path, "tool", exec_mode)
        make_file(tmp_path, "notes.txt", stat.S_IRUSR | stat.S_IWUSR)
        make_file(tmp_path, "group-only", stat.S_IRUSR | stat.S_IXGRP)
        make_file(tmp_path, "other-only", stat.S_IRUSR | stat.S_IXOTH)
        (tmp_path / "subdir").mkdir()

        assert labels(load_catalog([str(tmp_path)])) == ["group-only", "other-only", "tool"]

    def test_is_not_recursive(self, tmp_path, make_file, exec_mode):
        nested = tmp_path / "nested"
        nested.mkdir()
        make_file(nested, "hidden-tool", exec_mode)
        make_file(tmp_path, "top", exec_mode)

        assert labels(load_catalog([str(tmp_path)])) == ["top"]

    def test_sorted_across_all_paths(self, tmp_path, make_file, exec_mode):
        first = tmp_path / "a"
        second = tmp_path / "b"
        first.mkdir()
        second.mkdir()
        make_file(first, "zsh", exec_mode)
        make_file(first, "cat", exec_mode)
        make_file(second, "bash", exec_mode)
        make_file(second, "Xorg", exec_mode)

        # codepoint order: uppercase before lowercase
        assert labels(load_catalog([str(first), str(second)])) == ["Xorg", "bash", "cat", "zsh"]

    def test_missing_directory_is_skipped(self, tmp_path, make_file, exec_mode):
        make_file(tmp_path, "ls", exec_mode)
        paths = [str(tmp_path / "does-not-exist"), str(tmp_path)]

        assert labels(load_catalog(paths)) == ["ls"]

    def test_file_path_as_search_path_is_skipped(self, tmp_path, make_file, exec_mode):
        not_a_dir = make_file(tmp_path, "ls", exec_mode)

        assert load_catalog([str(not_a_dir)]) == []

    def test_broken_symlink_is_skipped(self, tmp_path, make_file, exec_mode):
        make_file(tmp_path, "real", exec_mode)
        os.symlink(str(tmp_path / "gone"), str(tmp_path / "dangling"))

        assert labels(load_catalog([str(tmp_path)])) == ["real"]

    def test_symlink_to_executable_is_listed(self, tmp_path, make_file, exec_mode):
        make_file(tmp_path, "python3.12", exec_mode)
        os.symlink(str(tmp_path / "python3.12"), str(tmp_path / "python3"))

        assert labels(load_catalog([str(tmp_path)])) == ["python3", "python3.12"]

    def test_symlink_to_directory_is_skipped(self, tmp_path, make_file, exec_mode):
        target = tmp_path / "libexec"
        target.mkdir()
        bindir = tmp_path / "bin"
        bindir.mkdir()
        make_file(bindir, "tool", exec_mode)
        os.symlink(str(target), str(bindir / "libexec"))

        assert labels(load_catalog([str(bindir)])) == ["tool"]

    def test_duplicates_kept_with_provenance(self, tmp_path, make_file, exec_mode):
        first = tmp_path / "a"
        second = tmp_path / "b"
        first.mkdir()
        second.mkdir()
        make_file(first, "vim", exec_mode)
        make_file(second, "vim", exec_mode)

        entries = load_catalog([str(first), str(second)])

        assert entries == [CatalogEntry("vim", str(first)), CatalogEntry("vim", str(second))]

    def test_dedupe_keeps_first_search_path(self, tmp_path, make_file, exec_mode):
        first = tmp_path / "a"
        second = tmp_path / "b"
        first.mkdir()
        second.mkdir()
        make_file(second, "vim", exec_mode)
        make_file(first, "vim", exec_mode)
        make_file(second, "awk", exec_mode)

        entries = load_catalog([str(first), str(second)], dedupe=True)

        assert entries == [CatalogEntry("awk", str(second)), CatalogEntry("vim", str(first))]

    def test_repeated_calls_see_new_files(self, tmp_path, make_file, exec_mode):
        make_file(tmp_path, "one", exec_mode)
        assert labels(load_catalog([str(tmp_path)])) == ["one"]

        make_file(tmp_path, "two", exec_mode)
        assert labels(load_catalog([str(tmp_path)])) == ["one", "two"]

    def test_non_utf8_name_is_skipped(self, tmp_path, make_file, exec_mode):
        """Names the shell could not receive byte-for-byte are left out"""
        make_file(tmp_path, "good", exec_mode)
        bad = os.path.join(os.fsencode(str(tmp_path)), b"bad\xffname")
        with open(bad, "wb") as f:
            f.write(b"#!/bin/sh\n")
        os.chmod(bad, exec_mode)

        assert labels(load_catalog([str(tmp_path)])) == ["good"]

    def test_accepts_path_objects_and_generators(self, tmp_path, make_file, exec_mode):
        make_file(tmp_path, "ls", exec_mode)

        assert labels(load_catalog(p for p in [tmp_path])) == ["ls"]
