"""
test_fs_utils.py
----------------
Unit tests for assetlint.utils.fs module.

Tests candidate enumeration in flat, bundle and recursive modes.
"""
import os
from pathlib import Path

import pytest

from assetlint.core.exceptions import ConfigurationError, EnumerationError
from assetlint.utils.fs import (
    Candidate,
    EnumerationMode,
    enumerate_candidates,
    is_candidate_file,
)

requires_symlinks = pytest.mark.skipif(
    not hasattr(os, "symlink") or os.name == "nt",
    reason="symlinks not supported on this platform",
)

requires_permissions = pytest.mark.skipif(
    os.name != "posix" or os.geteuid() == 0,
    reason="directory permissions are not enforced for this user/platform",
)


class TestFlatFiles:
    """Test FLAT_FILES enumeration."""

    def test_finds_matching_files(self, asset_root):
        """Test that only files with the extension are returned."""
        (asset_root / "b.md").write_text("content")
        (asset_root / "a.md").write_text("content")
        (asset_root / "script.js").write_text("console.log(1)")

        candidates = enumerate_candidates(asset_root, EnumerationMode.FLAT_FILES)
        assert [c.label for c in candidates] == ["a.md", "b.md"]

    def test_skips_directory_named_like_file(self, asset_root):
        """Test that a directory called x.md is not a candidate."""
        (asset_root / "tricky.md").mkdir()
        (asset_root / "real.md").write_text("# Real")

        candidates = enumerate_candidates(asset_root, EnumerationMode.FLAT_FILES)
        assert [c.label for c in candidates] == ["real.md"]

    def test_does_not_descend(self, asset_root):
        """Test that nested files are ignored in flat mode."""
        (asset_root / "sub").mkdir()
        (asset_root / "sub" / "nested.md").write_text("content")

        assert enumerate_candidates(asset_root, EnumerationMode.FLAT_FILES) == []

    def test_candidate_points_at_file(self, asset_root):
        """Test candidate path and label."""
        (asset_root / "one.md").write_text("content")

        candidates = enumerate_candidates(asset_root, EnumerationMode.FLAT_FILES)
        assert candidates == [Candidate(path=asset_root / "one.md", label="one.md")]

    def test_custom_extension(self, asset_root):
        """Test matching another extension."""
        (asset_root / "notes.txt").write_text("content")
        (asset_root / "doc.md").write_text("content")

        candidates = enumerate_candidates(
            asset_root, EnumerationMode.FLAT_FILES, extension=".txt"
        )
        assert [c.label for c in candidates] == ["notes.txt"]

    @requires_symlinks
    def test_keeps_dangling_symlink(self, asset_root):
        """Test that a broken link is kept so its read failure is reported."""
        os.symlink("/nonexistent/target.md", asset_root / "broken.md")

        candidates = enumerate_candidates(asset_root, EnumerationMode.FLAT_FILES)
        assert [c.label for c in candidates] == ["broken.md"]


class TestBundles:
    """Test BUNDLES enumeration."""

    def test_one_candidate_per_directory(self, asset_root):
        """Test that each directory yields its member file."""
        (asset_root / "beta").mkdir()
        (asset_root / "alpha").mkdir()

        candidates = enumerate_candidates(
            asset_root, EnumerationMode.BUNDLES, member_name="SKILL.md"
        )
        assert candidates == [
            Candidate(path=asset_root / "alpha" / "SKILL.md", label="alpha"),
            Candidate(path=asset_root / "beta" / "SKILL.md", label="beta"),
        ]

    def test_ignores_files(self, asset_root):
        """Test that plain files in the root are not bundles."""
        (asset_root / "README.md").write_text("# Skills")
        (asset_root / ".gitkeep").write_text("")

        candidates = enumerate_candidates(
            asset_root, EnumerationMode.BUNDLES, member_name="SKILL.md"
        )
        assert candidates == []

    def test_member_need_not_exist(self, asset_root):
        """Test that missing member files are still enumerated."""
        (asset_root / "broken-skill").mkdir()

        candidates = enumerate_candidates(
            asset_root, EnumerationMode.BUNDLES, member_name="SKILL.md"
        )
        assert len(candidates) == 1
        assert not candidates[0].path.exists()

    def test_requires_member_name(self, asset_root):
        """Test that bundle mode without a member name is rejected."""
        with pytest.raises(ConfigurationError):
            enumerate_candidates(asset_root, EnumerationMode.BUNDLES)


class TestRecursive:
    """Test RECURSIVE enumeration."""

    def test_collects_all_depths(self, asset_root):
        """Test that files are found at every depth."""
        deep = asset_root / "cat1" / "sub1"
        deep.mkdir(parents=True)
        (asset_root / "top.md").write_text("# Top")
        (asset_root / "cat1" / "mid.md").write_text("# Mid")
        (deep / "deep-rule.md").write_text("# Deep")

        candidates = enumerate_candidates(asset_root, EnumerationMode.RECURSIVE)
        assert [c.label for c in candidates] == [
            "cat1/mid.md",
            "cat1/sub1/deep-rule.md",
            "top.md",
        ]

    def test_skips_directories_and_other_extensions(self, asset_root):
        """Test that directories named x.md and other files are skipped."""
        (asset_root / "tricky.md").mkdir()
        (asset_root / "tricky.md" / "inner.md").write_text("# Inner")
        (asset_root / "notes.txt").write_text("not a rule")
        (asset_root / "config.json").write_text("{}")

        candidates = enumerate_candidates(asset_root, EnumerationMode.RECURSIVE)
        assert [c.label for c in candidates] == ["tricky.md/inner.md"]

    def test_order_is_stable(self, asset_root):
        """Test that repeated enumeration yields the same order."""
        for name in ("c", "a", "b"):
            (asset_root / name).mkdir()
            (asset_root / name / f"{name}.md").write_text(name)

        first = enumerate_candidates(asset_root, EnumerationMode.RECURSIVE)
        second = enumerate_candidates(asset_root, EnumerationMode.RECURSIVE)
        assert first == second
        assert [c.label for c in first] == ["a/a.md", "b/b.md", "c/c.md"]

    @requires_symlinks
    def test_does_not_follow_directory_symlinks(self, asset_root, tmp_dir):
        """Test that symlinked directories are not descended into."""
        outside = tmp_dir / "outside"
        outside.mkdir()
        (outside / "elsewhere.md").write_text("# Elsewhere")
        os.symlink(outside, asset_root / "linked", target_is_directory=True)

        assert enumerate_candidates(asset_root, EnumerationMode.RECURSIVE) == []


class TestRootHandling:
    """Test behaviour around the root directory itself."""

    @pytest.mark.parametrize("mode", list(EnumerationMode))
    def test_missing_root_is_empty(self, tmp_dir, mode):
        """Test that a non-existent root yields no candidates."""
        assert enumerate_candidates(
            tmp_dir / "nonexistent", mode, member_name="SKILL.md"
        ) == []

    @pytest.mark.parametrize("mode", list(EnumerationMode))
    def test_empty_root_is_empty(self, asset_root, mode):
        """Test that an empty root yields no candidates."""
        assert enumerate_candidates(asset_root, mode, member_name="SKILL.md") == []

    def test_root_is_a_file(self, tmp_dir):
        """Test that a root that is a file cannot be listed."""
        root = tmp_dir / "rules"
        root.write_text("not a directory")

        with pytest.raises(EnumerationError):
            enumerate_candidates(root, EnumerationMode.RECURSIVE)

    @requires_permissions
    def test_unlistable_root_raises(self, asset_root):
        """Test that permission denied on the root propagates."""
        (asset_root / "rule.md").write_text("# Rule")
        asset_root.chmod(0o000)
        try:
            with pytest.raises(EnumerationError) as exc_info:
                enumerate_candidates(asset_root, EnumerationMode.FLAT_FILES)
            assert isinstance(exc_info.value.__cause__, PermissionError)
        finally:
            asset_root.chmod(0o755)

    @pytest.mark.parametrize(
        "mode, method",
        [
            (EnumerationMode.FLAT_FILES, "is_file"),
            (EnumerationMode.BUNDLES, "is_dir"),
            (EnumerationMode.RECURSIVE, "is_dir"),
        ],
    )
    def test_entry_stat_failure_raises(self, asset_root, monkeypatch, mode, method):
        """Test that a failed stat on an entry is wrapped, not leaked."""
        (asset_root / "entry.md").write_text("# Entry")

        def denied(self, *args, **kwargs):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, method, denied)

        with pytest.raises(EnumerationError) as exc_info:
            enumerate_candidates(asset_root, mode, member_name="SKILL.md")
        assert isinstance(exc_info.value.__cause__, PermissionError)


class TestIsCandidateFile:
    """Test is_candidate_file function."""

    def test_regular_file(self, tmp_dir):
        path = tmp_dir / "a.md"
        path.write_text("x")
        assert is_candidate_file(path)

    def test_directory(self, tmp_dir):
        assert not is_candidate_file(tmp_dir)

    def test_missing_path(self, tmp_dir):
        assert not is_candidate_file(tmp_dir / "missing.md")
