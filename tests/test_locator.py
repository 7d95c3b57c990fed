"""Tests for config file location."""

from pathlib import Path

import pytest

from dingus.errors import UnrecognizedConfigExtensionError
from dingus.locator import (
    Conflict,
    ExplicitConfig,
    Found,
    NotFound,
    find_nearest,
    locate,
    locate_explicit,
)


class TestFindNearest:
    """Tests for the upward marker search."""

    def test_marker_in_start_dir(self, project: Path):
        """Test the start directory itself is checked first."""
        assert find_nearest(project) == project / ".dingus"

    def test_marker_in_ancestor(self, project: Path):
        """Test a marker several levels up is found."""
        assert find_nearest(project / "src" / "lib") == project / ".dingus"

    def test_closest_marker_wins(self, project: Path):
        """Test a nearer marker shadows one further up."""
        inner = project / "src" / ".dingus"
        inner.write_text("INNER: yes\n")
        assert find_nearest(project / "src" / "lib") == inner
        assert find_nearest(project) == project / ".dingus"

    def test_sibling_subtree_uses_shared_ancestor(self, project: Path):
        """Test leaving a marked subtree falls back to the nearest ancestor."""
        (project / "src" / ".dingus").write_text("INNER: yes\n")
        other = project / "docs"
        other.mkdir()
        assert find_nearest(other) == project / ".dingus"

    def test_no_marker(self, tmp_path: Path):
        """Test searching an unmarked tree ends without error."""
        start = tmp_path / "a" / "b"
        start.mkdir(parents=True)
        result = find_nearest(start)
        # An unrelated marker above tmp_path would be a property of the host
        assert result is None or not str(result).startswith(str(tmp_path))

    def test_filesystem_root(self):
        """Test starting at the root terminates."""
        root = Path(Path.cwd().anchor)
        result = find_nearest(root)
        assert result is None or result == root / ".dingus"

    def test_relative_start(self, project: Path, monkeypatch: pytest.MonkeyPatch):
        """Test a relative start directory is anchored at cwd."""
        monkeypatch.chdir(project / "src")
        assert find_nearest(Path("lib")) == project / ".dingus"

    def test_symlinked_start_walks_given_path(self, tmp_path: Path):
        """Test the parents of the given path are searched, not the link target's."""
        proj = tmp_path / "proj"
        proj.mkdir()
        (proj / ".dingus").write_text("NEAR: yes\n")
        real = tmp_path / "real"
        (real / "deep").mkdir(parents=True)
        (real / ".dingus").write_text("FAR: yes\n")
        link = proj / "link"
        link.symlink_to(real / "deep", target_is_directory=True)

        assert find_nearest(link) == proj / ".dingus"

    def test_dotdot_segments(self, project: Path):
        """Test ".." in the start path is collapsed before walking."""
        start = project / "src" / "lib" / ".." / "lib"
        assert find_nearest(start) == project / ".dingus"


class TestLocate:
    """Tests for locate()."""

    def test_implicit_found(self, project: Path):
        """Test implicit discovery returns Found."""
        assert locate(None, project / "src" / "lib") == Found(project / ".dingus")

    def test_implicit_not_found(self, tmp_path: Path):
        """Test implicit discovery in an unmarked tree."""
        start = tmp_path / "empty"
        start.mkdir()
        result = locate(None, start)
        if isinstance(result, Found):
            assert not str(result.path).startswith(str(tmp_path))
        else:
            assert result == NotFound()

    def test_explicit_takes_precedence(self, project: Path, config_folder: Path):
        """Test an explicit name ignores any marker."""
        (config_folder / "work.yaml").write_text("A: b\n")
        result = locate(ExplicitConfig(config_folder, "work"), project)
        assert result == Found(config_folder / "work.yaml")


class TestLocateExplicit:
    """Tests for explicit names."""

    def test_yaml_extension_accepted_unchecked(self, config_folder: Path):
        """Test a recognized extension is accepted even if the file is missing."""
        result = locate_explicit(ExplicitConfig(config_folder, "missing.yaml"))
        assert result == Found(config_folder / "missing.yaml")

    def test_yml_extension_accepted(self, config_folder: Path):
        """Test the short extension is recognized."""
        result = locate_explicit(ExplicitConfig(config_folder, "work.yml"))
        assert result == Found(config_folder / "work.yml")

    def test_unrecognized_extension(self, config_folder: Path):
        """Test any other extension is rejected."""
        with pytest.raises(UnrecognizedConfigExtensionError):
            locate_explicit(ExplicitConfig(config_folder, "work.json"))

    def test_only_yaml_exists(self, config_folder: Path):
        """Test the single existing .yaml variant is chosen."""
        (config_folder / "work.yaml").write_text("A: b\n")
        result = locate_explicit(ExplicitConfig(config_folder, "work"))
        assert result == Found(config_folder / "work.yaml")

    def test_only_yml_exists(self, config_folder: Path):
        """Test the single existing .yml variant is chosen."""
        (config_folder / "work.yml").write_text("A: b\n")
        result = locate_explicit(ExplicitConfig(config_folder, "work"))
        assert result == Found(config_folder / "work.yml")

    def test_neither_exists(self, config_folder: Path):
        """Test no variant on disk gives NotFound."""
        assert locate_explicit(ExplicitConfig(config_folder, "work")) == NotFound()

    def test_empty_name(self, config_folder: Path):
        """Test an empty explicit name is not found rather than implicit."""
        (config_folder.parent / "dingus.yaml").write_text("A: b\n")
        assert locate_explicit(ExplicitConfig(config_folder, "")) == NotFound()

    @pytest.mark.parametrize("first", ["yaml", "yml"])
    def test_both_exist_conflict(self, config_folder: Path, first: str):
        """Test both variants conflict regardless of creation order."""
        second = "yml" if first == "yaml" else "yaml"
        (config_folder / f"work.{first}").write_text("A: b\n")
        (config_folder / f"work.{second}").write_text("A: c\n")

        result = locate_explicit(ExplicitConfig(config_folder, "work"))

        assert isinstance(result, Conflict)
        assert {result.one, result.two} == {
            config_folder / "work.yaml",
            config_folder / "work.yml",
        }

    def test_dotted_name_keeps_stem(self, config_folder: Path):
        """Test names with dots are only matched by their last suffix."""
        with pytest.raises(UnrecognizedConfigExtensionError):
            locate_explicit(ExplicitConfig(config_folder, "client.prod"))

    def test_absolute_filename(self, tmp_path: Path, config_folder: Path):
        """Test an absolute name is used as-is."""
        target = tmp_path / "elsewhere.yaml"
        result = locate_explicit(ExplicitConfig(config_folder, str(target)))
        assert result == Found(target)
