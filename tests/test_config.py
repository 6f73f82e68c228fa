"""Tests for YAML configuration loading."""

from pathlib import Path

import pytest

from mine_driller.config import load_config


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return path


class TestLoadConfig:
    """load_config - sections, defaults and validation."""

    def test_full_config(self, tmp_path) -> None:
        path = write_config(tmp_path, (
            "mine:\n"
            "  size: 3\n"
            "  map: maps/mine.txt\n"
            "export:\n"
            "  text: false\n"
            "  csv: false\n"
            "  snapshot: false\n"
            "  gif: true\n"
            "  placeholder: '.'\n"
        ))
        config = load_config(path)
        assert config.mine.size == 3
        assert config.mine.map_path == tmp_path / "maps" / "mine.txt"
        assert config.text_enabled is False
        assert config.csv_enabled is False
        assert config.snapshot_enabled is False
        assert config.gif_enabled is True
        assert config.placeholder == "."

    def test_defaults(self, tmp_path) -> None:
        config = load_config(write_config(tmp_path, "mine:\n  map: mine.txt\n"))
        assert config.mine.size is None
        assert config.text_enabled is True
        assert config.csv_enabled is True
        assert config.snapshot_enabled is True
        assert config.gif_enabled is False
        assert config.placeholder == ""
        assert config.quiet is False

    def test_absolute_map_path_kept(self, tmp_path) -> None:
        map_path = tmp_path / "elsewhere" / "mine.txt"
        config = load_config(write_config(tmp_path, f"mine:\n  map: {map_path}\n"))
        assert config.mine.map_path == map_path

    def test_missing_mine_section(self, tmp_path) -> None:
        with pytest.raises(ValueError, match="mine"):
            load_config(write_config(tmp_path, "export:\n  csv: true\n"))

    def test_missing_map_key(self, tmp_path) -> None:
        with pytest.raises(KeyError):
            load_config(write_config(tmp_path, "mine:\n  size: 3\n"))

    @pytest.mark.parametrize("size", ["-1", "three", "true"])
    def test_invalid_size(self, tmp_path, size) -> None:
        with pytest.raises(ValueError, match="Invalid mine size"):
            load_config(write_config(tmp_path, f"mine:\n  size: {size}\n  map: m.txt\n"))

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_bundled_example(self) -> None:
        root = Path(__file__).resolve().parent.parent
        config = load_config(root / "configs" / "mine1.yaml")
        assert config.mine.size == 7
        assert config.mine.map_path.resolve() == (root / "maps" / "mine1.txt").resolve()
