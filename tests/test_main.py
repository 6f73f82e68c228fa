"""End-to-end tests for the mine-driller command line."""

import pytest

from mine_driller.main import main, parse_args


class TestParseArgs:

    def test_requires_source(self) -> None:
        with pytest.raises(SystemExit):
            parse_args([])

    def test_toggles(self, sample_map_file) -> None:
        args = parse_args(['--map', str(sample_map_file), '--no-csv', '--gif'])
        assert args.csv is False
        assert args.snapshot is None
        assert args.gif is True


class TestMain:

    def test_map_run(self, tmp_path, sample_map_file, capsys) -> None:
        out_dir = tmp_path / "out"
        code = main(['--map', str(sample_map_file), '--out-dir', str(out_dir),
                     '--no-snapshot'])
        assert code == 0

        stdout = capsys.readouterr().out
        assert "The driller starts at (0, 0) and claims 3." in stdout
        assert "Total resources: 3 + 5 + 8 = 16." in stdout
        assert "MINE DRILLER SEARCH REPORT" in stdout
        assert (out_dir / "path_steps.csv").exists()
        assert not (out_dir / "solution.png").exists()

    def test_config_run(self, tmp_path, sample_map_file, capsys) -> None:
        config = tmp_path / "run.yaml"
        config.write_text(
            f"mine:\n  size: 3\n  map: {sample_map_file.name}\n"
            "export:\n  csv: false\n  snapshot: true\n"
        )
        out_dir = tmp_path / "out"
        assert main(['--config', str(config), '--out-dir', str(out_dir)]) == 0
        assert (out_dir / "solution.png").exists()
        assert not (out_dir / "path_steps.csv").exists()

    def test_quiet(self, tmp_path, sample_map_file, capsys) -> None:
        code = main(['--map', str(sample_map_file), '--out-dir', str(tmp_path),
                     '--no-csv', '--no-snapshot', '--quiet'])
        assert code == 0
        assert capsys.readouterr().out == ""

    def test_malformed_map(self, tmp_path, capsys) -> None:
        bad = tmp_path / "bad.txt"
        bad.write_text("1 2 3\n4 5\n6 7 8\n")
        code = main(['--map', str(bad), '--out-dir', str(tmp_path / "out")])
        assert code == 1
        assert "Error:" in capsys.readouterr().err
        assert not (tmp_path / "out").exists()

    def test_wrong_size(self, tmp_path, sample_map_file, capsys) -> None:
        code = main(['--map', str(sample_map_file), '--size', '4',
                     '--out-dir', str(tmp_path / "out")])
        assert code == 1
        assert "Expected 4 rows" in capsys.readouterr().err

    def test_empty_map(self, tmp_path, capsys) -> None:
        empty = tmp_path / "empty.txt"
        empty.write_text("")
        assert main(['--map', str(empty), '--out-dir', str(tmp_path)]) == 1
        assert "no cells" in capsys.readouterr().err

    def test_missing_config(self, tmp_path, capsys) -> None:
        assert main(['--config', str(tmp_path / "nope.yaml")]) == 1
        assert "Configuration file not found" in capsys.readouterr().err

    def test_undecodable_map(self, tmp_path, capsys) -> None:
        bad = tmp_path / "binary.txt"
        bad.write_bytes(b"1 2\n3 \xff\n")
        assert main(['--map', str(bad), '--out-dir', str(tmp_path / "out")]) == 1
        assert "Error: Cannot read map" in capsys.readouterr().err

    def test_huge_value_in_map(self, tmp_path, capsys) -> None:
        bad = tmp_path / "huge.txt"
        bad.write_text("99999999999999999999 1\n2 3\n")
        assert main(['--map', str(bad), '--out-dir', str(tmp_path / "out")]) == 1
        assert "out of range" in capsys.readouterr().err

    def test_output_dir_is_a_file(self, tmp_path, sample_map_file, capsys) -> None:
        blocked = tmp_path / "blocked"
        blocked.write_text("")
        code = main(['--map', str(sample_map_file), '--out-dir', str(blocked),
                     '--no-snapshot'])
        assert code == 1
        assert "Error writing output" in capsys.readouterr().err
