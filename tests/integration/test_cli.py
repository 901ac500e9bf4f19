"""
Integration tests for the command-line entry point.
"""
import pytest
import yaml

from pycoulomb.__main__ import format_table, main
from pycoulomb.pairwise import Poisson

CONFIG = {
    "units": "REAL",
    "scheme": {"type": "poisson", "cutoff": 12.0, "c": 3, "d": 3, "debye_length": "auto"},
    "medium": {"permittivity": "water", "salt": "sodium_chloride", "molarity": 0.1},
}


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "poisson.yaml"
    path.write_text(yaml.safe_dump(CONFIG))
    return path


class TestCli:
    """Tests for `python -m pycoulomb`."""

    def test_prints_summary(self, config_path, capsys) -> None:
        assert main([str(config_path), "--points", "5"]) == 0
        out = capsys.readouterr().out
        assert "Scheme:  Poisson(" in out
        assert "NaCl" in out
        assert "kappa:" in out
        # header plus one row per point
        table = out.strip().splitlines()[-6:]
        assert table[0].split() == ["q", "S", "dS", "d2S", "d3S"]
        assert table[1].split()[0] == "0.0000"
        assert table[-1].split()[0] == "1.0000"

    def test_missing_file(self, tmp_path, capsys) -> None:
        assert main([str(tmp_path / "missing.yaml")]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_invalid_config(self, tmp_path, capsys) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text(yaml.safe_dump({"scheme": {"type": "wolf"}}))
        assert main([str(path)]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_too_few_points(self, config_path) -> None:
        with pytest.raises(SystemExit):
            main([str(config_path), "--points", "1"])


class TestFormatTable:
    """Tests for the short-range function table."""

    def test_boundary_rows(self) -> None:
        table = format_table(Poisson(cutoff=10.0, c=1, d=0), 3).splitlines()
        assert len(table) == 4
        first = [float(v) for v in table[1].split()]
        last = [float(v) for v in table[-1].split()]
        assert first[:3] == [0.0, 1.0, -1.0]
        assert last[:2] == [1.0, 0.0]
