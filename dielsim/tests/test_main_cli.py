# -*- coding: utf-8 -*-
"""
Command-line entrypoint: menu default, batch 'run', config errors.
"""
import io

import pytest

from dielsim.main import main
from dielsim.utils import logger


@pytest.fixture(autouse=True)
def _quiet_logger():
    yield
    logger.set_verbose(False)


def test_menu_is_default(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n6\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "--- PROCEDURE ---" in out
    assert "Exiting program." in out


def test_run_subcommand(tmp_path, capsys):
    csv = tmp_path / "bt.csv"
    csv.write_text("T_C,C_pF\n25,10\n120,40\n160,25\n", encoding="utf-8")
    code = main(["run", "--material", "Barium Titanate", "--readings", str(csv), "--out-dir", str(tmp_path)])
    assert code == 0
    assert "Estimated Curie Temperature: 120°C" in capsys.readouterr().out
    assert (tmp_path / "Barium_Titanate_results.txt").exists()


def test_run_unknown_material(tmp_path):
    csv = tmp_path / "r.csv"
    csv.write_text("T_C,C_pF\n25,10\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["run", "--material", "Unobtainium", "--readings", str(csv)])
    assert exc.value.code == 2


def test_bad_config_is_usage_error(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("chart: {width: -5}\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(cfg)])
    assert exc.value.code == 2


def test_config_materials_reach_batch_run(tmp_path, capsys):
    cfg = tmp_path / "lab.yaml"
    cfg.write_text(
        "verbose: true\nmaterials:\n  - {name: Lead Titanate, area_mm2: 48, thickness_mm: 1.0, curie_temp_C: 490}\n",
        encoding="utf-8",
    )
    csv = tmp_path / "pt.csv"
    csv.write_text("T_C,C_pF\n400,50\n490,90\n550,60\n", encoding="utf-8")
    code = main(["--config", str(cfg), "run", "--material", "Lead Titanate",
                 "--readings", str(csv), "--out-dir", str(tmp_path)])
    assert code == 0
    captured = capsys.readouterr()
    assert "Difference: 0.00°C" in captured.out
    assert "DEBUG: config loaded from" in captured.err
    assert (tmp_path / "Lead_Titanate_results.txt").exists()


def test_non_finite_material_in_config_is_usage_error(tmp_path):
    cfg = tmp_path / "nan.yaml"
    cfg.write_text(
        "materials:\n  - {name: Bad, area_mm2: .nan, thickness_mm: 1.42, curie_temp_C: 100}\n",
        encoding="utf-8",
    )
    csv = tmp_path / "r.csv"
    csv.write_text("T_C,C_pF\n25,10\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(cfg), "run", "--material", "Bad", "--readings", str(csv)])
    assert exc.value.code == 2


def test_infinite_temperature_in_csv_is_usage_error(tmp_path):
    csv = tmp_path / "r.csv"
    csv.write_text("T_C,C_pF\n25,10\ninf,12\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["run", "--material", "Quartz", "--readings", str(csv)])
    assert exc.value.code == 2
