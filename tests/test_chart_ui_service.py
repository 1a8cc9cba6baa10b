import pytest

import chart_ui_service
from chart.models import Sample, ScaleMode

SAMPLES = [
    Sample(day="2024-01-01", tx_count=10),
    Sample(day="2024-01-02", tx_count=5000),
    Sample(day="2024-01-03", tx_count=12),
]


def test_render_once_with_hover():
    out = chart_ui_service.render_once(SAMPLES, scale_mode=ScaleMode.LOG10, height=10, width_px=600, hover=2)
    assert "2024-01-03 | 12 tx" in out
    assert out.count("●") == 1
    assert "font:" in out
    assert "total 5,022" in out


def test_render_once_with_pin():
    out = chart_ui_service.render_once(SAMPLES, scale_mode=ScaleMode.LINEAR, height=10, width_px=600, pin=1)
    assert "2024-01-02 | 5,000 tx *" in out


def test_render_once_empty():
    out = chart_ui_service.render_once([], scale_mode=ScaleMode.LOG10, height=10, width_px=600)
    assert out == "Loading..."


def test_main_print_random(capsys):
    assert chart_ui_service.main(["--print", "--random", "20", "--hover", "3"]) == 0
    out = capsys.readouterr().out
    assert "●" in out
    assert "font:" in out


def test_main_print_missing_dataset(tmp_path, capsys):
    assert chart_ui_service.main(["--print", "--data", str(tmp_path / "missing.json")]) == 1
    assert "error" in capsys.readouterr().err


def test_main_print_scale_flag(capsys):
    assert chart_ui_service.main(["--print", "--random", "10", "--scale", "linear"]) == 0
    assert "font:" in capsys.readouterr().out


def test_invalid_scale_env_is_rejected(monkeypatch, capsys):
    monkeypatch.setattr(chart_ui_service.constants, "CHART_SCALE", "cubic")
    with pytest.raises(SystemExit) as exc:
        chart_ui_service.main(["--print", "--random", "5"])
    assert exc.value.code == 2
    assert "invalid scale 'cubic'" in capsys.readouterr().err


def test_invalid_scale_flag_is_rejected(capsys):
    with pytest.raises(SystemExit) as exc:
        chart_ui_service.main(["--print", "--random", "5", "--scale", "log2"])
    assert exc.value.code == 2
