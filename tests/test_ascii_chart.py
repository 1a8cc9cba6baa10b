import math

from chart.models import ScaleMode
from chart.plotter import AXIS_GLYPH, AXIS_GLYPHS, plot_block
from chart.scale import ScaleTransform


def _block(values, mode=ScaleMode.LINEAR, height=10):
    return plot_block(ScaleTransform.build(values, mode, 7), height)


def test_rows_have_uniform_width():
    lines = _block([3, 10, 1, 7, 0, 4]).split("\n")
    assert len({len(line) for line in lines}) == 1


def test_axis_glyph_is_present_and_labels_stay_left_of_it():
    lines = _block([10, 5000, 12], ScaleMode.LOG10, 25).split("\n")
    axis = next(line.index(AXIS_GLYPH) for line in lines if AXIS_GLYPH in line)
    assert axis == 8
    for line in lines:
        assert line[axis] in AXIS_GLYPHS
        assert not any(ch.isdigit() for ch in line[axis + 1 :])


def test_log_axis_labels_show_real_counts():
    lines = _block([10, 5000, 12], ScaleMode.LOG10, 25).split("\n")
    assert lines[0][:7] == "   5000"
    assert lines[-1][:7] == "      0"


def test_spike_is_the_highest_point():
    lines = _block([10, 5000, 12], ScaleMode.LOG10, 25).split("\n")
    top = next(line for line in lines if line[9:].strip())
    assert top[9] == "╭"
    assert top[10] == "╮"
    assert top[11] == " "


def test_last_sample_owns_a_column():
    lines = _block([1, 2, 3]).split("\n")
    assert any(line[8 + 1 + 2] != " " for line in lines)


def test_single_and_flat_series_render():
    assert AXIS_GLYPH in _block([0], ScaleMode.LOG10)
    assert AXIS_GLYPH in _block([0, 0, 0], ScaleMode.LOG10)
    flat = _block([5, 5, 5])
    assert len(flat.split("\n")) == 1
    assert flat.startswith("      5 ")


def test_log_plot_values_are_zero_safe():
    transform = ScaleTransform.build([0, 0], ScaleMode.LOG10, 7)
    assert transform.plot_values == [0.0, 0.0]
    assert not any(math.isnan(v) for v in transform.plot_values)
