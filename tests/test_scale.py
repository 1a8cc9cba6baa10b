import math

from chart.models import ScaleMode
from chart.scale import AxisLabelFormat, ScaleTransform, from_plot_value, to_plot_values


def test_log_values():
    assert to_plot_values([0, 9, 99], ScaleMode.LOG10) == [0.0, 1.0, 2.0]


def test_linear_values_are_unchanged():
    assert to_plot_values([0, 7, 5000], ScaleMode.LINEAR) == [0.0, 7.0, 5000.0]


def test_log_round_trip_recovers_counts():
    values = list(range(0, 20000, 7)) + [10**6, 123456789, 10**9]
    for v in values:
        assert from_plot_value(math.log10(v + 1), ScaleMode.LOG10) == v


def test_log_inverse_never_negative():
    assert from_plot_value(-0.5, ScaleMode.LOG10) == 0
    assert from_plot_value(0.0, ScaleMode.LOG10) == 0


def test_linear_labels_round_half_up():
    fmt = AxisLabelFormat(ScaleMode.LINEAR, 7)
    assert fmt.format(12.4) == "     12"
    assert fmt.format(12.5) == "     13"


def test_log_labels_are_padded_real_counts():
    fmt = AxisLabelFormat(ScaleMode.LOG10, 7)
    assert fmt.format(math.log10(5001)) == "   5000"
    assert fmt.format(0.0) == "      0"
    assert len(fmt.format(math.log10(10**6))) == 7


def test_transform_floor():
    assert ScaleTransform.build([1, 2], ScaleMode.LOG10, 7).minimum == 0.0
    assert ScaleTransform.build([1, 2], ScaleMode.LINEAR, 7).minimum is None
