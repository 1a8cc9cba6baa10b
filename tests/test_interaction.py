from chart.interaction import (
    TERMINAL_CALIBRATION,
    InteractionState,
    PointerCalibration,
    index_at_pointer,
)

BLOCK = "\n".join(
    [
        "     10 ┤  ╭╮",
        "      5 ┤ ╭╯╰",
        "      0 ┼─╯  ",
    ]
)


def test_pin_takes_precedence_over_hover():
    state = InteractionState(hovered_index=1, pinned_index=3)
    assert state.active_index == 3
    assert state.is_pinned
    assert InteractionState(hovered_index=1).active_index == 1
    assert InteractionState().active_index is None


def test_click_pins_hovered_index():
    state = InteractionState()
    state.hover(2)
    assert state.click() is True
    assert state.pinned_index == 2


def test_click_same_index_again_unpins():
    state = InteractionState(hovered_index=2, pinned_index=2)
    assert state.click() is True
    assert state.pinned_index is None


def test_click_other_index_moves_pin():
    state = InteractionState(hovered_index=4, pinned_index=2)
    state.click()
    assert state.pinned_index == 4


def test_click_without_hover_clears_pin():
    state = InteractionState(pinned_index=2)
    assert state.click() is True
    assert state.pinned_index is None
    assert state.click() is False


def test_leave_clears_hover_only():
    state = InteractionState(hovered_index=1, pinned_index=0)
    assert state.leave() is True
    assert state.hovered_index is None
    assert state.pinned_index == 0
    assert state.leave() is False


def test_pointer_mapping_default_calibration():
    # font 10 -> 6px chars; origin = (8 + 1) * 6 + 15 = 69
    assert index_at_pointer(69, BLOCK, 10, 4) == 0
    assert index_at_pointer(82, BLOCK, 10, 4) == 2
    assert index_at_pointer(68, BLOCK, 10, 4) is None
    assert index_at_pointer(93, BLOCK, 10, 4) is None


def test_pointer_mapping_terminal_cells():
    char_width = 10 * TERMINAL_CALIBRATION.char_width_ratio
    for column in range(9, 13):
        x = (column + 0.5) * char_width
        assert index_at_pointer(x, BLOCK, 10, 4, TERMINAL_CALIBRATION) == column - 9


def test_pointer_mapping_without_axis():
    assert index_at_pointer(50, "plain text", 10, 4) is None
    assert index_at_pointer(50, BLOCK, 0, 4) is None


def test_custom_calibration():
    calibration = PointerCalibration(char_width_ratio=0.5, left_margin_ratio=0.0)
    # 5px chars, origin 45
    assert index_at_pointer(45, BLOCK, 10, 4, calibration) == 0
    assert index_at_pointer(61, BLOCK, 10, 4, calibration) == 3
