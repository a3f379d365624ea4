from unittest.mock import patch

import pytest

from pixelkit.platform import (
    InputState,
    Key,
    KeyboardInput,
    LogicalPosition,
    LogicalSize,
    ModifiersState,
    MouseButton,
    PhysicalPosition,
    PhysicalSize,
    WindowEvent,
    WindowEventKind,
    WindowHint,
    pixel_ratio,
)


def test_key_from_char_letters_and_digits():
    assert Key.from_char("a") is Key.A
    assert Key.from_char("z") is Key.Z
    assert Key.from_char("0") is Key.NUM0
    assert Key.from_char("9") is Key.NUM9


def test_key_from_char_punctuation():
    assert Key.from_char("/") is Key.SLASH
    assert Key.from_char("\\") is Key.BACKSLASH
    assert Key.from_char(" ") is Key.SPACE
    assert Key.from_char(":") is Key.COLON


def test_key_from_char_unknown():
    assert Key.from_char("?") is Key.UNKNOWN
    assert Key.from_char("A") is Key.UNKNOWN
    assert str(Key.UNKNOWN) == "???"


@pytest.mark.parametrize("c", list("0123456789abcdefghijklmnopqrstuvwxyz/[]`,.=-';:\\"))
def test_key_display_round_trips_char(c):
    assert str(Key.from_char(c)) == c


def test_key_display_of_control_keys():
    assert str(Key.CONTROL) == "<ctrl>"
    assert str(Key.ESCAPE) == "<esc>"
    assert str(Key.PAGE_UP) == "<pgup>"
    assert str(Key.from_char(" ")) == "<space>"


def test_key_is_modifier():
    assert Key.ALT.is_modifier()
    assert Key.CONTROL.is_modifier()
    assert Key.SHIFT.is_modifier()
    assert not Key.A.is_modifier()
    assert not Key.RETURN.is_modifier()


def test_modifiers_display():
    assert str(ModifiersState()) == ""
    assert str(ModifiersState(shift=True)) == "<shift>"
    assert str(ModifiersState(shift=True, ctrl=True, alt=True, meta=True)) == (
        "<ctrl><alt><meta><shift>"
    )


def test_keyboard_input_defaults_and_equality():
    a = KeyboardInput(InputState.PRESSED, Key.A)
    b = KeyboardInput(InputState.PRESSED, Key.A, ModifiersState())
    assert a == b
    assert a.modifiers.shift is False
    assert a != KeyboardInput(InputState.RELEASED, Key.A)


def test_window_event_is_input():
    assert WindowEvent(WindowEventKind.RESIZED, LogicalSize(1, 1)).is_input()
    assert WindowEvent(WindowEventKind.CURSOR_MOVED, LogicalPosition(0, 0)).is_input()
    assert WindowEvent(WindowEventKind.SCALE_FACTOR_CHANGED, 2.0).is_input()
    assert not WindowEvent(WindowEventKind.MOUSE_WHEEL).is_input()
    assert not WindowEvent(WindowEventKind.REDRAW_REQUESTED).is_input()
    assert not WindowEvent(WindowEventKind.READY).is_input()
    assert not WindowEvent(WindowEventKind.NOOP).is_input()


def test_window_hint_validation():
    assert WindowHint("resizable", True).value is True
    with pytest.raises(ValueError):
        WindowHint("fullscreen", True)


def test_mouse_button_validation():
    assert MouseButton("other", 4) == MouseButton("other", 4)
    assert MouseButton.LEFT != MouseButton.RIGHT
    with pytest.raises(ValueError):
        MouseButton("other")
    with pytest.raises(ValueError):
        MouseButton("left", 1)
    with pytest.raises(ValueError):
        MouseButton("wheel")


def test_pixel_ratio_on_macos():
    with patch("pixelkit.platform.sys.platform", "darwin"):
        assert pixel_ratio(2.0) == 2.0


def test_pixel_ratio_elsewhere():
    with patch("pixelkit.platform.sys.platform", "linux"):
        assert pixel_ratio(2.0) == 1.0


def test_position_conversion_on_macos():
    with patch("pixelkit.platform.sys.platform", "darwin"):
        physical = LogicalPosition(3.0, 4.0).to_physical(2.0)
        assert physical == PhysicalPosition(6.0, 8.0)
        assert LogicalPosition.from_physical(physical, 2.0) == LogicalPosition(3.0, 4.0)


def test_position_conversion_elsewhere_is_identity():
    with patch("pixelkit.platform.sys.platform", "linux"):
        assert LogicalPosition(3.0, 4.0).to_physical(2.0) == PhysicalPosition(3.0, 4.0)
        assert PhysicalPosition.from_logical(LogicalPosition(3.0, 4.0), 2.0) == PhysicalPosition(
            3.0, 4.0
        )


def test_size_round_trip():
    with patch("pixelkit.platform.sys.platform", "darwin"):
        size = LogicalSize(640.0, 480.0)
        physical = PhysicalSize.from_logical(size, 2.0)
        assert physical == size.to_physical(2.0)
        assert LogicalSize.from_physical(physical, 2.0) == size
        assert physical.to_logical(2.0) == size


def test_size_is_zero():
    assert LogicalSize(0.5, 100.0).is_zero()
    assert LogicalSize(100.0, 0.0).is_zero()
    assert not LogicalSize(1.0, 1.0).is_zero()


def test_size_to_u32_rounds():
    assert LogicalSize(1.5, 2.4).to_u32() == (2, 2)
    assert PhysicalSize(-3.0, 7.0).to_u32() == (0, 7)