"""Tests del mapeo de teclado."""

import pytest

from app.keyboard import action_for_key, key_name_from_code


# --- Teclas → acciones ---

@pytest.mark.parametrize("key", list("0123456789."))
def test_digits_and_point(key):
    assert action_for_key(key) == ("digit", key)


@pytest.mark.parametrize("key", ["+", "-", "*", "/"])
def test_operators_are_padded(key):
    assert action_for_key(key) == ("operator", f" {key} ")


@pytest.mark.parametrize("key, expected", [
    ("Enter", ("compute", None)),
    ("Backspace", ("backspace", None)),
    ("Escape", ("clear", None)),
    ("t", ("toggle_theme", None)),
    ("q", ("quit", None)),
])
def test_control_keys(key, expected):
    assert action_for_key(key) == expected


def test_shift_escape_clears_all():
    assert action_for_key("Escape", shift=True) == ("clear_all", None)


@pytest.mark.parametrize("key", [None, "x", "=", "F1"])
def test_unmapped_keys(key):
    assert action_for_key(key) is None


# --- Códigos de cv2.waitKey → teclas ---

@pytest.mark.parametrize("code, expected", [
    (13, ("Enter", False)),
    (10, ("Enter", False)),
    (8, ("Backspace", False)),
    (127, ("Backspace", False)),
    (27, ("Escape", False)),
    (ord("A"), ("Escape", True)),
    (ord("5"), ("5", False)),
    (ord("*"), ("*", False)),
    (0x100000 | ord("7"), ("7", False)),
    (-1, (None, False)),
    (255, (None, False)),
])
def test_key_codes(code, expected):
    assert key_name_from_code(code) == expected


def test_key_code_round_trip_to_action():
    key, shift = key_name_from_code(ord("A"))
    assert action_for_key(key, shift) == ("clear_all", None)
