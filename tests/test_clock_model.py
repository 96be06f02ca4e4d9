from datetime import datetime

import pytest

from clock_model import (
    ClockTime, ClockModel, NO_ANGLE, KEY_PLUS,
    BUTTON_LEFT, BUTTON_MIDDLE, BUTTON_RIGHT,
    angle_from_point, hour_from_angle, minute_from_angle, parse_time,
)

CX, CY = 132, 132
ABOVE = (CX, CY - 100)
RIGHT = (CX + 100, CY)
BELOW = (CX, CY + 100)
LEFT = (CX - 100, CY)


# ============================================================
# ClockTime
# ============================================================

def test_advance_increments_second():
    t = ClockTime(1, 2, 3)
    t.advance()

    assert t.as_tuple() == (1, 2, 4)


def test_sixty_advances_make_one_minute():
    t = ClockTime(5, 20, 0)
    for _ in range(60):
        t.advance()

    assert t.as_tuple() == (5, 21, 0)


def test_full_hour_of_advances_returns_to_start():
    t = ClockTime(11, 59, 30)
    start = t.copy()
    for _ in range(3600):
        t.advance()

    assert t.hour == 0
    for _ in range(3600 * 11):
        t.advance()
    assert t == start


def test_hour_wraps_to_zero_not_twelve():
    t = ClockTime(11, 59, 59)
    t.advance()

    assert t.as_tuple() == (0, 0, 0)


def test_set_fields_leaves_omitted_fields_alone():
    t = ClockTime(4, 15, 30)
    t.set_fields(minute=45)

    assert t.as_tuple() == (4, 45, 30)


def test_set_fields_rejects_out_of_range_without_partial_update():
    t = ClockTime(4, 15, 30)

    with pytest.raises(ValueError):
        t.set_fields(hour=1, minute=60)
    with pytest.raises(ValueError):
        t.set_fields(hour=12)
    with pytest.raises(ValueError):
        t.set_fields(second=-1)
    assert t.as_tuple() == (4, 15, 30)


def test_constructor_validates():
    with pytest.raises(ValueError):
        ClockTime(13, 0, 0)


# ============================================================
# angle / hour / minute conversion
# ============================================================

@pytest.mark.parametrize("point, angle", [
    (ABOVE, 270),
    (RIGHT, 0),
    (BELOW, 90),
    (LEFT, 180),
    ((CX + 100, CY + 100), 45),
    ((CX - 100, CY - 100), 225),
])
def test_angle_from_point(point, angle):
    assert angle_from_point(point[0], point[1], CX, CY) == angle


@pytest.mark.parametrize("point, hour, minute", [
    (ABOVE, 0, 0),
    (RIGHT, 3, 15),
    (BELOW, 6, 30),
    (LEFT, 9, 45),
    ((CX + 100, CY - 100), 1, 7),
    ((CX - 100, CY - 100), 10, 52),
])
def test_clicked_point_to_hour_and_minute(point, hour, minute):
    angle = angle_from_point(point[0], point[1], CX, CY)

    assert hour_from_angle(angle) == hour
    assert minute_from_angle(angle) == minute


def test_angle_is_always_in_range():
    for dx in range(-50, 51, 5):
        for dy in range(-50, 51, 5):
            angle = angle_from_point(CX + dx, CY + dy, CX, CY)
            if angle is not NO_ANGLE:
                assert 0 <= angle < 360
                assert 0 <= hour_from_angle(angle) <= 11
                assert 0 <= minute_from_angle(angle) <= 59


def test_center_has_no_angle():
    assert angle_from_point(CX, CY, CX, CY) is NO_ANGLE
    assert angle_from_point(CX + 1, CY + 1, CX, CY) is NO_ANGLE
    assert angle_from_point(CX + 3, CY, CX, CY) == 0


def test_just_before_twelve_is_eleven():
    # one pixel left of straight up, far from the center
    angle = angle_from_point(CX - 1, CY - 100, CX, CY)

    assert angle == 269
    assert hour_from_angle(angle) == 11
    assert minute_from_angle(angle) == 59


# ============================================================
# ClockModel input handling
# ============================================================

def test_tick_advances(model):
    model.tick()

    assert model.time.as_tuple() == (3, 0, 1)


def test_plus_advances_minute(model):
    assert model.key_down(KEY_PLUS) is True
    assert model.time.as_tuple() == (3, 1, 0)


def test_plus_rolls_minute_into_hour():
    model = ClockModel(ClockTime(11, 59, 12))
    model.key_down(KEY_PLUS)

    assert model.time.as_tuple() == (0, 0, 12)


def test_shift_plus_advances_hour():
    model = ClockModel(ClockTime(11, 20, 5))
    model.key_down(KEY_PLUS, shift_held=True)

    assert model.time.as_tuple() == (0, 20, 5)


def test_other_keys_are_ignored(model):
    assert model.key_down('-') is False
    assert model.time.as_tuple() == (3, 0, 0)


def test_left_click_sets_hour_only():
    model = ClockModel(ClockTime(3, 25, 40))
    assert model.mouse_up(BUTTON_LEFT, *BELOW) is True

    assert model.time.as_tuple() == (6, 25, 40)


def test_right_click_sets_minute_only():
    model = ClockModel(ClockTime(3, 25, 40))
    model.mouse_up(BUTTON_RIGHT, *LEFT)

    assert model.time.as_tuple() == (3, 45, 40)


def test_middle_click_sets_hour_and_clears_minute():
    model = ClockModel(ClockTime(3, 25, 40))
    model.mouse_up(BUTTON_MIDDLE, *ABOVE)

    assert model.time.as_tuple() == (0, 0, 40)


def test_click_on_center_changes_nothing(model):
    assert model.mouse_up(BUTTON_LEFT, CX, CY) is False
    assert model.time.as_tuple() == (3, 0, 0)


def test_unknown_button_is_ignored(model):
    assert model.mouse_up('back', *RIGHT) is False


def test_from_now_uses_twelve_hour_display():
    model = ClockModel.from_now(datetime(2024, 1, 1, 15, 42, 7))

    assert model.time.as_tuple() == (3, 42, 7)


# ============================================================
# parse_time
# ============================================================

@pytest.mark.parametrize("text, expected", [
    ("15:30", (3, 30, 0)),
    ("7:05:09", (7, 5, 9)),
    ("0:00", (0, 0, 0)),
    ("12:00:00", (0, 0, 0)),
])
def test_parse_time(text, expected):
    assert parse_time(text).as_tuple() == expected


@pytest.mark.parametrize("text", ["7", "7:xx", "24:00", "7:61", "1:2:3:4", ""])
def test_parse_time_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_time(text)
