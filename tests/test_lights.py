import pytest

from galbitools.lights import (
    BACKBTN_LEFT_FILE,
    BACKBTN_RIGHT_FILE,
    LCD_FILE,
    PTN_BLINK_FILE,
    FlashMode,
    LightsDevice,
    LightState,
    blink_pattern,
    is_lit,
    rgb_to_brightness,
)


def _file(root, name):
    return root / name.lstrip("/")


def _make(root, *names):
    for name in names:
        path = _file(root, name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("")


def _reset(root, name):
    _file(root, name).write_text("")


def _read(root, name):
    return _file(root, name).read_text()


@pytest.fixture
def device(tmp_path):
    _make(tmp_path, LCD_FILE, PTN_BLINK_FILE, BACKBTN_LEFT_FILE, BACKBTN_RIGHT_FILE)
    return LightsDevice(tmp_path), tmp_path


def test_is_lit_ignores_alpha():
    assert is_lit(LightState(color=0xFF000000)) is False
    assert is_lit(LightState(color=0x00000001)) is True


def test_brightness_bounds():
    assert rgb_to_brightness(LightState(color=0xFF000000)) == 0
    assert rgb_to_brightness(LightState(color=0x00FFFFFF)) == 255


def test_brightness_ignores_alpha():
    a = rgb_to_brightness(LightState(color=0x00123456))
    b = rgb_to_brightness(LightState(color=0xFF123456))
    assert a == b


def test_brightness_green_brighter_than_blue():
    green = rgb_to_brightness(LightState(color=0x0000FF00))
    blue = rgb_to_brightness(LightState(color=0x000000FF))
    assert green > blue


def test_blink_pattern_timed():
    state = LightState(0xFF00FF00, FlashMode.TIMED, 500, 1000)
    assert blink_pattern(state) == "0xff00ff00,500,1000"


def test_blink_pattern_not_timed():
    state = LightState(0xFF00FF00, FlashMode.NONE, 500, 1000)
    assert blink_pattern(state) == "0xff00ff00,-1,-1"


def test_backlight_writes_brightness(device):
    dev, root = device
    dev.set_backlight(LightState(color=0xFFFFFFFF))
    assert _read(root, LCD_FILE) == "255\n"


def test_backlight_missing_file_raises(tmp_path):
    dev = LightsDevice(tmp_path)
    with pytest.raises(FileNotFoundError):
        dev.set_backlight(LightState(color=0xFFFFFFFF))


def test_notification_written(device):
    dev, root = device
    state = LightState(0xFF0000FF, FlashMode.TIMED, 100, 200)
    dev.set_notifications(state)
    assert _read(root, PTN_BLINK_FILE) == blink_pattern(state) + "\n"


def test_notification_beats_battery(device):
    dev, root = device
    note = LightState(0xFF0000FF, FlashMode.TIMED, 100, 200)
    dev.set_notifications(note)
    _reset(root, PTN_BLINK_FILE)
    dev.set_battery(LightState(0xFFFF0000))
    assert _read(root, PTN_BLINK_FILE) == blink_pattern(note) + "\n"


def test_battery_shown_when_notification_dark(device):
    dev, root = device
    battery = LightState(0xFFFF0000)
    dev.set_battery(battery)
    assert _read(root, PTN_BLINK_FILE) == blink_pattern(battery) + "\n"


def test_nothing_lit_writes_notification(device):
    dev, root = device
    dev.set_battery(LightState(0xFF000000))
    assert _read(root, PTN_BLINK_FILE) == "0x0,-1,-1\n"


def test_attention_wins_and_lights_buttons(device):
    dev, root = device
    dev.set_notifications(LightState(0xFF0000FF))
    _reset(root, PTN_BLINK_FILE)
    attention = LightState(0xFFFFFFFF, FlashMode.TIMED, 10, 20)
    dev.set_attention(attention)
    assert _read(root, PTN_BLINK_FILE) == blink_pattern(attention) + "\n"
    expected = f"{rgb_to_brightness(attention)}\n"
    assert _read(root, BACKBTN_LEFT_FILE) == expected
    assert _read(root, BACKBTN_RIGHT_FILE) == expected


def test_attention_zero_times_turns_off(device):
    dev, root = device
    note = LightState(0xFF0000FF)
    dev.set_notifications(note)
    _reset(root, PTN_BLINK_FILE)
    dev.set_attention(LightState(0xFFFFFFFF, FlashMode.TIMED, 0, 0))
    assert _read(root, PTN_BLINK_FILE) == blink_pattern(note) + "\n"
    assert _read(root, BACKBTN_LEFT_FILE) == "0\n"


def test_led_errors_are_swallowed(tmp_path):
    dev = LightsDevice(tmp_path)
    dev.set_notifications(LightState(0xFF0000FF))
    assert not _file(tmp_path, PTN_BLINK_FILE).exists()


def test_open_returns_setter(device):
    dev, root = device
    setter = dev.open("backlight")
    setter(LightState(color=0xFF000000))
    assert _read(root, LCD_FILE) == "0\n"


def test_open_unknown_name():
    with pytest.raises(ValueError):
        LightsDevice("/nonexistent").open("keyboard")