import pytest

from galbitools.hwaddrs import (
    MAC_OFFSET,
    format_bdaddr,
    main,
    read_mac_bytes,
    write_bdaddr,
)

MAC = bytes([0x02, 0x00, 0x00, 0xAB, 0xCD, 0xEF])


@pytest.fixture
def misc(tmp_path):
    path = tmp_path / "misc"
    path.write_bytes(b"\x00" * MAC_OFFSET + MAC + b"\xff" * 16)
    return path


def test_read_mac_bytes(misc):
    assert read_mac_bytes(misc) == MAC


def test_read_mac_custom_offset(tmp_path):
    path = tmp_path / "misc"
    path.write_bytes(b"\x11" * 4 + MAC)
    assert read_mac_bytes(path, 4) == MAC


def test_read_short_file(tmp_path):
    path = tmp_path / "misc"
    path.write_bytes(b"\x00" * (MAC_OFFSET + 3))
    with pytest.raises(ValueError):
        read_mac_bytes(path)


def test_format_bdaddr():
    assert format_bdaddr(MAC) == "02:00:00:ab:cd:ef"


def test_format_high_bytes():
    assert format_bdaddr(bytes([0x80, 0xFF, 0, 0, 0, 1])) == "80:ff:00:00:00:01"


def test_write_bdaddr(misc, tmp_path):
    out = tmp_path / "bdaddr"
    out.write_text("old content that is longer than the address")
    text = write_bdaddr(misc, out)
    assert out.read_text() == text
    assert text == format_bdaddr(MAC)


def test_main_writes_file(misc, tmp_path):
    out = tmp_path / "bdaddr"
    assert main(["--misc", str(misc), "--output", str(out)]) == 0
    assert out.read_text() == format_bdaddr(MAC)


def test_main_missing_partition(tmp_path):
    out = tmp_path / "bdaddr"
    assert main(["--misc", str(tmp_path / "absent"), "--output", str(out)]) == 1
    assert not out.exists()