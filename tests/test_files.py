import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from quark.files import (
    file_exists,
    file_size,
    open_file_or_panic,
    path_exists,
    read_entire_file,
)
from quark.text import PanicError


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(st.binary(max_size=4096))
def test_read_entire_file_round_trip(tmp_path, data):
    path = tmp_path / "blob.bin"
    path.write_bytes(data)
    assert read_entire_file(path) == data


def test_file_size_rewinds(tmp_path):
    path = tmp_path / "data.bin"
    payload = b"quark engine data"
    path.write_bytes(payload)
    with open_file_or_panic(path, "rb", "reading") as f:
        f.read(5)
        assert file_size(f) == len(payload)
        assert f.read() == payload


def test_open_missing_file_panics(tmp_path):
    missing = tmp_path / "absent.txt"
    with pytest.raises(PanicError) as info:
        open_file_or_panic(missing, "rb", "could not load level")
    message = str(info.value)
    assert str(missing) in message
    assert "could not load level" in message
    assert isinstance(info.value.__cause__, OSError)


def test_read_missing_file_panics(tmp_path):
    with pytest.raises(PanicError):
        read_entire_file(tmp_path / "nope.bin")


def test_write_then_read(tmp_path):
    path = tmp_path / "out.txt"
    with open_file_or_panic(path, "wb", "writing") as f:
        f.write(b"abc")
    assert read_entire_file(path) == b"abc"


def test_existence_checks(tmp_path):
    path = tmp_path / "here.txt"
    assert file_exists(path) is False
    path.write_text("x")
    assert file_exists(path) is True
    assert path_exists(tmp_path) is True
    assert path_exists(tmp_path / "missing") is False