import pytest

from rtosim.allocator import allocate, deallocate
from rtosim.logger import LogLevel, get_logger


@pytest.fixture(autouse=True)
def _debug_logging():
    get_logger().set_log_level(LogLevel.DEBUG)


def test_allocate_and_deallocate(capsys):
    size = 1024
    buffer = allocate(size, 0)
    assert len(buffer) == size
    assert not any(buffer)
    deallocate(buffer, size)
    assert len(buffer) == 0
    out = capsys.readouterr().out
    assert "[INFO] Allocating 1024 bytes on NUMA node 0" in out
    assert "[INFO] Deallocating 1024 bytes." in out


def test_allocate_default_node(capsys):
    buffer = allocate(16)
    assert len(buffer) == 16
    assert "Allocating 16 bytes on NUMA node 0" in capsys.readouterr().out


def test_allocate_on_other_node(capsys):
    allocate(8, 1)
    assert "on NUMA node 1" in capsys.readouterr().out


def test_buffer_is_writable():
    buffer = allocate(4, 0)
    buffer[:] = b"\x01\x02\x03\x04"
    assert bytes(buffer) == b"\x01\x02\x03\x04"


def test_negative_size_raises():
    with pytest.raises(ValueError):
        allocate(-1, 0)