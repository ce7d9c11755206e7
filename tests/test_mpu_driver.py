import pytest

from rtosim.logger import LogLevel, get_logger
from rtosim.mpu_driver import MPUDriver


@pytest.fixture(autouse=True)
def _debug_logging():
    get_logger().set_log_level(LogLevel.DEBUG)


def test_initialize_and_configure(capsys):
    mpu = MPUDriver()
    assert mpu.initialize() is True
    assert mpu.initialized
    assert mpu.configure_region(0x20000000, 0x1000, 0x03) is True
    out = capsys.readouterr().out
    assert "MPU Initialized successfully." in out
    assert "Configured MPU region: Base=0x20000000, Size=4096, Permissions=0x3" in out


def test_enforce_without_initialization(capsys):
    mpu = MPUDriver()
    mpu.enforce_memory_protection()
    out = capsys.readouterr().out
    assert "[ERROR] MPU is not initialized." in out
    assert "Enforcing" not in out


def test_configure_without_initialization_fails():
    mpu = MPUDriver()
    assert mpu.configure_region(0x20000000, 0x1000, 0x03) is False
    assert not mpu.initialized


def test_enforce_after_initialization(capsys):
    mpu = MPUDriver()
    mpu.initialize()
    mpu.enforce_memory_protection()
    assert "[INFO] Enforcing hardware-level memory isolation." in capsys.readouterr().out