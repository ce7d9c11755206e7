import threading
import time

import pytest

from rtosim.logger import LogLevel, get_logger
from rtosim.timer_driver import TimerDriver


@pytest.fixture(autouse=True)
def _debug_logging():
    get_logger().set_log_level(LogLevel.DEBUG)


def test_initialize(capsys):
    assert TimerDriver().initialize() is True
    assert "[INFO] TimerDriver: Initialized." in capsys.readouterr().out


def test_timer_fires_until_stopped(capsys):
    timer = TimerDriver()
    fired = threading.Event()
    timer.start(5, fired.set)
    assert timer.running
    assert fired.wait(2.0)
    timer.stop()
    assert not timer.running
    out = capsys.readouterr().out
    assert "TimerDriver: Timer started with interval 5 ms." in out
    assert "TimerDriver: Timer stopped." in out


def test_no_ticks_after_stop():
    timer = TimerDriver()
    ticks = []
    ticked = threading.Event()

    def tick():
        ticks.append(1)
        ticked.set()

    timer.start(2, tick)
    assert timer.running is True
    assert ticked.wait(2.0)
    timer.stop()
    assert timer.running is False
    count = len(ticks)
    assert count >= 1
    time.sleep(0.05)
    assert len(ticks) == count


def test_second_start_is_ignored():
    timer = TimerDriver()
    first = threading.Event()
    second = []
    timer.start(5, first.set)
    timer.start(1, lambda: second.append(1))
    assert first.wait(2.0)
    timer.stop()
    assert second == []


def test_stop_when_not_running_is_silent(capsys):
    timer = TimerDriver()
    timer.stop()
    assert not timer.running
    assert "Timer stopped" not in capsys.readouterr().out


def test_negative_interval_raises():
    timer = TimerDriver()
    with pytest.raises(ValueError):
        timer.start(-1, lambda: None)
    assert not timer.running