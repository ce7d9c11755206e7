import random

import pytest

from rtosim.context_switcher import CPUContext, ContextSwitcher
from rtosim.logger import LogLevel, get_logger


@pytest.fixture(autouse=True)
def _debug_logging():
    get_logger().set_log_level(LogLevel.DEBUG)


def test_save_and_restore_context(capsys):
    switcher = ContextSwitcher()
    context = switcher.save_context()
    assert len(context.registers) == 16
    assert all(0 <= value <= 2**31 - 1 for value in context.registers)
    assert 0 <= context.cpsr <= 2**31 - 1
    switcher.restore_context(context)
    out = capsys.readouterr().out
    assert "[INFO] Context saved." in out
    assert "Restoring context:" in out
    assert f"CPSR: {context.cpsr}" in out


def test_seeded_rng_is_deterministic():
    first = ContextSwitcher(random.Random(42)).save_context()
    second = ContextSwitcher(random.Random(42)).save_context()
    assert first == second


def test_restore_format(capsys):
    context = CPUContext(list(range(16)), 7)
    ContextSwitcher().restore_context(context)
    out = capsys.readouterr().out
    assert "Restoring context:\nR0: 0 R1: 1 R2: 2 R3: 3 \n" in out
    assert "R12: 12 R13: 13 R14: 14 R15: 15 \nCPSR: 7" in out


def test_default_context_is_zeroed():
    context = CPUContext()
    assert context.registers == [0] * 16
    assert context.cpsr == 0


def test_wrong_register_count_raises():
    with pytest.raises(ValueError):
        CPUContext([0] * 15, 0)