from rtosim.logger import get_logger
from rtosim.main import main


def test_main_runs_all_tasks(tmp_path, capsys):
    log_path = tmp_path / "sim.log"
    status = main(["--duration", "0.3", "--log-file", str(log_path)])
    assert status == 0
    out = capsys.readouterr().out
    for i in range(5):
        assert f"Executing Task {i} logic..." in out
    assert "HAL: Handling interrupt 1: Timer tick." in out
    assert "HAL: Handling interrupt 2: External event." in out
    assert "Main: Received packet: NetworkDriver: Received simulated packet." in out


def test_main_writes_log_file(tmp_path):
    log_path = tmp_path / "sim.log"
    assert main(["--duration", "0.05", "--log-file", str(log_path)]) == 0
    text = log_path.read_text(encoding="utf-8")
    lines = text.splitlines()
    assert "RTOS Simulation Starting via HAL..." in lines[0]
    assert "RTOS Simulation Ending." in lines[-1]
    assert get_logger().file_logging_enabled is False


def test_main_default_log_file_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--duration", "0.05"]) == 0
    text = (tmp_path / "rtos.log").read_text(encoding="utf-8")
    assert "Mapped virtual region 0x40000000 successfully." in text
    assert "Page fault at virtual address" in text
    assert "Translated virtual address 0x40000010 to physical address" in text


def test_main_appends_to_existing_log(tmp_path):
    log_path = tmp_path / "sim.log"
    main(["--duration", "0.01", "--log-file", str(log_path)])
    main(["--duration", "0.01", "--log-file", str(log_path)])
    text = log_path.read_text(encoding="utf-8")
    assert text.count("RTOS Simulation Ending.") == 2