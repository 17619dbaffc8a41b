import pytest

from expense_log.config import Config
from expense_log.menu.main import main


def test_validate_accepts_defaults():
    Config.validate()


def test_validate_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError):
        Config.validate()


def test_main_exits_with_error_on_bad_config(monkeypatch, capsys):
    monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
    with pytest.raises(SystemExit) as exc:
        main()
    assert exc.value.code == 1
    assert "Configuration error" in capsys.readouterr().out


def test_main_loads_file_and_exits(monkeypatch, data_file, scripted_input, capsys):
    with open(data_file, "w", encoding="utf-8") as f:
        f.write("2026-10-14,12.50,food,lunch\n")
    monkeypatch.setattr(Config, "EXPENSE_FILE", data_file)
    monkeypatch.setattr(Config, "LOG_FILE", None)
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    scripted_input("3", "4")
    with pytest.raises(SystemExit) as exc:
        main()
    assert exc.value.code == 0
    assert "lunch" in capsys.readouterr().out
