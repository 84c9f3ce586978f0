import json

import pytest
from loguru import logger

from essentials.core.excepthook import uninstall_exception_hooks
from essentials.main import main


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "general": {"debug_mode": False},
        "logging": {"log_dir": str(tmp_path / "logs"), "file_logging": False},
    }))
    yield str(path)
    uninstall_exception_hooks()
    # main() points a sink at the captured stderr
    logger.remove()


def test_demo_checks_out_cart(config_path, capsys):
    assert main(["--config", config_path]) == 0
    assert "Cart after checkout: []" in capsys.readouterr().out


def test_demo_failure_is_shown_not_raised(config_path, capsys):
    assert main(["--config", config_path, "--fail"]) == 0

    out = capsys.readouterr().out
    assert "[Error] Could not checkout because network error" in out
    assert "Cart after checkout: ['Wensleydale', 'Stilton']" in out


def test_startup_error_returns_nonzero(config_path, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("no terminal")

    monkeypatch.setattr("essentials.main.setup_logging", broken)

    assert main(["--config", config_path]) == 1
