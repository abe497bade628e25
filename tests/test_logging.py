from loguru import logger

from selectionset.core.config import LoggingSettings, load_config
from selectionset.core.logging import setup_logging


def test_setup_logging_defaults_to_debug_console(tmp_path, capsys):
    setup_logging()
    logger.debug("visible debug")
    logger.remove()

    assert "visible debug" in capsys.readouterr().err


def test_setup_logging_console_only(tmp_path, capsys):
    setup_logging(LoggingSettings(debug_mode=False))
    logger.debug("hidden")
    logger.info("shown")
    logger.remove()

    err = capsys.readouterr().err
    assert "shown" in err
    assert "hidden" not in err
    assert not any(tmp_path.iterdir())


def test_setup_logging_file_sink(tmp_path):
    log_dir = tmp_path / "logs"

    setup_logging(LoggingSettings(log_dir=str(log_dir)))
    logger.debug("to file")
    logger.remove()

    files = list(log_dir.iterdir())
    assert len(files) == 1
    assert "to file" in files[0].read_text(encoding="utf-8")


def test_setup_logging_from_loaded_settings(tmp_path, capsys):
    path = tmp_path / "app.toml"
    path.write_text("[logging]\ndebug_mode = false\n", encoding="utf-8")

    setup_logging(load_config(str(path)).logging)
    logger.debug("suppressed")
    logger.info("kept")
    logger.remove()

    err = capsys.readouterr().err
    assert "kept" in err
    assert "suppressed" not in err
