"""Tests for logger level filtering, file format and cleanup."""

import pytest

from prepush.core.log import (
    ConsoleSink,
    FileSink,
    Logger,
    LogfireSink,
    level_name,
    setup_logger,
)


def _file_logger(tmp_path, level, **file_kwargs):
    log_file = tmp_path / f"{level}.log"
    logger = setup_logger(
        log_root=tmp_path,
        run_name="test",
        console=ConsoleSink(enabled=False),
        file=FileSink(enabled=True, level=level, path=str(log_file),
                      **file_kwargs),
        logfire=LogfireSink(enabled=False),
    )
    return logger, log_file


def test_debug_level_includes_debug(tmp_path):
    logger, log_file = _file_logger(tmp_path, "debug")

    logger.debug("DEBUG message - should be included")
    logger.info("INFO message - should be included")
    logger.close()

    content = log_file.read_text()
    assert "DEBUG message" in content
    assert "INFO message" in content


def test_warn_level_filters_info(tmp_path):
    logger, log_file = _file_logger(tmp_path, "warn")

    logger.info("INFO message - should be filtered")
    logger.warn("WARN message - should be included")
    logger.error("ERROR message - should be included")
    logger.close()

    content = log_file.read_text()
    assert "INFO message" not in content
    assert "WARN message" in content
    assert "ERROR message" in content


def test_default_format_is_json(tmp_path):
    logger, log_file = _file_logger(tmp_path, "info")

    logger.info("Json message")
    logger.close()

    content = log_file.read_text()
    assert content.startswith("{")
    assert '"name": "Json message"' in content


def test_text_format_template(tmp_path):
    logger, log_file = _file_logger(
        tmp_path, "info", format_template="[{level}] {message}"
    )

    logger.info("Text message")
    logger.close()

    assert "[info] Text message" in log_file.read_text()


def test_level_name_round_trip():
    from prepush.core.log import LEVELS

    for name, number in LEVELS.items():
        assert level_name(number) == name


def test_sinks_inherit_logger_level():
    logger = Logger(level="debug", file=FileSink())

    assert logger.file.level == "debug"
    # Console keeps its own quieter default
    assert logger.console.level == "warn"


def test_logger_closes_file_via_context_manager(tmp_path):
    logger = Logger(
        console=ConsoleSink(enabled=False),
        file=FileSink(enabled=True, path=str(tmp_path / "test.log")),
        logfire={"enabled": False},
    )
    logger.setup(log_root=tmp_path, run_name="test")

    assert not logger.file._file.closed

    with logger:
        logger.info("test message")

    assert logger.file._file.closed


def test_logger_closes_on_exception(tmp_path):
    logger = Logger(
        console=ConsoleSink(enabled=False),
        file=FileSink(enabled=True, path=str(tmp_path / "test.log")),
        logfire={"enabled": False},
    )
    logger.setup(log_root=tmp_path, run_name="test")

    with pytest.raises(ValueError), logger:
        logger.info("before exception")
        raise ValueError("test exception")

    assert logger.file._file.closed


def test_config_close_cascades_to_sinks(tmp_path):
    """Config.close() closes the logger and its file sink."""
    from prepush.core.config import Config

    config = Config(
        log_root=tmp_path,
        logger=Logger(
            console=ConsoleSink(enabled=False),
            file=FileSink(enabled=True, path=str(tmp_path / "cascade.log")),
            logfire={"enabled": False},
        ),
    )

    assert not config.logger.file._file.closed

    config.close()

    assert config.logger.file._file.closed
