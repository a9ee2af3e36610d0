import logging
from optkit.logger.logger import logger, setup_logger


def stream_handlers(log):
    # pytest attaches its own handlers (subclasses of StreamHandler) during tests
    return [h for h in log.handlers if type(h) is logging.StreamHandler]


def test_default_logger():
    assert logger.name == "optkit"
    assert logger.propagate is False
    assert len(stream_handlers(logger)) == 1


def test_setup_logger_configures_once():
    log = setup_logger("optkit.test.once", level="debug")
    assert log.level == logging.DEBUG
    handlers = stream_handlers(log)
    assert len(handlers) == 1

    again = setup_logger("optkit.test.once", level="error")
    assert again is log
    assert stream_handlers(again) == handlers
    assert again.level == logging.DEBUG


def test_setup_logger_writes_to_stdout(capsys):
    log = setup_logger(
        "optkit.test.stdout", level="INFO", format_string="%(levelname)s|%(message)s"
    )
    log.info("hello")
    assert "INFO|hello" in capsys.readouterr().out
