from holograph.logger import MemoryLogger, TerminalLogger
from holograph.protocols import Logger


def test_memory_logger_groups_by_level():
    logger = MemoryLogger()
    logger.error("e")
    logger.warning("w")
    logger.notice("n")
    logger.info("i")
    assert logger.messages == {
        "error": ["e"],
        "warning": ["w"],
        "notice": ["n"],
        "info": ["i"],
    }
    assert isinstance(logger, Logger)


def test_terminal_logger_default(capsys):
    logger = TerminalLogger()
    logger.notice("Writing files\n")
    logger.info("hidden")
    logger.warning("careful")
    logger.error("broken")

    out = capsys.readouterr()
    assert out.out == "Writing files\n"
    assert "Warning: careful" in out.err
    assert "broken" in out.err
    assert logger.warning_count == 1


def test_terminal_logger_verbose(capsys):
    TerminalLogger(verbose=True).info("details")
    assert ">> details" in capsys.readouterr().out


def test_terminal_logger_quiet(capsys):
    logger = TerminalLogger(quiet=True, verbose=True)
    logger.notice("n")
    logger.info("i")
    logger.warning("w")
    out = capsys.readouterr()
    assert out.out == ""
    assert "w" in out.err


def test_loggers_do_not_share_settings(capsys):
    TerminalLogger(verbose=True)
    TerminalLogger().info("quiet by default")
    assert capsys.readouterr().out == ""
