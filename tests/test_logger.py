import logging

from salesboard.utils.logger import get_logger


def test_single_handler_and_default_level():
    log = get_logger("salesboard.test.default")
    again = get_logger("salesboard.test.default")

    assert log is again
    assert len(log.handlers) == 1
    assert log.level == logging.INFO


def test_level_is_applied_on_later_calls():
    get_logger("salesboard.test.verbose")
    log = get_logger("salesboard.test.verbose", level=logging.DEBUG)

    assert log.level == logging.DEBUG
    assert len(log.handlers) == 1


def test_cli_verbose_flag_sets_package_level(monkeypatch, dashboard):
    from salesboard import cli

    monkeypatch.setattr(
        cli,
        "run_once",
        lambda config_path=None, with_advice=False: {
            "data": dashboard.to_dict(),
            "is_fallback": False,
            "advice": None,
        },
    )
    package_logger = logging.getLogger("salesboard")
    monkeypatch.setattr(package_logger, "level", package_logger.level)

    cli.main(["--once", "-v"])
    assert package_logger.level == logging.DEBUG

    cli.main(["--once"])
    assert package_logger.level == logging.INFO
