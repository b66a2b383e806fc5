import logging

from core import logging as core_logging


def test_is_test_environment_under_pytest():
    assert core_logging._is_test_environment()  # pylint: disable=protected-access


def test_configure_logging_silences_output_in_tests():
    core_logging.configure_logging()
    assert logging.root.level == logging.CRITICAL + 1


def test_get_module_logger_can_emit():
    log = core_logging.get_module_logger()
    log.info("test_event", key="value")
    log.warning("test_warning")
