import logging

from release_notifier.config import get_settings
from release_notifier.log import get_logger, setup_logging


def test_configured_library_loggers_are_quieted():
    settings = get_settings().model_copy(update={"QUIET_LOGGERS": ["noisy.lib"]})
    logging.getLogger("noisy.lib").setLevel(logging.NOTSET)

    setup_logging(settings)

    assert logging.getLogger("noisy.lib").level == logging.WARNING


def test_module_loggers_share_package_namespace():
    assert get_logger("notify").name == "release_notifier.notify"
