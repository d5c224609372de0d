import logging

from pixcheckout.logging import configure_logging
from pixcheckout.settings import Settings


class TestConfigureLogging:
    def test_text_format(self):
        configure_logging(Settings(_env_file=None, log_level="debug", log_json=False))
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert not root.handlers[0].formatter.__class__.__name__.startswith("Json")

    def test_json_format(self):
        configure_logging(Settings(_env_file=None, log_level="INFO", log_json=True))
        root = logging.getLogger()
        assert len(root.handlers) == 1
        from pythonjsonlogger.json import JsonFormatter

        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_invalid_level_falls_back_to_info(self):
        configure_logging(Settings(_env_file=None, log_level="nope"))
        assert logging.getLogger().level == logging.INFO

    def test_quiets_noisy_loggers(self):
        configure_logging(Settings(_env_file=None))
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_reconfigure_does_not_stack_handlers(self):
        configure_logging(Settings(_env_file=None))
        configure_logging(Settings(_env_file=None))
        assert len(logging.getLogger().handlers) == 1
