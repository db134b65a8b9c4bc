import logging

from api_doc_meta.logging import ROOT_LOGGER, configure_logging, get_logger


class TestGetLogger:
    def test_module_logger_is_child_of_root(self):
        assert get_logger("resolver").name == "api_doc_meta.resolver"
        assert get_logger().name == ROOT_LOGGER


class TestConfigureLogging:
    def test_reconfigure_keeps_one_handler(self):
        configure_logging()
        logger = configure_logging(verbose=True)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_default_level_is_info(self):
        assert configure_logging().level == logging.INFO
