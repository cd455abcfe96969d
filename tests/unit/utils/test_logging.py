import logging

from jira_mcp.utils.logging import log_config_param, mask_sensitive, setup_logging


def test_setup_logging_default_level():
    """Test setup_logging with default WARNING level"""
    logger = setup_logging()

    assert logger.level == logging.WARNING

    root_logger = logging.getLogger()
    assert root_logger.level == logging.WARNING

    assert len(root_logger.handlers) == 1
    handler = root_logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.formatter._fmt == "%(levelname)s - %(name)s - %(message)s"


def test_setup_logging_custom_level():
    """Test setup_logging with custom DEBUG level"""
    logger = setup_logging(logging.DEBUG)

    assert logger.level == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("mcp.server").level == logging.DEBUG


def test_setup_logging_removes_existing_handlers():
    """Test that setup_logging removes existing handlers"""
    root_logger = logging.getLogger()
    test_handler = logging.StreamHandler()
    root_logger.addHandler(test_handler)

    setup_logging()

    assert len(root_logger.handlers) == 1
    assert test_handler not in root_logger.handlers


def test_setup_logging_logger_name():
    """Test that setup_logging returns the application logger"""
    assert setup_logging().name == "jira-mcp"


def test_mask_sensitive():
    assert mask_sensitive(None) == "Not Provided"
    assert mask_sensitive("short") == "*****"
    assert mask_sensitive("abcd1234efgh5678") == "abcd********5678"


def test_log_config_param_masks_secrets(caplog):
    logger = logging.getLogger("jira-mcp.test")

    with caplog.at_level(logging.INFO, logger="jira-mcp.test"):
        log_config_param(logger, "API token", "abcd1234efgh5678", sensitive=True)
        log_config_param(logger, "email", None)

    assert "Jira API token: abcd********5678" in caplog.text
    assert "Jira email: Not Provided" in caplog.text
    assert "1234efgh" not in caplog.text
