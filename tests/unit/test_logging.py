import structlog

from twitchhelix.core.logging import LogContext, get_logger, setup_logging


class TestLogging:
    def test_setup_logging_console(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "console")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        setup_logging()
        assert structlog.is_configured()

    def test_setup_logging_json(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        setup_logging()
        assert structlog.is_configured()

    def test_get_logger_with_context(self):
        logger = get_logger("twitchhelix.test", endpoint="streams")
        assert logger is not None

    def test_log_context_binds_and_unbinds(self):
        with LogContext(request_id="abc"):
            assert structlog.contextvars.get_contextvars()["request_id"] == "abc"
        assert "request_id" not in structlog.contextvars.get_contextvars()
