"""Tests for config and logging."""

import json
import logging
import sys
from typing import Iterator

import pytest

from bank_terminal.config import DEFAULT_API_URL, ApiConfig, LoggingConfig, TerminalConfig
from bank_terminal.exceptions import ConfigurationError
from bank_terminal.logging import JsonFormatter, TaxIdRedactionFilter, get_logger, setup_logging

ENV_VARS = [
    "BANK_API_URL",
    "BANK_API_TIMEOUT",
    "BANK_API_VERIFY_TLS",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_REDACT_TAX_IDS",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """Root logger, restored after the test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestApiConfig:
    """Tests for ApiConfig."""

    def test_default_values(self) -> None:
        config = ApiConfig()

        assert config.base_url == DEFAULT_API_URL
        assert config.timeout == 10.0
        assert config.verify_tls is True

    def test_strips_trailing_slash(self) -> None:
        assert ApiConfig(base_url="http://bank:8080/api/v1/").base_url == "http://bank:8080/api/v1"

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_rejects_non_positive_timeout(self, timeout: float) -> None:
        with pytest.raises(ConfigurationError):
            ApiConfig(timeout=timeout)


class TestTerminalConfig:
    """Tests for TerminalConfig."""

    def test_default_values(self) -> None:
        config = TerminalConfig()

        assert config.api == ApiConfig()
        assert config.logging == LoggingConfig()
        assert config.logging.level == "INFO"
        assert config.logging.format_type == "standard"

    def test_from_env_default(self, clean_env: pytest.MonkeyPatch) -> None:
        config = TerminalConfig.from_env()

        assert config.api.base_url == DEFAULT_API_URL
        assert config.api.timeout == 10.0
        assert config.api.verify_tls is True
        assert config.logging.level == "INFO"
        assert config.logging.redact_tax_ids is True

    def test_from_env_custom(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("BANK_API_URL", "https://bank.example.com/api/v1/")
        clean_env.setenv("BANK_API_TIMEOUT", "2.5")
        clean_env.setenv("BANK_API_VERIFY_TLS", "False")
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("LOG_FORMAT", "json")
        clean_env.setenv("LOG_REDACT_TAX_IDS", "false")

        config = TerminalConfig.from_env()

        assert config.api.base_url == "https://bank.example.com/api/v1"
        assert config.api.timeout == 2.5
        assert config.api.verify_tls is False
        assert config.logging.level == "DEBUG"
        assert config.logging.format_type == "json"
        assert config.logging.redact_tax_ids is False

    def test_from_env_bad_timeout(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("BANK_API_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError, match="BANK_API_TIMEOUT"):
            TerminalConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self, root_logger: logging.Logger) -> None:
        setup_logging()

        assert logging.getLogger("bank_terminal").level == logging.INFO
        assert root_logger.level == logging.INFO

    def test_setup_logging_debug(self, root_logger: logging.Logger) -> None:
        setup_logging(level="debug")
        assert root_logger.level == logging.DEBUG

    def test_setup_logging_invalid_level(self, root_logger: logging.Logger) -> None:
        """Unknown levels fall back to INFO."""
        setup_logging(level="INVALID")
        assert root_logger.level == logging.INFO

    def test_setup_logging_json_format(self, root_logger: logging.Logger) -> None:
        setup_logging(format_type="json")
        assert any(isinstance(h.formatter, JsonFormatter) for h in root_logger.handlers)

    def test_setup_logging_replaces_handlers(self, root_logger: logging.Logger) -> None:
        root_logger.addHandler(logging.StreamHandler())
        root_logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(root_logger.handlers) == 1

    def test_logs_to_stderr(self, root_logger: logging.Logger) -> None:
        setup_logging()
        (handler,) = root_logger.handlers
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_redaction_filter_installed(self, root_logger: logging.Logger) -> None:
        setup_logging()
        assert any(isinstance(f, TaxIdRedactionFilter) for f in root_logger.handlers[0].filters)

    def test_redaction_can_be_disabled(self, root_logger: logging.Logger) -> None:
        setup_logging(redact_tax_ids=False)
        assert root_logger.handlers[0].filters == []

    def test_external_loggers_quieted(self, root_logger: logging.Logger) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        defaults = dict(
            name="test.logger",
            level=logging.INFO,
            pathname="/path/to/file.py",
            lineno=42,
            msg="Transaction %s executed",
            args=("NSU-1",),
            exc_info=None,
        )
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Transaction NSU-1 executed"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info)))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = self._record()
        record.extra = {"manager_id": 7}

        data = json.loads(JsonFormatter().format(record))

        assert data["manager_id"] == 7

    def test_keeps_non_ascii(self) -> None:
        result = JsonFormatter().format(self._record(msg="Endereço não encontrado", args=()))
        assert "Endereço não encontrado" in result


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        logger = get_logger("bank_terminal.client")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "bank_terminal.client"

    def test_get_logger_same_instance(self) -> None:
        assert get_logger("test.same") is get_logger("test.same")


class TestPackageInit:
    """Tests for bank_terminal __init__.py."""

    def test_version_exported(self) -> None:
        from bank_terminal import __version__

        assert isinstance(__version__, str)


class TestTaxIdRedactionFilter:
    """Tests for TaxIdRedactionFilter."""

    def _filtered(self, msg: str, *args) -> str:
        record = logging.LogRecord("test", logging.INFO, __file__, 1, msg, args, None)
        assert TaxIdRedactionFilter().filter(record) is True
        return record.getMessage()

    def test_masks_bare_cpf_in_args(self) -> None:
        message = self._filtered("%s %s", "GET", "/contas/buscar-por-cpf/52998224725")
        assert message == "GET /contas/buscar-por-cpf/***.***.**7-25"

    def test_masks_formatted_cpf(self) -> None:
        assert self._filtered("Cliente 529.982.247-25 não encontrado") == (
            "Cliente ***.***.**7-25 não encontrado"
        )

    def test_leaves_invalid_numbers(self) -> None:
        assert self._filtered("NSU 12345678901 ok") == "NSU 12345678901 ok"

    def test_leaves_longer_numbers(self) -> None:
        assert self._filtered("id 529982247250") == "id 529982247250"
