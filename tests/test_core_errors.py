"""Tests for core/errors.py."""

from ssmconfig.core.errors import (
    ConfigurationError,
    CredentialParseError,
    ExitCode,
    ProviderError,
    SsmConfigError,
    StoreFetchError,
    format_error_message,
    main_with_error_handling,
    sanitize_error,
)


class TestErrorHierarchy:
    def test_exit_codes(self):
        assert CredentialParseError("bad").exit_code == ExitCode.CONFIG_ERROR
        assert StoreFetchError("down").exit_code == ExitCode.PROVIDER_ERROR
        assert SsmConfigError("x").exit_code == ExitCode.UNKNOWN_ERROR

    def test_subclassing(self):
        assert issubclass(CredentialParseError, ConfigurationError)
        assert issubclass(StoreFetchError, ProviderError)

    def test_details_default_empty(self):
        assert StoreFetchError("down").details == {}


class TestFormatErrorMessage:
    def test_without_details(self):
        assert format_error_message(ConfigurationError("bad config")) == "bad config"

    def test_with_details(self):
        error = StoreFetchError("fetch failed", details={"path": "/app/dev/", "error_code": "X"})
        assert format_error_message(error) == "fetch failed (path=/app/dev/, error_code=X)"


class TestSanitizeError:
    def test_returns_exception_type(self):
        assert sanitize_error(ValueError("secret details")) == "ValueError"


class TestMainWithErrorHandling:
    def test_success(self):
        @main_with_error_handling()
        def command() -> int:
            return 0

        assert command() == 0

    def test_known_error(self, capsys):
        @main_with_error_handling()
        def command() -> int:
            raise StoreFetchError("fetch failed", details={"path": "/app/dev/"})

        assert command() == ExitCode.PROVIDER_ERROR
        assert "fetch failed (path=/app/dev/)" in capsys.readouterr().err

    def test_unexpected_error(self):
        @main_with_error_handling()
        def command() -> int:
            raise RuntimeError("boom")

        assert command() == ExitCode.UNKNOWN_ERROR

    def test_keyboard_interrupt(self):
        @main_with_error_handling()
        def command() -> int:
            raise KeyboardInterrupt

        assert command() == 130
