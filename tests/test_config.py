"""Tests for ContextVar-based parse configuration and server settings."""

from threading import Thread

import pytest

from minimark import (
    ParseConfig,
    ServerConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        assert ParseConfig().legacy_eof is False

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.legacy_eof = True  # type: ignore[misc]

    def test_from_dict(self) -> None:
        assert ParseConfig.from_dict({"legacy_eof": True}).legacy_eof is True

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"legacy_eof": True, "tables_enabled": True})
        assert config == ParseConfig(legacy_eof=True)

    def test_from_dict_empty(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default(self) -> None:
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset(self) -> None:
        set_parse_config(ParseConfig(legacy_eof=True))
        try:
            assert get_parse_config().legacy_eof is True
        finally:
            reset_parse_config()
        assert get_parse_config().legacy_eof is False

    def test_context_manager_restores_previous(self) -> None:
        with parse_config_context(ParseConfig(legacy_eof=True)):
            assert get_parse_config().legacy_eof is True
        assert get_parse_config().legacy_eof is False

    def test_context_manager_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with parse_config_context(ParseConfig(legacy_eof=True)):
                raise RuntimeError("boom")
        assert get_parse_config().legacy_eof is False

    def test_thread_changes_do_not_leak(self) -> None:
        """A config set in another thread leaves this thread untouched."""
        seen: list[bool] = []

        def worker() -> None:
            set_parse_config(ParseConfig(legacy_eof=True))
            seen.append(get_parse_config().legacy_eof)

        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == [True]
        assert get_parse_config().legacy_eof is False


class TestServerConfig:
    """Server settings."""

    def test_defaults(self) -> None:
        config = ServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 3001
        assert config.root == "."
        assert config.parse == ParseConfig()

    def test_from_dict_nested_parse(self) -> None:
        config = ServerConfig.from_dict(
            {"port": 8080, "parse": {"legacy_eof": True}, "workers": 4}
        )
        assert config.port == 8080
        assert config.parse == ParseConfig(legacy_eof=True)
        assert config.host == "127.0.0.1"

    def test_immutability(self) -> None:
        with pytest.raises(AttributeError):
            ServerConfig().port = 1  # type: ignore[misc]
