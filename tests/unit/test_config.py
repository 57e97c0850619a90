"""Unit tests for configuration, token resolution and the CLI entry point."""

import pytest
from pydantic import ValidationError

from miro_mcp import server
from miro_mcp.config import (
    DEFAULT_BASE_URL,
    MiroConfig,
    load_config,
    mask_token,
    resolve_token,
)
from miro_mcp.errors import ConfigurationError


class TestResolveToken:
    def test_cli_token_wins_over_environment(self):
        assert resolve_token("from-cli", {"MIRO_OAUTH_TOKEN": "from-env"}) == "from-cli"

    def test_environment_used_without_cli_token(self):
        assert resolve_token(None, {"MIRO_OAUTH_TOKEN": "from-env"}) == "from-env"

    def test_blank_cli_token_falls_back_to_environment(self):
        assert resolve_token("   ", {"MIRO_OAUTH_TOKEN": "from-env"}) == "from-env"

    def test_missing_token_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_token(None, {})
        assert "MIRO_OAUTH_TOKEN" in str(exc_info.value)
        assert "--token" in str(exc_info.value)


class TestLoadConfig:
    def test_defaults(self):
        config = load_config(environ={"MIRO_OAUTH_TOKEN": "abc"})
        assert config.token == "abc"
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == 30.0

    def test_base_url_from_environment_loses_trailing_slash(self):
        config = load_config(
            environ={"MIRO_OAUTH_TOKEN": "abc", "MIRO_API_BASE_URL": "http://localhost:9000/v2/"}
        )
        assert config.base_url == "http://localhost:9000/v2"

    def test_base_url_flag_beats_environment(self):
        config = load_config(
            base_url="http://flag/v2",
            environ={"MIRO_OAUTH_TOKEN": "abc", "MIRO_API_BASE_URL": "http://env/v2"},
        )
        assert config.base_url == "http://flag/v2"

    def test_config_is_frozen(self):
        config = MiroConfig(token="abc")
        with pytest.raises(ValidationError):
            config.token = "other"

    def test_empty_token_rejected(self):
        with pytest.raises(ValidationError):
            MiroConfig(token="")


class TestMaskToken:
    def test_long_token_keeps_five_characters_each_end(self):
        assert mask_token("abcdefghijklmnop") == "abcde...lmnop"

    def test_short_token_fully_masked(self):
        assert mask_token("short") == "*****"

    def test_missing_token(self):
        assert mask_token(None) == "undefined"


class TestMain:
    def test_missing_token_exits_with_status_one(self, monkeypatch, capsys):
        """Startup without a token fails before any server is built."""
        monkeypatch.delenv("MIRO_OAUTH_TOKEN", raising=False)
        monkeypatch.setattr(server, "configure_logging", lambda level: None)
        built = []
        monkeypatch.setattr(server, "create_server", lambda config: built.append(config))

        with pytest.raises(SystemExit) as exc_info:
            server.main(["stdio"])

        assert exc_info.value.code == 1
        assert "token is required" in capsys.readouterr().err
        assert built == []

    def test_parser_defaults(self):
        args = server.build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.host == "0.0.0.0"
        assert args.port == 3002
        assert args.token is None

    def test_parser_rejects_unknown_transport(self):
        with pytest.raises(SystemExit):
            server.build_parser().parse_args(["websocket"])
