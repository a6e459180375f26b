"""Tests for environment-driven settings."""

from unittest.mock import patch

from filerelay.infrastructure.settings import DEFAULT_MAX_UPLOAD_BYTES, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PORT", "API_PORT", "API_KEY", "DISCORD_WEBHOOK_URL", "MAX_UPLOAD_BYTES"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.api_port == 3000
        assert settings.max_upload_bytes == DEFAULT_MAX_UPLOAD_BYTES == 8 * 1024 * 1024
        assert settings.webhook_url is None
        assert settings.expected_api_key == ""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("API_KEY", "s3cret")
        monkeypatch.setenv("DISCORD_WEBHOOK_URL", "https://discord.test/api/webhooks/1/tok")

        settings = Settings(_env_file=None)

        assert settings.api_port == 8080
        assert settings.expected_api_key == "s3cret"
        assert settings.webhook_url == "https://discord.test/api/webhooks/1/tok"

    def test_blank_webhook_is_unset(self, monkeypatch):
        monkeypatch.setenv("DISCORD_WEBHOOK_URL", "   ")

        assert Settings(_env_file=None).webhook_url is None

    def test_secrets_hidden_from_repr(self):
        settings = Settings(_env_file=None, api_key="s3cret", discord_webhook_url="https://x/y/token")

        assert "s3cret" not in repr(settings)
        assert "token" not in repr(settings)


class TestServeCli:
    def test_runs_uvicorn_with_arguments(self, monkeypatch):
        from filerelay.cli import serve

        monkeypatch.setattr("sys.argv", ["filerelay-serve", "--host", "127.0.0.1", "--port", "9999"])

        with patch.object(serve.uvicorn, "run") as mock_run:
            assert serve.main() == 0

        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args == ("filerelay.api.main:app",)
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9999
        assert kwargs["reload"] is False
