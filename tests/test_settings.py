import os

from pixcheckout.settings import Settings


def _clear_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("PIXCHECKOUT_"):
            monkeypatch.delenv(key, raising=False)


class TestSettings:
    def test_defaults(self, monkeypatch):
        _clear_env(monkeypatch)
        s = Settings(_env_file=None)
        assert s.abacatepay_api_key == ""
        assert s.abacatepay_base_url == "https://api.abacatepay.com/v1"
        assert s.environment == "development"
        assert s.port == 3000
        assert s.gateway_configured is False
        assert s.is_development is True

    def test_env_override(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("PIXCHECKOUT_ABACATEPAY_API_KEY", "abc_dev_123")
        monkeypatch.setenv("PIXCHECKOUT_ENVIRONMENT", "production")
        monkeypatch.setenv("PIXCHECKOUT_PORT", "8080")
        s = Settings(_env_file=None)
        assert s.gateway_configured is True
        assert s.is_development is False
        assert s.port == 8080

    def test_cors_origins_include_frontend_first(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("PIXCHECKOUT_FRONTEND_URL", "https://loja.example.com")
        s = Settings(_env_file=None)
        origins = s.cors_origins()
        assert origins[0] == "https://loja.example.com"
        assert "http://localhost:5173" in origins

    def test_cors_origins_no_duplicate(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("PIXCHECKOUT_FRONTEND_URL", "http://localhost:3000")
        s = Settings(_env_file=None)
        assert s.cors_origins().count("http://localhost:3000") == 1

    def test_allowed_origins_from_json_env(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("PIXCHECKOUT_ALLOWED_ORIGINS", '["https://a.example.com"]')
        s = Settings(_env_file=None)
        assert s.cors_origins() == ["https://a.example.com"]
