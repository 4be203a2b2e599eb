"""
Unit tests for application settings.
"""

import pytest
from pydantic import ValidationError

from contactform.core.config import Settings


class TestSettings:

    def test_defaults(self, settings):
        assert settings.host == "127.0.0.1"
        assert settings.port == 8080
        assert settings.namespace == "form_ns"
        assert settings.database == "form_db"
        assert settings.allowed_origins == ["*"]
        assert settings.storage_backend == "memory"

    def test_mongodb_url_takes_precedence(self):
        settings = Settings(
            _env_file=None,
            mongodb_url="mongodb://primary:27017",
            mongo_uri="mongodb://fallback:27017",
        )
        assert settings.effective_mongo_uri == "mongodb://primary:27017"
        assert settings.storage_backend == "mongo"

    def test_mongo_uri_fallback(self):
        settings = Settings(_env_file=None, mongodb_url=None, mongo_uri="mongodb://fallback:27017")
        assert settings.effective_mongo_uri == "mongodb://fallback:27017"

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    @pytest.mark.parametrize("port", [0, 65536, -1])
    def test_port_out_of_range_rejected(self, port):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, port=port)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "9090")
        monkeypatch.setenv("NAMESPACE", "other_ns")
        settings = Settings(_env_file=None)
        assert settings.port == 9090
        assert settings.namespace == "other_ns"


class TestAllowedOrigins:

    def test_comma_separated_environment_value(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://example.com, https://www.example.com")
        settings = Settings(_env_file=None)
        assert settings.allowed_origins == ["https://example.com", "https://www.example.com"]

    def test_single_origin(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://example.com")
        assert Settings(_env_file=None).allowed_origins == ["https://example.com"]

    def test_json_list_environment_value(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", '["https://example.com"]')
        assert Settings(_env_file=None).allowed_origins == ["https://example.com"]

    def test_list_argument_passes_through(self):
        settings = Settings(_env_file=None, allowed_origins=["http://localhost:5173"])
        assert settings.allowed_origins == ["http://localhost:5173"]
