"""Tests for configuration."""

import pytest
from pydantic import ValidationError

from config import Config, load_config
from shortener.shortcode import ShortCodeGenerator


class TestConfig:
    """Test configuration loading."""
    
    def test_defaults(self, monkeypatch):
        """Defaults match the generator and server defaults."""
        for name in ("PORT", "HOST", "SHORT_CODE_LENGTH", "MAX_COLLISION_RETRIES", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        
        config = Config(_env_file=None)
        
        assert config.port == 8080
        assert config.short_code_length == 6
        assert config.short_code_alphabet == ShortCodeGenerator.BASE62_CHARS
        assert config.max_collision_retries == 10
        assert config.hash_algorithm == "md5"
        assert config.max_url_length == 2048
        assert "malware.com" in config.blocked_domains
        assert config.log_level == "INFO"
    
    def test_env_overrides(self, monkeypatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("PORT", "9999")
        monkeypatch.setenv("SHORT_CODE_LENGTH", "8")
        monkeypatch.setenv("MAX_COLLISION_RETRIES", "3")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("BLOCKED_DOMAINS", '["bad.example"]')
        
        config = load_config()
        
        assert config.port == 9999
        assert config.short_code_length == 8
        assert config.max_collision_retries == 3
        assert config.log_level == "DEBUG"
        assert config.blocked_domains == ["bad.example"]
    
    @pytest.mark.parametrize("kwargs", [
        {"port": 0},
        {"short_code_length": 0},
        {"max_collision_retries": 0},
        {"short_code_alphabet": ""},
        {"log_level": "LOUD"},
    ])
    def test_invalid_values(self, kwargs):
        """Out-of-range values are rejected."""
        with pytest.raises(ValidationError):
            Config(_env_file=None, **kwargs)
