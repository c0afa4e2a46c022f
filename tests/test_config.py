"""
Tests for core.config module.
"""

import pytest


class TestSettings:
    """Tests for Settings class."""
    
    def test_credentials_loaded(self):
        """Test that OAuth credentials are loaded from environment."""
        from bbstatus.core.config import Settings
        
        settings = Settings()
        assert settings.api_key == "test_key"
        assert settings.api_secret == "test_secret"
    
    def test_credentials_stripped(self, monkeypatch):
        """Test that whitespace around credentials is removed."""
        monkeypatch.setenv("BITBUCKET_API_KEY", "  spaced_key \n")
        
        from bbstatus.core.config import Settings
        settings = Settings()
        
        assert settings.api_key == "spaced_key"
    
    def test_missing_secret(self, monkeypatch):
        """Test that a missing secret leaves credentials incomplete."""
        monkeypatch.delenv("BITBUCKET_API_SECRET")
        
        from bbstatus.core.config import Settings
        settings = Settings()
        
        assert settings.api_secret == ""
    
    @pytest.mark.parametrize("raw,expected", [("false", False), ("0", False), ("true", True), ("1", True)])
    def test_notify_flags_parsed(self, monkeypatch, raw, expected):
        """Test boolean notify flags from environment strings."""
        monkeypatch.setenv("BITBUCKET_NOTIFY_START", raw)
        monkeypatch.setenv("BITBUCKET_NOTIFY_FINISH", raw)
        
        from bbstatus.core.config import Settings
        settings = Settings()
        
        assert settings.notify_start is expected
        assert settings.notify_finish is expected
    
    def test_urls_normalized(self, monkeypatch):
        """Test trailing slashes are dropped from endpoint URLs."""
        monkeypatch.setenv("BITBUCKET_API_URL", "https://bb.example.com/2.0/")
        
        from bbstatus.core.config import Settings
        settings = Settings()
        
        assert settings.api_url == "https://bb.example.com/2.0"
    
    def test_default_values(self):
        """Test that default values are set correctly."""
        from bbstatus.core.config import Settings
        
        settings = Settings()
        
        assert settings.hosting_domain == "bitbucket.org"
        assert settings.api_url == "https://api.bitbucket.org/2.0"
        assert settings.token_url == "https://bitbucket.org/site/oauth2/access_token"
        assert settings.http_timeout == 10.0
        assert settings.log_level == "INFO"
