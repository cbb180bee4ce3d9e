"""
Tests for configuration loading
"""

from ledger_core.config import LedgerConfig, get_config, reload_config
from ledger_core.identifiers import RandomAccountNumberGenerator
from ledger_core.service import LedgerService


class TestLedgerConfig:
    """Test environment-driven configuration"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LEDGER_ACCOUNT_NUMBER_STRATEGY", raising=False)
        config = LedgerConfig()

        assert config.account_number_strategy == "sequential"
        assert config.account_number_prefix == "ACC"
        assert config.account_number_start == 1000
        assert config.log_format == "json"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("LEDGER_ACCOUNT_NUMBER_STRATEGY", "random")
        monkeypatch.setenv("LEDGER_RANDOM_ACCOUNT_LENGTH", "10")
        config = LedgerConfig()

        assert config.account_number_strategy == "random"
        assert config.random_account_length == 10

    def test_reload_config(self, monkeypatch):
        monkeypatch.setenv("LEDGER_LOG_LEVEL", "DEBUG")
        try:
            reloaded = reload_config()
            assert reloaded.log_level == "DEBUG"
            assert get_config() is reloaded
        finally:
            monkeypatch.delenv("LEDGER_LOG_LEVEL")
            reload_config()

    def test_service_from_config(self):
        service = LedgerService.from_config(
            LedgerConfig(account_number_strategy="random", random_account_prefix="X-")
        )

        assert isinstance(service.id_generator, RandomAccountNumberGenerator)
        assert service.create_account("Alice").id.startswith("X-")

    def test_service_from_default_config(self):
        service = LedgerService.from_config()
        assert service.create_account("Alice").id
