"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings


class LedgerConfig(BaseSettings):
    """Ledger core configuration"""

    # Account number generation
    account_number_strategy: str = "sequential"  # sequential or random
    account_number_prefix: str = "ACC"
    account_number_start: int = 1000  # First issued number is start + 1
    account_number_width: int = 6
    random_account_prefix: str = "ACCT-"
    random_account_length: int = 8

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    class Config:
        env_prefix = "LEDGER_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = LedgerConfig()


def get_config() -> LedgerConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> LedgerConfig:
    """Reload configuration from environment"""
    global config
    config = LedgerConfig()
    return config
