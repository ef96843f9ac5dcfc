"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from decimal import Decimal
from pydantic_settings import BaseSettings


class LedgerConfig(BaseSettings):
    """Retail ledger configuration"""
    
    # Account numbering
    account_number_prefix: str = "ACMX"
    account_number_width: int = 6
    
    # Product defaults
    savings_interest_rate: str = "2.5"  # Percentage
    checking_overdraft_limit: str = "500.00"
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    
    class Config:
        env_prefix = "RETAIL_LEDGER_"
        env_file = ".env"
        case_sensitive = False
    
    @property
    def default_interest_rate(self) -> Decimal:
        return Decimal(self.savings_interest_rate)
    
    @property
    def default_overdraft_limit(self) -> Decimal:
        return Decimal(self.checking_overdraft_limit)


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
