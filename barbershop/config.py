"""
Type-safe configuration using Pydantic Settings
Validates environment variables and provides shop defaults
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict, List, Optional

from barbershop.models import DEFAULT_BARBERS, DEFAULT_SERVICE_PRICES


class ShopConfig(BaseSettings):
    """
    Shop configuration with validation
    Automatically loads from environment variables and .env file
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Required settings
    telegram_bot_token: str = Field(
        ..., description="Telegram Bot API token from @BotFather"
    )

    # Storage settings
    db_file: str = Field("barber_shop.db", description="SQLite database file path")
    storage_key: str = Field(
        "barberShopRecords", description="Key holding the serialized record list"
    )
    report_dir: str = Field("reports", description="Directory for exported PDFs")
    timezone: str = Field(
        "Europe/Istanbul", description="Local clock used to stamp records"
    )

    # Shop identity
    shop_title: str = Field("ODTÜ Berber", description="Name shown in chat")
    report_title: str = Field("ODTU Berber - Gelir Raporu")
    footer_text: str = Field("© 2025 ODTÜ Berber - Eyyüpcan İşler")
    currency_label: str = Field("TL")
    report_file_prefix: str = Field("ODTU_Berber_Gelir_Raporu")

    # Static catalog
    barbers: List[str] = Field(
        default_factory=lambda: list(DEFAULT_BARBERS)
    )
    service_prices: Dict[str, List[str]] = Field(
        default_factory=lambda: {
            service: list(tiers) for service, tiers in DEFAULT_SERVICE_PRICES.items()
        },
        description="Service name mapped to its quick-select price tiers",
    )

    @field_validator("telegram_bot_token")
    @classmethod
    def validate_telegram_token(cls, v: str) -> str:
        """Validate Telegram bot token format"""
        if not v or v == "your_bot_token_here":
            raise ValueError(
                "TELEGRAM_BOT_TOKEN must be set to a valid token from @BotFather"
            )
        if ":" not in v:
            raise ValueError(
                "TELEGRAM_BOT_TOKEN appears to be invalid (should contain ':')"
            )
        return v

    @field_validator("barbers")
    @classmethod
    def validate_barbers(cls, v: List[str]) -> List[str]:
        """Barber identifiers must be non-empty and unique"""
        if not v:
            raise ValueError("at least one barber must be configured")
        if any(not name.strip() for name in v):
            raise ValueError("barber names must not be empty")
        if len(set(v)) != len(v):
            raise ValueError("barber names must be unique")
        return v

    @field_validator("service_prices")
    @classmethod
    def validate_service_prices(cls, v: Dict[str, List[str]]) -> Dict[str, List[str]]:
        """Every service needs at least one suggested price"""
        if not v:
            raise ValueError("at least one service must be configured")
        for service, tiers in v.items():
            if not tiers:
                raise ValueError(f"service '{service}' has no price tiers")
        return v

    @property
    def services(self) -> List[str]:
        """Service names in catalog order"""
        return list(self.service_prices)


# Singleton instance
_config: Optional[ShopConfig] = None


def get_config() -> ShopConfig:
    """
    Get or create the global configuration instance

    Returns:
        ShopConfig: Validated configuration

    Raises:
        ValidationError: If configuration is invalid
    """
    global _config
    if _config is None:
        _config = ShopConfig()
    return _config


def reload_config() -> ShopConfig:
    """Force reload configuration from environment"""
    global _config
    _config = ShopConfig()
    return _config
