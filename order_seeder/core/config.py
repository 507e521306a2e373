"""
Centralized configuration for the random order generator

Settings are built once at startup (see order_seeder.cli) and passed
explicitly to the connector and the order service.

Author: TM3
Date: 2025-10-17
"""
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from order_seeder.core.exceptions import ConfigError


class Settings(BaseSettings):
    """Application settings"""

    # Shopify store
    SHOP_URL: str = ""
    ACCESS_TOKEN: str = ""
    API_VERSION: str = "2025-04"

    # Transport
    REQUEST_TIMEOUT: float = 30.0

    # Selection pages (only the first page is ever considered)
    CUSTOMER_PAGE_SIZE: int = 25
    PRODUCT_PAGE_SIZE: int = 25
    VARIANT_PAGE_SIZE: int = 5

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("SHOP_URL")
    @classmethod
    def normalize_shop_url(cls, value: str) -> str:
        """Strip scheme and trailing slashes, e.g. https://x.myshopify.com/ -> x.myshopify.com"""
        value = value.strip()
        for prefix in ("https://", "http://"):
            if value.startswith(prefix):
                value = value[len(prefix):]
        return value.rstrip("/")

    @field_validator("CUSTOMER_PAGE_SIZE", "PRODUCT_PAGE_SIZE", "VARIANT_PAGE_SIZE")
    @classmethod
    def check_page_size(cls, value: int) -> int:
        # Shopify caps connection pages at 250
        if not 1 <= value <= 250:
            raise ValueError("page size must be between 1 and 250")
        return value

    @property
    def graphql_url(self) -> str:
        """Admin GraphQL endpoint for the configured store"""
        return f"https://{self.SHOP_URL}/admin/api/{self.API_VERSION}/graphql.json"

    def missing_required(self) -> List[str]:
        """Names of required settings that are empty"""
        return [name for name in ("SHOP_URL", "ACCESS_TOKEN") if not getattr(self, name)]

    def validate_required(self) -> None:
        """
        Raise ConfigError if the store endpoint or the access token is missing

        Raises:
            ConfigError: listing every missing setting
        """
        missing = self.missing_required()
        if missing:
            raise ConfigError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Set them in your environment or .env file"
            )


def get_settings(env_file: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load .env, build Settings and validate them

    Args:
        env_file: Optional path to a .env file (defaults to ./.env)

    Returns:
        Validated Settings

    Raises:
        ConfigError: if required settings are missing or invalid
    """
    if env_file is not None and not Path(env_file).exists():
        raise ConfigError(f"Env file not found: {env_file}")

    env_path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    load_dotenv(env_path)

    try:
        # the chosen file replaces ./.env, it is never merged with it
        settings = Settings(_env_file=env_path)
    except ValueError as e:
        # pydantic.ValidationError subclasses ValueError
        raise ConfigError(f"Invalid configuration: {e}") from e

    settings.validate_required()
    return settings
