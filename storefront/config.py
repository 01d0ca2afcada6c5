"""Configuration loading for the storefront.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings

Structured values (exchange_rates, shipping_rates, declined_cards) are
read from the environment as JSON, e.g.
EXCHANGE_RATES='{"USD:AUD": 1.5}'.
"""

import re
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.core.accounts import DEFAULT_EMAIL_PATTERN

CURRENCY_CODE = re.compile(r"^[A-Z]{3}$")


class ShippingRate(BaseModel):
    """Flat shipping rate for a single destination."""

    cost: float = Field(gt=0, description="Shipping cost in the base currency")
    estimated_days: int = Field(gt=0, description="Estimated delivery time in days")


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Pricing
    base_currency: str = Field(
        default="USD",
        description="Currency that store prices are expressed in",
    )
    exchange_rates: dict[str, float] = Field(
        default_factory=lambda: {"USD:AUD": 1.5, "USD:EUR": 0.92, "USD:GBP": 0.79},
        description="Exchange rates keyed by 'BASE:TARGET'",
    )

    # Shipping
    shipping_rates: dict[str, ShippingRate] = Field(
        default_factory=lambda: {
            "London": ShippingRate(cost=10, estimated_days=2),
            "New York": ShippingRate(cost=15, estimated_days=5),
        },
        description="Flat shipping rates keyed by destination",
    )

    # Payments
    declined_cards: list[str] = Field(
        default_factory=list,
        description="Card numbers the sandbox payment adapter declines",
    )

    # Accounts
    email_pattern: str = Field(
        default=DEFAULT_EMAIL_PATTERN,
        description="Regular expression a sign-up email address must match",
    )
    login_code_digits: int = Field(
        default=6,
        description="Number of digits in one-time login codes",
    )

    # Opening hours
    store_timezone: str = Field(
        default="UTC",
        description="IANA timezone used for opening hours and calendar rules",
    )
    open_hour: int = Field(
        default=8,
        description="First hour of the day support is online",
    )
    close_hour: int = Field(
        default=20,
        description="Hour at which support goes offline",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("base_currency")
    @classmethod
    def validate_base_currency(cls, v: str) -> str:
        """Ensure the base currency is a three-letter code."""
        v = v.upper()
        if not CURRENCY_CODE.match(v):
            raise ValueError("base_currency must be a three-letter currency code")
        return v

    @field_validator("exchange_rates")
    @classmethod
    def validate_exchange_rates(cls, v: dict[str, float]) -> dict[str, float]:
        """Ensure rate keys are 'BASE:TARGET' pairs with positive rates."""
        normalized: dict[str, float] = {}
        for pair, rate in v.items():
            base, sep, target = pair.upper().partition(":")
            if not sep or not CURRENCY_CODE.match(base) or not CURRENCY_CODE.match(target):
                raise ValueError(f"exchange rate key must look like 'USD:AUD', got {pair!r}")
            if rate <= 0:
                raise ValueError(f"exchange rate for {pair} must be positive")
            normalized[f"{base}:{target}"] = rate
        return normalized

    @field_validator("email_pattern")
    @classmethod
    def validate_email_pattern(cls, v: str) -> str:
        """Ensure the email pattern compiles."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"email_pattern is not a valid regular expression: {e}") from e
        return v

    @field_validator("login_code_digits")
    @classmethod
    def validate_login_code_digits(cls, v: int) -> int:
        """Ensure login codes have a usable length."""
        if not 4 <= v <= 12:
            raise ValueError("login_code_digits must be between 4 and 12")
        return v

    @field_validator("store_timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Ensure the timezone is known to zoneinfo."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {v}") from e
        return v

    @model_validator(mode="after")
    def validate_opening_hours(self) -> "Settings":
        """Ensure 0 <= open_hour < close_hour <= 24."""
        if not 0 <= self.open_hour < self.close_hour <= 24:
            raise ValueError("opening hours must satisfy 0 <= open_hour < close_hour <= 24")
        return self

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.store_timezone)


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "ShippingRate", "load_settings"]
