from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Payment provider selection
    payment_provider: Literal["mock", "robokassa"] = Field(
        default="mock",
        description="Payment provider to use",
    )

    # Robokassa settings
    robokassa_merchant_login: str = Field(
        default="",
        description="Robokassa merchant login",
    )
    robokassa_password_1: str = Field(
        default="",
        repr=False,
        description="Robokassa password for payment URL generation",
    )
    robokassa_password_2: str = Field(
        default="",
        repr=False,
        description="Robokassa password for webhook validation",
    )
    robokassa_is_test: bool = Field(
        default=True,
        description="Use Robokassa test mode",
    )
    robokassa_payment_url: str = Field(
        default="https://auth.robokassa.ru/Merchant/Index.aspx",
        description="Redirect endpoint for regular payments",
    )
    robokassa_init_recurring_url: str = Field(
        default="https://auth.robokassa.ru/Merchant/Index.aspx",
        description="Redirect endpoint for the first payment of a recurring chain",
    )
    robokassa_recurring_url: str = Field(
        default="https://auth.robokassa.ru/Merchant/Recurring",
        description="Server-to-server endpoint for recurring charges",
    )

    # Mock provider settings (same structure as Robokassa for compatibility)
    mock_merchant_login: str = Field(
        default="test_merchant",
        description="Mock merchant login",
    )
    mock_password_1: str = Field(
        default="test_password_1",
        repr=False,
        description="Mock password for payment URL generation",
    )
    mock_password_2: str = Field(
        default="test_password_2",
        repr=False,
        description="Mock password for webhook validation",
    )

    # Webhooks
    webhook_base_url: str = Field(
        default="http://localhost:8000",
        min_length=1,
        description="Base URL for payment callbacks and the mock payment page",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: Literal["json", "standard"] = Field(
        default="standard",
        description="Log format (json for production, standard for dev)",
    )


settings = Settings()
