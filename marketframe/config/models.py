"""Pydantic settings models with type safety and validation."""

from pydantic import BaseModel, Field, field_validator, model_validator


class TelegramSettings(BaseModel):
    """Telegram notification settings."""

    enabled: bool = Field(default=False, description="Send notifications over Telegram")
    token: str = Field(default="", description="Bot token issued by BotFather")
    users: list[int] = Field(
        default_factory=list,
        description="Telegram user ids allowed to receive notifications",
    )

    @model_validator(mode="after")
    def _token_required_when_enabled(self) -> "TelegramSettings":
        if self.enabled and not self.token:
            raise ValueError("token is required when telegram is enabled")
        return self


class Settings(BaseModel):
    """Top-level settings: traded pairs and notifications."""

    pairs: list[str] = Field(
        default_factory=list,
        description="Trading pairs (e.g. BTCUSDT, ETHUSDT)",
    )
    telegram: TelegramSettings = Field(default_factory=TelegramSettings)

    @field_validator("pairs")
    @classmethod
    def _strip_pairs(cls, pairs: list[str]) -> list[str]:
        normalized = [pair.strip() for pair in pairs]
        if any(not pair for pair in normalized):
            raise ValueError("pairs must not contain empty values")
        return normalized
