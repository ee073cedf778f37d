"""Client settings model."""

from pydantic import BaseModel, Field, field_validator


class ClientSettings(BaseModel):
    """Settings for talking to a blockade daemon."""
    host: str = Field(default="http://127.0.0.1:5000")
    timeout: float = Field(default=10.0, gt=0)
    log_level: str = Field(default="INFO")

    class Config:
        """Pydantic config."""
        extra = "ignore"

    @field_validator("host")
    @classmethod
    def strip_trailing_slash(cls, v):
        """URLs are built as host + path."""
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()
