"""Pydantic models for provider configuration."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RetryPolicy(BaseModel):
    """Backoff applied to throttled and transient MediaConvert failures."""
    max_attempts: int = Field(5, ge=1, description="Total attempts, the first call included")
    base_delay: float = Field(0.5, ge=0, description="Delay before the first retry, in seconds")
    max_delay: float = Field(20.0, ge=0, description="Upper bound for a single delay")
    multiplier: float = Field(2.0, ge=1)

    def delay(self, attempt: int) -> float:
        """Delay after the given failed attempt (1-based)."""
        return min(self.max_delay, self.base_delay * (self.multiplier ** (attempt - 1)))


class ProviderConfig(BaseModel):
    """Connection settings for the MediaConvert client."""
    region: Optional[str] = None
    profile: Optional[str] = None
    endpoint_url: Optional[str] = None
    resolve_account_endpoint: bool = False
    connect_timeout: float = Field(10, gt=0)
    read_timeout: float = Field(60, gt=0)
    operation_timeout: Optional[float] = Field(300, gt=0)
    retry: RetryPolicy = Field(default_factory=RetryPolicy)

    model_config = ConfigDict(extra="forbid")
