"""Configuration helpers for API keys and environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_LLM_MODEL = "grok-4-fast-reasoning"
DEFAULT_PLACES_TIMEOUT_S = 15.0


@dataclass(slots=True)
class ApiSettings:
    """Centralised container for the external service credentials."""

    xai_api_key: Optional[str] = None
    google_places_api_key: Optional[str] = None
    llm_model: str = DEFAULT_LLM_MODEL
    places_timeout_s: float = DEFAULT_PLACES_TIMEOUT_S

    @classmethod
    def from_env(cls) -> "ApiSettings":
        """Load settings from the process environment."""

        return cls(
            xai_api_key=os.getenv("XAI_API_KEY"),
            google_places_api_key=os.getenv("GOOGLE_PLACES_API_KEY"),
            llm_model=os.getenv("LLM_MODEL", DEFAULT_LLM_MODEL),
            places_timeout_s=float(os.getenv("PLACES_TIMEOUT_S", str(DEFAULT_PLACES_TIMEOUT_S))),
        )

    def ensure(self, field: str) -> str:
        """Return the requested field and fail fast if it is missing."""

        value = getattr(self, field)
        if not value:
            raise RuntimeError(f"Missing configuration value: {field}")
        return value
