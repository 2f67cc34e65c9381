from __future__ import annotations

import os

import coincurve
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..crypto.promise import load_private_key


class Settings(BaseModel):
    """Typed service settings built from LSPFEES_* environment variables."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    database_url: str = "redis://localhost:6379/0"

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: list[str] = ["*"]

    app_name: str = "lspfees"
    app_version: str = "1.0.0"

    # PEM (SEC1/PKCS8) or 32-byte hex secp256k1 key. Never logged.
    private_key_text: str = Field(repr=False)

    private_key: coincurve.PrivateKey = Field(repr=False)

    @field_validator("private_key_text")
    @classmethod
    def validate_private_key_text(cls, v: str) -> str:
        if not v:
            raise ValueError("Private key cannot be empty")
        try:
            load_private_key(v)
        except Exception as e:
            raise ValueError(
                f"Invalid private key ({type(e).__name__})"
            ) from None
        return v

    @property
    def public_key(self) -> coincurve.PublicKey:
        return self.private_key.public_key


def get_settings() -> Settings:
    """Return typed settings sourced from env vars."""
    private_key_text = os.environ.get("LSPFEES_PRIVATE_KEY")
    if not private_key_text:
        raise ValueError("LSPFEES_PRIVATE_KEY is required")

    return Settings(
        database_url=os.environ.get("LSPFEES_DATABASE_URL", "redis://localhost:6379/0"),
        api_host=os.environ.get("LSPFEES_API_HOST", "0.0.0.0"),
        api_port=int(os.environ.get("LSPFEES_API_PORT", "8000")),
        api_debug=os.environ.get("LSPFEES_API_DEBUG", "false").lower() == "true",
        api_cors_origins=os.environ.get("LSPFEES_API_CORS_ORIGINS", "*").split(","),
        app_name=os.environ.get("LSPFEES_APP_NAME", "lspfees"),
        app_version=os.environ.get("LSPFEES_APP_VERSION", "1.0.0"),
        private_key_text=private_key_text,
        private_key=load_private_key(private_key_text),
    )
