"""SDK configuration via pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class SDKSettings(BaseSettings):
    base_url: str = "https://developer.api.autodesk.com"
    timeout: float = 30.0
    page_size: int = 20
    user_agent: str = "autodesk-sdk-python"

    # Used by `env_token()` when no getter is supplied.
    access_token: str | None = None

    # Vault gateway host, e.g. "myvault.example.com"
    vault_server: str | None = None

    model_config = {"env_prefix": "APS_", "env_file": ".env", "extra": "ignore"}

    @property
    def vault_base_url(self) -> str:
        if not self.vault_server or not self.vault_server.strip():
            raise ValueError("vault_server required")
        return f"https://{self.vault_server.strip()}/AutodeskDM/Services/api/vault/v2"


settings = SDKSettings()
