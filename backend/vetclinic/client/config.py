"""Module: client config."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


# Client-side settings; independent of the server's DATABASE_URL.
class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="VETCLINIC_", env_file=".env", extra="ignore")

    api_base_url: str = "http://localhost:5000/api"
    token_file: Path = Path.home() / ".vetclinic" / "auth.json"
    timeout: float = 10.0
