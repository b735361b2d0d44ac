"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False


class RpcSettings(BaseModel):
    url: str = "http://localhost:18232"
    username: str = "zcashrpc"
    password: str = Field(default="", repr=False)
    timeout: float = 30.0


class SecuritySettings(BaseModel):
    api_key: str = Field(default="", repr=False)


class OperationSettings(BaseModel):
    poll_interval_ms: int = Field(default=2000, ge=0)
    max_attempts: int = Field(default=150, ge=1)


class Settings(BaseSettings):
    """Top-level gateway settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Zcash Gateway"
    api_prefix: str = "/api/zcash"
    log_level: str = "INFO"

    server: ServerSettings = ServerSettings()
    rpc: RpcSettings = RpcSettings()
    security: SecuritySettings = SecuritySettings()
    operations: OperationSettings = OperationSettings()

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def rpc_url(self) -> str:
        return self.rpc.url

    @property
    def api_key(self) -> str:
        return self.security.api_key


@lru_cache()
def get_settings() -> Settings:
    return Settings()
