"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from domaincheck.core.types import GoDaddyEnvironment, NamecomEnvironment, ProviderName


class DomainCheckSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="DOMAINCHECK_",
    )

    # Provider chain, highest priority first
    provider_order: list[ProviderName] = Field(
        default=[ProviderName.NAMECOM, ProviderName.GODADDY, ProviderName.RDAP],
        description="Providers to try, in fallback order",
    )

    # Name.com
    namecom_environment: NamecomEnvironment = Field(
        default=NamecomEnvironment.SANDBOX,
        description="Name.com environment (sandbox or production)",
    )
    namecom_username: str | None = Field(default=None, description="Production username")
    namecom_api_token: str | None = Field(default=None, description="Production API token")
    namecom_test_username: str | None = Field(default=None, description="Sandbox username")
    namecom_test_api_token: str | None = Field(default=None, description="Sandbox API token")
    namecom_rate_limit_per_second: int = Field(default=20, ge=1)
    namecom_rate_limit_per_hour: int = Field(default=3000, ge=1)

    # GoDaddy
    godaddy_environment: GoDaddyEnvironment = Field(
        default=GoDaddyEnvironment.OTE,
        description="GoDaddy environment (ote or production)",
    )
    godaddy_api_key: str | None = Field(default=None, description="GoDaddy API key")
    godaddy_api_secret: str | None = Field(default=None, description="GoDaddy API secret")
    # Documented quota is 60 requests per minute
    godaddy_rate_limit_per_second: int | None = Field(default=1, ge=1)
    godaddy_rate_limit_per_hour: int | None = Field(default=3600, ge=1)

    # RDAP
    rdap_enabled: bool = Field(default=True, description="Enable keyless RDAP lookups")
    rdap_endpoints: dict[str, str] = Field(
        default_factory=dict,
        description="Extra or overriding TLD -> RDAP base URL routes",
    )
    rdap_bootstrap_on_startup: bool = Field(
        default=False,
        description="Load the IANA RDAP bootstrap registry at startup",
    )

    # Batch checks
    max_batch_size: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Maximum domains per batch request",
    )
    batch_concurrency: int = Field(
        default=20,
        ge=1,
        description="Concurrent per-domain resolutions within a batch",
    )

    # Usage logging (Airtable)
    airtable_api_key: str | None = Field(default=None, description="Airtable API key")
    airtable_base_id: str | None = Field(default=None, description="Airtable base ID")
    airtable_table_name: str = Field(
        default="Domain Generator Logs",
        description="Airtable table receiving usage events",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )

    @property
    def namecom_credentials(self) -> tuple[str | None, str | None]:
        """Username and token for the selected Name.com environment."""
        if self.namecom_environment == NamecomEnvironment.PRODUCTION:
            return self.namecom_username, self.namecom_api_token
        return self.namecom_test_username, self.namecom_test_api_token

    @property
    def namecom_configured(self) -> bool:
        return all(self.namecom_credentials)

    @property
    def godaddy_configured(self) -> bool:
        return bool(self.godaddy_api_key and self.godaddy_api_secret)

    @property
    def airtable_configured(self) -> bool:
        return bool(self.airtable_api_key and self.airtable_base_id)


@lru_cache
def get_settings() -> DomainCheckSettings:
    """Get cached settings instance."""
    return DomainCheckSettings()
