from dataclasses import dataclass

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from .identity_providers import GoogleCredentials, MicrosoftCredentials

DEVELOPMENT = "development"


class Settings(BaseSettings):
    """Deployment settings loaded from environment."""

    # Service
    service_name: str = "saffira-infra"
    log_level: str = "INFO"

    # Deployment target
    environment: str = Field(
        default="production",
        validation_alias=AliasChoices("environment", "node_env"),
    )
    cdk_default_account: str | None = None
    cdk_default_region: str | None = None

    # Hosted UI
    redirect_sign_in: str | None = None
    redirect_sign_out: str | None = None
    user_pool_domain: str | None = "saffira"

    # Google (OAuth)
    google_client_id: str | None = None
    google_client_secret: str | None = None

    # Microsoft (OIDC)
    microsoft_client_id: str | None = None
    microsoft_client_secret: str | None = None
    microsoft_tenant_id: str | None = None

    # Optional stacks
    deploy_student_data_bucket: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


class ConfigurationError(Exception):
    """Raised when required deployment settings are missing."""

    pass


@dataclass(frozen=True)
class StackConfiguration:
    """Everything the Cognito stack needs, resolved once at the entry point."""

    callback_urls: tuple[str, ...]
    logout_urls: tuple[str, ...]
    user_pool_domain: str | None = None
    google: GoogleCredentials | None = None
    microsoft: MicrosoftCredentials | None = None
    environment: str = "production"

    @property
    def is_development(self) -> bool:
        return self.environment == DEVELOPMENT

    @classmethod
    def from_settings(cls, settings: Settings) -> "StackConfiguration":
        """
        Validate settings and build the stack configuration.

        Raises:
            ConfigurationError: If REDIRECT_SIGN_IN or REDIRECT_SIGN_OUT is unset
        """
        missing = [
            name
            for name, value in (
                ("REDIRECT_SIGN_IN", settings.redirect_sign_in),
                ("REDIRECT_SIGN_OUT", settings.redirect_sign_out),
            )
            if not value or not value.strip()
        ]
        if missing:
            raise ConfigurationError(
                f"Environment variables {' and '.join(missing)} must be set."
            )

        return cls(
            callback_urls=(settings.redirect_sign_in.strip(),),
            logout_urls=(settings.redirect_sign_out.strip(),),
            user_pool_domain=(settings.user_pool_domain or "").strip() or None,
            google=GoogleCredentials.from_parts(
                settings.google_client_id,
                settings.google_client_secret,
            ),
            microsoft=MicrosoftCredentials.from_parts(
                settings.microsoft_client_id,
                settings.microsoft_client_secret,
                settings.microsoft_tenant_id,
            ),
            environment=settings.environment,
        )
