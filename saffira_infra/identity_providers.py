"""Credentials for the federated identity providers.

A provider is either fully configured or absent. ``from_parts`` returns
``None`` whenever any part is missing, so the stack only ever sees complete
credentials.
"""

from dataclasses import dataclass

GOOGLE_PROVIDER_NAME = "Google"
MICROSOFT_PROVIDER_NAME = "Microsoft"

GOOGLE_SCOPES = ("email", "profile", "openid")
MICROSOFT_SCOPES = ("openid", "profile", "email")

MICROSOFT_ISSUER_URL_TEMPLATE = "https://login.microsoftonline.com/{tenant_id}/v2.0"

# Microsoft has no ProviderAttribute constants, raw OIDC claim names are used
MICROSOFT_CLAIMS = {
    "email": "email",
    "given_name": "given_name",
    "family_name": "family_name",
    "profile_picture": "picture",
}


def _present(*values: str | None) -> bool:
    return all(value and value.strip() for value in values)


@dataclass(frozen=True)
class GoogleCredentials:
    """OAuth client registered with Google."""

    client_id: str
    client_secret: str

    @classmethod
    def from_parts(
        cls, client_id: str | None, client_secret: str | None
    ) -> "GoogleCredentials | None":
        if not _present(client_id, client_secret):
            return None
        return cls(client_id=client_id.strip(), client_secret=client_secret.strip())


@dataclass(frozen=True)
class MicrosoftCredentials:
    """OIDC app registration in a Microsoft Entra tenant."""

    client_id: str
    client_secret: str
    tenant_id: str

    @classmethod
    def from_parts(
        cls,
        client_id: str | None,
        client_secret: str | None,
        tenant_id: str | None,
    ) -> "MicrosoftCredentials | None":
        if not _present(client_id, client_secret, tenant_id):
            return None
        return cls(
            client_id=client_id.strip(),
            client_secret=client_secret.strip(),
            tenant_id=tenant_id.strip(),
        )

    @property
    def issuer_url(self) -> str:
        return MICROSOFT_ISSUER_URL_TEMPLATE.format(tenant_id=self.tenant_id)
