"""Cognito Stack - User Pool with optional Google and Microsoft sign-in."""

import structlog
from aws_cdk import (
    CfnOutput,
    RemovalPolicy,
    SecretValue,
    Stack,
)
from aws_cdk import (
    aws_cognito as cognito,
)
from constructs import Construct

from ..config import StackConfiguration
from ..identity_providers import (
    GOOGLE_SCOPES,
    MICROSOFT_CLAIMS,
    MICROSOFT_PROVIDER_NAME,
    MICROSOFT_SCOPES,
    GoogleCredentials,
    MicrosoftCredentials,
)
from ..logging import sanitize_for_logging

logger = structlog.get_logger()


class CognitoStack(Stack):
    """Cognito User Pool, hosted UI client and federated identity providers.

    Google and Microsoft are declared only when their credentials are
    complete. The client lists exactly the providers that were declared and
    depends on each of them.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        config: StackConfiguration,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Cognito User Pool
        self.user_pool = cognito.UserPool(
            self,
            "SaffiraUserPool",
            self_sign_up_enabled=True,
            sign_in_aliases=cognito.SignInAliases(email=True),
            auto_verify=cognito.AutoVerifiedAttrs(email=True),
            password_policy=cognito.PasswordPolicy(
                min_length=8,
                require_uppercase=True,
                require_digits=True,
            ),
            account_recovery=cognito.AccountRecovery.EMAIL_ONLY,
            removal_policy=(
                RemovalPolicy.DESTROY if config.is_development else RemovalPolicy.RETAIN
            ),
        )

        # ============================================================
        # Federated Identity Providers
        # Providers register themselves with the pool on construction
        # ============================================================

        supported_providers = [cognito.UserPoolClientIdentityProvider.COGNITO]
        self.identity_providers: list[cognito.IUserPoolIdentityProvider] = []

        if config.google:
            self.identity_providers.append(self._add_google_provider(config.google))
            supported_providers.append(cognito.UserPoolClientIdentityProvider.GOOGLE)
        else:
            logger.info("Google sign-in disabled, credentials incomplete")

        if config.microsoft:
            self.identity_providers.append(self._add_microsoft_provider(config.microsoft))
            supported_providers.append(
                cognito.UserPoolClientIdentityProvider.custom(MICROSOFT_PROVIDER_NAME)
            )
        else:
            logger.info("Microsoft sign-in disabled, credentials incomplete")

        # User Pool Client
        self.user_pool_client = self.user_pool.add_client(
            "SaffiraUserPoolClient",
            user_pool_client_name="SaffiraUserPoolClient",
            auth_flows=cognito.AuthFlow(user_srp=True),
            supported_identity_providers=supported_providers,
            o_auth=cognito.OAuthSettings(
                flows=cognito.OAuthFlows(authorization_code_grant=True),
                callback_urls=list(config.callback_urls),
                logout_urls=list(config.logout_urls),
                scopes=[
                    cognito.OAuthScope.EMAIL,
                    cognito.OAuthScope.OPENID,
                    cognito.OAuthScope.PROFILE,
                ],
            ),
            prevent_user_existence_errors=True,
        )

        # Ensure client is created after providers
        for provider in self.identity_providers:
            self.user_pool_client.node.add_dependency(provider)

        logger.info(
            "User pool client declared",
            supported_providers=[p.name for p in supported_providers],
        )

        # User Pool Domain (for hosted UI)
        self.user_pool_domain: cognito.UserPoolDomain | None = None
        if config.user_pool_domain:
            self.user_pool_domain = self.user_pool.add_domain(
                "SaffiraUserPoolDomain",
                cognito_domain=cognito.CognitoDomainOptions(
                    domain_prefix=config.user_pool_domain,
                ),
            )

        # Outputs
        CfnOutput(
            self,
            "UserPoolId",
            value=self.user_pool.user_pool_id,
            description="The ID of the Cognito User Pool",
            export_name="SaffiraUserPoolId",
        )

        CfnOutput(
            self,
            "UserPoolClientId",
            value=self.user_pool_client.user_pool_client_id,
            description="The ID of the Cognito User Pool Client",
            export_name="SaffiraUserPoolClientId",
        )

    def _add_google_provider(
        self, credentials: GoogleCredentials
    ) -> cognito.UserPoolIdentityProviderGoogle:
        logger.info(
            "Declaring Google identity provider",
            client_id=sanitize_for_logging(credentials.client_id),
        )
        return cognito.UserPoolIdentityProviderGoogle(
            self,
            "SaffiraGoogleProvider",
            user_pool=self.user_pool,
            client_id=credentials.client_id,
            client_secret_value=SecretValue.unsafe_plain_text(credentials.client_secret),
            scopes=list(GOOGLE_SCOPES),
            attribute_mapping=cognito.AttributeMapping(
                email=cognito.ProviderAttribute.GOOGLE_EMAIL,
                given_name=cognito.ProviderAttribute.GOOGLE_GIVEN_NAME,
                family_name=cognito.ProviderAttribute.GOOGLE_FAMILY_NAME,
                profile_picture=cognito.ProviderAttribute.GOOGLE_PICTURE,
            ),
        )

    def _add_microsoft_provider(
        self, credentials: MicrosoftCredentials
    ) -> cognito.UserPoolIdentityProviderOidc:
        logger.info(
            "Declaring Microsoft identity provider",
            client_id=sanitize_for_logging(credentials.client_id),
            issuer_url=credentials.issuer_url,
        )
        return cognito.UserPoolIdentityProviderOidc(
            self,
            "SaffiraMicrosoftProvider",
            user_pool=self.user_pool,
            name=MICROSOFT_PROVIDER_NAME,
            client_id=credentials.client_id,
            client_secret=credentials.client_secret,
            issuer_url=credentials.issuer_url,
            scopes=list(MICROSOFT_SCOPES),
            attribute_mapping=cognito.AttributeMapping(
                **{
                    attribute: cognito.ProviderAttribute.other(claim)
                    for attribute, claim in MICROSOFT_CLAIMS.items()
                }
            ),
        )
