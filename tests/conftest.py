import logging

import aws_cdk as cdk
import pytest
import structlog
from aws_cdk.assertions import Template

from saffira_infra.config import StackConfiguration
from saffira_infra.identity_providers import GoogleCredentials, MicrosoftCredentials
from saffira_infra.stacks import CognitoStack

SETTINGS_ENV_VARS = (
    "ENVIRONMENT",
    "NODE_ENV",
    "LOG_LEVEL",
    "CDK_DEFAULT_ACCOUNT",
    "CDK_DEFAULT_REGION",
    "REDIRECT_SIGN_IN",
    "REDIRECT_SIGN_OUT",
    "USER_POOL_DOMAIN",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
    "MICROSOFT_CLIENT_ID",
    "MICROSOFT_CLIENT_SECRET",
    "MICROSOFT_TENANT_ID",
    "DEPLOY_STUDENT_DATA_BUCKET",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's shell and .env out of the tests."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_logging():
    """Undo global structlog and root logger changes made by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def google_credentials() -> GoogleCredentials:
    return GoogleCredentials(client_id="g", client_secret="s")


@pytest.fixture
def microsoft_credentials() -> MicrosoftCredentials:
    return MicrosoftCredentials(
        client_id="ms-client",
        client_secret="ms-secret",
        tenant_id="contoso-tenant",
    )


@pytest.fixture
def base_config() -> StackConfiguration:
    return StackConfiguration(
        callback_urls=("https://app/cb",),
        logout_urls=("https://app/",),
    )


@pytest.fixture
def synth():
    """Build a CognitoStack from a configuration and return (stack, template)."""

    def _synth(config: StackConfiguration) -> tuple[CognitoStack, Template]:
        app = cdk.App()
        stack = CognitoStack(app, "TestCognitoStack", config=config)
        return stack, Template.from_stack(stack)

    return _synth
