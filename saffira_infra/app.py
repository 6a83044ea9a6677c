"""CDK App for Saffira identity infrastructure."""

import aws_cdk as cdk
import structlog

from .config import ConfigurationError, Settings, StackConfiguration
from .logging import configure_logging
from .stacks import CognitoStack, StudentDataStack

logger = structlog.get_logger()


def build_app(settings: Settings) -> cdk.App:
    """
    Compose the CDK app from validated settings.

    Raises:
        ConfigurationError: If the hosted UI redirect URLs are missing
    """
    # Validated before the app exists, so a bad config never yields a partial graph
    config = StackConfiguration.from_settings(settings)

    app = cdk.App()

    env = cdk.Environment(
        account=settings.cdk_default_account,
        region=settings.cdk_default_region,
    )

    # Auth - Cognito
    CognitoStack(app, "SaffiraCognitoStack", config=config, env=env)

    # Data - S3 (opt-in)
    if settings.deploy_student_data_bucket:
        StudentDataStack(app, "SaffiraCdkStack", env=env)

    return app


def main() -> None:
    """Entry point used by cdk.json."""
    settings = Settings()
    configure_logging(settings.service_name, settings.log_level)

    logger.info("Synthesizing app", environment=settings.environment)
    try:
        app = build_app(settings)
    except ConfigurationError as e:
        logger.error("Invalid configuration", error=str(e))
        raise

    app.synth()
