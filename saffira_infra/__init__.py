"""AWS CDK app provisioning the Saffira Cognito user pool and its sign-in providers."""
