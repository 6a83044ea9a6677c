"""Student Data Stack - private S3 bucket for student data."""

from aws_cdk import (
    Aws,
    CfnOutput,
    RemovalPolicy,
    Stack,
)
from aws_cdk import (
    aws_s3 as s3,
)
from constructs import Construct


class StudentDataStack(Stack):
    """Versioned, encrypted S3 bucket with all public access blocked."""

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.bucket = s3.Bucket(
            self,
            "SaffiraAIStudentDataBucket",
            bucket_name=f"saffira-ai-student-data-{Aws.ACCOUNT_ID}",
            public_read_access=False,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            versioned=True,
            encryption=s3.BucketEncryption.S3_MANAGED,
            # Deleted with the stack, do not store anything that must outlive it
            removal_policy=RemovalPolicy.DESTROY,
        )

        CfnOutput(
            self,
            "BucketName",
            value=self.bucket.bucket_name,
        )
