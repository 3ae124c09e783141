# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Optional

from aws_cdk import CfnOutput, Duration, RemovalPolicy, Stack
from aws_cdk import (
    aws_cloudfront as cloudfront,
    aws_lambda,
    aws_logs as logs,
    aws_s3 as s3,
    aws_secretsmanager as secretsmanager,
)
from constructs import Construct

from aws_lambda_layers.dependencies_layer.layer import DependenciesLayer
import signed_url.stack_constants as globals


class BucketListViewerStack(Stack):
    description = "CloudFront Signed URL - bucket list viewer"

    def __init__(
            self,
            scope: Construct,
            construct_id: str,
            secret: secretsmanager.ISecret,
            bucket: s3.IBucket,
            public_key: cloudfront.IPublicKey,
            host_name: str,
            expiration_seconds: Optional[int] = None,
            base_path: Optional[str] = None,
            **kwargs,
    ) -> None:
        """
        This stack creates the function URL that lists the content bucket and issues signed URLs.
        """
        super().__init__(scope, construct_id, **kwargs)

        if expiration_seconds is None:
            expiration_seconds = globals.DEFAULT_EXPIRATION_SECONDS

        environment = {
            "BUCKET": bucket.bucket_name,
            "HOST_NAME": host_name,
            "PRIVATE_SECRET_NAME": secret.secret_name,
            "CF_KEY_PAIR_ID": public_key.public_key_id,
            "CF_EXPIRATION": str(expiration_seconds),
            "POWERTOOLS_SERVICE_NAME": "bucket-list-viewer",
        }
        if base_path:
            environment["BASE_PATH"] = base_path
        for context_key in ("SOLUTION_ID", "SOLUTION_VERSION"):
            if value := self.node.try_get_context(context_key):
                environment[context_key] = value

        self.viewer_function = aws_lambda.Function(
            self,
            "Lambda",
            code=aws_lambda.Code.from_asset(
                str(globals.INFRASTRUCTURE_PATH),
                exclude=["*", f"!{globals.VIEWER_PACKAGE_NAME}", f"!{globals.VIEWER_PACKAGE_NAME}/*.py"],
            ),
            handler=f"{globals.VIEWER_PACKAGE_NAME}.handler.lambda_handler",
            runtime=globals.LAMBDA_RUNTIME,
            architecture=globals.LAMBDA_ARCHITECTURE,
            description="Lambda function for listing bucket objects and issuing CloudFront signed URLs",
            timeout=Duration.seconds(30),
            memory_size=256,
            environment=environment,
            layers=[DependenciesLayer.get_or_create(self)],
            log_group=logs.LogGroup(
                self,
                "LambdaLog",
                removal_policy=RemovalPolicy.DESTROY,
                retention=logs.RetentionDays.ONE_DAY,
            ),
        )

        function_url = self.viewer_function.add_function_url(
            auth_type=aws_lambda.FunctionUrlAuthType.NONE,
        )

        bucket.grant_read(self.viewer_function)
        secret.grant_read(self.viewer_function)

        CfnOutput(self, "FunctionUrl", value=function_url.url)
