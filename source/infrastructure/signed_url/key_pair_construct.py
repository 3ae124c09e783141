# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from aws_cdk import CustomResource, Duration, Fn, RemovalPolicy, SecretValue
from aws_cdk import aws_lambda, aws_logs as logs
from constructs import Construct

from aws_lambda_layers.dependencies_layer.layer import DependenciesLayer
import signed_url.stack_constants as globals


class KeyPairProvider(Construct):
    def __init__(self, scope: Construct, id: str) -> None:
        """
        This construct generates the RSA key pair for CloudFront signed URLs through a custom resource.
        """
        super().__init__(scope, id)

        # The function returns the private key as a resource attribute, so its
        # log group masks anything that looks like one.
        handler_log_group = logs.LogGroup(
            self,
            "HandlerLog",
            removal_policy=RemovalPolicy.DESTROY,
            retention=logs.RetentionDays.ONE_DAY,
            data_protection_policy=logs.DataProtectionPolicy(
                name="RSAPrivateKeyMasking",
                identifiers=[
                    logs.CustomDataIdentifier("RSAPrivateKey", globals.RSA_PRIVATE_KEY_PATTERN),
                ],
            ),
        )

        self.key_pair_function = aws_lambda.Function(
            self,
            "Handler",
            code=aws_lambda.Code.from_asset(str(globals.CUSTOM_RESOURCES_PATH / "key_pair_lambda")),
            handler="key_pair_gen.event_handler",
            runtime=globals.LAMBDA_RUNTIME,
            architecture=globals.LAMBDA_ARCHITECTURE,
            description="Lambda function for CloudFront key pair generation",
            timeout=Duration.seconds(30),
            memory_size=256,
            log_group=handler_log_group,
            layers=[DependenciesLayer.get_or_create(self)],
        )

        # No properties: the resource is created once and never updated, so the
        # key pair is generated exactly once per stack.
        resource = CustomResource(
            self,
            "KeyPair",
            service_token=self.key_pair_function.function_arn,
            removal_policy=RemovalPolicy.DESTROY,
        )

        self.public_key = resource.get_att_string("publicKey")

        private_key_string = resource.get_att_string("privateKey")

        # Secrets Manager stores the key as a JSON string value, so newlines are escaped as "\n"
        self.private_key_as_json_string = SecretValue.unsafe_plain_text(
            Fn.join("\\n", Fn.split("\n", private_key_string))
        )
