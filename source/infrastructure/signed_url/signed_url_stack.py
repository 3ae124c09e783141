# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass
from typing import Optional

from aws_cdk import CfnOutput, Duration, RemovalPolicy, Stack
from aws_cdk import (
    aws_certificatemanager as acm,
    aws_cloudfront as cloudfront,
    aws_cloudfront_origins as cloudfront_origins,
    aws_route53 as route53,
    aws_route53_targets as route53_targets,
    aws_s3 as s3,
    aws_s3_deployment as s3_deployment,
    aws_secretsmanager as secretsmanager,
)
from constructs import Construct

from .key_pair_construct import KeyPairProvider
import signed_url.stack_constants as globals


@dataclass
class CustomDomainSetting:
    cert: acm.ICertificate
    host_name: str
    domain_name: str
    hosted_zone_id: str

    @property
    def fqdn(self) -> str:
        return f"{self.host_name}.{self.domain_name}"


class CloudFrontSignedUrlStack(Stack):
    description = "CloudFront Signed URL - private content bucket served through signed URLs"

    def __init__(
            self,
            scope: Construct,
            construct_id: str,
            custom_domain_setting: Optional[CustomDomainSetting] = None,
            **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.bucket = s3.Bucket(
            self,
            "Bucket",
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            encryption=s3.BucketEncryption.S3_MANAGED,
            enforce_ssl=True,
            removal_policy=RemovalPolicy.DESTROY,
            auto_delete_objects=True,
        )

        # Static content, including the page served for rejected signatures
        if globals.ASSETS_PATH.is_dir():
            s3_deployment.BucketDeployment(
                self,
                "S3Assets",
                sources=[s3_deployment.Source.asset(str(globals.ASSETS_PATH))],
                destination_bucket=self.bucket,
            )

        key_pair_provider = KeyPairProvider(self, "KeyPairProvider")

        self.secret = secretsmanager.Secret(
            self,
            "PrivateSecret",
            secret_name=globals.SECRET_NAME,
            removal_policy=RemovalPolicy.DESTROY,
            secret_string_value=key_pair_provider.private_key_as_json_string,
        )

        self.public_key = cloudfront.PublicKey(
            self,
            "PublicKey",
            encoded_key=key_pair_provider.public_key,
            comment="Public key for CloudFront signed URLs",
        )

        key_group = cloudfront.KeyGroup(
            self,
            "KeyGroup",
            items=[self.public_key],
            comment="Key group for CloudFront signed URLs",
        )

        self.distribution = cloudfront.Distribution(
            self,
            "Distribution",
            certificate=custom_domain_setting.cert if custom_domain_setting else None,
            domain_names=[custom_domain_setting.fqdn] if custom_domain_setting else None,
            default_behavior=cloudfront.BehaviorOptions(
                origin=cloudfront_origins.S3BucketOrigin.with_origin_access_control(self.bucket),
                trusted_key_groups=[key_group],
                viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
            ),
            error_responses=[
                cloudfront.ErrorResponse(
                    http_status=403,
                    response_http_status=403,
                    response_page_path=globals.ERROR_PAGE_PATH,
                    ttl=Duration.seconds(globals.ERROR_RESPONSE_TTL_SECONDS),
                )
            ],
        )

        # Signed URLs are built from this host name, never from the bucket endpoint
        self.host_name = (
            custom_domain_setting.fqdn if custom_domain_setting else self.distribution.distribution_domain_name
        )

        if custom_domain_setting:
            hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
                self,
                "HostedZone",
                hosted_zone_id=custom_domain_setting.hosted_zone_id,
                zone_name=custom_domain_setting.domain_name,
            )
            route53.ARecord(
                self,
                "ARecord",
                zone=hosted_zone,
                record_name=custom_domain_setting.host_name,
                target=route53.RecordTarget.from_alias(route53_targets.CloudFrontTarget(self.distribution)),
            )

        CfnOutput(self, "DistributionDomainName", value=self.distribution.distribution_domain_name)
        CfnOutput(self, "BucketName", value=self.bucket.bucket_name)
        CfnOutput(self, "PublicKeyId", value=self.public_key.public_key_id)
