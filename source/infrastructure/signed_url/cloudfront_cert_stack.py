# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from aws_cdk import Stack
from aws_cdk import aws_certificatemanager as acm, aws_route53 as route53
from constructs import Construct


class CloudFrontCertStack(Stack):
    """
    ACM certificate for the custom domain of the distribution.
    CloudFront only accepts certificates from us-east-1, so deploy this stack there.
    """

    description = "CloudFront Signed URL - custom domain certificate"

    def __init__(
            self,
            scope: Construct,
            construct_id: str,
            host_name: str,
            domain_name: str,
            hosted_zone_id: str,
            **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
            self,
            "HostedZone",
            hosted_zone_id=hosted_zone_id,
            zone_name=domain_name,
        )

        self.cert = acm.Certificate(
            self,
            "Cert",
            domain_name=f"{host_name}.{domain_name}",
            validation=acm.CertificateValidation.from_dns(hosted_zone),
        )
