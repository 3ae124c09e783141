# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import logging

from aws_cdk import App, Environment

from signed_url.bucket_list_viewer_stack import BucketListViewerStack
from signed_url.cloudfront_cert_stack import CloudFrontCertStack
from signed_url.signed_url_stack import CloudFrontSignedUrlStack, CustomDomainSetting

ENVIRONMENT_CONTEXT_KEY = "environment"
# CloudFront certificates and signing resources live in us-east-1
DEPLOYMENT_REGION = "us-east-1"

logger = logging.getLogger("cdk-helper")


def get_environment_settings(app: App):
    env_key = app.node.try_get_context(ENVIRONMENT_CONTEXT_KEY)
    if env_key is None:
        raise ValueError(
            f"Please specify environment with context option. ex) cdk deploy -c {ENVIRONMENT_CONTEXT_KEY}=dev"
        )
    env_values = app.node.try_get_context(env_key)
    if env_values is None:
        raise ValueError(f"Invalid environment: {env_key}")
    return env_key, env_values


def build_app(context=None):
    app = App(context=context)
    env_key, env_values = get_environment_settings(app)
    env = Environment(account=env_values.get("awsAccountId"), region=DEPLOYMENT_REGION)

    host_name = env_values.get("hostName")
    domain_name = env_values.get("domainName")
    hosted_zone_id = env_values.get("hostedZoneId")

    custom_domain_setting = None
    if host_name and domain_name and hosted_zone_id:
        cert_stack = CloudFrontCertStack(
            app,
            f"{env_key}CloudFrontCertStack",
            host_name=host_name,
            domain_name=domain_name,
            hosted_zone_id=hosted_zone_id,
            description=CloudFrontCertStack.description,
            env=env,
        )
        custom_domain_setting = CustomDomainSetting(
            cert=cert_stack.cert,
            host_name=host_name,
            domain_name=domain_name,
            hosted_zone_id=hosted_zone_id,
        )
        logger.info(f"Using custom domain {custom_domain_setting.fqdn}")

    signed_url_stack = CloudFrontSignedUrlStack(
        app,
        f"{env_key}CloudFrontSignedUrlStack",
        custom_domain_setting=custom_domain_setting,
        description=CloudFrontSignedUrlStack.description,
        env=env,
    )

    BucketListViewerStack(
        app,
        f"{env_key}BucketListViewerStack",
        secret=signed_url_stack.secret,
        bucket=signed_url_stack.bucket,
        public_key=signed_url_stack.public_key,
        host_name=signed_url_stack.host_name,
        expiration_seconds=env_values.get("expirationSeconds"),
        base_path=env_values.get("basePath"),
        description=BucketListViewerStack.description,
        env=env,
    )

    return app.synth()


if __name__ == "__main__":
    build_app()
