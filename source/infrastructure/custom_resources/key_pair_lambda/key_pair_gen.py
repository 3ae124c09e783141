# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""
This module is a custom lambda for producing the RSA key pair used to sign CloudFront URLs
"""

from enum import Enum

from aws_lambda_powertools import Logger
from crhelper import CfnResource
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa


logger = Logger(utc=True, service="key-pair-custom-lambda")
helper = CfnResource(log_level="ERROR", boto_level="ERROR")

KEY_SIZE = 2048
PUBLIC_EXPONENT = 65537


class RequestType(str, Enum):
    """CloudFormation custom resource request types."""

    create = "Create"
    update = "Update"
    delete = "Delete"


def generate_key_pair() -> dict:
    """
    Generate a 2048 bit RSA key pair, both halves PEM encoded in PKCS1 format
    """
    private_key = rsa.generate_private_key(public_exponent=PUBLIC_EXPONENT, key_size=KEY_SIZE)

    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.PKCS1,
    )

    return {
        "publicKey": public_pem.decode("utf-8"),
        "privateKey": private_pem.decode("utf-8"),
    }


def get_stack_name(event) -> str:
    # arn:aws:cloudformation:region:account:stack/<stack-name>/<uuid>
    stack_id = event.get("StackId", "")
    parts = stack_id.split("/")
    return parts[1] if len(parts) > 1 else stack_id


def handle(event) -> dict:
    """
    Produce the custom resource result for a lifecycle event.
    Only Create returns data; key material is never rotated on Update and
    teardown on Delete is left to CloudFormation.
    """
    request_type = RequestType(event["RequestType"])
    stack_name = get_stack_name(event)

    if request_type == RequestType.create:
        logger.info(f"Generating CloudFront key pair for stack {stack_name}")
        return {"Data": generate_key_pair()}

    logger.info(f"{request_type.value} request for stack {stack_name}, key pair left unchanged")
    return {}


def event_handler(event, context):
    """
    This is the Lambda custom resource entry point.
    """
    logger.info(event)
    helper(event, context)


@helper.create
@helper.update
@helper.delete
def on_event(event, _) -> None:
    """
    Function to pass the key pair, if any, back to CloudFormation as resource attributes
    """
    result = handle(event)
    helper.Data.update(result.get("Data", {}))
