# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
This module is the Lambda function behind the bucket list viewer function URL.
It renders the objects of the content bucket and returns CloudFront signed URLs for them.
"""

import boto3
from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import LambdaFunctionUrlResolver, Response, content_types
from aws_lambda_powertools.logging import correlation_paths

from bucket_list_viewer import render
from bucket_list_viewer.config import ViewerConfig
from bucket_list_viewer.errors import ViewerError
from bucket_list_viewer.service import SignedUrlService

logger = Logger(utc=True, service="bucket-list-viewer")
app = LambdaFunctionUrlResolver()

viewer_config = ViewerConfig.from_environ()


def get_service() -> SignedUrlService:
    boto_config = viewer_config.boto_config()
    return SignedUrlService(
        viewer_config,
        s3_client=boto3.client("s3", config=boto_config),
        secrets_client=boto3.client("secretsmanager", config=boto_config),
    )


def html_response(body: str) -> Response:
    return Response(status_code=200, content_type=content_types.TEXT_HTML, body=body)


@app.get("/")
def list_objects() -> Response:
    objects = get_service().list_objects()
    return html_response(render.render_object_list(objects))


@app.get("/api/signed-url")
def get_signed_url() -> Response:
    object_key = app.current_event.get_query_string_value("key")
    result = get_service().issue_signed_url(object_key)
    logger.info(f"Signed url issued for {object_key}, expires at {result.expire_at_epoch_millis}")
    return html_response(render.render_signed_url(result.url))


@app.exception_handler(ViewerError)
def handle_viewer_error(ex: ViewerError) -> Response:
    logger.error(f"{type(ex).__name__}: {ex.message}")
    return Response(status_code=ex.status_code, content_type=content_types.TEXT_PLAIN, body=ex.message)


@logger.inject_lambda_context(correlation_id_path=correlation_paths.LAMBDA_FUNCTION_URL)
def lambda_handler(event, context):
    """
    This function is the entry point for the Lambda function URL.
    """
    return app.resolve(event, context)
