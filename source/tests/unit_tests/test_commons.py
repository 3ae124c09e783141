# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import base64
import logging
import shutil
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlencode, urlsplit

import pytest

logging.basicConfig()
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

# Synthesizing CDK stacks needs the jsii runtime, which runs on node
requires_node = pytest.mark.skipif(shutil.which("node") is None, reason="node is required to synthesize CDK stacks")

# Assets are staged from their source directories instead of being bundled in a container
BUNDLING_DISABLED_CONTEXT = {"aws:cdk:bundling-stacks": []}

TEST_SOLUTION_CONTEXT = {
    "SOLUTION_ID": "SO9999test",
    "SOLUTION_NAME": "CloudFront Signed URL",
    "SOLUTION_VERSION": "v99.99.99",
}


@dataclass
class FakeLambdaContext:
    function_name: str = "bucket-list-viewer"
    memory_limit_in_mb: int = 256
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:bucket-list-viewer"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


def function_url_event(path: str, query: Optional[dict] = None, method: str = "GET") -> dict:
    """
    Build a Lambda function URL (payload format 2.0) request event.
    """
    event = {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": path,
        "rawQueryString": urlencode(query) if query else "",
        "headers": {
            "host": "abcdefg.lambda-url.us-east-1.on.aws",
            "accept": "text/html",
        },
        "requestContext": {
            "accountId": "anonymous",
            "apiId": "abcdefg",
            "domainName": "abcdefg.lambda-url.us-east-1.on.aws",
            "domainPrefix": "abcdefg",
            "http": {
                "method": method,
                "path": path,
                "protocol": "HTTP/1.1",
                "sourceIp": "127.0.0.1",
                "userAgent": "pytest",
            },
            "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
            "routeKey": "$default",
            "stage": "$default",
            "time": "19/Oct/2026:12:00:00 +0000",
            "timeEpoch": 1792411200000,
        },
        "isBase64Encoded": False,
    }
    if query:
        event["queryStringParameters"] = query
    return event


def signed_url_params(signed_url: str) -> dict:
    return {name: values[0] for name, values in parse_qs(urlsplit(signed_url).query).items()}


def decode_cloudfront_signature(signature: str) -> bytes:
    # CloudFront replaces the characters "+=/" of the base64 alphabet with "-_~"
    return base64.b64decode(signature.replace("-", "+").replace("_", "=").replace("~", "/"))


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())

    @property
    def text(self) -> str:
        return "\n".join(self.messages)


@contextmanager
def recorded_logs(logger_name: str):
    """
    Record every message of a powertools Logger, which is registered under its service name.
    """
    handler = RecordingHandler()
    target = logging.getLogger(logger_name)
    target.addHandler(handler)
    try:
        yield handler
    finally:
        target.removeHandler(handler)


def pem_body_lines(pem: str) -> list:
    return [line for line in pem.splitlines() if line and not line.startswith("-----")]
