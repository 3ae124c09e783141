# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import time
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from bucket_list_viewer.config import ViewerConfig
from bucket_list_viewer.errors import BackendError, SigningError, ValidationError
from bucket_list_viewer import signer

logger = Logger(utc=True, service="bucket-list-viewer")


@dataclass(frozen=True)
class StorageObject:
    key: str
    size_bytes: int
    last_modified: Optional[datetime]


@dataclass(frozen=True)
class SignedUrlResult:
    url: str
    expire_at_epoch_millis: int


def is_displayable(key: Optional[str]) -> bool:
    # Skip entries without a name and directory markers
    return bool(key) and not key.endswith("/")


class SignedUrlService:
    """
    Lists the objects of the content bucket and issues CloudFront signed URLs for them.
    Both operations are stateless; the private key is read from Secrets Manager on every call.
    """

    def __init__(self, viewer_config: ViewerConfig, s3_client, secrets_client):
        self.config = viewer_config
        self.s3_client = s3_client
        self.secrets_client = secrets_client

    def list_objects(self) -> List[StorageObject]:
        self.config.require_listing()

        request = {"Bucket": self.config.bucket}
        if self.config.base_path:
            request["Prefix"] = self.config.base_path

        objects = []
        try:
            paginator = self.s3_client.get_paginator("list_objects_v2")
            for page in paginator.paginate(**request):
                for content in page.get("Contents", []):
                    key = content.get("Key")
                    if not is_displayable(key):
                        continue
                    objects.append(
                        StorageObject(
                            key=key,
                            size_bytes=content.get("Size", 0),
                            last_modified=content.get("LastModified"),
                        )
                    )
        except (ClientError, BotoCoreError) as err:
            logger.error(f"Error listing objects in bucket {self.config.bucket}: {err}")
            raise BackendError(f"Failed to list objects in S3: {err}") from err

        logger.info(f"{len(objects)} objects listed from bucket {self.config.bucket}")
        return objects

    def get_private_key_pem(self) -> str:
        try:
            response = self.secrets_client.get_secret_value(SecretId=self.config.private_secret_name)
        except (ClientError, BotoCoreError) as err:
            logger.error(f"Error reading secret {self.config.private_secret_name}: {err}")
            raise BackendError(f"Failed to read the private key secret: {err}") from err

        secret_string = response.get("SecretString")
        if not secret_string:
            raise SigningError("Failed to retrieve the private key.")
        return signer.unescape_private_key(secret_string)

    def issue_signed_url(self, object_key: Optional[str], now: Optional[float] = None) -> SignedUrlResult:
        """
        Issue a signed URL for object_key that expires after the configured
        number of seconds. now is the current epoch time in seconds.
        """
        self.config.require_signing()
        if not object_key:
            raise ValidationError("The key query parameter is required.")

        expiration_seconds = self.config.expiration_seconds
        url = signer.build_object_url(self.config.host_name, object_key)
        logger.info(f"Signing url: {url}")

        private_key = signer.load_private_key(self.get_private_key_pem())

        now = time.time() if now is None else now
        expire_at_epoch_millis = int(now * 1000) + expiration_seconds * 1000
        signed_url = signer.sign_url(url, self.config.key_pair_id, private_key, expire_at_epoch_millis)

        return SignedUrlResult(url=signed_url, expire_at_epoch_millis=expire_at_epoch_millis)
