# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from botocore import config

from bucket_list_viewer.errors import ConfigurationError

DEFAULT_EXPIRATION_SECONDS = 3600


@dataclass(frozen=True)
class ViewerConfig:
    """
    Settings of the viewer function, read once from the environment.
    Nothing is validated here: each operation checks the settings it needs so
    that a missing value surfaces as an error response instead of an import failure.
    """

    host_name: Optional[str] = None
    private_secret_name: Optional[str] = None
    key_pair_id: Optional[str] = None
    expiration: Optional[str] = None
    bucket: Optional[str] = None
    base_path: Optional[str] = None
    solution_id: Optional[str] = None
    solution_version: Optional[str] = None

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "ViewerConfig":
        environ = os.environ if environ is None else environ
        return cls(
            host_name=environ.get("HOST_NAME") or None,
            private_secret_name=environ.get("PRIVATE_SECRET_NAME") or None,
            key_pair_id=environ.get("CF_KEY_PAIR_ID") or None,
            expiration=environ.get("CF_EXPIRATION") or None,
            bucket=environ.get("BUCKET") or None,
            base_path=environ.get("BASE_PATH") or None,
            solution_id=environ.get("SOLUTION_ID") or None,
            solution_version=environ.get("SOLUTION_VERSION") or None,
        )

    def require_listing(self) -> None:
        if not self.bucket:
            raise ConfigurationError("Required environment variable BUCKET is not set.")

    def require_signing(self) -> None:
        missing = [
            name
            for name, value in (
                ("HOST_NAME", self.host_name),
                ("PRIVATE_SECRET_NAME", self.private_secret_name),
                ("CF_KEY_PAIR_ID", self.key_pair_id),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Required environment variables are not set: {', '.join(missing)}")

    @property
    def expiration_seconds(self) -> int:
        if self.expiration is None:
            return DEFAULT_EXPIRATION_SECONDS
        try:
            seconds = int(self.expiration)
        except ValueError:
            raise ConfigurationError(f"CF_EXPIRATION must be a positive integer, got {self.expiration!r}.")
        if seconds < 1:
            raise ConfigurationError(f"CF_EXPIRATION must be a positive integer, got {self.expiration!r}.")
        return seconds

    def boto_config(self) -> config.Config:
        # Add the solution identifier to boto3 requests for attributing service API usage
        if self.solution_id and self.solution_version:
            return config.Config(user_agent_extra=f"AwsSolution/{self.solution_id}/{self.solution_version}")
        return config.Config()
