# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Errors raised by the bucket list viewer. Each one maps to the HTTP status
code returned to the caller; none of them are retried.
"""


class ViewerError(Exception):
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(ViewerError):
    """A required setting is missing or invalid."""


class ValidationError(ViewerError):
    """A request parameter is missing or invalid."""

    status_code = 400


class BackendError(ViewerError):
    """An S3 or Secrets Manager call failed."""


class SigningError(ViewerError):
    """The private key material could not be used for signing."""
