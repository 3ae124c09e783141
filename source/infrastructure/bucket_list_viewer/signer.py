# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""
CloudFront URL signing with a canned policy.
Reference: https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/cloudfront.html#generate-a-signed-url-for-amazon-cloudfront
"""

import datetime
from urllib.parse import quote

from botocore.signers import CloudFrontSigner
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from bucket_list_viewer.errors import SigningError


def build_object_url(host_name: str, object_key: str) -> str:
    """
    Build the unsigned distribution URL of an object. A single leading "/" is
    dropped and the rest of the key is percent-encoded, "/" included.
    """
    if object_key.startswith("/"):
        object_key = object_key[1:]
    return f"https://{host_name}/{quote(object_key, safe='')}"


def unescape_private_key(secret_string: str) -> str:
    # The key is stored with its newlines escaped as the two characters "\n"
    return secret_string.replace("\\n", "\n")


def load_private_key(private_key_pem: str) -> rsa.RSAPrivateKey:
    try:
        private_key = serialization.load_pem_private_key(private_key_pem.encode("utf-8"), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as err:
        raise SigningError(f"Private key could not be loaded: {err}") from err

    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise SigningError("Private key is not an RSA key.")
    return private_key


def sign_url(url: str, key_pair_id: str, private_key: rsa.RSAPrivateKey, expire_at_epoch_millis: int) -> str:
    """
    Sign the url with a canned policy that expires at the given time. The
    Expires, Signature and Key-Pair-Id query parameters are appended to the url.
    """

    def rsa_signer(message):
        return private_key.sign(message, padding.PKCS1v15(), hashes.SHA1())  # nosec

    date_less_than = datetime.datetime.fromtimestamp(expire_at_epoch_millis / 1000, tz=datetime.timezone.utc)
    cloudfront_signer = CloudFrontSigner(key_pair_id, rsa_signer)
    return cloudfront_signer.generate_presigned_url(url, date_less_than=date_less_than)
