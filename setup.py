# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import json
from pathlib import Path

import setuptools

readme_path = Path(__file__).resolve().parent / "README.md"
long_description = Path(readme_path).read_text()
cdk_json_path = Path(__file__).resolve().parent / "source" / "infrastructure" / "cdk.json"
cdk_json = json.loads(cdk_json_path.read_text())
VERSION = cdk_json["context"]["SOLUTION_VERSION"].lstrip("v")


setuptools.setup(
    name="cloudfront-signed-url",
    version=VERSION,
    description="Serve private S3 content through CloudFront signed URLs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="AWS Solutions Builders",
    package_dir={"": "source/infrastructure"},
    packages=setuptools.find_namespace_packages(
        where="source/infrastructure",
        include=["signed_url*", "bucket_list_viewer*", "aws_lambda_layers*", "custom_resources*"],
    ),
    install_requires=[
        "aws-cdk-lib>=2.156.0",
        "constructs>=10.0.0",
        "aws-lambda-powertools>=2.30.0",
        "crhelper>=2.0.11",
        "boto3>=1.28.0",
        "cryptography>=42.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "moto[s3,secretsmanager]>=5.0.0",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Utilities",
    ],
)
