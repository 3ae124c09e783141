# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

from aws_cdk import BundlingOptions, Stack
from aws_cdk import aws_lambda
from constructs import Construct

import signed_url.stack_constants as globals


class DependenciesLayer(aws_lambda.LayerVersion):
    """
    Lambda layer with the third party packages listed in requirements.txt,
    installed for the runtime and architecture the solution functions use.
    """

    def __init__(self, scope: Construct, construct_id: str, **kwargs):
        requirements_path: Path = Path(__file__).absolute().parent
        install_command = (
            "pip install -r requirements.txt -t /asset-output/python "
            f"--platform {globals.LAMBDA_PIP_PLATFORM} --only-binary=:all: "
            f"--python-version {globals.LAMBDA_PYTHON_VERSION} --no-cache-dir"
        )
        super().__init__(
            scope,
            construct_id,
            code=aws_lambda.Code.from_asset(
                str(requirements_path),
                exclude=["*.py", "__pycache__"],
                bundling=BundlingOptions(
                    image=globals.LAMBDA_RUNTIME.bundling_image,
                    command=["bash", "-c", install_command],
                ),
            ),
            compatible_runtimes=[globals.LAMBDA_RUNTIME],
            compatible_architectures=[globals.LAMBDA_ARCHITECTURE],
            description="Third party dependencies for the CloudFront signed URL functions",
            **kwargs,
        )

    @staticmethod
    def get_or_create(scope: Construct, **kwargs):
        stack = Stack.of(scope)
        construct_id = "DependenciesLayer-5B1F"
        exists = stack.node.try_find_child(construct_id)
        if exists:
            return exists
        return DependenciesLayer(stack, construct_id, **kwargs)
