#!/usr/bin/env python3
# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Exit with status 0 when run inside a virtual environment, 1 otherwise.
run-unit-tests.sh uses it to decide whether to create a temporary one.
"""
import sys


def in_virtual_environment() -> bool:
    base_prefix = getattr(sys, "base_prefix", None) or getattr(sys, "real_prefix", None) or sys.prefix
    return base_prefix != sys.prefix


if __name__ == "__main__":
    sys.exit(0 if in_virtual_environment() else 1)
