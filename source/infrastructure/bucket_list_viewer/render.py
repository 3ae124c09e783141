# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import re
from html import escape
from typing import Iterable
from urllib.parse import quote

from bucket_list_viewer.service import StorageObject

CSS_UNSAFE_CHARACTERS = re.compile(r"[ !\"#$%&'()*+,./:;<=>?@\[\\\]^`{|}~]")

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<meta name="description" content="{description}">
<title>{title}</title>
<script src="https://unpkg.com/htmx.org@1.9.12"></script>
<script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-gray-100">
{content}
</body>
</html>
"""


def css_escape(value: str) -> str:
    """
    Make a value usable as an element id in a CSS selector.
    """
    return CSS_UNSAFE_CHARACTERS.sub("-", value)


def render_object_card(storage_object: StorageObject) -> str:
    key = storage_object.key
    target_id = f"file-{css_escape(key)}"
    signed_url_path = f"/api/signed-url?key={quote(key, safe='')}"
    return (
        '<div class="bg-white shadow-md rounded p-4 flex flex-col justify-between">'
        f'<div><h2 class="text-lg font-semibold">{escape(key)}</h2></div>'
        '<div class="mt-2">'
        '<button type="button" class="px-3 py-2 bg-blue-500 text-white rounded hover:bg-blue-700" '
        f'hx-get="{escape(signed_url_path)}" hx-target="#{escape(target_id)}">'
        "Get Signed URL"
        "</button>"
        "</div>"
        f'<div id="{escape(target_id)}" class="mt-2"></div>'
        "</div>"
    )


def render_object_list(objects: Iterable[StorageObject]) -> str:
    cards = "\n".join(render_object_card(storage_object) for storage_object in objects)
    content = (
        '<div class="container mx-auto p-4">'
        '<h1 class="text-2xl font-bold mb-4">S3 File List</h1>'
        f'<div class="grid gap-4 grid-cols-1 sm:grid-cols-2 md:grid-cols-3">\n{cards}\n</div>'
        "</div>"
    )
    return PAGE_TEMPLATE.format(
        title="S3 File List",
        description="CloudFront Signed URL demo",
        content=content,
    )


def render_signed_url(signed_url: str) -> str:
    return (
        f'<a href="{escape(signed_url)}" target="_blank" '
        'class="text-blue-600 underline hover:text-blue-800">'
        "Open Signed URL"
        "</a>"
    )
