# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import aiofiles

from reuse_me.adaptors.os import is_file, path_join
from reuse_me.bom.content_providers.abstract_content_provider import (
    ContentProvider,
    MissingContent,
)


class LocalContentProvider(ContentProvider):
    """Reads file contents from a working copy on disk."""

    def __init__(self, root_path: str) -> None:
        self.root_path = root_path

    async def get_contents(self, path: str) -> bytes:
        file_path = path_join(self.root_path, path)
        if not is_file(file_path):
            return b""
        try:
            async with aiofiles.open(file_path, "rb") as file:
                return await file.read()
        except OSError as e:
            raise MissingContent(f"Unable to read {path}: {e}") from e
