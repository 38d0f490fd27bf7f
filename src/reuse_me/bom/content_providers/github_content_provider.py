# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import asyncio
import base64
import binascii
import logging

from agithub.GitHub import GitHub

from reuse_me.bom.content_providers.abstract_content_provider import (
    ContentProvider,
    MissingContent,
)

# Get application-specific logger
logger = logging.getLogger("reuse_me")


class GitHubContentProvider(ContentProvider):
    """Reads file contents at a given ref through the GitHub contents API."""

    def __init__(
        self, github_client: GitHub, owner: str, repo: str, ref: str | None = None
    ) -> None:
        self.client = github_client
        self.owner = owner
        self.repo = repo
        self.ref = ref

    async def get_contents(self, path: str) -> bytes:
        # agithub is blocking, keep the event loop free while GitHub answers
        return await asyncio.to_thread(self._fetch_contents, path)

    def _fetch_contents(self, path: str) -> bytes:
        endpoint = self.client.repos[self.owner][self.repo].contents
        for part in path.split("/"):
            endpoint = endpoint[part]

        params = {"ref": self.ref} if self.ref else {}
        status, response = endpoint.get(**params)

        if status == 404:
            logger.debug("File %s not found in %s/%s", path, self.owner, self.repo)
            return b""
        if status != 200 or not isinstance(response, dict):
            raise MissingContent(
                f"Failed to get contents of {path} from {self.owner}/{self.repo} (status {status})"
            )
        if response.get("encoding") != "base64":
            raise MissingContent(
                f"Unsupported encoding for {path}: {response.get('encoding')}"
            )
        try:
            return base64.b64decode(response.get("content", ""))
        except (binascii.Error, ValueError) as e:
            raise MissingContent(f"Invalid base64 contents for {path}: {e}") from e
