# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from abc import ABC, abstractmethod


class MissingContent(Exception):
    """Exception raised when an existing file cannot be read."""

    pass


class ContentProvider(ABC):
    @abstractmethod
    async def get_contents(self, path: str) -> bytes:
        """Return the contents of a file, or empty bytes when it does not exist."""
        raise NotImplementedError
