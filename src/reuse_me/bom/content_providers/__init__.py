# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from reuse_me.bom.content_providers.abstract_content_provider import (
    ContentProvider,
    MissingContent,
)
from reuse_me.bom.content_providers.github_content_provider import (
    GitHubContentProvider,
)
from reuse_me.bom.content_providers.local_content_provider import (
    LocalContentProvider,
)

__all__ = [
    "ContentProvider",
    "MissingContent",
    "GitHubContentProvider",
    "LocalContentProvider",
]
