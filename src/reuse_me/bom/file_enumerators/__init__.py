# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from reuse_me.bom.file_enumerators.abstract_file_enumerator import FileEnumerator
from reuse_me.bom.file_enumerators.git_file_enumerator import GitFileEnumerator
from reuse_me.bom.file_enumerators.github_pull_request_file_enumerator import (
    GitHubPullRequestFileEnumerator,
)

__all__ = [
    "FileEnumerator",
    "GitFileEnumerator",
    "GitHubPullRequestFileEnumerator",
]
