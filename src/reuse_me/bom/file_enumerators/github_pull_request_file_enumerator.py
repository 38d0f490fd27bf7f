# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging

from agithub.GitHub import GitHub

from reuse_me.bom.bom import Modification, SourceFileRef
from reuse_me.bom.file_enumerators.abstract_file_enumerator import FileEnumerator
from reuse_me.bom.source_files import license_inventory, to_source_file_refs
from reuse_me.config import Config, default_config

# Get application-specific logger
logger = logging.getLogger("reuse_me")

PAGE_SIZE = 100

GITHUB_STATUS_TO_MODIFICATION = {
    "added": Modification.ADDED,
    "copied": Modification.ADDED,
    "removed": Modification.REMOVED,
    "modified": Modification.MODIFIED,
    "renamed": Modification.MODIFIED,
    "changed": Modification.MODIFIED,
}


class GitHubPullRequestFileEnumerator(FileEnumerator):
    """Enumerates the files touched by a GitHub pull request."""

    is_complete = False

    def __init__(
        self,
        github_client: GitHub,
        owner: str,
        repo: str,
        pull_number: int,
        ref: str | None = None,
        config: Config = default_config,
    ) -> None:
        self.client = github_client
        self.owner = owner
        self.repo = repo
        self.pull_number = pull_number
        self.ref = ref
        self.config = config

    def get_repository_name(self) -> str:
        return self.repo

    def get_ref(self) -> str:
        """
        The ref the pull request files are read from, the head commit of the
        pull request unless a ref was given.
        """
        if self.ref is None:
            status, pull_request = (
                self.client.repos[self.owner][self.repo]
                .pulls[str(self.pull_number)]
                .get()
            )
            if status != 200 or not isinstance(pull_request, dict):
                raise ValueError(
                    f"Failed to get pull request {self.owner}/{self.repo}#{self.pull_number}"
                )
            self.ref = pull_request["head"]["sha"]
            logger.debug("Using head commit %s of the pull request", self.ref)
        return self.ref

    def _list_pull_request_files(self) -> list[tuple[str, Modification]]:
        listed: dict[str, Modification] = {}
        page = 1
        while True:
            status, files = (
                self.client.repos[self.owner][self.repo]
                .pulls[str(self.pull_number)]
                .files.get(per_page=PAGE_SIZE, page=page)
            )
            if status != 200:
                raise ValueError(
                    f"Failed to get files of pull request {self.owner}/{self.repo}#{self.pull_number}"
                )
            for file in files:
                # only the first status of a file is kept
                if file["filename"] in listed:
                    continue
                listed[file["filename"]] = GITHUB_STATUS_TO_MODIFICATION.get(
                    file.get("status", ""), Modification.MODIFIED
                )
            if len(files) < PAGE_SIZE:
                break
            page += 1

        logger.info(
            "Found %d files in pull request %s/%s#%d",
            len(listed),
            self.owner,
            self.repo,
            self.pull_number,
        )
        return list(listed.items())

    def get_files(self) -> list[SourceFileRef]:
        return to_source_file_refs(self._list_pull_request_files(), self.config)

    def get_license_files(self) -> list[str]:
        # the whole license directory is relevant, not only the changed files
        status, entries = (
            self.client.repos[self.owner][self.repo]
            .contents[self.config.license_directory]
            .get(ref=self.get_ref())
        )
        if status == 404:
            return []
        if status != 200 or not isinstance(entries, list):
            raise ValueError(
                f"Failed to list {self.config.license_directory} of {self.owner}/{self.repo}"
            )
        return license_inventory(
            (entry["path"] for entry in entries if entry.get("type") == "file"),
            self.config,
        )
