# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging

from reuse_me.adaptors.os import base_name, is_file, output_from_command, path_join
from reuse_me.bom.bom import Modification, SourceFileRef
from reuse_me.bom.file_enumerators.abstract_file_enumerator import FileEnumerator
from reuse_me.bom.source_files import license_inventory, to_source_file_refs
from reuse_me.config import Config, default_config

# Get application-specific logger
logger = logging.getLogger("reuse_me")


class GitFileEnumerator(FileEnumerator):
    """Enumerates the tracked and untracked (but not ignored) files of a git working copy."""

    def __init__(self, path: str = ".", config: Config = default_config) -> None:
        self.path = path
        self.config = config
        self._root_path: str | None = None
        self._listed_files: list[tuple[str, Modification]] | None = None

    def get_root_path(self) -> str:
        if self._root_path is None:
            self._root_path = output_from_command(
                ["git", "rev-parse", "--show-toplevel"], cwd=self.path
            ).strip()
            logger.debug("Repository root path: %s", self._root_path)
        return self._root_path

    def get_repository_name(self) -> str:
        return base_name(self.get_root_path())

    def _list_files(self) -> list[tuple[str, Modification]]:
        if self._listed_files is not None:
            return self._listed_files

        root_path = self.get_root_path()
        tracked = output_from_command(
            ["git", "ls-files", "--exclude-standard", "--full-name"], cwd=root_path
        )
        untracked = output_from_command(
            ["git", "ls-files", "--others", "--exclude-standard", "--full-name"],
            cwd=root_path,
        )

        listed: dict[str, Modification] = {}
        for output, modification in (
            (tracked, Modification.MODIFIED),
            (untracked, Modification.ADDED),
        ):
            for file_path in output.splitlines():
                file_path = file_path.strip()
                # deleted but not yet committed files are still listed by git
                if not file_path or not is_file(path_join(root_path, file_path)):
                    continue
                listed.setdefault(file_path, modification)

        logger.info("Found %d files in %s", len(listed), root_path)
        self._listed_files = list(listed.items())
        return self._listed_files

    def get_files(self) -> list[SourceFileRef]:
        return to_source_file_refs(self._list_files(), self.config)

    def get_license_files(self) -> list[str]:
        return license_inventory((path for path, _ in self._list_files()), self.config)
