# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Builds the Bill of Materials of a repository, one file at a time."""

import logging
import uuid
from collections.abc import AsyncIterator, Iterable

from reuse_me.adaptors.os import decode_contents
from reuse_me.bom.bom import (
    Bom,
    BomRecord,
    FileSource,
    Modification,
    SourceFileRef,
    content_checksum,
    record_identifier,
)
from reuse_me.bom.content_providers.abstract_content_provider import (
    ContentProvider,
    MissingContent,
)
from reuse_me.config import Config, default_config
from reuse_me.debian.debian_package import FormatError, build_license_map, parse
from reuse_me.spdx_header.spdx_header import SpdxHeader, extract

# Get application-specific logger
logger = logging.getLogger("reuse_me")


def bom_namespace(name: str) -> str:
    return f"https://spdx.org/spdxdocs/{name}-{uuid.uuid5(uuid.NAMESPACE_URL, name)}"


async def read_contents(content_provider: ContentProvider, path: str) -> bytes:
    """Read a file, a file that cannot be read is treated as an empty one."""
    try:
        return await content_provider.get_contents(path)
    except MissingContent as e:
        logger.warning("Unable to read %s, assuming it has no SPDX header: %s", path, e)
        return b""


async def load_license_map(
    content_provider: ContentProvider,
    candidate_files: Iterable[str],
    config: Config = default_config,
) -> dict[str, SpdxHeader]:
    """Build the license map of the first Debian copyright file found in the repository."""
    for location in config.preset_debian_copyright_locations:
        contents = await read_contents(content_provider, location)
        if not contents:
            continue
        try:
            package = parse(decode_contents(contents))
        except FormatError as e:
            logger.error("Ignoring malformed Debian copyright file %s: %s", location, e)
            continue
        logger.info(
            "Loaded %d files-stanzas from %s", len(package.files), location
        )
        return build_license_map(package, candidate_files, config)
    return {}


class BomAssembler:
    def __init__(
        self,
        content_provider: ContentProvider,
        config: Config = default_config,
        license_map: dict[str, SpdxHeader] | None = None,
    ) -> None:
        self.content_provider = content_provider
        self.config = config
        self.license_map = license_map or {}

    async def build(self, name: str, source_files: Iterable[SourceFileRef]) -> Bom:
        """
        Create the Bill of Materials for the given source files.

        An original file and its companion collapse into a single record.
        Removed files do not get a record.
        """
        grouped: dict[str, list[SourceFileRef]] = {}
        for source_file in source_files:
            grouped.setdefault(source_file.file_path, []).append(source_file)

        records = []
        for file_path, refs in grouped.items():
            if any(
                ref.source == FileSource.ORIGINAL
                and ref.modification == Modification.REMOVED
                for ref in refs
            ):
                logger.debug("Skipping removed file %s", file_path)
                continue
            records.append(await self._build_record(refs[0]))

        logger.info("Assembled Bill of Materials %s with %d files", name, len(records))
        return Bom(name=name, namespace=bom_namespace(name), records=tuple(records))

    async def _candidate_headers(
        self, source_file: SourceFileRef, contents: bytes
    ) -> AsyncIterator[SpdxHeader]:
        yield extract(decode_contents(contents), self.config)
        companion = await read_contents(self.content_provider, source_file.license_path)
        yield extract(decode_contents(companion), self.config)
        if source_file.file_path in self.license_map:
            yield self.license_map[source_file.file_path]

    async def _effective_header(
        self, source_file: SourceFileRef, contents: bytes
    ) -> SpdxHeader:
        """The first valid header of the file, its companion and the Debian
        copyright file, in that order. Headers are never merged."""
        embedded = None
        async for header in self._candidate_headers(source_file, contents):
            if embedded is None:
                embedded = header
            if header.is_valid():
                return header
        return embedded if embedded is not None else SpdxHeader()

    async def _build_record(self, source_file: SourceFileRef) -> BomRecord:
        contents = await read_contents(self.content_provider, source_file.file_path)
        header = await self._effective_header(source_file, contents)
        if not header.is_valid():
            logger.debug("No valid SPDX header found for %s", source_file.file_path)

        return BomRecord(
            spdx_id=record_identifier(source_file.file_path),
            file_name=source_file.file_path,
            checksum=content_checksum(contents),
            license_info_in_file=tuple(header.licenses),
            copyright_text=header.copyright_text(),
            header=header,
        )
