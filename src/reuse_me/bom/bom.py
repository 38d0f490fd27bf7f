# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import hashlib
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath

from reuse_me.spdx_header.spdx_header import NO_ASSERTION, SpdxHeader

SPDX_ID_PREFIX = "SPDXRef-"


class Modification(Enum):
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


class FileSource(Enum):
    """Whether a physical file is the original or its metadata companion."""

    ORIGINAL = "original"
    LICENSE = "license"


@dataclass(frozen=True)
class SourceFileRef:
    file_path: str  # path of the original file
    source: FileSource
    modification: Modification
    companion_suffix: str = ".license"

    @property
    def license_path(self) -> str:
        return self.file_path + self.companion_suffix

    @property
    def physical_path(self) -> str:
        return self.file_path if self.source == FileSource.ORIGINAL else self.license_path


@dataclass(frozen=True)
class Checksum:
    algorithm: str
    value: str


@dataclass(frozen=True)
class BomRecord:
    """One file of the Bill of Materials."""

    spdx_id: str
    file_name: str
    checksum: Checksum
    license_info_in_file: tuple[str, ...]
    copyright_text: str
    header: SpdxHeader
    # we never infer the license of a file, only record what it declares
    license_concluded: str = NO_ASSERTION

    def has_valid_license(self) -> bool:
        return any(
            license != NO_ASSERTION for license in self.license_info_in_file
        )

    def has_valid_copyright(self) -> bool:
        return self.copyright_text != ""


@dataclass(frozen=True)
class Bom:
    name: str
    namespace: str
    records: tuple[BomRecord, ...]


def normalize_path(path: str) -> str:
    return PurePosixPath(path.replace("\\", "/")).as_posix()


def record_identifier(path: str) -> str:
    """
    Derive the SPDX identifier of a file from its relative path.

    The identifier is "SPDXRef-" followed by the hexadecimal SHA-256 digest of
    the UTF-8 encoded, normalized POSIX path. It only depends on the path, two
    files with the same contents at different paths get different identifiers.
    """
    digest = hashlib.sha256(normalize_path(path).encode("utf-8")).hexdigest()
    return f"{SPDX_ID_PREFIX}{digest}"


def content_checksum(contents: bytes) -> Checksum:
    return Checksum(algorithm="SHA1", value=hashlib.sha1(contents).hexdigest())
