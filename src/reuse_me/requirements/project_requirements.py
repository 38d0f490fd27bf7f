# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Requirements evaluated on the Bill of Materials as a whole."""

from collections.abc import Iterator

from reuse_me.bom.bom import Bom
from reuse_me.config import Config
from reuse_me.requirements.requirement import ProjectRequirement
from reuse_me.spdx_header.spdx_header import individual_licenses
from reuse_me.utils.formatting import format_message, highlight_message


def license_file_path(license: str, config: Config) -> str:
    return f"{config.license_directory}/{license}{config.license_file_extension}"


def license_from_file_path(path: str, config: Config) -> str:
    """LICENSES/MIT.txt -> MIT"""
    prefix = config.license_directory + "/"
    if path.startswith(prefix):
        path = path[len(prefix) :]
    if path.endswith(config.license_file_extension):
        path = path[: -len(config.license_file_extension)]
    return path


def declared_licenses(bom: Bom) -> list[str]:
    """Distinct individual licenses of all records, in order of appearance."""
    licenses: dict[str, None] = {}
    for record in bom.records:
        for license in individual_licenses(record.license_info_in_file):
            licenses.setdefault(license, None)
    return list(licenses)


def missing_license_file(
    requirement: ProjectRequirement, bom: Bom, license_files: list[str], config: Config
) -> Iterator[str]:
    available = set(license_files)
    for license in declared_licenses(bom):
        if license_file_path(license, config) in available:
            continue
        yield highlight_message(
            format_message(requirement.description, license), "License File", license
        )


def unused_license_file(
    requirement: ProjectRequirement, bom: Bom, license_files: list[str], config: Config
) -> Iterator[str]:
    used = set(declared_licenses(bom))
    for license in dict.fromkeys(
        license_from_file_path(path, config) for path in license_files
    ):
        if license in used:
            continue
        yield highlight_message(
            format_message(requirement.description, license), "License File", license
        )


def duplicate_identifier(
    requirement: ProjectRequirement, bom: Bom, license_files: list[str], config: Config
) -> Iterator[str]:
    seen = set()
    for record in bom.records:
        if record.spdx_id in seen:
            yield highlight_message(
                format_message(requirement.description, record.spdx_id, record.file_name),
                record.spdx_id,
            )
        seen.add(record.spdx_id)


MISSING_LICENSE_FILE = ProjectRequirement(
    code="PR01",
    name="MissingLicenseFile",
    description="Missing License File for {0}",
    check=missing_license_file,
)

UNUSED_LICENSE_FILE = ProjectRequirement(
    code="PR02",
    name="UnusedLicenseFile",
    description="Unused License File {0}",
    check=unused_license_file,
)

DUPLICATE_IDENTIFIER = ProjectRequirement(
    code="PR03",
    name="DuplicateIdentifier",
    description="Duplicate identifier {0} for {1}",
    check=duplicate_identifier,
)
