# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Requirements evaluated on every file of the Bill of Materials."""

import re
from collections.abc import Iterator

from reuse_me.bom.bom import BomRecord
from reuse_me.config import Config
from reuse_me.requirements.requirement import FileRequirement
from reuse_me.spdx_header.spdx_header import individual_licenses
from reuse_me.utils.formatting import format_message, highlight_message

LICENSE_INFORMATION = "License Information"
COPYRIGHT_INFORMATION = "Copyright Information"


def missing_spdx_information(
    requirement: FileRequirement, record: BomRecord, config: Config
) -> Iterator[str]:
    if not record.has_valid_license():
        yield highlight_message(
            format_message(requirement.description, LICENSE_INFORMATION),
            LICENSE_INFORMATION,
        )
    if not record.has_valid_copyright():
        yield highlight_message(
            format_message(requirement.description, COPYRIGHT_INFORMATION),
            COPYRIGHT_INFORMATION,
        )


def incorrect_license_format(
    requirement: FileRequirement, record: BomRecord, config: Config
) -> Iterator[str]:
    prefix = config.license_ref_prefix
    valid_reference = re.compile(re.escape(prefix) + r"[A-Za-z0-9.\-]+")
    for license in individual_licenses(record.license_info_in_file):
        if not license.startswith(prefix) or valid_reference.fullmatch(license):
            continue
        yield highlight_message(
            format_message(requirement.description, license, prefix),
            license,
            f'{prefix}[letters, numbers, ".", or "-"]',
        )


MISSING_SPDX_INFORMATION = FileRequirement(
    code="FL01",
    name="MissingSpdxInformation",
    description="File is missing {0}",
    check=missing_spdx_information,
)

INCORRECT_LICENSE_FORMAT = FileRequirement(
    code="FL02",
    name="IncorrectLicenseFormat",
    description='License identifier {0} must match {1}[letters, numbers, ".", or "-"]',
    check=incorrect_license_format,
)
