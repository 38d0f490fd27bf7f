# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from reuse_me.bom.bom import BomRecord, Checksum, record_identifier
from reuse_me.config import default_config
from reuse_me.requirements.file_requirements import (
    INCORRECT_LICENSE_FORMAT,
    MISSING_SPDX_INFORMATION,
)
from reuse_me.requirements.requirement import Level, RequirementScope
from reuse_me.spdx_header.spdx_header import CopyrightStatement, SpdxHeader
from reuse_me.utils.formatting import strip_highlights


def make_record(
    file_name: str = "main.py",
    licenses: tuple[str, ...] = (),
    copyright_text: str = "",
) -> BomRecord:
    return BomRecord(
        spdx_id=record_identifier(file_name),
        file_name=file_name,
        checksum=Checksum("SHA1", "0" * 40),
        license_info_in_file=licenses,
        copyright_text=copyright_text,
        header=SpdxHeader(
            copyright=[CopyrightStatement(copyright_text)] if copyright_text else [],
            licenses=list(licenses),
        ),
    )


def test_missing_spdx_information_reports_both_facts() -> None:
    violation = MISSING_SPDX_INFORMATION.evaluate(make_record())

    assert violation is not None
    assert violation.code == "FL01"
    assert violation.level == Level.ERROR
    assert violation.scope == RequirementScope.FILE
    assert violation.subject == "main.py"
    assert violation.occurrence_count == 2
    assert [strip_highlights(message) for message in violation.messages] == [
        "File is missing License Information",
        "File is missing Copyright Information",
    ]


def test_missing_spdx_information_reports_only_missing_license() -> None:
    violation = MISSING_SPDX_INFORMATION.evaluate(
        make_record(copyright_text="2023 Jane Doe")
    )

    assert violation is not None
    assert violation.occurrence_count == 1
    assert strip_highlights(violation.messages[0]) == (
        "File is missing License Information"
    )


def test_missing_spdx_information_treats_noassertion_as_missing() -> None:
    violation = MISSING_SPDX_INFORMATION.evaluate(
        make_record(licenses=("NOASSERTION",), copyright_text="2023 Jane Doe")
    )

    assert violation is not None
    assert violation.occurrence_count == 1


def test_missing_spdx_information_passes_complete_record() -> None:
    record = make_record(licenses=("MIT",), copyright_text="2023 Jane Doe")

    assert MISSING_SPDX_INFORMATION.evaluate(record) is None


def test_missing_spdx_information_highlights_missing_fact() -> None:
    violation = MISSING_SPDX_INFORMATION.evaluate(make_record())

    assert violation is not None
    assert "\x1b[36mLicense Information\x1b[0;1m" in violation.messages[0]
    assert "\x1b[36mCopyright Information\x1b[0;1m" in violation.messages[1]


def test_incorrect_license_format_accepts_valid_references() -> None:
    record = make_record(
        licenses=("LicenseRef-My.License-2", "MIT OR LicenseRef-Other"),
        copyright_text="ACME",
    )

    assert INCORRECT_LICENSE_FORMAT.evaluate(record, default_config) is None


def test_incorrect_license_format_reports_every_occurrence() -> None:
    record = make_record(
        licenses=(
            "LicenseRef-my_license",
            "MIT AND LicenseRef-my_license",
            "LicenseRef-",
            "Apache-2.0",
        ),
        copyright_text="ACME",
    )

    violation = INCORRECT_LICENSE_FORMAT.evaluate(record, default_config)

    assert violation is not None
    assert violation.code == "FL02"
    assert [strip_highlights(message) for message in violation.messages] == [
        'License identifier LicenseRef-my_license must match LicenseRef-[letters, numbers, ".", or "-"]',
        'License identifier LicenseRef-my_license must match LicenseRef-[letters, numbers, ".", or "-"]',
        'License identifier LicenseRef- must match LicenseRef-[letters, numbers, ".", or "-"]',
    ]


def test_incorrect_license_format_ignores_plain_identifiers() -> None:
    record = make_record(licenses=("GPL-2.0+ WITH Classpath-exception-2.0",))

    assert INCORRECT_LICENSE_FORMAT.evaluate(record, default_config) is None

