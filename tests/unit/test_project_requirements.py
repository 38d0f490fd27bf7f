# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import replace

from reuse_me.bom.bom import Bom, BomRecord, Checksum, record_identifier
from reuse_me.config import default_config
from reuse_me.requirements.project_requirements import (
    DUPLICATE_IDENTIFIER,
    MISSING_LICENSE_FILE,
    UNUSED_LICENSE_FILE,
    declared_licenses,
    license_file_path,
    license_from_file_path,
)
from reuse_me.requirements.requirement import RequirementScope
from reuse_me.spdx_header.spdx_header import CopyrightStatement, SpdxHeader
from reuse_me.utils.formatting import strip_highlights


def make_record(file_name: str, licenses: tuple[str, ...] = ()) -> BomRecord:
    return BomRecord(
        spdx_id=record_identifier(file_name),
        file_name=file_name,
        checksum=Checksum("SHA1", "0" * 40),
        license_info_in_file=licenses,
        copyright_text="ACME",
        header=SpdxHeader(
            copyright=[CopyrightStatement("ACME")], licenses=list(licenses)
        ),
    )


def make_bom(*records: BomRecord) -> Bom:
    return Bom(name="project", namespace="https://example.com/project", records=records)


def test_license_file_paths() -> None:
    assert license_file_path("MIT", default_config) == "LICENSES/MIT.txt"
    assert license_from_file_path("LICENSES/MIT.txt", default_config) == "MIT"
    assert (
        license_from_file_path("LICENSES/LicenseRef-Custom.txt", default_config)
        == "LicenseRef-Custom"
    )


def test_declared_licenses_are_distinct_and_ordered() -> None:
    bom = make_bom(
        make_record("a.py", licenses=("MIT OR Apache-2.0",)),
        make_record("b.py", licenses=("Apache-2.0", "NOASSERTION")),
        make_record("c.py", licenses=("(MIT AND BSD-3-Clause)",)),
    )

    assert declared_licenses(bom) == ["MIT", "Apache-2.0", "BSD-3-Clause"]


def test_missing_license_file_one_line_per_license() -> None:
    bom = make_bom(
        make_record("a.py", licenses=("MIT",)),
        make_record("b.py", licenses=("Apache-2.0 OR MIT",)),
    )

    violation = MISSING_LICENSE_FILE.evaluate(bom, ["LICENSES/MIT.txt"])

    assert violation is not None
    assert violation.code == "PR01"
    assert violation.scope == RequirementScope.PROJECT
    assert violation.subject == "project"
    assert [strip_highlights(message) for message in violation.messages] == [
        "Missing License File for Apache-2.0"
    ]


def test_missing_license_file_counts_every_license() -> None:
    bom = make_bom(make_record("a.py", licenses=("MIT", "GPL-3.0-only", "ISC")))

    violation = MISSING_LICENSE_FILE.evaluate(bom, [])

    assert violation is not None
    assert violation.occurrence_count == 3


def test_missing_license_file_passes_when_all_present() -> None:
    bom = make_bom(make_record("a.py", licenses=("MIT",)))

    assert MISSING_LICENSE_FILE.evaluate(bom, ["LICENSES/MIT.txt"]) is None


def test_unused_license_file() -> None:
    bom = make_bom(make_record("a.py", licenses=("MIT",)))

    violation = UNUSED_LICENSE_FILE.evaluate(
        bom, ["LICENSES/MIT.txt", "LICENSES/Apache-2.0.txt", "LICENSES/ISC.txt"]
    )

    assert violation is not None
    assert violation.code == "PR02"
    assert [strip_highlights(message) for message in violation.messages] == [
        "Unused License File Apache-2.0",
        "Unused License File ISC",
    ]


def test_unused_license_file_on_empty_bom() -> None:
    violation = UNUSED_LICENSE_FILE.evaluate(make_bom(), ["LICENSES/MIT.txt"])

    assert violation is not None
    assert violation.occurrence_count == 1


def test_duplicate_identifier() -> None:
    first = make_record("a.py", licenses=("MIT",))
    duplicate = replace(make_record("b.py", licenses=("MIT",)), spdx_id=first.spdx_id)

    violation = DUPLICATE_IDENTIFIER.evaluate(
        make_bom(first, duplicate, make_record("c.py")), []
    )

    assert violation is not None
    assert violation.code == "PR03"
    assert violation.occurrence_count == 1
    assert strip_highlights(violation.messages[0]) == (
        f"Duplicate identifier {first.spdx_id} for b.py"
    )


def test_duplicate_identifier_passes_on_distinct_paths() -> None:
    bom = make_bom(make_record("a.py"), make_record("b.py"))

    assert DUPLICATE_IDENTIFIER.evaluate(bom, []) is None


def test_project_requirements_honor_license_directory() -> None:
    config = replace(default_config, license_directory="legal")
    bom = make_bom(make_record("a.py", licenses=("MIT",)))

    assert MISSING_LICENSE_FILE.evaluate(bom, ["legal/MIT.txt"], config) is None
    assert UNUSED_LICENSE_FILE.evaluate(bom, ["legal/MIT.txt"], config) is None
