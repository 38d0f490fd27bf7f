# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import pytest

from reuse_me.bom.bom import Bom, BomRecord, Checksum, record_identifier
from reuse_me.requirements.file_requirements import MISSING_SPDX_INFORMATION
from reuse_me.requirements.registry import (
    REQUIREMENTS,
    evaluate_requirements,
    get_requirement,
    rank_violations,
)
from reuse_me.requirements.requirement import (
    Level,
    RequirementScope,
    RequirementViolation,
)
from reuse_me.spdx_header.spdx_header import CopyrightStatement, SpdxHeader


def make_record(file_name: str, licenses: tuple[str, ...], copyright_text: str) -> BomRecord:
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


def make_violation(
    code: str, scope: RequirementScope, subject: str, level: Level = Level.ERROR
) -> RequirementViolation:
    return RequirementViolation(
        code=code,
        name=code,
        level=level,
        scope=scope,
        subject=subject,
        messages=("message",),
    )


def test_requirements_have_unique_codes() -> None:
    codes = [requirement.code for requirement in REQUIREMENTS]

    assert codes == ["FL01", "FL02", "PR01", "PR02", "PR03"]
    assert all(requirement.level == Level.ERROR for requirement in REQUIREMENTS)


def test_get_requirement() -> None:
    assert get_requirement("FL01") is MISSING_SPDX_INFORMATION
    with pytest.raises(KeyError):
        get_requirement("XX99")


def test_rank_violations_orders_by_level_scope_code_and_subject() -> None:
    violations = [
        make_violation("FL01", RequirementScope.FILE, "b.py"),
        make_violation("FL02", RequirementScope.FILE, "a.py", Level.WARNING),
        make_violation("FL01", RequirementScope.FILE, "a.py"),
        make_violation("PR02", RequirementScope.PROJECT, "project"),
        make_violation("PR01", RequirementScope.PROJECT, "project"),
    ]

    ranked = rank_violations(violations)

    assert [(violation.code, violation.subject) for violation in ranked] == [
        ("PR01", "project"),
        ("PR02", "project"),
        ("FL01", "a.py"),
        ("FL01", "b.py"),
        ("FL02", "a.py"),
    ]


def test_evaluate_requirements_on_compliant_bom() -> None:
    bom = Bom(
        name="project",
        namespace="https://example.com/project",
        records=(make_record("main.py", ("MIT",), "2023 Jane Doe"),),
    )

    assert evaluate_requirements(bom, ["LICENSES/MIT.txt"]) == []


def test_evaluate_requirements_collects_every_violation() -> None:
    bom = Bom(
        name="project",
        namespace="https://example.com/project",
        records=(
            make_record("main.py", ("MIT",), "2023 Jane Doe"),
            make_record("README", (), ""),
            make_record("custom.py", ("LicenseRef-my_license",), "ACME"),
        ),
    )

    violations = evaluate_requirements(bom, ["LICENSES/Apache-2.0.txt"])

    assert [(violation.code, violation.subject) for violation in violations] == [
        ("PR01", "project"),
        ("PR02", "project"),
        ("FL01", "README"),
        ("FL02", "custom.py"),
    ]
    assert [violation.occurrence_count for violation in violations] == [2, 1, 2, 1]


def test_evaluate_requirements_with_selected_requirements() -> None:
    bom = Bom(
        name="project",
        namespace="https://example.com/project",
        records=(make_record("README", (), ""),),
    )

    violations = evaluate_requirements(
        bom, ["LICENSES/MIT.txt"], requirements=(MISSING_SPDX_INFORMATION,)
    )

    assert [violation.code for violation in violations] == ["FL01"]
