# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from reuse_me.report_generator.writers.console_reporting_writer import (
    ConsoleReportingWriter,
)
from reuse_me.requirements.requirement import (
    Level,
    RequirementScope,
    RequirementViolation,
)
from reuse_me.validator.validation_report import FileResult, ValidationReport

REPORT = ValidationReport(
    bom_name="project",
    file_results=(
        FileResult("main.py", True, ()),
        FileResult(
            "README",
            False,
            ("Missing license information", "Missing copyright information"),
        ),
    ),
    violations=(
        RequirementViolation(
            code="PR01",
            name="MissingLicenseFile",
            level=Level.ERROR,
            scope=RequirementScope.PROJECT,
            subject="project",
            messages=("Missing \x1b[36mLicense File\x1b[0;1m for \x1b[36mMIT\x1b[0;1m",),
        ),
        RequirementViolation(
            code="FL01",
            name="MissingSpdxInformation",
            level=Level.ERROR,
            scope=RequirementScope.FILE,
            subject="README",
            messages=(
                "File is missing \x1b[36mLicense Information\x1b[0;1m",
                "File is missing \x1b[36mCopyright Information\x1b[0;1m",
            ),
        ),
    ),
)


def test_console_reporting_writer_writes_one_line_per_diagnostic() -> None:
    output = ConsoleReportingWriter().write(REPORT)

    assert output == (
        "project: error [PR01] Missing \x1b[36mLicense File\x1b[0;1m for \x1b[36mMIT\x1b[0;1m\x1b[0m\n"
        "README: error [FL01] File is missing \x1b[36mLicense Information\x1b[0;1m\x1b[0m\n"
        "README: error [FL01] File is missing \x1b[36mCopyright Information\x1b[0;1m\x1b[0m\n"
        "\n"
        "Non-compliant files:\n"
        "  README: Missing license information, Missing copyright information\n"
        "\n"
        "1 of 2 files are REUSE compliant.\n"
    )


def test_console_reporting_writer_on_compliant_report() -> None:
    report = ValidationReport(
        bom_name="project",
        file_results=(FileResult("main.py", True, ()),),
        violations=(),
    )

    output = ConsoleReportingWriter().write(report)

    assert output == "\n1 of 1 files are REUSE compliant.\n"
