# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json

from reuse_me.report_generator.writers.sarif_reporting_writer import (
    SarifReportingWriter,
)
from reuse_me.requirements.requirement import (
    Level,
    RequirementScope,
    RequirementViolation,
)
from reuse_me.validator.validation_report import FileResult, ValidationReport


def make_report(*violations: RequirementViolation) -> ValidationReport:
    return ValidationReport(
        bom_name="project",
        file_results=(FileResult("README", False, ("Missing license information",)),),
        violations=violations,
    )


def test_sarif_reporting_writer_declares_every_rule() -> None:
    sarif = json.loads(SarifReportingWriter().write(make_report()))

    assert sarif["version"] == "2.1.0"
    assert sarif["$schema"] == "https://json.schemastore.org/sarif-2.1.0.json"
    run = sarif["runs"][0]
    driver = run["tool"]["driver"]
    assert driver["name"] == "reuse-me"
    assert driver["version"] == "0.1.0"
    assert [rule["id"] for rule in driver["rules"]] == [
        "FL01",
        "FL02",
        "PR01",
        "PR02",
        "PR03",
    ]
    assert driver["rules"][0]["name"] == "MissingSpdxInformation"
    assert driver["rules"][0]["defaultConfiguration"] == {"level": "error"}
    assert run["results"] == []


def test_sarif_reporting_writer_writes_one_result_per_diagnostic() -> None:
    violation = RequirementViolation(
        code="PR02",
        name="UnusedLicenseFile",
        level=Level.ERROR,
        scope=RequirementScope.PROJECT,
        subject="project",
        messages=(
            "Unused \x1b[36mLicense File\x1b[0;1m \x1b[36mISC\x1b[0;1m",
            "Unused \x1b[36mLicense File\x1b[0;1m \x1b[36mMIT\x1b[0;1m",
        ),
    )

    sarif = json.loads(SarifReportingWriter().write(make_report(violation)))

    results = sarif["runs"][0]["results"]
    assert [result["message"]["text"] for result in results] == [
        "Unused License File ISC",
        "Unused License File MIT",
    ]
    assert results[0]["ruleId"] == "PR02"
    assert results[0]["ruleIndex"] == 3
    assert results[0]["level"] == "error"
    assert results[0]["locations"] == [
        {"physicalLocation": {"artifactLocation": {"uri": "project"}}}
    ]
