# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass

from reuse_me.bom.bom import Bom, BomRecord
from reuse_me.requirements.requirement import RequirementViolation

MISSING_LICENSE_MESSAGE = "Missing license information"
MISSING_COPYRIGHT_MESSAGE = "Missing copyright information"


@dataclass(frozen=True)
class FileResult:
    file_name: str
    compliant: bool
    messages: tuple[str, ...]


@dataclass(frozen=True)
class ValidationReport:
    bom_name: str
    file_results: tuple[FileResult, ...]
    violations: tuple[RequirementViolation, ...]

    @property
    def error_count(self) -> int:
        return sum(violation.occurrence_count for violation in self.violations)

    @property
    def passed(self) -> bool:
        return not self.violations and all(
            result.compliant for result in self.file_results
        )

    def non_compliant_files(self) -> list[FileResult]:
        return [result for result in self.file_results if not result.compliant]


def file_result(record: BomRecord) -> FileResult:
    messages = []
    if not record.has_valid_license():
        messages.append(MISSING_LICENSE_MESSAGE)
    if not record.has_valid_copyright():
        messages.append(MISSING_COPYRIGHT_MESSAGE)
    return FileResult(
        file_name=record.file_name, compliant=not messages, messages=tuple(messages)
    )


def build_report(
    bom: Bom, violations: list[RequirementViolation]
) -> ValidationReport:
    return ValidationReport(
        bom_name=bom.name,
        file_results=tuple(file_result(record) for record in bom.records),
        violations=tuple(violations),
    )
