# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import io
import json
from typing import Any

from reuse_me.config import Config, default_config
from reuse_me.report_generator.writers.abstract_reporting_writer import (
    ReportingWriter,
)
from reuse_me.requirements.registry import REQUIREMENTS
from reuse_me.requirements.requirement import Requirement
from reuse_me.utils.formatting import strip_highlights
from reuse_me.validator.validation_report import ValidationReport

SARIF_SCHEMA = "https://json.schemastore.org/sarif-2.1.0.json"
SARIF_VERSION = "2.1.0"
REUSE_INFORMATION_URI = "https://reuse.software/"


class SarifReportingWriter(ReportingWriter):
    """
    Writes the requirement violations as a SARIF 2.1.0 log, one result per
    diagnostic line.
    """

    def __init__(
        self,
        config: Config = default_config,
        requirements: tuple[Requirement, ...] = REQUIREMENTS,
    ) -> None:
        self.config = config
        self.requirements = requirements

    def _rule(self, requirement: Requirement) -> dict[str, Any]:
        return {
            "id": requirement.code,
            "name": requirement.name,
            "shortDescription": {"text": requirement.description},
            "defaultConfiguration": {"level": requirement.level.value},
        }

    def write(self, report: ValidationReport) -> str:
        rule_index = {
            requirement.code: index
            for index, requirement in enumerate(self.requirements)
        }
        results = [
            {
                "ruleId": violation.code,
                "ruleIndex": rule_index.get(violation.code, -1),
                "level": violation.level.value,
                "message": {"text": strip_highlights(message)},
                "locations": [
                    {
                        "physicalLocation": {
                            "artifactLocation": {"uri": violation.subject}
                        }
                    }
                ],
            }
            for violation in report.violations
            for message in violation.messages
        ]
        sarif_log = {
            "$schema": SARIF_SCHEMA,
            "version": SARIF_VERSION,
            "runs": [
                {
                    "tool": {
                        "driver": {
                            "name": self.config.tool_name,
                            "version": self.config.tool_version,
                            "informationUri": REUSE_INFORMATION_URI,
                            "rules": [
                                self._rule(requirement)
                                for requirement in self.requirements
                            ],
                        }
                    },
                    "results": results,
                }
            ],
        }

        output = io.StringIO()
        json.dump(sarif_log, output, indent=2)
        json_string = output.getvalue()
        output.close()
        return json_string
