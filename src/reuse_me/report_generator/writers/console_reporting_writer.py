# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import io

from reuse_me.report_generator.writers.abstract_reporting_writer import (
    ReportingWriter,
)
from reuse_me.validator.validation_report import ValidationReport


class ConsoleReportingWriter(ReportingWriter):
    """
    Human readable report, one line per diagnostic followed by a summary.
    Diagnostic lines keep their terminal highlight markers.
    """

    def write(self, report: ValidationReport) -> str:
        output = io.StringIO()

        for violation in report.violations:
            for message in violation.messages:
                output.write(
                    f"{violation.subject}: {violation.level.value} "
                    f"[{violation.code}] {message}\x1b[0m\n"
                )

        non_compliant = report.non_compliant_files()
        if non_compliant:
            output.write("\nNon-compliant files:\n")
            for result in non_compliant:
                output.write(f"  {result.file_name}: {', '.join(result.messages)}\n")

        compliant_count = len(report.file_results) - len(non_compliant)
        output.write(
            f"\n{compliant_count} of {len(report.file_results)} files are REUSE compliant.\n"
        )

        text = output.getvalue()
        output.close()
        return text
