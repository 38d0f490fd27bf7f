# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from reuse_me.report_generator.writers.abstract_reporting_writer import (
    ReportingWriter,
)
from reuse_me.validator.validation_report import ValidationReport


class ReportGenerator:
    def __init__(self, reporting_writer: ReportingWriter):
        self.reporting_writer = reporting_writer

    def generate_report(self, report: ValidationReport) -> str:
        return self.reporting_writer.write(report)
