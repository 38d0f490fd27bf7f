# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from abc import ABC, abstractmethod

from reuse_me.validator.validation_report import ValidationReport


class ReportingWriter(ABC):
    @abstractmethod
    def write(self, report: ValidationReport) -> str:
        raise NotImplementedError
