# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Union

from reuse_me.bom.bom import Bom, BomRecord
from reuse_me.config import Config, default_config


class Level(Enum):
    """
    Severity of a requirement, using the SARIF level names.
    """

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"

    @property
    def rank(self) -> int:
        return list(Level).index(self)


class RequirementScope(Enum):
    FILE = "file"
    PROJECT = "project"


@dataclass(frozen=True)
class RequirementViolation:
    """
    All breaches of one requirement by one subject (a file or the whole
    Bill of Materials), one highlighted diagnostic line per breach.
    """

    code: str
    name: str
    level: Level
    scope: RequirementScope
    subject: str
    messages: tuple[str, ...]

    @property
    def occurrence_count(self) -> int:
        return len(self.messages)


FileCheck = Callable[["FileRequirement", BomRecord, Config], Iterator[str]]
ProjectCheck = Callable[["ProjectRequirement", Bom, list[str], Config], Iterator[str]]


@dataclass(frozen=True)
class FileRequirement:
    code: str
    name: str
    description: str
    check: FileCheck
    level: Level = Level.ERROR

    def evaluate(
        self, record: BomRecord, config: Config = default_config
    ) -> RequirementViolation | None:
        messages = tuple(self.check(self, record, config))
        if not messages:
            return None
        return RequirementViolation(
            code=self.code,
            name=self.name,
            level=self.level,
            scope=RequirementScope.FILE,
            subject=record.file_name,
            messages=messages,
        )


@dataclass(frozen=True)
class ProjectRequirement:
    code: str
    name: str
    description: str
    check: ProjectCheck
    level: Level = Level.ERROR

    def evaluate(
        self, bom: Bom, license_files: list[str], config: Config = default_config
    ) -> RequirementViolation | None:
        messages = tuple(self.check(self, bom, license_files, config))
        if not messages:
            return None
        return RequirementViolation(
            code=self.code,
            name=self.name,
            level=self.level,
            scope=RequirementScope.PROJECT,
            subject=bom.name,
            messages=messages,
        )


Requirement = Union[FileRequirement, ProjectRequirement]
