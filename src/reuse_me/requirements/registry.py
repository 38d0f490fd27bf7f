# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""The requirements a repository has to satisfy, and their evaluation."""

import logging

from reuse_me.bom.bom import Bom
from reuse_me.config import Config, default_config
from reuse_me.requirements.file_requirements import (
    INCORRECT_LICENSE_FORMAT,
    MISSING_SPDX_INFORMATION,
)
from reuse_me.requirements.project_requirements import (
    DUPLICATE_IDENTIFIER,
    MISSING_LICENSE_FILE,
    UNUSED_LICENSE_FILE,
)
from reuse_me.requirements.requirement import (
    FileRequirement,
    ProjectRequirement,
    Requirement,
    RequirementScope,
    RequirementViolation,
)

# Get application-specific logger
logger = logging.getLogger("reuse_me")

REQUIREMENTS: tuple[Requirement, ...] = (
    MISSING_SPDX_INFORMATION,
    INCORRECT_LICENSE_FORMAT,
    MISSING_LICENSE_FILE,
    UNUSED_LICENSE_FILE,
    DUPLICATE_IDENTIFIER,
)


def get_requirement(code: str) -> Requirement:
    for requirement in REQUIREMENTS:
        if requirement.code == code:
            return requirement
    raise KeyError(f"Unknown requirement: {code}")


def rank_violations(
    violations: list[RequirementViolation],
) -> list[RequirementViolation]:
    """Most severe first, project violations before file violations."""
    return sorted(
        violations,
        key=lambda violation: (
            violation.level.rank,
            0 if violation.scope == RequirementScope.PROJECT else 1,
            violation.code,
            violation.subject,
        ),
    )


def evaluate_requirements(
    bom: Bom,
    license_files: list[str],
    requirements: tuple[Requirement, ...] = REQUIREMENTS,
    config: Config = default_config,
) -> list[RequirementViolation]:
    """
    Evaluate every requirement, a violation never stops the evaluation of the
    remaining requirements or files.
    """
    violations = []
    for requirement in requirements:
        if isinstance(requirement, ProjectRequirement):
            violation = requirement.evaluate(bom, license_files, config)
            if violation is not None:
                violations.append(violation)
        elif isinstance(requirement, FileRequirement):
            for record in bom.records:
                violation = requirement.evaluate(record, config)
                if violation is not None:
                    violations.append(violation)

    logger.info(
        "Evaluated %d requirements on %d files, found %d violations",
        len(requirements),
        len(bom.records),
        len(violations),
    )
    return rank_violations(violations)
