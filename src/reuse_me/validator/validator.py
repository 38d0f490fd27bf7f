# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Validator wires file enumeration, content retrieval, Bill of Materials
assembly and requirement evaluation together."""

import asyncio
import logging

from reuse_me.bom.bom import Bom
from reuse_me.bom.bom_assembler import BomAssembler, load_license_map
from reuse_me.bom.content_providers.abstract_content_provider import ContentProvider
from reuse_me.bom.file_enumerators.abstract_file_enumerator import FileEnumerator
from reuse_me.config import Config, default_config
from reuse_me.requirements.project_requirements import UNUSED_LICENSE_FILE
from reuse_me.requirements.registry import REQUIREMENTS, evaluate_requirements
from reuse_me.requirements.requirement import Requirement
from reuse_me.validator.validation_report import ValidationReport, build_report

# Get application-specific logger
logger = logging.getLogger("reuse_me")


def validate(
    bom: Bom,
    license_files: list[str],
    config: Config = default_config,
    requirements: tuple[Requirement, ...] = REQUIREMENTS,
) -> ValidationReport:
    violations = evaluate_requirements(bom, license_files, requirements, config)
    return build_report(bom, violations)


async def run_validation(
    file_enumerator: FileEnumerator,
    content_provider: ContentProvider,
    config: Config = default_config,
) -> tuple[Bom, ValidationReport]:
    # enumerators may block on git or on the GitHub API
    name = await asyncio.to_thread(file_enumerator.get_repository_name)
    source_files = await asyncio.to_thread(file_enumerator.get_files)
    license_files = await asyncio.to_thread(file_enumerator.get_license_files)
    logger.debug(
        "Validating %d source files and %d license files",
        len(source_files),
        len(license_files),
    )

    license_map = await load_license_map(
        content_provider, [source_file.file_path for source_file in source_files], config
    )
    assembler = BomAssembler(content_provider, config, license_map)
    bom = await assembler.build(name, source_files)

    requirements = REQUIREMENTS
    if not file_enumerator.is_complete:
        # the files missing from the Bill of Materials may use any license file
        logger.info(
            "Partial file enumeration, skipping %s", UNUSED_LICENSE_FILE.code
        )
        requirements = tuple(
            requirement
            for requirement in REQUIREMENTS
            if requirement is not UNUSED_LICENSE_FILE
        )

    return bom, validate(bom, license_files, config, requirements)
