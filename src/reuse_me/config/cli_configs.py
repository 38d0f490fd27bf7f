# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass


@dataclass
class Config:
    tool_name: str
    tool_version: str
    license_directory: str
    license_file_extension: str
    companion_suffix: str
    license_ref_prefix: str
    ignore_start_marker: str
    ignore_end_marker: str
    preset_debian_copyright_locations: list[str]
    preset_excluded_paths: list[str]


default_config = Config(
    tool_name="reuse-me",
    tool_version="0.1.0",
    license_directory="LICENSES",
    license_file_extension=".txt",
    companion_suffix=".license",
    license_ref_prefix="LicenseRef-",
    ignore_start_marker="REUSE-IgnoreStart",
    ignore_end_marker="REUSE-IgnoreEnd",
    preset_debian_copyright_locations=[
        ".reuse/dep5",
    ],
    preset_excluded_paths=[
        ".git/**",
        "LICENSES/**",
        ".reuse/**",
    ],
)
