# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from reuse_me.spdx_header.spdx_header import (
    NO_ASSERTION,
    CopyrightStatement,
    SpdxHeader,
    extract,
    individual_licenses,
)

__all__ = [
    "NO_ASSERTION",
    "CopyrightStatement",
    "SpdxHeader",
    "extract",
    "individual_licenses",
]
