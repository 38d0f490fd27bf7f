# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from reuse_me.debian.debian_package import (
    DebianHeader,
    DebianPackage,
    FilesStanza,
    FormatError,
    build_license_map,
    parse,
)

__all__ = [
    "DebianHeader",
    "DebianPackage",
    "FilesStanza",
    "FormatError",
    "build_license_map",
    "parse",
]
