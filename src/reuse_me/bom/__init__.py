# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from reuse_me.bom.bom import (
    Bom,
    BomRecord,
    Checksum,
    FileSource,
    Modification,
    SourceFileRef,
    record_identifier,
)
from reuse_me.bom.bom_assembler import BomAssembler, load_license_map

__all__ = [
    "Bom",
    "BomRecord",
    "Checksum",
    "FileSource",
    "Modification",
    "SourceFileRef",
    "record_identifier",
    "BomAssembler",
    "load_license_map",
]
