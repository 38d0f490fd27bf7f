# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Turns the raw paths reported by a file enumerator into SourceFileRef objects."""

from collections.abc import Iterable

from reuse_me.bom.bom import FileSource, Modification, SourceFileRef, normalize_path
from reuse_me.config import Config, default_config
from reuse_me.debian.debian_package import glob_match


def is_excluded(path: str, config: Config = default_config) -> bool:
    return any(glob_match(path, pattern) for pattern in config.preset_excluded_paths)


def to_source_file_ref(
    path: str,
    modification: Modification = Modification.MODIFIED,
    config: Config = default_config,
) -> SourceFileRef:
    path = normalize_path(path)
    if path.endswith(config.companion_suffix):
        return SourceFileRef(
            file_path=path[: -len(config.companion_suffix)],
            source=FileSource.LICENSE,
            modification=modification,
            companion_suffix=config.companion_suffix,
        )
    return SourceFileRef(
        file_path=path,
        source=FileSource.ORIGINAL,
        modification=modification,
        companion_suffix=config.companion_suffix,
    )


def to_source_file_refs(
    paths: Iterable[tuple[str, Modification]], config: Config = default_config
) -> list[SourceFileRef]:
    """Map (path, modification) pairs to source files, leaving out excluded paths."""
    return [
        to_source_file_ref(path, modification, config)
        for path, modification in paths
        if path.strip() and not is_excluded(normalize_path(path), config)
    ]


def license_inventory(paths: Iterable[str], config: Config = default_config) -> list[str]:
    """Select the license texts stored as LICENSES/<identifier>.txt"""
    prefix = config.license_directory + "/"
    return sorted(
        {
            normalize_path(path)
            for path in paths
            if normalize_path(path).startswith(prefix)
            and path.endswith(config.license_file_extension)
        }
    )
