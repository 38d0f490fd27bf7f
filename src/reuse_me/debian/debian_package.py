# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Parser for the Debian machine-readable copyright format (as used by .reuse/dep5)
and its projection into SPDX headers."""

import functools
import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from reuse_me.config import Config, default_config
from reuse_me.spdx_header.spdx_header import (
    COPYRIGHT_TAG,
    LICENSE_TAG,
    SpdxHeader,
    extract,
)

logger = logging.getLogger("reuse_me")

# "Key: value" where the value may continue on lines starting with whitespace
DEBIAN_FIELD_REGEX = re.compile(
    r"^(?P<key>[^:\s][^:\n]*):[ \t]*(?P<value>[^\n]*(?:\n[ \t]+[^\n]*)*)",
    re.MULTILINE,
)
STANZA_SEPARATOR_REGEX = re.compile(r"\n\s*\n")


class FormatError(ValueError):
    """Exception raised when a Debian copyright document has no stanza."""

    pass


@dataclass
class DebianHeader:
    format: str = "1.0"
    upstream_name: str | None = None
    upstream_contact: str | None = None
    source: str | None = None
    disclaimer: str | None = None
    comment: str | None = None
    license: str | None = None
    copyright: list[str] | None = None


@dataclass
class FilesStanza:
    files: list[str] = field(default_factory=list)
    copyright: list[str] = field(default_factory=list)
    license: str = ""
    comment: str | None = None


@dataclass
class DebianPackage:
    header: DebianHeader
    files: list[FilesStanza]


def _text(value: str) -> str:
    return value


def _first_line(value: str) -> str:
    return value.split("\n")[0].strip()


def _lines(value: str) -> list[str]:
    # a lone "." is how the format spells an empty continuation line
    return [line.strip() for line in value.split("\n") if line.strip() not in ("", ".")]


def _words(value: str) -> list[str]:
    return value.split()


FieldMapping = dict[str, tuple[str, Callable[[str], Any]]]

HEADER_FIELDS: FieldMapping = {
    "format": ("format", _text),
    "upstreamName": ("upstream_name", _text),
    "upstreamContact": ("upstream_contact", _text),
    "source": ("source", _text),
    "disclaimer": ("disclaimer", _text),
    "comment": ("comment", _text),
    "license": ("license", _first_line),
    "copyright": ("copyright", _lines),
}

FILES_STANZA_FIELDS: FieldMapping = {
    "files": ("files", _words),
    "license": ("license", _first_line),
    "copyright": ("copyright", _lines),
    "comment": ("comment", _text),
}


def kebab_to_camel(key: str) -> str:
    """Upstream-Name -> upstreamName"""
    words = [word for word in key.split("-") if word]
    return "".join(
        word.lower() if index == 0 else word[0].upper() + word[1:].lower()
        for index, word in enumerate(words)
    )


def _apply_fields(target: Any, stanza: str, field_mapping: FieldMapping) -> None:
    for match in DEBIAN_FIELD_REGEX.finditer(stanza):
        key = kebab_to_camel(match.group("key").strip())
        if key not in field_mapping:
            logger.debug("Ignoring unknown Debian copyright field: %s", key)
            continue
        attribute, convert = field_mapping[key]
        setattr(target, attribute, convert(match.group("value").strip()))


def parse(document: str) -> DebianPackage:
    """
    Parse a Debian copyright document.

    The first stanza is the header, every following stanza is a files-stanza.

    Raises:
        FormatError: If the document is empty or only contains whitespace
    """
    if not document.strip():
        raise FormatError("No stanzas found")

    stanzas = STANZA_SEPARATOR_REGEX.split(document.strip())

    header = DebianHeader()
    _apply_fields(header, stanzas[0], HEADER_FIELDS)

    files = []
    for stanza in stanzas[1:]:
        files_stanza = FilesStanza()
        _apply_fields(files_stanza, stanza, FILES_STANZA_FIELDS)
        files.append(files_stanza)

    return DebianPackage(header=header, files=files)


@functools.lru_cache(maxsize=None)
def _glob_to_regex(pattern: str) -> re.Pattern[str]:
    regex = []
    index = 0
    while index < len(pattern):
        if pattern.startswith("**/", index):
            regex.append("(?:.*/)?")
            index += 3
        elif pattern.startswith("**", index):
            regex.append(".*")
            index += 2
        elif pattern[index] == "*":
            regex.append("[^/]*")
            index += 1
        elif pattern[index] == "?":
            regex.append("[^/]")
            index += 1
        else:
            regex.append(re.escape(pattern[index]))
            index += 1
    return re.compile("".join(regex))


def _strip_current_directory(path: str) -> str:
    return path[2:] if path.startswith("./") else path


def glob_match(path: str, pattern: str) -> bool:
    """
    Match a relative path against a glob pattern.

    "*" and "?" stay within a path segment, "**" crosses segments. The bare
    pattern "*" is the Debian catch-all and matches every path.
    """
    if pattern == "*":
        return True
    return (
        _glob_to_regex(_strip_current_directory(pattern)).fullmatch(
            _strip_current_directory(path)
        )
        is not None
    )


def stanza_header(stanza: FilesStanza, config: Config = default_config) -> SpdxHeader:
    lines = [f"{COPYRIGHT_TAG} {copyright}" for copyright in stanza.copyright]
    lines.append(f"{LICENSE_TAG} {stanza.license}")
    return extract("\n".join(lines), config)


def build_license_map(
    package: DebianPackage,
    candidate_files: Iterable[str],
    config: Config = default_config,
) -> dict[str, SpdxHeader]:
    """
    Map every candidate file matched by a files-stanza to the SPDX header of
    that stanza.

    A file matched by several stanzas gets the header of the last one, as more
    specific stanzas are listed after the generic ones. Stanzas that do not
    yield a valid header are skipped.
    """
    candidates = list(candidate_files)
    license_map: dict[str, SpdxHeader] = {}

    for stanza in package.files:
        header = stanza_header(stanza, config)
        if not header.is_valid():
            logger.debug(
                "Skipping Debian files-stanza %s without a valid license and copyright",
                stanza.files,
            )
            continue
        for pattern in stanza.files:
            for path in candidates:
                if glob_match(path, pattern):
                    license_map[path] = header

    return license_map
