# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Extraction of SPDX copyright and license facts from free-form file text."""

import re
from collections import Counter
from dataclasses import dataclass, field

from reuse_me.config import Config, default_config

NO_ASSERTION = "NOASSERTION"

# REUSE-IgnoreStart
COPYRIGHT_TAG = "SPDX-FileCopyrightText:"
LICENSE_TAG = "SPDX-License-Identifier:"
# REUSE-IgnoreEnd

COPYRIGHT_REGEX = re.compile(
    re.escape(COPYRIGHT_TAG)
    + r"[ \t]*"
    + r"(?:(?:©|\([cC]\)|Copyright)[ \t]*)?"
    + r"(?:(?P<year>\d{4}(?:[ \t]*[,\-][ \t]*\d{4})*(?:[ \t]*-[ \t]*present)?)[ \t]*,?[ \t]*)?"
    + r"(?P<holder>[^<\r\n]*)"
    + r"(?:<(?P<contact>[^>\r\n]*)>)?"
)
LICENSE_REGEX = re.compile(re.escape(LICENSE_TAG) + r"(?P<license>[^\r\n]*)")
LICENSE_OPERATOR_REGEX = re.compile(r"\s+(?:AND|OR|WITH)\s+")
COMMENT_TERMINATORS = ("*/", "-->")


@dataclass(frozen=True)
class CopyrightStatement:
    holder: str
    year: str | None = None
    contact: str | None = None

    def __str__(self) -> str:
        parts = [self.year, self.holder, f"<{self.contact}>" if self.contact else None]
        return " ".join(part for part in parts if part)


@dataclass(eq=False)
class SpdxHeader:
    """SPDX facts found in a file.

    Both lists keep the order in which the facts were found, but two headers
    compare equal when they hold the same facts in any order.
    """

    copyright: list[CopyrightStatement] = field(default_factory=list)
    licenses: list[str] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpdxHeader):
            return NotImplemented
        return Counter(self.copyright) == Counter(other.copyright) and Counter(
            self.licenses
        ) == Counter(other.licenses)

    def has_valid_license(self) -> bool:
        return any(license != NO_ASSERTION for license in self.licenses)

    def has_valid_copyright(self) -> bool:
        return len(self.copyright) > 0

    def is_valid(self) -> bool:
        return self.has_valid_license() and self.has_valid_copyright()

    def copyright_text(self) -> str:
        return "\n".join(str(statement) for statement in self.copyright)


def strip_ignored_regions(text: str, start_marker: str, end_marker: str) -> str:
    """
    Remove every span between a start marker and the next end marker.

    A start marker without an end marker strips everything up to the end of
    the text. End markers outside of an ignored region are left in place.
    """
    kept = []
    position = 0
    while True:
        start = text.find(start_marker, position)
        if start == -1:
            kept.append(text[position:])
            break
        kept.append(text[position:start])
        end = text.find(end_marker, start + len(start_marker))
        if end == -1:
            break
        position = end + len(end_marker)
    return "".join(kept)


def _clean_value(value: str) -> str:
    value = value.strip()
    for terminator in COMMENT_TERMINATORS:
        if value.endswith(terminator):
            value = value[: -len(terminator)].rstrip()
    return value


def extract(text: str, config: Config = default_config) -> SpdxHeader:
    """
    Extract the SPDX header of a file.

    Lines that do not match the grammar are skipped, an absent header is an
    SpdxHeader with no copyright statements and no licenses.
    """
    text = strip_ignored_regions(
        text, config.ignore_start_marker, config.ignore_end_marker
    )

    copyrights = []
    for match in COPYRIGHT_REGEX.finditer(text):
        holder = _clean_value(match.group("holder"))
        if not holder:
            continue
        contact = match.group("contact")
        copyrights.append(
            CopyrightStatement(
                holder=holder,
                year=match.group("year"),
                contact=contact.strip() if contact and contact.strip() else None,
            )
        )

    licenses = []
    for match in LICENSE_REGEX.finditer(text):
        license = _clean_value(match.group("license"))
        if license:
            licenses.append(license)

    return SpdxHeader(copyright=copyrights, licenses=licenses)


def individual_licenses(identifiers: list[str] | tuple[str, ...]) -> list[str]:
    """
    Split SPDX license expressions into their individual identifiers.

    "MIT OR (Apache-2.0 AND BSD-3-Clause)" yields ["MIT", "Apache-2.0", "BSD-3-Clause"].
    NOASSERTION is not an identifier and is dropped.
    """
    licenses = []
    for identifier in identifiers:
        for part in LICENSE_OPERATOR_REGEX.split(identifier):
            part = part.strip().strip("()").strip()
            if part and part != NO_ASSERTION:
                licenses.append(part)
    return licenses
