# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import io
import json
import logging
from typing import Any

from license_expression import ExpressionError
from spdx_tools.common.spdx_licensing import spdx_licensing
from spdx_tools.spdx.jsonschema.document_converter import DocumentConverter
from spdx_tools.spdx.model import (
    Actor,
    ActorType,
    Checksum,
    ChecksumAlgorithm,
    CreationInfo,
    Document,
    File,
    Relationship,
    RelationshipType,
    SpdxNoAssertion,
)

from reuse_me.adaptors.datetime import get_datetime_now
from reuse_me.bom.bom import Bom, BomRecord
from reuse_me.bom.writers.abstract_bom_writer import BomWriter
from reuse_me.config import Config, default_config
from reuse_me.spdx_header.spdx_header import NO_ASSERTION

# Get application-specific logger
logger = logging.getLogger("reuse_me")

DOCUMENT_SPDX_ID = "SPDXRef-DOCUMENT"


class SpdxJsonBomWriter(BomWriter):
    """
    Writes a Bill of Materials as an SPDX 2.3 JSON document.
    """

    def __init__(self, config: Config = default_config) -> None:
        self.config = config

    def _license(self, record: BomRecord, identifier: str) -> Any:
        if identifier == NO_ASSERTION:
            return SpdxNoAssertion()
        try:
            return spdx_licensing.parse(identifier)
        except ExpressionError as e:
            logger.warning(
                "License %s of %s is not a valid SPDX expression: %s",
                identifier,
                record.file_name,
                e,
            )
            return SpdxNoAssertion()

    def _to_spdx_file(self, record: BomRecord) -> File:
        license_info = [
            self._license(record, identifier)
            for identifier in record.license_info_in_file
        ]
        invalid = [
            identifier
            for identifier, license in zip(record.license_info_in_file, license_info)
            if isinstance(license, SpdxNoAssertion) and identifier != NO_ASSERTION
        ]
        return File(
            name=f"./{record.file_name}",
            spdx_id=record.spdx_id,
            checksums=[
                Checksum(ChecksumAlgorithm[record.checksum.algorithm], record.checksum.value)
            ],
            license_concluded=SpdxNoAssertion(),
            license_info_in_file=license_info,
            license_comment=(
                "Unparsed license identifiers: " + ", ".join(invalid) if invalid else None
            ),
            copyright_text=record.copyright_text or SpdxNoAssertion(),
        )

    def to_document(self, bom: Bom) -> Document:
        created = get_datetime_now().replace(tzinfo=None, microsecond=0)
        creation_info = CreationInfo(
            spdx_version="SPDX-2.3",
            spdx_id=DOCUMENT_SPDX_ID,
            name=bom.name,
            document_namespace=bom.namespace,
            creators=[
                Actor(
                    ActorType.TOOL,
                    f"{self.config.tool_name}-{self.config.tool_version}",
                )
            ],
            created=created,
        )
        files = [self._to_spdx_file(record) for record in bom.records]
        relationships = [
            Relationship(DOCUMENT_SPDX_ID, RelationshipType.DESCRIBES, file.spdx_id)
            for file in files
        ]
        return Document(
            creation_info=creation_info, files=files, relationships=relationships
        )

    def write(self, bom: Bom) -> str:
        output = io.StringIO()
        json.dump(DocumentConverter().convert(self.to_document(bom)), output, indent=2)
        json_string = output.getvalue()
        output.close()
        return json_string
