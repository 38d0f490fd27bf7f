# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from abc import ABC, abstractmethod

from reuse_me.bom.bom import SourceFileRef


class FileEnumerator(ABC):
    # False when only part of the repository is enumerated, e.g. a pull request
    is_complete = True

    @abstractmethod
    def get_repository_name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def get_files(self) -> list[SourceFileRef]:
        raise NotImplementedError

    @abstractmethod
    def get_license_files(self) -> list[str]:
        """Paths of the license texts, LICENSES/<identifier>.txt"""
        raise NotImplementedError
