# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reader configuration for cmdtree."""

from cmdtree.config.reader_config import (
    CONFIG_FILE_NAME,
    ReaderConfig,
    ReaderConfigError,
    build_reader,
    load_reader_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ReaderConfig",
    "ReaderConfigError",
    "build_reader",
    "load_reader_config",
]
