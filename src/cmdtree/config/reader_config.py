# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the reader configuration file.

The configuration selects which argument types a reader knows about::

    include-defaults: true
    argument-types:
      - mypkg.types:CUSTOM_TYPES
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from cmdtree.argtypes.registry import ArgumentTypeParser
from cmdtree.compiler.reader import CommandFileReader

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".cmdtree.yaml"


class ReaderConfigError(Exception):
    """Raised when a reader configuration file is invalid or cannot be loaded."""


@dataclass
class ReaderConfig:
    """The parsed reader configuration.

    Attributes:
        include_defaults: Register the default argument type families first.
        argument_types: ``module:attribute`` references to argument type
            mappings, registered in order after the defaults.
    """

    include_defaults: bool = True
    argument_types: list[str] = field(default_factory=list)


def load_reader_config(path: Path) -> ReaderConfig:
    """Load and parse a reader configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A ReaderConfig instance populated from the file.

    Raises:
        ReaderConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ReaderConfigError(f"Configuration file not found: {path}") from None
    except OSError as exc:
        raise ReaderConfigError(f"Cannot read configuration file: {exc}") from exc

    return _parse_reader_config(text, source_label=str(path))


def build_reader(config: ReaderConfig) -> CommandFileReader:
    """Build a reader with the argument types selected by *config*.

    Raises:
        ReaderConfigError: If a referenced argument type mapping cannot be
            imported or contains an invalid type name.
    """
    builder = CommandFileReader.builder()
    if config.include_defaults:
        builder.with_default_argument_types()
    for reference in config.argument_types:
        try:
            builder.with_argument_types(_load_argument_types(reference))
        except ValueError as exc:
            raise ReaderConfigError(f"Invalid argument types in {reference!r}: {exc}") from exc
    return builder.build()


# ################
# Implementation
# ################


def _parse_reader_config(text: str, source_label: str = "<string>") -> ReaderConfig:
    """Parse reader config YAML text into a ReaderConfig.

    An empty document yields the default configuration.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ReaderConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ReaderConfig()
    if not isinstance(data, dict):
        raise ReaderConfigError(f"{source_label}: reader config must be a YAML mapping")

    unknown = sorted(set(data) - {"include-defaults", "argument-types"})
    if unknown:
        raise ReaderConfigError(f"{source_label}: unknown field(s): {', '.join(map(str, unknown))}")

    include_defaults = data.get("include-defaults", True)
    if not isinstance(include_defaults, bool):
        raise ReaderConfigError(f"{source_label}: 'include-defaults' must be a boolean")

    raw_types = data.get("argument-types", [])
    if not isinstance(raw_types, list):
        raise ReaderConfigError(f"{source_label}: 'argument-types' must be a list")
    argument_types: list[str] = []
    for index, entry in enumerate(raw_types):
        if not isinstance(entry, str) or entry.count(":") != 1 or not all(entry.split(":")):
            raise ReaderConfigError(
                f"{source_label}: argument-types[{index}] must be a 'module:attribute' string, got {entry!r}"
            )
        argument_types.append(entry)

    return ReaderConfig(include_defaults=include_defaults, argument_types=argument_types)


def _load_argument_types(reference: str) -> Mapping[str, ArgumentTypeParser]:
    """Import the argument type mapping named by a ``module:attribute`` reference."""
    module_name, _, attribute = reference.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ReaderConfigError(f"Cannot import argument types from {reference!r}: {exc}") from exc
    try:
        parsers = getattr(module, attribute)
    except AttributeError:
        raise ReaderConfigError(f"Module {module_name!r} has no attribute {attribute!r}") from None
    if not isinstance(parsers, Mapping):
        raise ReaderConfigError(f"{reference!r} is not a mapping of argument type parsers")
    logger.debug("Loaded %d argument type(s) from %s", len(parsers), reference)
    return parsers
