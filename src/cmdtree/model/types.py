# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed argument descriptors attached to argument nodes of a command tree."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ArgumentType(BaseModel):
    """The resolved type of an argument node.

    Instances are produced by the parse functions registered in an
    argument-type registry. The compiler only carries them through to the
    command tree and never looks inside ``properties``.

    Attributes:
        name: Identity of the type (e.g. ``"integer"`` or ``"player"``).
        properties: Parser-supplied configuration, such as numeric bounds.
            Stored as a read-only copy of the mapping it was built from.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    properties: Mapping[str, Any] = _Field(default_factory=dict, validate_default=True)

    @field_validator("properties")
    @classmethod
    def _freeze_properties(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("properties")
    def _serialize_properties(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)
