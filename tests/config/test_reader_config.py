# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for loading the reader configuration and building readers from it."""

import logging
from pathlib import Path

import pytest

from cmdtree.compiler import UnknownTypeError
from cmdtree.config import (
    ReaderConfig,
    ReaderConfigError,
    build_reader,
    load_reader_config,
)
from cmdtree.model import ArgumentNode

# ###############
# Test Helpers
# ###############

_PLUGIN = """\
from cmdtree.model.types import ArgumentType


def _color(spec):
    return ArgumentType(name="color", properties={"palette": spec or "default"})


COLOR_TYPES = {"color": _color, "player": lambda spec: ArgumentType(name="user")}
NOT_A_MAPPING = 42
BAD_NAMES = {"two words": _color}
"""


@pytest.fixture
def plugin_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Write an importable argument type module and return its name."""
    (tmp_path / "cmdtree_test_plugin.py").write_text(_PLUGIN, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return "cmdtree_test_plugin"


def _write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / ".cmdtree.yaml"
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# Loading
# ###############


class TestLoadReaderConfig:
    def test_full_config(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, "include-defaults: false\nargument-types:\n  - pkg.types:TYPES\n")
        config = load_reader_config(path)
        assert config == ReaderConfig(include_defaults=False, argument_types=["pkg.types:TYPES"])

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_reader_config(_write_config(tmp_path, "")) == ReaderConfig()

    def test_missing_fields_take_defaults(self, tmp_path: Path) -> None:
        config = load_reader_config(_write_config(tmp_path, "argument-types: []\n"))
        assert config.include_defaults is True
        assert config.argument_types == []

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ReaderConfigError, match="not found"):
            load_reader_config(tmp_path / "absent.yaml")

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ("key: [unclosed\n", "Invalid YAML"),
            ("- a\n- b\n", "must be a YAML mapping"),
            ("colour: red\n", "unknown field"),
            ("include-defaults: maybe\n", "must be a boolean"),
            ("argument-types: pkg:TYPES\n", "must be a list"),
            ("argument-types:\n  - no_colon\n", r"argument-types\[0\]"),
            ("argument-types:\n  - ':TYPES'\n", r"argument-types\[0\]"),
            ("argument-types:\n  - a:b:c\n", r"argument-types\[0\]"),
            ("argument-types:\n  - 7\n", r"argument-types\[0\]"),
        ],
    )
    def test_invalid_config(self, tmp_path: Path, content: str, message: str) -> None:
        with pytest.raises(ReaderConfigError, match=message):
            load_reader_config(_write_config(tmp_path, content))


# ###############
# Building Readers
# ###############


class TestBuildReader:
    def test_default_config_knows_both_families(self) -> None:
        reader = build_reader(ReaderConfig())
        assert "integer" in reader.registry
        assert "player" in reader.registry

    def test_without_defaults(self) -> None:
        reader = build_reader(ReaderConfig(include_defaults=False))
        assert len(reader.registry) == 0
        with pytest.raises(UnknownTypeError):
            reader.parse_string("give\n    <x>:player\n")

    def test_builtin_family_by_reference(self) -> None:
        reader = build_reader(ReaderConfig(include_defaults=False, argument_types=["cmdtree.argtypes:GAME_TYPES"]))
        assert "block_pos" in reader.registry
        assert "integer" not in reader.registry

    def test_plugin_types_are_added_after_defaults(self, plugin_module: str) -> None:
        reader = build_reader(ReaderConfig(argument_types=[f"{plugin_module}:COLOR_TYPES"]))
        tree = reader.parse_string("paint\n    <shade>:color warm\n    <who>:player\n")
        shade, who = tree.children
        assert isinstance(shade, ArgumentNode)
        assert shade.type.properties == {"palette": "warm"}
        assert isinstance(who, ArgumentNode)
        assert who.type.name == "user"

    def test_plugin_load_is_logged(self, plugin_module: str, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="cmdtree.config.reader_config"):
            build_reader(ReaderConfig(argument_types=[f"{plugin_module}:COLOR_TYPES"]))
        assert "Loaded 2 argument type(s)" in caplog.text

    def test_unimportable_module(self) -> None:
        with pytest.raises(ReaderConfigError, match="Cannot import"):
            build_reader(ReaderConfig(argument_types=["cmdtree_no_such_module:TYPES"]))

    def test_missing_attribute(self, plugin_module: str) -> None:
        with pytest.raises(ReaderConfigError, match="has no attribute"):
            build_reader(ReaderConfig(argument_types=[f"{plugin_module}:MISSING"]))

    def test_attribute_is_not_a_mapping(self, plugin_module: str) -> None:
        with pytest.raises(ReaderConfigError, match="not a mapping"):
            build_reader(ReaderConfig(argument_types=[f"{plugin_module}:NOT_A_MAPPING"]))

    def test_invalid_type_name_in_plugin(self, plugin_module: str) -> None:
        with pytest.raises(ReaderConfigError, match="Invalid argument types"):
            build_reader(ReaderConfig(argument_types=[f"{plugin_module}:BAD_NAMES"]))
