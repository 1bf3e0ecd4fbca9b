# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for cmdtree documentation."""

project = "cmdtree"
author = "cmdtree Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
