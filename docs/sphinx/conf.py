# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the py2ts documentation."""

project = "py2ts"
author = "Py2TS Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]
autodoc_typehints = "description"

html_theme = "alabaster"
