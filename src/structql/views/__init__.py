# Copyright 2026 structql Contributors
# SPDX-License-Identifier: Apache-2.0

"""Textual rendering of generated schema types."""

from structql.views.sdl import render_sdl

__all__ = [
    "render_sdl",
]
