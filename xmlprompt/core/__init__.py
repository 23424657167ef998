"""Prompt builder, settings and errors.

Import directly from submodules; the public surface is re-exported by the
top-level ``xmlprompt`` package.
"""

__all__ = []
