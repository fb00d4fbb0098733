"""
Top-level package for the 42Sports backend.

This file makes ``sports_backend`` a package so that modules within
``app`` can be imported using fully qualified names like
``sports_backend.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
