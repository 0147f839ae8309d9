"""
Top‑level package for the Sons Mágicos Instruments API.

This file makes ``sons_magicos_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``sons_magicos_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
