"""
Top‑level package for the SafetyNet Alerts API.

This file makes ``safety_alerts_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``safety_alerts_api.app.main``.  The bundled reference dataset
lives in the ``data`` directory next to this file.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
