"""
Version 1 of the API.

This subpackage bundles the alert views and the CRUD resources of the
SafetyNet Alerts API.  Breaking changes belong in a new version
subpackage.
"""
