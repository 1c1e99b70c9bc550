"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The dataset (persons, fire stations and medical records)
is owned by ``core.datastore``; business logic lives in ``services``
and every alert view or CRUD resource exposes a router defined in
``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
