"""
API package containing versioned routes.

A version subpackage (``v1``) exposes a top‑level ``router`` which
includes all of its endpoint routers.  Shared FastAPI dependencies
live in ``deps``.
"""
