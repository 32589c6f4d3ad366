"""
API package containing versioned routes.

A version subpackage such as ``v1`` exposes a top‑level ``router``
which includes all of its resource endpoints.  ``deps`` holds the
FastAPI dependencies shared across versions.
"""
