"""
API package containing versioned routes.

This package groups API versions under subpackages such as ``v1``.  A
version subpackage exposes a top-level ``router`` which includes all
of its domain-specific endpoints.  Shared dependencies and the error
translation live next to the versions in ``deps`` and ``errors``.
"""
