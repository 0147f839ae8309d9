"""
Version 1 of the API.

This subpackage bundles the endpoints for the first public version of
the Instruments API.  Breaking changes should be introduced in new
version subpackages (e.g. ``v2``) to preserve backwards compatibility.
"""
