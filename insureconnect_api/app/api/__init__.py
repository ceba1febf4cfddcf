"""
HTTP layer of the InsureConnect API.

``router.py`` exposes a single ``router`` that bundles the endpoint
modules under ``endpoints``.
"""
