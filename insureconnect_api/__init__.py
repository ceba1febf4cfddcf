"""
Top‑level package for the InsureConnect API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
