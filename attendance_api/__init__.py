"""
Top-level package for the Attendance Log API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``attendance_api.app.main:app``.
"""

__all__ = []
