"""
API package containing the HTTP routes.

``router`` in ``api.router`` includes every domain router defined in
``api/endpoints``.
"""
