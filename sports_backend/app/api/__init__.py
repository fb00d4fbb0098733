"""
API package.

``router`` aggregates the entity routers and is mounted under ``/api``
by the application factory.  The health check lives in
``endpoints.health`` and is mounted at the root.
"""
