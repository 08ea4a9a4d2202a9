"""
Schemas module - Request/Response schemas for API endpoints.

The same models describe the records kept by every storage backend, so
the API, the repositories and the client all agree on one shape.
"""
