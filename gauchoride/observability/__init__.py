"""Request observability helpers.

Request IDs + structlog contextvars, the ambient request context, and the
"before handler" request logger wired into routing via ``LoggedRoute``.
"""
