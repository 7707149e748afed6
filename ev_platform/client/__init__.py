# ev_platform/client/__init__.py
"""Consumer side of the vehicles API: HTTP client, listing logic, form checks and view state."""
