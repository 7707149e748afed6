# ev_platform/__init__.py
"""EV Platform — electric vehicle listings: REST store + API client."""

__version__ = "1.0.0"
