"""Async Foursquare v2 venues client with LangChain tool bindings."""

__version__ = "0.1.0"
