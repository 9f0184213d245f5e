"""Shared application state and the ports the presentation layer talks through."""
