"""Dash web app for the feature explorer."""

from .app import ServerState, create_app

__all__ = ["ServerState", "create_app"]
