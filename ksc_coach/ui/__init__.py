"""
UI package for the KSC Coach game entry application.

This package contains the Flask web server and its JSON API.
"""
from .web_app import create_app, run_web_app, WebAppState

__all__ = ["create_app", "run_web_app", "WebAppState"]
