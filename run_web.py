#!/usr/bin/env python3
"""
Main entry point for the KSC Coach game entry web application.

This script configures logging and launches the Flask-based web server.
Settings come from ``KSC_*`` environment variables (see ksc_coach.utils.config).
"""
import logging
import os

from ksc_coach.ui.web_app import run_web_app
from ksc_coach.utils import AppConfig

if __name__ == "__main__":
    config = AppConfig.from_env()
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Serve index.html from the project root
    project_root = os.path.dirname(os.path.abspath(__file__))
    run_web_app(
        host=config.host,
        port=config.port,
        static_folder=project_root,
        settings_path=config.settings_file,
    )
