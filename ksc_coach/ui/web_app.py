"""
Web application module for the KSC Coach game entry application.

This module contains the Flask web server that serves the HTML interface
and provides JSON API endpoints for the configuration screens and the
intervals grid.
"""
import logging
import os
from typing import Any, Dict, Optional

from flask import Flask, send_from_directory, jsonify, request

from ..services import ConfigurationError, UnknownScreenError, ServiceFactory

logger = logging.getLogger(__name__)


class WebAppState:
    """
    State holder for the web application.

    Each Flask app gets its own instance, built through the service factory.
    """

    def __init__(self, settings_path: Optional[str] = None):
        self.service_factory = ServiceFactory(settings_path)
        self.game_entry = self.service_factory.create_game_entry_service()


def _payload() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _player_name(data: Dict[str, Any]) -> str:
    name = data.get("player")
    if not isinstance(name, str) or not name:
        raise ConfigurationError("Field 'player' is required")
    return name


def create_app(static_folder: str = ".", settings_path: Optional[str] = None) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        static_folder: Directory to serve static files from
        settings_path: JSON file for persisted settings; None keeps them in memory

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__, static_folder=static_folder, static_url_path="")
    app_state = WebAppState(settings_path)
    app.config["APP_STATE"] = app_state

    @app.route("/")
    def index():
        """Serve the main HTML interface."""
        response = send_from_directory(static_folder, "index.html")
        response.headers['Cache-Control'] = 'no-cache, no-store, must-revalidate'
        response.headers['Pragma'] = 'no-cache'
        response.headers['Expires'] = '0'
        return response

    # ==================== Error handling ==================== #

    @app.errorhandler(UnknownScreenError)
    def handle_unknown_screen(e):
        return jsonify({"success": False, "error": str(e)}), 404

    @app.errorhandler(ConfigurationError)
    def handle_configuration_error(e):
        return jsonify({"success": False, "error": str(e)}), 400

    # ==================== API Endpoints ==================== #

    @app.route("/api/state", methods=["GET"])
    def get_state():
        """Get the persisted configuration and current screen."""
        try:
            return jsonify({"success": True, **app_state.game_entry.state()})
        except Exception as e:
            logger.exception("Failed to build state")
            return jsonify({"success": False, "error": str(e)}), 500

    @app.route("/api/menu", methods=["GET"])
    def get_menu():
        return jsonify({"success": True, "items": app_state.game_entry.menu()})

    @app.route("/api/screen", methods=["POST"])
    def set_screen():
        """Navigate to another screen."""
        screen = app_state.game_entry.navigate(_payload().get("screen"))
        return jsonify({"success": True, "screen": screen.value})

    @app.route("/api/continue/<step>", methods=["POST"])
    def continue_step(step: str):
        """Handle a "Save & Continue" button from one of the configuration screens."""
        handlers = {
            "landing": app_state.game_entry.continue_from_landing,
            "setup": app_state.game_entry.continue_from_setup,
            "stats": app_state.game_entry.continue_from_stats,
        }
        handler = handlers.get(step)
        if handler is None:
            return jsonify({"success": False, "error": f"Unknown step: {step}"}), 404
        screen = handler()
        return jsonify({"success": True, "screen": screen.value})

    # ---------- Landing ---------- #

    @app.route("/api/team", methods=["POST"])
    def save_team():
        """Save team name and age group."""
        data = _payload()
        app_state.game_entry.save_team(
            team_name=data.get("team_name"),
            age_group=data.get("age_group"),
        )
        team = app_state.game_entry.team
        return jsonify({
            "success": True,
            "team_name": team.team_name,
            "age_group": team.age_group,
            "can_continue": team.can_continue(),
        })

    @app.route("/api/squad", methods=["POST"])
    def add_squad_player():
        """Add a player to the squad."""
        name = _payload().get("name")
        if not isinstance(name, str):
            return jsonify({"success": False, "error": "Field 'name' is required"}), 400

        added = app_state.game_entry.add_squad_player(name)
        squad = list(app_state.game_entry.team.squad)
        if not added:
            return jsonify({"success": False, "error": "Name is blank or already in the squad", "squad": squad}), 409
        return jsonify({"success": True, "squad": squad})

    @app.route("/api/squad/<int:index>", methods=["DELETE"])
    def remove_squad_player(index: int):
        """Remove the squad player at a list position."""
        removed = app_state.game_entry.remove_squad_player(index)
        if removed is None:
            return jsonify({"success": False, "error": "Player not found"}), 404
        return jsonify({
            "success": True,
            "removed": removed,
            "squad": list(app_state.game_entry.team.squad),
        })

    # ---------- Game setup ---------- #

    @app.route("/api/setup", methods=["POST"])
    def configure_game():
        """Save total game time and interval choice."""
        data = _payload()
        app_state.game_entry.configure_game(
            total=data.get("total_minutes"),
            interval_choice=data.get("interval_choice"),
            custom=data.get("custom_minutes"),
        )
        return jsonify({"success": True, **app_state.game_entry.state()["setup"]})

    # ---------- Stats & players ---------- #

    @app.route("/api/stats", methods=["GET"])
    def get_stats():
        stats = app_state.game_entry.stats
        return jsonify({
            "success": True,
            "columns": stats.columns(),
            "enabled": {name: stats.is_enabled(name) for name in stats.all_stats},
        })

    @app.route("/api/stats/toggle", methods=["POST"])
    def toggle_stat():
        name = _payload().get("name")
        enabled = app_state.game_entry.toggle_stat(name)
        return jsonify({"success": True, "name": name, "enabled": enabled})

    @app.route("/api/players/toggle", methods=["POST"])
    def toggle_player():
        name = _player_name(_payload())
        selected = app_state.game_entry.toggle_player(name)
        return jsonify({
            "success": True,
            "player": name,
            "selected": selected,
            "selected_players": list(app_state.game_entry.selection.players),
        })

    # ---------- Intervals grid ---------- #

    @app.route("/api/grid", methods=["GET"])
    def get_grid():
        """Get interval columns and per-player entries."""
        try:
            return jsonify({"success": True, **app_state.game_entry.grid()})
        except Exception as e:
            logger.exception("Failed to build intervals grid")
            return jsonify({"success": False, "error": str(e)}), 500

    @app.route("/api/grid/presence", methods=["POST"])
    def toggle_presence():
        data = _payload()
        name = _player_name(data)
        index = data.get("interval")
        if not isinstance(index, int) or isinstance(index, bool):
            return jsonify({"success": False, "error": "Field 'interval' must be an integer"}), 400

        app_state.game_entry.toggle_presence(name, index)
        return jsonify({
            "success": True,
            "player": name,
            "presence": app_state.game_entry.records.presence(name),
        })

    @app.route("/api/grid/goals", methods=["POST"])
    def set_goals():
        data = _payload()
        name = _player_name(data)
        goals = app_state.game_entry.set_goals(name, data.get("value"))
        return jsonify({"success": True, "player": name, "goals": goals})

    @app.route("/api/grid/assists", methods=["POST"])
    def set_assists():
        data = _payload()
        name = _player_name(data)
        assists = app_state.game_entry.set_assists(name, data.get("value"))
        return jsonify({"success": True, "player": name, "assists": assists})

    @app.route("/api/grid/potm", methods=["POST"])
    def set_player_of_match():
        name = _player_name(_payload())
        holder = app_state.game_entry.set_player_of_match(name)
        return jsonify({"success": True, "player_of_match": holder})

    return app


def run_web_app(
    host: str = "127.0.0.1",
    port: int = 7122,
    static_folder: str = ".",
    settings_path: Optional[str] = None,
) -> None:
    """
    Run the web application.

    Args:
        host: Host address to bind to (default: localhost only)
        port: Port number to listen on
        static_folder: Directory containing static files (HTML, CSS, JS)
        settings_path: JSON file for persisted settings
    """
    app = create_app(static_folder, settings_path)
    logger.info("Serving on http://%s:%d", host, port)
    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    # Default to serving files from the project root when run directly
    project_root = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
    run_web_app(static_folder=project_root)
