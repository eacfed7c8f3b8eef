"""Tests for the Flask JSON API."""

import pytest

from ksc_coach.ui import create_app


@pytest.fixture
def settings_path(tmp_path):
    return str(tmp_path / "settings.json")


@pytest.fixture
def client(tmp_path, settings_path):
    (tmp_path / "index.html").write_text("<html><body>KSC</body></html>", encoding="utf-8")
    app = create_app(static_folder=str(tmp_path), settings_path=settings_path)
    app.config["TESTING"] = True
    return app.test_client()


def _configure(client, players=("Ava", "Bea")):
    client.post("/api/team", json={"team_name": "KSC", "age_group": "U12"})
    for name in ("Ava", "Bea", "Cat"):
        client.post("/api/squad", json={"name": name})
    client.post("/api/continue/landing")
    client.post("/api/setup", json={"total_minutes": "65", "interval_choice": 30})
    client.post("/api/continue/setup")
    for name in players:
        client.post("/api/players/toggle", json={"player": name})
    return client.post("/api/continue/stats")


def test_index_served(client):
    response = client.get("/")
    assert response.status_code == 200
    assert b"KSC" in response.data


def test_landing_gate(client):
    response = client.post("/api/continue/landing")
    assert response.status_code == 400
    assert response.get_json()["success"] is False

    client.post("/api/team", json={"team_name": "KSC", "age_group": "U12"})
    response = client.post("/api/continue/landing")
    assert response.get_json() == {"success": True, "screen": "menu"}


def test_squad_add_and_remove(client):
    assert client.post("/api/squad", json={"name": "Ava"}).status_code == 200
    assert client.post("/api/squad", json={"name": "Ava"}).status_code == 409
    assert client.post("/api/squad", json={}).status_code == 400

    response = client.delete("/api/squad/0")
    assert response.get_json()["removed"] == "Ava"
    assert client.delete("/api/squad/0").status_code == 404


def test_setup_rejects_unknown_interval(client):
    response = client.post("/api/setup", json={"total_minutes": "60", "interval_choice": 25})
    assert response.status_code == 400


def test_stats_listing_and_toggle(client):
    data = client.get("/api/stats").get_json()
    assert data["columns"][0] == ["Goals", "Assists", "POTM"]
    assert data["enabled"]["Goals"] is True

    response = client.post("/api/stats/toggle", json={"name": "Saves"})
    assert response.get_json()["enabled"] is True
    assert client.post("/api/stats/toggle", json={"name": "Throw-ins"}).status_code == 400


def test_full_flow_and_grid_entries(client):
    assert _configure(client).get_json()["screen"] == "intervals"

    grid = client.get("/api/grid").get_json()
    assert grid["intervals"] == [[0, 30], [30, 60], [60, 65]]
    assert [row["name"] for row in grid["players"]] == ["Ava", "Bea"]

    response = client.post("/api/grid/presence", json={"player": "Ava", "interval": 2})
    assert response.get_json()["presence"] == [False, False, True]

    assert client.post("/api/grid/goals", json={"player": "Ava", "value": "2"}).get_json()["goals"] == 2
    assert client.post("/api/grid/assists", json={"player": "Ava", "value": "-3"}).get_json()["assists"] == 0

    client.post("/api/grid/potm", json={"player": "Ava"})
    response = client.post("/api/grid/potm", json={"player": "Bea"})
    assert response.get_json()["player_of_match"] == "Bea"

    grid = client.get("/api/grid").get_json()
    ava = grid["players"][0]
    assert ava["goals"] == 2
    assert ava["presence"] == [False, False, True]
    assert ava["player_of_match"] is False
    assert grid["player_of_match"] == "Bea"


def test_grid_presence_validation(client):
    _configure(client)
    assert client.post("/api/grid/presence", json={"player": "Ava", "interval": "2"}).status_code == 400
    assert client.post("/api/grid/presence", json={"interval": 1}).status_code == 400

    # Stale index is ignored rather than reported
    response = client.post("/api/grid/presence", json={"player": "Ava", "interval": 9})
    assert response.status_code == 200
    assert response.get_json()["presence"] == [False, False, False]


def test_screen_navigation(client):
    assert client.post("/api/screen", json={"screen": "menu"}).get_json()["screen"] == "menu"
    assert client.post("/api/screen", json={"screen": "nowhere"}).status_code == 404
    assert client.post("/api/continue/unknown").status_code == 404


def test_menu(client):
    items = client.get("/api/menu").get_json()["items"]
    assert [item["title"] for item in items] == [
        "Season Overview", "Game Data Entry", "Training Tracker", "Training Plan Builder"
    ]


def test_state_survives_new_app(client, tmp_path, settings_path):
    _configure(client)
    fresh = create_app(static_folder=str(tmp_path), settings_path=settings_path).test_client()
    state = fresh.get("/api/state").get_json()
    assert state["team"]["squad"] == ["Ava", "Bea", "Cat"]
    assert state["setup"]["total_minutes"] == "65"
    assert state["setup"]["interval_choice"] == 30
    assert state["selected_players"] == []


def test_state_carries_app_title(client):
    state = client.get("/api/state").get_json()
    assert state["title"] == "Game Entry Tab"
    assert state["club"] == "KSC"


def test_non_finite_goal_value_is_stored_as_zero(client):
    _configure(client)
    response = client.post(
        "/api/grid/goals",
        data='{"player": "Ava", "value": 1e400}',
        content_type="application/json",
    )
    assert response.status_code == 200
    assert response.get_json()["goals"] == 0


@pytest.mark.parametrize("total", ["200", "9" * 5000])
def test_setup_rejects_game_longer_than_limit(client, total):
    client.post("/api/setup", json={"total_minutes": "60", "interval_choice": 15})
    response = client.post("/api/setup", json={"total_minutes": total, "interval_choice": "custom", "custom_minutes": "1"})
    assert response.status_code == 400

    state = client.get("/api/state")
    assert state.status_code == 200
    assert state.get_json()["setup"]["total_minutes"] == "60"
    assert state.get_json()["setup"]["interval_choice"] == 15


def test_grid_write_after_leaving_grid_does_not_persist(client):
    _configure(client)
    client.post("/api/screen", json={"screen": "menu"})
    assert client.post("/api/grid/goals", json={"player": "Ava", "value": 5}).get_json()["goals"] == 0

    client.post("/api/screen", json={"screen": "intervals"})
    grid = client.get("/api/grid").get_json()
    assert grid["players"][0]["goals"] == 0
