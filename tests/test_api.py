import pytest

from langchain_core.language_models.fake_chat_models import FakeListChatModel

from stemedge.services import ai_tutor
from stemedge.services.ai_tutor import AITutorService

API = "/api/v1"


def open_view(client, lesson_key="ecology"):
    response = client.post(f"{API}/lessons/{lesson_key}/views")
    assert response.status_code == 200
    return response.json()


def test_health_and_root(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["lessons"] == ["cell_biology", "ecology"]


def test_list_lessons_and_slides(client):
    lessons = {l["key"]: l for l in client.get(f"{API}/lessons").json()}
    assert lessons["ecology"]["total_slides"] == 12

    slides = client.get(f"{API}/lessons/ecology/slides").json()
    assert slides[2]["sim_type"] == "web_builder"

    assert client.get(f"{API}/lessons/astronomy/slides").status_code == 404


def test_open_unknown_lesson(client):
    assert client.post(f"{API}/lessons/astronomy/views").status_code == 404


def test_navigation_and_resume(client):
    view = open_view(client)
    view_id = view["view_id"]
    assert view["current_index"] == 0

    client.post(f"{API}/views/{view_id}/navigate/next")
    data = client.post(f"{API}/views/{view_id}/navigate/next").json()
    assert data["current_index"] == 2
    assert data["completed"] == [0, 1]
    assert data["slide"]["title"] == "Food Chains"

    data = client.post(f"{API}/views/{view_id}/goto", json={"index": 5}).json()
    assert data["completed"] == [0, 1, 2, 3, 4]

    data = client.post(f"{API}/views/{view_id}/notes", json={"text": "carbon moves"}).json()
    assert data["notes"][-1].endswith("carbon moves")

    client.delete(f"{API}/views/{view_id}")

    resumed = open_view(client)
    assert resumed["current_index"] == 5
    assert resumed["completed"] == [0, 1, 2, 3, 4]
    assert len(resumed["notes"]) == 1


def test_navigation_errors(client):
    view_id = open_view(client)["view_id"]

    assert client.post(f"{API}/views/{view_id}/navigate/sideways").status_code == 400
    assert client.post(f"{API}/views/missing/navigate/next").status_code == 404
    assert client.post(f"{API}/views/{view_id}/notes", json={"text": ""}).status_code == 422


def test_closed_view_is_gone(client):
    view_id = open_view(client)["view_id"]

    assert client.delete(f"{API}/views/{view_id}").status_code == 200
    assert client.get(f"{API}/views/{view_id}/progress").status_code == 404
    assert client.delete(f"{API}/views/{view_id}").status_code == 404


def test_population_controls(client, registry):
    view_id = open_view(client)["view_id"]

    data = client.get(f"{API}/views/{view_id}/population").json()
    assert data == {"running": False, "history": [{"tick": 0, "prey": 40.0, "predator": 10.0}]}

    assert client.post(f"{API}/views/{view_id}/population/start").json()["running"] is True
    assert client.post(f"{API}/views/{view_id}/population/pause").json()["running"] is False

    data = client.post(f"{API}/views/{view_id}/population/reset").json()
    assert data["history"] == [{"tick": 0, "prey": 40.0, "predator": 10.0}]

    assert client.post(f"{API}/views/{view_id}/population/explode").status_code == 400


def test_closing_view_stops_simulation(client, registry):
    view_id = open_view(client)["view_id"]
    client.post(f"{API}/views/{view_id}/population/start")
    sim = registry.get(view_id).population

    client.delete(f"{API}/views/{view_id}")

    assert not sim.running


def test_food_web_flow(client):
    view_id = open_view(client)["view_id"]
    click = f"{API}/views/{view_id}/food-web/click"

    data = client.post(click, json={"organism_id": "grass"}).json()
    assert data["outcome"] == "selected"
    assert data["selected_id"] == "grass"

    data = client.post(click, json={"organism_id": "rabbit"}).json()
    assert data["outcome"] == "created"
    assert data["edges"] == [{"from_id": "grass", "to_id": "rabbit"}]

    client.post(click, json={"organism_id": "grass"})
    data = client.post(click, json={"organism_id": "fox"}).json()
    assert data["outcome"] == "rejected"
    assert len(data["edges"]) == 1

    assert client.post(click, json={"organism_id": "dragon"}).status_code == 404

    data = client.post(f"{API}/views/{view_id}/food-web/reset").json()
    assert data["edges"] == []
    assert len(data["organisms"]) == 5


def test_carbon_transfer_and_settle(client):
    view_id = open_view(client)["view_id"]
    transfer = f"{API}/views/{view_id}/carbon/transfer"

    data = client.post(transfer, json={"action": "photosynthesis"}).json()
    assert data["accepted"] is True
    quantities = {r["id"]: r["quantity"] for r in data["reservoirs"]}
    assert quantities["atmosphere"] == 90
    assert quantities["plants"] == 60
    assert data["total"] == 450
    assert data["active_action"] == "Photosynthesis"

    data = client.post(transfer, json={"action": "combustion"}).json()
    assert data["accepted"] is False
    assert data["total"] == 450

    assert client.post(transfer, json={"action": "volcano"}).status_code == 400


def test_quiz_endpoints(client):
    topics = client.get(f"{API}/quiz/topics").json()
    assert {t["id"] for t in topics} >= {"cell_biology", "ecology"}

    questions = client.post(f"{API}/quiz/questions", json={"topic_id": "cell_biology", "limit": 2}).json()
    assert len(questions) == 2

    everything = client.post(f"{API}/quiz/questions", json={"topic_id": "cell_biology", "limit": "All"}).json()
    assert len(everything) == 6

    assert client.post(f"{API}/quiz/questions", json={"topic_id": "astronomy"}).status_code == 404
    assert client.post(f"{API}/quiz/questions", json={"topic_id": "ecology", "limit": 0}).status_code == 400


def test_tutor_chat(client, monkeypatch):
    service = AITutorService(model=FakeListChatModel(responses=["Great question!"]))
    monkeypatch.setattr(ai_tutor, "_tutor_service", service)

    data = client.post(f"{API}/tutor/chat/thread-1", json={"prompt": "What is ATP?", "topic": "Cells"}).json()

    assert data == {"text": "Great question!", "error": None}


def test_auth_endpoints(client, auth_service):
    response = client.post(f"{API}/auth/login", json={"email": "ada@school.org", "password": "s3cret"})
    assert response.status_code == 200
    token = response.json()["access_token"]

    greeting = client.get(f"{API}/auth/greeting", headers={"Authorization": f"Bearer {token}"}).json()
    assert greeting == {"greeting": "Welcome back, ada!"}

    anonymous = client.get(f"{API}/auth/greeting").json()
    assert "Sign in" in anonymous["greeting"]

    bad = client.post(f"{API}/auth/login", json={"email": "ada@school.org", "password": "wrong"})
    assert bad.status_code == 401


def test_population_websocket(client):
    view_id = open_view(client)["view_id"]

    with client.websocket_connect(f"{API}/ws/population/{view_id}") as ws:
        state = ws.receive_json()
        assert state["type"] == "state"
        assert state["running"] is False

        ws.send_json({"type": "ping"})
        assert ws.receive_json()["type"] == "pong"

        ws.send_json({"type": "start"})
        assert ws.receive_json()["running"] is True

        sample = ws.receive_json()
        assert sample["type"] == "sample"
        assert sample["sample"]["tick"] == 1
        assert sample["sample"]["prey"] == pytest.approx(42.0)

        ws.send_json({"type": "dance"})
        message = ws.receive_json()
        while message["type"] == "sample":
            message = ws.receive_json()
        assert message["type"] == "error"

    progress = client.get(f"{API}/views/{view_id}/population").json()
    assert progress["running"] is False


def test_simulation_keeps_running_while_another_stream_is_open(client, registry):
    view_id = open_view(client)["view_id"]
    url = f"{API}/ws/population/{view_id}"

    with client.websocket_connect(url) as first:
        first.receive_json()
        first.send_json({"type": "start"})
        assert first.receive_json()["running"] is True

        with client.websocket_connect(url) as second:
            assert second.receive_json()["running"] is True

        assert registry.get(view_id).stream_count == 1
        assert client.get(f"{API}/views/{view_id}/population").json()["running"] is True

    assert registry.get(view_id).stream_count == 0
    assert client.get(f"{API}/views/{view_id}/population").json()["running"] is False


def test_websocket_unknown_view(client):
    with client.websocket_connect(f"{API}/ws/population/nope") as ws:
        assert ws.receive_json()["type"] == "error"
