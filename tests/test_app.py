from fastapi.testclient import TestClient

from surfscore.main import app
from surfscore.spots import ALL_SPOTS

client = TestClient(app)


def test_conditions_single_spot():
    resp = client.get("/api/surf/conditions?spot=strandhill&ability=advanced&date=2026-10-19")
    assert resp.status_code == 200
    data = resp.json()
    assert data["spotId"] == "strandhill"
    assert 0 <= data["score"] <= 10
    assert isinstance(data["reasons"], list)


def test_conditions_unknown_spot():
    resp = client.get("/api/surf/conditions?spot=atlantis")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Spot not found"}


def test_conditions_all_spots_ranked():
    resp = client.get("/api/surf/conditions?ranked=true")
    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == len(ALL_SPOTS)
    scores = [d["score"] for d in data]
    assert scores == sorted(scores, reverse=True)


def test_unknown_ability_treated_as_intermediate():
    bogus = client.get("/api/surf/conditions?spot=easkey&ability=legend").json()
    intermediate = client.get("/api/surf/conditions?spot=easkey&ability=intermediate").json()
    assert bogus == intermediate


def test_outlook_endpoint():
    resp = client.get("/api/surf/outlook?spot=strandhill&ability=beginner")
    assert resp.status_code == 200
    data = resp.json()
    assert data["ability"] == "beginner"
    assert len(data["hours"]) == 5
    assert all(0 <= h["score"] <= 10 for h in data["hours"])


def test_outlook_unknown_spot():
    assert client.get("/api/surf/outlook?spot=atlantis").status_code == 404


def test_spots_endpoint():
    resp = client.get("/api/spots?region=Connacht&country=Ireland")
    assert resp.status_code == 200
    assert {s["id"] for s in resp.json()} == {s.id for s in ALL_SPOTS}
    assert client.get("/api/spots?country=France").json() == []


def test_outlook_tolerates_missing_cells(tmp_path, monkeypatch):
    from surfscore.conditions import COLUMNS, load_conditions

    csv = tmp_path / "conditions.csv"
    csv.write_text(
        ",".join(COLUMNS) + "\n"
        "strandhill,2026-10-19T06:00Z,1.6,12.0,290,,11.0,9.0,100\n"
        "strandhill,2026-10-19T09:00Z,1.6,12.5,290,1.8,11.5,12.0,110\n"
    )
    monkeypatch.setenv("SURF_DATA_PATH", str(csv))
    load_conditions.cache_clear()

    assert client.get("/api/surf/conditions?spot=strandhill").status_code == 200
    resp = client.get("/api/surf/outlook?spot=strandhill")
    assert resp.status_code == 200
    hours = resp.json()["hours"]
    assert len(hours) == 2
    assert hours[0]["waveHeight"] == 0.0
    assert hours[1]["waveHeight"] == 1.8
