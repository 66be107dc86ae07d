import pytest

from runlog.review.app import create_app


@pytest.fixture
def client(csv_table):
    app = create_app({"summary": {"recent_count": 2}}, path=csv_table)
    app.config["TESTING"] = True
    return app.test_client()


def test_summary(client):
    resp = client.get("/api/summary")
    assert resp.status_code == 200
    data = resp.get_json()

    assert data["activity_count"] == 4
    assert data["total_distance_mi"] == pytest.approx(26.4)
    assert data["display"]["distance"] == "26.40"
    assert data["display"]["elevation"] == "162"


def test_monthly(client):
    data = client.get("/api/monthly").get_json()
    assert [m["month"] for m in data] == ["Nov 2023", "Jan 2024"]
    assert data[1]["count"] == 2


def test_categories(client):
    data = client.get("/api/categories").get_json()
    names = [c["name"] for c in data]
    assert names == ["Race", "Easy Run", "Long Run", "Workout"]
    assert sum(c["share_pct"] for c in data) == pytest.approx(100)


def test_activities_all_and_recent(client):
    everything = client.get("/api/activities").get_json()
    assert [a["id"] for a in everything] == ["102", "101", "103", "104"]
    assert everything[3]["date"] is None
    assert everything[3]["date_display"] == "Invalid Date"

    recent = client.get("/api/activities?recent=").get_json()
    assert [a["id"] for a in recent] == ["104", "103"]

    one = client.get("/api/activities?recent=1").get_json()
    assert [a["id"] for a in one] == ["104"]


def test_activities_bad_recent(client):
    resp = client.get("/api/activities?recent=lots")
    assert resp.status_code == 400


def test_hr_pace(client):
    data = client.get("/api/hr-pace").get_json()
    assert len(data) == 3
    assert all(p["pace"] > 0 and p["heart_rate"] > 0 for p in data)


def test_missing_table_is_an_error(tmp_path):
    app = create_app({}, path=tmp_path / "gone.csv")
    resp = app.test_client().get("/api/summary")

    assert resp.status_code == 500
    assert resp.get_json()["error"].startswith("Failed to load the data")


def test_empty_table_is_not_found(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("id,name\n")
    resp = create_app({}, path=path).test_client().get("/api/monthly")

    assert resp.status_code == 404
    assert "No data found" in resp.get_json()["error"]
