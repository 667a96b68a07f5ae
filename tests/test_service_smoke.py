from fastapi.testclient import TestClient


def test_import_app():
    from metricize.service.app import app
    assert app is not None


def _client() -> TestClient:
    from metricize.service.app import app

    return TestClient(app)


def test_health():
    response = _client().get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["settings"]["css_class"] == "metric-converted"


def test_convert_endpoint():
    response = _client().post("/convert", json={"text": 'Frame 5x7"'})
    assert response.status_code == 200
    assert response.json() == {
        "text": 'Frame 5x7"',
        "converted": 'Frame <span class="metric-converted" title="5x7">12.70x17.78 cm</span>"',
    }


def test_convert_endpoint_honours_strict_setting(monkeypatch):
    monkeypatch.setenv("METRICIZE_STRICT", "true")
    response = _client().post("/convert", json={"text": '3 1/0 x 2"'})
    assert response.json()["converted"] == '3 1/0 x 2"'

    response = _client().post("/convert", json={"text": '3 1/0 x 2"', "strict": False})
    assert "7.62x5.08 cm" in response.json()["converted"]


def test_parse_endpoint():
    response = _client().post("/parse", json={"token": "5½"})
    assert response.json() == {"token": "5½", "kind": "mixed_glyph", "value": 5.5, "fraction": "11/2"}

    response = _client().post("/parse", json={"token": "¾"})
    assert response.json() == {"token": "¾", "kind": None, "value": None, "fraction": None}


def test_scan_endpoint():
    response = _client().post("/scan", json={"text": '31 1/8 x 5 x 2" and 5x7 cm'})
    assert response.status_code == 200
    rows = response.json()
    assert len(rows) == 1
    assert rows[0]["components"] == ["31 1/8", "5", "2"]
    assert rows[0]["values_cm"] == ["79.06", "12.70", "5.08"]


def test_convert_requires_text():
    response = _client().post("/convert", json={})
    assert response.status_code == 422
