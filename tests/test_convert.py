from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_percent_inexact():
    r = client.post("/percent", json={"numerator": 7, "denominator": 13})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["percent"] == r"53\frac{11}{13}\%"
    assert body["fraction"] == r"\frac{7}{13}"


def test_percent_exact():
    body = client.post("/percent", json={"numerator": 1, "denominator": 2}).json()
    assert body["ok"] is True and body["percent"] == r"50\%"


def test_percent_zero_denominator():
    body = client.post("/percent", json={"numerator": 1, "denominator": 0}).json()
    assert body["ok"] is False
    assert "denominator" in body["feedback"].lower()


def test_percent_negative_numerator():
    body = client.post("/percent", json={"numerator": -1, "denominator": 3}).json()
    assert body["ok"] is False
