from fastapi.testclient import TestClient

from fracdex.main import app

client = TestClient(app)


def test_key_between_endpoint():
    resp = client.post("/v1/keys:between", json={"before": "a1", "after": "a2"})
    assert resp.status_code == 200
    assert resp.json() == {"key": "a1V"}


def test_key_between_unbounded():
    assert client.post("/v1/keys:between", json={}).json() == {"key": "a0"}
    assert client.post("/v1/keys:between", json={"after": "a0"}).json() == {"key": "Zz"}
    assert client.post("/v1/keys:between", json={"before": "", "after": ""}).json() == {"key": "a0"}


def test_key_between_error_envelope():
    resp = client.post("/v1/keys:between", json={"before": "a1", "after": "a0"})
    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "invalid_range"
    assert body["message"] == "a1 >= a0"
    assert body["details"] == {"before": "a1", "after": "a0"}
    assert body["requestId"]


def test_invalid_head_error_code():
    resp = client.post("/v1/keys:between", json={"before": "0", "after": "1"})
    assert resp.status_code == 422
    assert resp.json()["code"] == "invalid_head"


def test_batch_endpoint():
    resp = client.post("/v1/keys:batch", json={"after": "a0", "count": 5})
    assert resp.status_code == 200
    assert resp.json() == {"keys": ["Zv", "Zw", "Zx", "Zy", "Zz"]}


def test_batch_rejects_negative_count():
    resp = client.post("/v1/keys:batch", json={"count": -1})
    assert resp.status_code == 422


def test_batch_limit(monkeypatch):
    monkeypatch.setattr("fracdex.config.MAX_BATCH", 3)
    resp = client.post("/v1/keys:batch", json={"count": 4})
    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "batch_too_large"
    assert body["details"] == {"count": 4, "limit": 3}


def test_validate_endpoint():
    assert client.post("/v1/keys:validate", json={"key": "a0V"}).json() == {
        "key": "a0V",
        "valid": True,
        "error": None,
    }
    sentinel = "A" + "0" * 26
    assert client.post("/v1/keys:validate", json={"key": sentinel}).json()["error"] == "invalid_key"
    assert client.post("/v1/keys:validate", json={"key": "b1"}).json()["error"] == "key_too_short"


def test_key_between_at_bound_length_limit():
    before = "a0" + "z" * 4094
    resp = client.post("/v1/keys:between", json={"before": before, "after": "a1"})
    assert resp.status_code == 200
    assert resp.json() == {"key": before + "V"}


def test_length_mismatch_details_name_the_integer_part():
    from fracdex.errors import LengthMismatchError

    exc = LengthMismatchError("a00")
    assert exc.code == "length_mismatch"
    assert exc.details == {"integer_part": "a00"}
