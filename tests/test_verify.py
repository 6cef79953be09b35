import pytest

VERIFY_URL = "/api/request/verify"


@pytest.fixture
def alice_card(store):
    reader_id = store.add_reader("rk1", add_card=True)
    alice = store.add_person("Alice", "staff")
    store.add_card("S1", "T1", owner=alice)
    return reader_id, alice


def test_verify_known_card_returns_owner(client, store, alice_card):
    reader_id, alice = alice_card

    res = client.post(VERIFY_URL, json={"apiKey": "rk1", "authtoken": "T1", "serialNumber": "S1"})

    assert res.status_code == 200
    assert res.json() == {"ok": True, "name": "Alice", "permission": "staff"}
    logs = store.log_rows()
    assert len(logs) == 1
    assert logs[0]["allowed"] is True
    assert logs[0]["card"] == "S1"
    assert logs[0]["reader"] == reader_id
    assert logs[0]["people"] == alice


def test_verify_wrong_authtoken_is_logged_against_reader(client, store, alice_card):
    reader_id, _ = alice_card

    res = client.post(VERIFY_URL, json={"apiKey": "rk1", "authtoken": "T2", "serialNumber": "S1"})

    assert res.status_code == 200
    assert res.json() == {"ok": False, "name": "", "permission": ""}
    logs = store.log_rows()
    assert len(logs) == 1
    assert logs[0] == {
        "card": "S1",
        "reader": reader_id,
        "people": None,
        "allowed": False,
        "direction": None,
        "comment": "unknown card or authtoken",
    }


def test_verify_unknown_api_key_logs_without_reader(client, store, alice_card):
    res = client.post(VERIFY_URL, json={"apiKey": "nope", "authtoken": "T1", "serialNumber": "S1"})

    assert res.json()["ok"] is False
    logs = store.log_rows()
    assert len(logs) == 1
    assert logs[0]["reader"] is None
    assert logs[0]["people"] is None
    assert logs[0]["card"] == "S1"
    assert logs[0]["comment"] == "bad api key"


def test_verify_unassigned_card_is_denied(client, store):
    reader_id = store.add_reader("rk1")
    store.add_card("S9", "T9")

    res = client.post(VERIFY_URL, json={"apiKey": "rk1", "authtoken": "T9", "serialNumber": "S9"})

    assert res.json()["ok"] is False
    assert store.log_rows()[0]["reader"] == reader_id


def test_verify_accepts_lowercase_keys(client, store, alice_card):
    res = client.post(VERIFY_URL, json={"apikey": "rk1", "authtoken": "T1", "serialnumber": "S1"})

    assert res.json()["ok"] is True


def test_verify_malformed_json_is_not_logged(client, store, alice_card):
    res = client.post(
        VERIFY_URL, content=b'{"apiKey": "rk1",', headers={"Content-Type": "application/json"}
    )

    assert res.status_code == 200
    assert res.json() == {"ok": False, "name": "", "permission": ""}
    assert store.log_rows() == []


def test_verify_non_object_payload_is_malformed(client, store, alice_card):
    res = client.post(VERIFY_URL, json=["rk1", "T1", "S1"])

    assert res.json()["ok"] is False
    assert store.log_rows() == []


def test_verify_missing_fields_fail_lookup(client, store, alice_card):
    res = client.post(VERIFY_URL, json={})

    assert res.json()["ok"] is False
    logs = store.log_rows()
    assert len(logs) == 1
    assert logs[0]["reader"] is None


def test_verify_rejects_non_json_content_type(client, store, alice_card):
    res = client.post(
        VERIFY_URL,
        content=b'{"apiKey": "rk1", "authtoken": "T1", "serialNumber": "S1"}',
        headers={"Content-Type": "text/plain"},
    )

    assert res.status_code == 415
    assert res.content == b""
    assert store.log_rows() == []


def test_verify_storage_failure_returns_denied_envelope(client, services, store, alice_card, monkeypatch):
    from sqlalchemy.exc import OperationalError

    def broken(conn, api_key):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(services.verification.store, "find_reader", broken)

    res = client.post(VERIFY_URL, json={"apiKey": "rk1", "authtoken": "T1", "serialNumber": "S1"})

    assert res.status_code == 200
    assert res.json() == {"ok": False, "name": "", "permission": ""}
    assert store.log_rows() == []
