ADD_URL = "/api/request/addCard"


def test_add_card_then_duplicate_serial(client, store):
    reader_id = store.add_reader("rk1", add_card=True)

    first = client.post(ADD_URL, json={"apiKey": "rk1", "serialNumber": "S1"})

    assert first.status_code == 200
    body = first.json()
    assert body["ok"] is True
    assert body["authtoken"] and body["writeKey"] and body["readKey"]
    assert len({body["authtoken"], body["writeKey"], body["readKey"]}) == 3

    card = store.card("S1")
    assert card is not None
    assert card["owner"] is None
    assert card["authtoken"] == body["authtoken"]
    assert card["writeKey"] == body["writeKey"]
    assert card["readKey"] == body["readKey"]

    second = client.post(ADD_URL, json={"apiKey": "rk1", "serialNumber": "S1"})

    assert second.json() == {"ok": False, "authtoken": "", "writeKey": "", "readKey": ""}
    # the original secrets survive the failed insert
    assert store.card("S1")["authtoken"] == body["authtoken"]

    logs = store.log_rows()
    assert len(logs) == 2
    assert logs[0]["allowed"] is True
    assert logs[0]["comment"] == "card provisioned"
    assert logs[1]["allowed"] is False
    assert logs[1]["reader"] == reader_id
    assert logs[1]["card"] == "S1"
    assert logs[1]["comment"] == "card insert failed"


def test_add_card_requires_permission(client, store):
    reader_id = store.add_reader("ro1", add_card=False)

    res = client.post(ADD_URL, json={"apiKey": "ro1", "serialNumber": "S5"})

    assert res.json()["ok"] is False
    assert store.card("S5") is None
    logs = store.log_rows()
    assert len(logs) == 1
    assert logs[0]["reader"] == reader_id
    assert logs[0]["comment"] == "reader not permitted to add cards"


def test_add_card_with_bad_api_key(client, store):
    store.add_reader("rk1", add_card=True)

    res = client.post(ADD_URL, json={"apiKey": "wrong", "serialNumber": "S6"})

    assert res.json()["ok"] is False
    assert store.card("S6") is None
    logs = store.log_rows()
    assert len(logs) == 1
    assert logs[0]["reader"] is None
    assert logs[0]["comment"] == "bad api key"


def test_add_card_randomness_failure(client, store, monkeypatch):
    reader_id = store.add_reader("rk1", add_card=True)

    def no_entropy(n):
        raise OSError("getrandom failed")

    monkeypatch.setattr("card_access.utils.crypto.secrets.token_bytes", no_entropy)

    res = client.post(ADD_URL, json={"apiKey": "rk1", "serialNumber": "S7"})

    assert res.json() == {"ok": False, "authtoken": "", "writeKey": "", "readKey": ""}
    assert store.card("S7") is None
    logs = store.log_rows()
    assert len(logs) == 1
    assert logs[0]["reader"] == reader_id
    assert logs[0]["comment"] == "secret generation failed"


def test_provisioned_card_verifies_once_assigned(client, store):
    store.add_reader("rk1", add_card=True)
    carol = store.add_person("Carol", "admin")

    minted = client.post(ADD_URL, json={"apiKey": "rk1", "serialNumber": "S8"}).json()
    store.assign_card("S8", carol)

    res = client.post(
        "/api/request/verify",
        json={"apiKey": "rk1", "authtoken": minted["authtoken"], "serialNumber": "S8"},
    )

    assert res.json() == {"ok": True, "name": "Carol", "permission": "admin"}


def test_add_card_rejects_form_posts(client, store):
    store.add_reader("rk1", add_card=True)

    res = client.post(ADD_URL, data={"apiKey": "rk1", "serialNumber": "S1"})

    assert res.status_code == 415
    assert store.card("S1") is None
