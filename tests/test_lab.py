from demo_lab.app import LAB_PORT, app


def test_lab_home_explains_itself():
    r = app.test_client().get("/")
    assert r.status_code == 200
    assert b"Port scan lab target" in r.data


def test_lab_health():
    r = app.test_client().get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"status": "ok", "port": LAB_PORT}
