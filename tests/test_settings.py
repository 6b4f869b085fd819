# tests/test_settings.py


def test_company_name_defaults_and_is_public(client):
    r = client.get("/settings/company-name")
    assert r.status_code == 200
    assert r.json() == {"companyName": "Acme Corp"}


def test_owner_updates_company_name(client, users, login):
    login("olivia")
    r = client.post("/settings/company-name", json={"companyName": "  PT Jaringan  "})
    assert r.status_code == 200
    assert r.json()["companyName"] == "PT Jaringan"

    client.post("/logout")
    assert client.get("/settings/company-name").json()["companyName"] == "PT Jaringan"


def test_empty_company_name_rejected_and_unchanged(client, users, login):
    login("olivia")
    client.post("/settings/company-name", json={"companyName": "Before"})

    r = client.post("/settings/company-name", json={"companyName": ""})
    assert r.status_code == 400
    assert r.json()["message"] == "Company name cannot be empty"
    assert client.get("/settings/company-name").json()["companyName"] == "Before"


def test_company_name_write_gates(client, users, login):
    assert client.post("/settings/company-name", json={"companyName": "X"}).status_code == 401

    login("alice")
    assert client.post("/settings/company-name", json={"companyName": "X"}).status_code == 403
    assert client.get("/settings/company-name").json()["companyName"] == "Acme Corp"


def test_company_logo(client, users, login):
    assert client.get("/settings/company-logo").json() == {"logoUrl": None}

    login("olivia")
    r = client.post("/settings/company-logo")
    assert r.status_code == 400
    assert r.json()["message"] == "No file uploaded"

    r = client.post("/settings/company-logo", files={"logo": ("logo.svg", b"<svg/>", "image/svg+xml")})
    assert r.status_code == 200
    logo_url = r.json()["logoUrl"]
    assert logo_url.startswith("/uploads/")
    assert client.get("/settings/company-logo").json()["logoUrl"] == logo_url


def test_company_logo_requires_owner(client, users, login):
    login("bob")
    r = client.post("/settings/company-logo", files={"logo": ("logo.png", b"x", "image/png")})
    assert r.status_code == 403
