def test_candidate_crud_and_profile(make_client, admin_headers) -> None:
    client = make_client()
    payload = {
        "name": "Ana Silva",
        "party": "Partido Exemplo",
        "alignment": "moderate",
        "bio": "Economista.",
        "policies": [{"topic": "Saúde", "stance": "Reforço do SNS", "proposal": "Mais médicos de família"}],
    }

    assert client.post("/api/admin/candidates", json=payload).status_code == 401

    created = client.post("/api/admin/candidates", json=payload, headers=admin_headers).json()
    assert created["name"] == "Ana Silva"
    assert created["policies"][0]["topic"] == "Saúde"
    assert created["electoral_plan"] is None

    names = [c["name"] for c in client.get("/candidates").json()["items"]]
    assert "Ana Silva" in names

    payload["party"] = "Outro Partido"
    payload["policies"] = []
    updated = client.put(f"/api/admin/candidates/{created['id']}", json=payload, headers=admin_headers).json()
    assert updated["party"] == "Outro Partido"
    assert updated["policies"] == []

    assert client.delete(f"/api/admin/candidates/{created['id']}", headers=admin_headers).status_code == 200
    assert client.get(f"/candidates/{created['id']}").status_code == 404


def test_profile_includes_latest_plan(make_client, admin_headers) -> None:
    client = make_client()
    cand = client.get("/candidates").json()["items"][0]

    client.post(
        "/api/admin/plans",
        json={"candidate_name": cand["name"], "party": cand["party"], "proposals": "## Saúde"},
        headers=admin_headers,
    )

    profile = client.get(f"/candidates/{cand['id']}").json()
    assert profile["electoral_plan"]["proposals"] == "## Saúde"


def test_rejects_unknown_alignment(make_client, admin_headers) -> None:
    client = make_client()

    resp = client.post(
        "/api/admin/candidates",
        json={"name": "X Y", "party": "Z", "alignment": "libertarian"},
        headers=admin_headers,
    )

    assert resp.status_code == 422
