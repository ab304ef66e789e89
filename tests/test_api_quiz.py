def test_seeded_questions_are_listed(make_client) -> None:
    client = make_client()

    resp = client.get("/quiz/questions")

    assert resp.status_code == 200
    items = resp.json()["items"]
    assert len(items) == 5
    assert [o["option_id"] for o in items[0]["options"]] == ["a", "b", "c"]


def test_submit_ranks_seeded_candidates(make_client) -> None:
    client = make_client()
    questions = client.get("/quiz/questions").json()["items"]

    answers = [
        {"question_id": questions[0]["id"], "option_id": "a"},
        {"question_id": questions[1]["id"], "option_id": "a"},
        {"question_id": questions[2]["id"], "option_id": "b"},
    ]
    resp = client.post("/quiz/submit", json={"participant": "p-1", "answers": answers})

    assert resp.status_code == 200
    body = resp.json()
    assert body["answered"] == 3
    assert body["total_questions"] == 5
    assert body["alignment_counts"] == {"progressive": 2, "moderate": 1, "conservative": 0}
    assert [(m["name"], m["match_percentage"], m["rank"]) for m in body["matches"]] == [
        ("Alexandra Johnson", 67, 1),
        ("Sophia Rodriguez", 33, 2),
        ("Michael Reynolds", 0, 3),
    ]


def test_submit_with_no_answers_scores_zero(make_client) -> None:
    client = make_client()

    body = client.post("/quiz/submit", json={"answers": []}).json()

    assert body["answered"] == 0
    assert [m["match_percentage"] for m in body["matches"]] == [0, 0, 0]
    assert [m["name"] for m in body["matches"]] == [
        "Alexandra Johnson",
        "Michael Reynolds",
        "Sophia Rodriguez",
    ]


def test_submit_replaces_repeated_answers_for_a_question(make_client) -> None:
    client = make_client()
    qid = client.get("/quiz/questions").json()["items"][0]["id"]

    answers = [{"question_id": qid, "option_id": "a"}, {"question_id": qid, "option_id": "c"}]
    body = client.post("/quiz/submit", json={"answers": answers}).json()

    assert body["answered"] == 1
    assert body["alignment_counts"] == {"progressive": 0, "moderate": 0, "conservative": 1}
    assert body["matches"][0]["name"] == "Michael Reynolds"
    assert body["matches"][0]["match_percentage"] == 100


def test_submit_rejects_unknown_option(make_client) -> None:
    client = make_client()
    qid = client.get("/quiz/questions").json()["items"][0]["id"]

    resp = client.post("/quiz/submit", json={"answers": [{"question_id": qid, "option_id": "z"}]})

    assert resp.status_code == 400
    assert resp.json()["detail"]["error"] == "unknown_option"


def test_admin_question_crud(make_client, admin_headers) -> None:
    client = make_client()
    payload = {
        "question": "How should public transport be funded?",
        "options": [
            {"option_id": "a", "text": "Free public transport", "alignment": "progressive"},
            {"option_id": "b", "text": "User fees only", "alignment": "conservative"},
        ],
    }

    assert client.post("/api/admin/quiz/questions", json=payload).status_code == 401

    created = client.post("/api/admin/quiz/questions", json=payload, headers=admin_headers).json()
    assert created["position"] == 6

    payload["question"] = "How should public transport be financed?"
    updated = client.put(
        f"/api/admin/quiz/questions/{created['id']}", json=payload, headers=admin_headers
    ).json()
    assert updated["question"] == "How should public transport be financed?"
    assert len(updated["options"]) == 2

    resp = client.delete(f"/api/admin/quiz/questions/{created['id']}", headers=admin_headers)
    assert resp.status_code == 200
    assert len(client.get("/quiz/questions").json()["items"]) == 5

    resp = client.delete(f"/api/admin/quiz/questions/{created['id']}", headers=admin_headers)
    assert resp.status_code == 404


def test_admin_question_rejects_duplicate_option_ids(make_client, admin_headers) -> None:
    client = make_client()
    payload = {
        "question": "Duplicate options question?",
        "options": [
            {"option_id": "a", "text": "One", "alignment": "progressive"},
            {"option_id": "a", "text": "Two", "alignment": "moderate"},
        ],
    }

    resp = client.post("/api/admin/quiz/questions", json=payload, headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["detail"] == "duplicate_option_id"
