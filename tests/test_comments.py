# tests/test_comments.py


def _comment(client, ticket_id, author="Support Agent", message="Looking into it."):
    return client.post(f"/tickets/{ticket_id}/comments", json={"authorName": author, "message": message})


def test_add_and_list_comments_oldest_first(client, make_ticket):
    tid = make_ticket()["id"]

    first = _comment(client, tid, message="First reply")
    assert first.status_code == 201
    data = first.json()
    assert set(data) == {"id", "ticketId", "authorName", "message", "createdAt"}
    assert data["ticketId"] == tid
    assert data["authorName"] == "Support Agent"

    _comment(client, tid, author="John Doe", message="Second reply")

    r = client.get(f"/tickets/{tid}/comments")
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == 2
    assert body["totalPages"] == 1
    assert [c["message"] for c in body["items"]] == ["First reply", "Second reply"]


def test_comments_are_scoped_to_their_ticket(client, make_ticket):
    a = make_ticket(title="First ticket")["id"]
    b = make_ticket(title="Second ticket")["id"]
    _comment(client, a)

    assert client.get(f"/tickets/{a}/comments").json()["total"] == 1
    assert client.get(f"/tickets/{b}/comments").json()["total"] == 0


def test_comments_paginate(client, make_ticket):
    tid = make_ticket()["id"]
    for i in range(5):
        _comment(client, tid, message=f"Reply {i}")

    body = client.get(f"/tickets/{tid}/comments", params={"page": 2, "limit": 2}).json()
    assert body["total"] == 5
    assert body["totalPages"] == 3
    assert [c["message"] for c in body["items"]] == ["Reply 2", "Reply 3"]

    body = client.get(f"/tickets/{tid}/comments", params={"page": 4, "limit": 2}).json()
    assert body["items"] == []
    assert body["total"] == 5


def test_comments_unreachable_after_ticket_deleted(client, make_ticket):
    tid = make_ticket()["id"]
    assert _comment(client, tid).status_code == 201
    assert client.delete(f"/tickets/{tid}").status_code == 204

    r = client.get(f"/tickets/{tid}/comments")
    assert r.status_code == 404
    assert r.json()["error"] == {"message": "Ticket not found", "code": "NOT_FOUND"}
    assert _comment(client, tid).status_code == 404


def test_comment_validation(client, make_ticket):
    tid = make_ticket()["id"]

    r = _comment(client, tid, author="")
    assert r.status_code == 422
    assert [d["path"] for d in r.json()["error"]["details"]] == ["body.authorName"]

    r = _comment(client, tid, author="   ")
    assert r.status_code == 422

    r = _comment(client, tid, message="m" * 501)
    assert r.status_code == 422
    assert [d["path"] for d in r.json()["error"]["details"]] == ["body.message"]

    assert _comment(client, tid, author="a" * 100, message="m" * 500).status_code == 201
    assert client.post(f"/tickets/{tid}/comments", json={}).status_code == 422


def test_comment_routes_validate_ticket_id_and_paging(client):
    r = client.get("/tickets/nope/comments")
    assert r.status_code == 422
    assert r.json()["error"]["details"][0]["path"] == "path.ticket_id"

    r = client.post("/tickets/nope/comments", json={"authorName": "Ann", "message": "Hi"})
    assert r.status_code == 422


def test_comment_list_query_bounds(client, make_ticket):
    tid = make_ticket()["id"]
    assert client.get(f"/tickets/{tid}/comments?limit=101").status_code == 422
    assert client.get(f"/tickets/{tid}/comments?page=0").status_code == 422


def test_huge_page_number_returns_empty_comment_page(client, make_ticket):
    tid = make_ticket()["id"]
    _comment(client, tid)
    r = client.get(f"/tickets/{tid}/comments", params={"page": 10**17, "limit": 100})
    assert r.status_code == 200
    body = r.json()
    assert body["items"] == []
    assert body["total"] == 1
    assert body["totalPages"] == 1


def test_comment_timestamp_is_utc(client, make_ticket):
    tid = make_ticket()["id"]
    created = _comment(client, tid).json()["createdAt"]
    listed = client.get(f"/tickets/{tid}/comments").json()["items"][0]["createdAt"]
    for value in (created, listed):
        assert value.endswith("Z") or value.endswith("+00:00"), value
