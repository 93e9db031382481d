"""HTTP tests for blog comments: public list/thread/submit and admin moderation."""
import pytest


def comment_body(**overrides) -> dict:
    body = {"name": "Grace", "email": "grace@example.com", "content": "Loved this post."}
    body.update(overrides)
    return body


async def submit(client, post_id: int, **overrides) -> dict:
    response = await client.post(f"/api/v1/blog/{post_id}/comments", json=comment_body(**overrides))
    assert response.status_code == 201, response.text
    return response.json()["comment"]


@pytest.mark.asyncio
async def test_submit_returns_pending_notice(client, make_post):
    post_id = await make_post()

    response = await client.post(f"/api/v1/blog/{post_id}/comments", json=comment_body())

    assert response.status_code == 201
    data = response.json()
    assert "visible after approval" in data["message"]
    assert data["comment"]["is_approved"] is False
    assert data["comment"]["blog_post_id"] == post_id
    assert "email" not in data["comment"]


@pytest.mark.asyncio
async def test_submit_validation_error_names_field(client, make_post):
    post_id = await make_post()

    response = await client.post(f"/api/v1/blog/{post_id}/comments", json=comment_body(content="abcd"))

    assert response.status_code == 400
    assert "content" in response.json()["message"]


@pytest.mark.asyncio
async def test_submit_bad_email(client, make_post):
    post_id = await make_post()

    response = await client.post(f"/api/v1/blog/{post_id}/comments", json=comment_body(email="not-an-email"))

    assert response.status_code == 400
    assert "email" in response.json()["message"]


@pytest.mark.asyncio
async def test_invalid_post_id(client):
    assert (await client.get("/api/v1/blog/abc/comments")).status_code == 400
    assert (await client.post("/api/v1/blog/0/comments", json=comment_body())).status_code == 400


@pytest.mark.asyncio
async def test_list_includes_pending_comments(client, make_post):
    post_id = await make_post()
    first = await submit(client, post_id, content="first comment")
    second = await submit(client, post_id, content="second comment")

    response = await client.get(f"/api/v1/blog/{post_id}/comments")

    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [second["id"], first["id"]]
    assert all(c["is_approved"] is False for c in response.json())


@pytest.mark.asyncio
async def test_thread_shows_only_approved(client, make_post, admin_headers):
    post_id = await make_post()
    top = await submit(client, post_id)
    reply = await submit(client, post_id, parent_id=top["id"])
    hidden_reply = await submit(client, post_id, parent_id=top["id"])
    hidden_top = await submit(client, post_id)
    for comment_id in (top["id"], reply["id"]):
        response = await client.post(f"/api/v1/admin/comments/{comment_id}/approve", headers=admin_headers)
        assert response.status_code == 200

    response = await client.get(f"/api/v1/blog/{post_id}/comments/thread")

    assert response.status_code == 200
    data = response.json()
    assert [c["id"] for c in data["top_level"]] == [top["id"]]
    assert [c["id"] for c in data["replies_by_parent"][str(top["id"])]] == [reply["id"]]
    shown = {c["id"] for replies in data["replies_by_parent"].values() for c in replies}
    assert hidden_reply["id"] not in shown
    assert hidden_top["id"] not in [c["id"] for c in data["top_level"]]


@pytest.mark.asyncio
async def test_approve(client, make_post, admin_headers):
    post_id = await make_post()
    comment = await submit(client, post_id)

    response = await client.post(f"/api/v1/admin/comments/{comment['id']}/approve", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["message"] == "Comment approved successfully"
    assert response.json()["comment"]["is_approved"] is True


@pytest.mark.asyncio
async def test_approve_missing_comment(client, admin_headers):
    response = await client.post("/api/v1/admin/comments/999/approve", headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Comment not found"


@pytest.mark.asyncio
async def test_delete_cascades_and_is_idempotent(client, make_post, admin_headers):
    post_id = await make_post()
    root = await submit(client, post_id)
    r1 = await submit(client, post_id, parent_id=root["id"])
    await submit(client, post_id, parent_id=r1["id"])

    first = await client.delete(f"/api/v1/admin/comments/{root['id']}", headers=admin_headers)
    second = await client.delete(f"/api/v1/admin/comments/{root['id']}", headers=admin_headers)
    already_cascaded = await client.delete(f"/api/v1/admin/comments/{r1['id']}", headers=admin_headers)

    assert first.status_code == 200
    assert first.json()["deleted"] == 3
    assert second.status_code == 200
    assert second.json()["deleted"] == 0
    assert already_cascaded.status_code == 200
    assert (await client.get(f"/api/v1/blog/{post_id}/comments")).json() == []


@pytest.mark.asyncio
async def test_pending_queue_for_admin(client, make_post, admin_headers):
    post_id = await make_post()
    comment = await submit(client, post_id)

    response = await client.get("/api/v1/admin/comments/pending", headers=admin_headers)

    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [comment["id"]]


@pytest.mark.asyncio
async def test_moderation_requires_admin(client, make_post, reader_headers):
    post_id = await make_post()
    comment = await submit(client, post_id)
    url = f"/api/v1/admin/comments/{comment['id']}/approve"

    assert (await client.post(url)).status_code == 401
    assert (await client.post(url, headers={"Authorization": "Bearer garbage"})).status_code == 401
    assert (await client.post(url, headers=reader_headers)).status_code == 403
    assert (await client.delete(f"/api/v1/admin/comments/{comment['id']}")).status_code == 401
