"""Community routes — reviews, inquiries and role-authored comments."""

from uuid import uuid4

from tests.api.helpers import ADMIN, MEMBER, SELLER

REVIEWS = f"{MEMBER}/reviews"


async def _review(client, member, rating=5, title="Great shirt"):
    resp = await client.post(
        REVIEWS,
        json={"review_title": title, "review_body": "Fits well", "rating": rating, "status": "active"},
        headers=member.headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_review_out_of_range_rating_is_rejected(client, member):
    resp = await client.post(
        REVIEWS,
        json={"review_title": "t", "review_body": "b", "rating": 6, "status": "active"},
        headers=member.headers,
    )

    assert resp.status_code == 400
    assert resp.json()["error"]["details"][0]["field"] == "body.rating"


async def test_review_owner_is_caller(client, member):
    review = await _review(client, member)

    assert review["member_user_id"] == member.id
    assert review["is_private"] is False
    assert review["shopping_mall_channel_id"] is None


async def test_review_filters(client, member):
    await _review(client, member, rating=2, title="Too small")
    good = await _review(client, member, rating=5, title="Great shirt")

    high = await client.patch(REVIEWS, json={"min_rating": 4}, headers=member.headers)
    text = await client.patch(REVIEWS, json={"search": "great"}, headers=member.headers)

    assert [r["id"] for r in high.json()["data"]] == [good["id"]]
    assert [r["id"] for r in text.json()["data"]] == [good["id"]]


async def test_review_update_rejects_bad_rating(client, member):
    review = await _review(client, member)

    resp = await client.put(
        f"{REVIEWS}/{review['id']}", json={"rating": 0}, headers=member.headers,
    )
    assert resp.status_code == 400


async def test_other_member_cannot_edit_review(client, member, other_member):
    review = await _review(client, member)

    resp = await client.put(
        f"{REVIEWS}/{review['id']}", json={"rating": 1}, headers=other_member.headers,
    )
    assert resp.status_code == 403


async def test_inquiry_about_missing_sale_is_not_found(client, member):
    resp = await client.post(
        f"{MEMBER}/inquiries",
        json={
            "shopping_mall_sale_id": str(uuid4()), "title": "Restock?",
            "body": "When?", "status": "open",
        },
        headers=member.headers,
    )
    assert resp.status_code == 404


async def test_inquiry_lifecycle(client, member):
    created = await client.post(
        f"{MEMBER}/inquiries",
        json={"title": "Shipping", "body": "Do you ship abroad?", "status": "open"},
        headers=member.headers,
    )
    assert created.status_code == 201
    path = f"{MEMBER}/inquiries/{created.json()['id']}"

    updated = await client.put(path, json={"status": "answered"}, headers=member.headers)
    assert updated.json()["status"] == "answered"
    assert updated.json()["title"] == "Shipping"

    assert (await client.delete(path, headers=member.headers)).status_code == 204
    listed = await client.patch(f"{MEMBER}/inquiries", json={}, headers=member.headers)
    assert listed.json()["pagination"]["records"] == 0


async def test_comments_record_their_author_role(client, member, seller, admin):
    review = await _review(client, member)
    path = f"reviews/{review['id']}/comments"

    by_member = await client.post(
        f"{MEMBER}/{path}", json={"body": "Thanks!", "status": "active"}, headers=member.headers,
    )
    by_seller = await client.post(
        f"{SELLER}/{path}", json={"body": "Glad you like it", "status": "active"},
        headers=seller.headers,
    )

    assert by_member.json()["member_user_id"] == member.id
    assert by_member.json()["review_id"] == review["id"]
    assert by_seller.json()["seller_user_id"] == seller.id
    assert by_seller.json()["member_user_id"] is None

    listed = await client.patch(f"{ADMIN}/{path}", json={}, headers=admin.headers)
    assert listed.json()["pagination"]["records"] == 2


async def test_only_the_author_edits_a_comment(client, member, other_member):
    review = await _review(client, member)
    base = f"{MEMBER}/reviews/{review['id']}/comments"
    comment = await client.post(
        base, json={"body": "First", "status": "active"}, headers=member.headers,
    )
    path = f"{base}/{comment.json()['id']}"

    denied = await client.put(path, json={"body": "Hijacked"}, headers=other_member.headers)
    assert denied.status_code == 403

    edited = await client.put(path, json={"body": "Edited"}, headers=member.headers)
    assert edited.json()["body"] == "Edited"


async def test_comment_on_deleted_review_is_not_found(client, member):
    review = await _review(client, member)
    await client.delete(f"{REVIEWS}/{review['id']}", headers=member.headers)

    resp = await client.post(
        f"{REVIEWS}/{review['id']}/comments",
        json={"body": "Late", "status": "active"}, headers=member.headers,
    )
    assert resp.status_code == 404


async def _inquiry(client, member, title="Sizing?"):
    resp = await client.post(
        f"{MEMBER}/inquiries",
        json={"title": title, "body": "Does it run small?", "status": "open"},
        headers=member.headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_admin_sees_inquiries_of_every_member(client, admin, member, other_member):
    mine = await _inquiry(client, member)
    await _inquiry(client, other_member, title="Shipping?")

    every = await client.patch(f"{ADMIN}/inquiries", json={}, headers=admin.headers)
    assert every.json()["pagination"]["records"] == 2

    one = await client.patch(
        f"{ADMIN}/inquiries", json={"member_user_id": member.id}, headers=admin.headers,
    )
    assert [i["id"] for i in one.json()["data"]] == [mine["id"]]


async def test_admin_answers_and_closes_inquiry(client, admin, seller, member):
    inquiry = await _inquiry(client, member)
    path = f"inquiries/{inquiry['id']}"

    by_seller = await client.post(
        f"{SELLER}/{path}/comments", json={"body": "True to size", "status": "active"},
        headers=seller.headers,
    )
    by_admin = await client.post(
        f"{ADMIN}/{path}/comments", json={"body": "Resolved", "status": "active"},
        headers=admin.headers,
    )
    assert by_seller.json()["inquiry_id"] == inquiry["id"]
    assert by_admin.json()["admin_user_id"] == admin.id

    closed = await client.put(f"{ADMIN}/{path}", json={"status": "closed"}, headers=admin.headers)
    assert closed.json()["status"] == "closed"
    assert closed.json()["member_user_id"] == member.id


async def test_admin_lists_deleted_inquiries(client, admin, member):
    gone = await _inquiry(client, member, title="Gone")
    await _inquiry(client, member, title="Kept")

    removed = await client.delete(f"{ADMIN}/inquiries/{gone['id']}", headers=admin.headers)
    assert removed.status_code == 204

    deleted = await client.patch(
        f"{ADMIN}/inquiries", json={"deleted": "deleted"}, headers=admin.headers,
    )
    assert [i["id"] for i in deleted.json()["data"]] == [gone["id"]]

    live = await client.get(f"{ADMIN}/inquiries/{gone['id']}", headers=admin.headers)
    assert live.status_code == 404


async def test_members_cannot_use_admin_inquiry_routes(client, member):
    resp = await client.patch(f"{ADMIN}/inquiries", json={}, headers=member.headers)
    assert resp.status_code == 403


async def test_review_of_unknown_snapshot_is_not_found(client, member):
    resp = await client.post(
        REVIEWS,
        json={
            "shopping_mall_sale_snapshot_id": str(uuid4()), "review_title": "t",
            "review_body": "b", "rating": 4, "status": "active",
        },
        headers=member.headers,
    )
    assert resp.status_code == 404


async def test_review_of_known_snapshot(client, member, snapshot):
    resp = await client.post(
        REVIEWS,
        json={
            "shopping_mall_sale_snapshot_id": snapshot["id"], "review_title": "Solid",
            "review_body": "As pictured", "rating": 5, "status": "active",
        },
        headers=member.headers,
    )
    assert resp.status_code == 201
    assert resp.json()["shopping_mall_sale_snapshot_id"] == snapshot["id"]
