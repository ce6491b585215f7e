"""
End-to-end tests through the HTTP layer.

Covers status-code mapping (400 / 404), response shapes, and the full
application -> event -> notification type -> message flow.
"""

from uuid import uuid4

from httpx import AsyncClient

API = "/api/v1"


async def create_active_chain(client: AsyncClient) -> dict:
    app = await client.post(f"{API}/applications", json={"name": "billing", "is_active": True})
    assert app.status_code == 201, app.text

    event = await client.post(
        f"{API}/events",
        json={"name": "password-reset", "is_active": True, "application": app.json()["id"]},
    )
    assert event.status_code == 201, event.text

    nt = await client.post(
        f"{API}/notification-types",
        json={
            "name": "reset-code",
            "template_subject": "Your code",
            "template_body": "Hello {{name}}, your code is {{code}}",
            "is_active": True,
            "event": event.json()["id"],
        },
    )
    assert nt.status_code == 201, nt.text

    return {"application": app.json(), "event": event.json(), "notification_type": nt.json()}


class TestApplicationsApi:
    """CRUD surface for applications."""

    async def test_create_and_get(self, client: AsyncClient):
        response = await client.post(
            f"{API}/applications",
            json={"name": "  billing  ", "description": "Payments"},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "billing"
        assert body["is_active"] is False
        assert set(body) == {"id", "name", "description", "is_active", "created_at", "modified_at"}

        fetched = await client.get(f"{API}/applications/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["description"] == "Payments"

    async def test_name_length_is_validated(self, client: AsyncClient):
        response = await client.post(f"{API}/applications", json={"name": "ab"})
        assert response.status_code == 422

    async def test_duplicate_name_is_a_client_error(self, client: AsyncClient):
        await client.post(f"{API}/applications", json={"name": "billing"})
        response = await client.post(f"{API}/applications", json={"name": "billing"})

        assert response.status_code == 400
        assert response.json()["error"] == "constraint_violation"

    async def test_unknown_id_is_404(self, client: AsyncClient):
        response = await client.get(f"{API}/applications/{uuid4()}")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    async def test_empty_patch_is_400(self, client: AsyncClient):
        created = await client.post(f"{API}/applications", json={"name": "billing"})

        response = await client.patch(f"{API}/applications/{created.json()['id']}", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "The request body should not be empty"

    async def test_patch_rejects_unknown_fields(self, client: AsyncClient):
        created = await client.post(f"{API}/applications", json={"name": "billing"})

        response = await client.patch(
            f"{API}/applications/{created.json()['id']}",
            json={"tags": ["x"]},
        )

        assert response.status_code == 422

    async def test_list_pagination(self, client: AsyncClient):
        for i in range(10):
            await client.post(f"{API}/applications", json={"name": f"app-{i:02d}", "is_active": True})

        everything = await client.get(f"{API}/applications", params={"page_number": 0})
        assert everything.json()["total"] == 10
        assert len(everything.json()["results"]) == 10
        assert everything.json()["current_page"] == 1
        assert everything.json()["last_page"] == 1

        clamped = await client.get(
            f"{API}/applications",
            params={"page_number": 5, "page_size": 3},
        )
        body = clamped.json()
        assert body["current_page"] == 4
        assert body["last_page"] == 4
        assert [a["name"] for a in body["results"]] == ["app-09"]

    async def test_delete_then_get_is_404(self, client: AsyncClient):
        created = await client.post(f"{API}/applications", json={"name": "billing"})
        app_id = created.json()["id"]

        deleted = await client.delete(f"{API}/applications/{app_id}")
        assert deleted.status_code == 200

        assert (await client.get(f"{API}/applications/{app_id}")).status_code == 404

    async def test_delete_unknown_is_404(self, client: AsyncClient):
        response = await client.delete(f"{API}/applications/{uuid4()}")
        assert response.status_code == 404

    async def test_bulk_delete(self, client: AsyncClient):
        ids = []
        for name in ("first", "second"):
            created = await client.post(f"{API}/applications", json={"name": name})
            ids.append(created.json()["id"])

        response = await client.request("DELETE", f"{API}/applications", json={"ids": ids})
        assert response.status_code == 200
        assert sorted(response.json()["deleted"]) == sorted(ids)

        nothing = await client.request("DELETE", f"{API}/applications", json={"ids": ids})
        assert nothing.status_code == 404


class TestHierarchyApi:
    """Events and notification types."""

    async def test_event_under_inactive_application_is_400(self, client: AsyncClient):
        app = await client.post(f"{API}/applications", json={"name": "billing"})

        response = await client.post(
            f"{API}/events",
            json={"name": "signup", "application": app.json()["id"]},
        )

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "application"

    async def test_event_listing_requires_application(self, client: AsyncClient):
        response = await client.get(f"{API}/events")
        assert response.status_code == 400

    async def test_notification_type_exposes_tags(self, client: AsyncClient):
        chain = await create_active_chain(client)
        nt = chain["notification_type"]

        assert nt["tags"] == ["name", "code"]
        assert nt["event"] == chain["event"]["id"]

        tags = await client.get(f"{API}/tags")
        assert {t["label"] for t in tags.json()} >= {"name", "code"}

    async def test_patching_event_application_moves_it(self, client: AsyncClient):
        chain = await create_active_chain(client)
        other = await client.post(f"{API}/applications", json={"name": "support", "is_active": True})

        response = await client.patch(
            f"{API}/events/{chain['event']['id']}",
            json={"application": other.json()["id"]},
        )

        assert response.status_code == 200, response.text
        assert response.json()["application"] == other.json()["id"]

    async def test_patching_body_recomputes_tags(self, client: AsyncClient):
        chain = await create_active_chain(client)

        response = await client.patch(
            f"{API}/notification-types/{chain['notification_type']['id']}",
            json={"template_body": "Hi {{first}} {{last}}"},
        )

        assert response.status_code == 200
        assert response.json()["tags"] == ["first", "last"]

    async def test_application_delete_hides_descendants(self, client: AsyncClient):
        chain = await create_active_chain(client)

        await client.delete(f"{API}/applications/{chain['application']['id']}")

        event = await client.get(f"{API}/events/{chain['event']['id']}")
        nt = await client.get(f"{API}/notification-types/{chain['notification_type']['id']}")
        assert event.status_code == 404
        assert nt.status_code == 404

    async def test_list_notification_types_for_event(self, client: AsyncClient):
        chain = await create_active_chain(client)

        response = await client.get(
            f"{API}/notification-types",
            params={"event": chain["event"]["id"]},
        )

        assert response.status_code == 200
        assert [nt["name"] for nt in response.json()["results"]] == ["reset-code"]


class TestMessagesApi:
    """Composing messages over HTTP."""

    async def test_compose_message(self, client: AsyncClient):
        chain = await create_active_chain(client)

        response = await client.post(
            f"{API}/messages",
            json={
                "notification_type": chain["notification_type"]["id"],
                "email": "alex@example.com",
                "metadata": {"name": "Alex", "code": "123"},
            },
        )

        assert response.status_code == 201, response.text
        body = response.json()
        assert body["body"] == "Hello Alex, your code is 123"
        assert body["subject"] == "Your code"

        fetched = await client.get(f"{API}/messages/{body['id']}")
        assert fetched.status_code == 200

    async def test_missing_metadata_is_400(self, client: AsyncClient):
        chain = await create_active_chain(client)

        response = await client.post(
            f"{API}/messages",
            json={
                "notification_type": chain["notification_type"]["id"],
                "email": "alex@example.com",
                "metadata": {"name": "Alex"},
            },
        )

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "code"

    async def test_missing_notification_type_is_400(self, client: AsyncClient):
        response = await client.post(
            f"{API}/messages",
            json={"email": "alex@example.com", "metadata": {}},
        )

        assert response.status_code == 400

    async def test_inactive_event_is_400(self, client: AsyncClient):
        chain = await create_active_chain(client)
        await client.patch(f"{API}/events/{chain['event']['id']}", json={"is_active": False})

        response = await client.post(
            f"{API}/messages",
            json={
                "notification_type": chain["notification_type"]["id"],
                "email": "alex@example.com",
                "metadata": {"name": "Alex", "code": "123"},
            },
        )

        assert response.status_code == 400
        assert "event" in response.json()["message"]

    async def test_invalid_email_is_422(self, client: AsyncClient):
        response = await client.post(
            f"{API}/messages",
            json={"notification_type": str(uuid4()), "email": "not-an-email"},
        )
        assert response.status_code == 422
