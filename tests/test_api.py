"""HTTP tests for the catalog API."""

from datetime import datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import Update
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.main import create_app
from tests.conftest import make_settings, make_token

API = "/api/v1"


async def create_language(client, headers, slug="python", name="Python", **extra):
    response = await client.post(
        f"{API}/languages", json={"name": name, "slug": slug, **extra}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def create_module(client, headers, language_id, slug, order=0):
    response = await client.post(
        f"{API}/modules",
        json={"languageId": language_id, "title": slug.title(), "slug": slug, "order": order},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["environment"] == "test"
    assert "uptime" in body
    assert "timestamp" in body


@pytest.mark.asyncio
async def test_root(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["api"] == API


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client):
    response = await client.get(f"{API}/nothing-here")

    assert response.status_code == 404
    body = response.json()
    assert body["status"] == "error"
    assert body["error"]["code"] == "ROUTE_NOT_FOUND"
    assert "timestamp" in body["meta"]


@pytest.mark.asyncio
async def test_missing_token(client):
    response = await client.post(f"{API}/languages", json={"name": "Python", "slug": "python"})

    assert response.status_code == 401
    assert response.json()["error"] == {"code": "UNAUTHORIZED", "message": "No token provided"}


@pytest.mark.asyncio
async def test_invalid_and_expired_tokens(client):
    bad = {"Authorization": f"Bearer {make_token(secret='wrong-secret')}"}
    expired = {"Authorization": f"Bearer {make_token(expires_in=timedelta(minutes=-5))}"}

    bad_response = await client.post(f"{API}/languages", json={}, headers=bad)
    expired_response = await client.post(f"{API}/languages", json={}, headers=expired)

    assert bad_response.status_code == 401
    assert bad_response.json()["error"]["message"] == "Invalid token"
    assert expired_response.status_code == 401
    assert expired_response.json()["error"]["message"] == "Token expired"


@pytest.mark.asyncio
async def test_delete_requires_admin(client, admin_headers, user_headers):
    lang = await create_language(client, user_headers)

    forbidden = await client.delete(f"{API}/languages/{lang['id']}", headers=user_headers)
    allowed = await client.delete(f"{API}/languages/{lang['id']}", headers=admin_headers)

    assert forbidden.status_code == 403
    assert forbidden.json()["error"]["message"] == "Access denied. Required roles: ADMIN"
    assert allowed.status_code == 204
    assert allowed.content == b""
    assert (await client.get(f"{API}/languages/{lang['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_language_crud(client, admin_headers):
    lang = await create_language(
        client, admin_headers, description="Batteries included", difficulty="INTERMEDIATE"
    )
    assert lang["isActive"] is True
    assert lang["difficulty"] == "INTERMEDIATE"
    assert "createdAt" in lang and "updatedAt" in lang

    by_slug = await client.get(f"{API}/languages/slug/python")
    assert by_slug.json()["data"]["id"] == lang["id"]

    updated = await client.put(
        f"{API}/languages/{lang['id']}",
        json={"name": "Python 3", "icon": ""},
        headers=admin_headers,
    )
    data = updated.json()["data"]
    assert updated.status_code == 200
    assert data["name"] == "Python 3"
    assert data["icon"] == ""
    assert data["description"] == "Batteries included"
    assert datetime.fromisoformat(data["updatedAt"]) >= datetime.fromisoformat(lang["updatedAt"])

    deactivated = await client.post(
        f"{API}/languages/{lang['id']}/deactivate", headers=admin_headers
    )
    assert deactivated.json()["data"]["isActive"] is False


@pytest.mark.asyncio
async def test_duplicate_language_slug(client, admin_headers):
    await create_language(client, admin_headers)

    response = await client.post(
        f"{API}/languages", json={"name": "Other", "slug": "python"}, headers=admin_headers
    )

    assert response.status_code == 422
    assert response.json()["error"]["message"] == "Language with slug python already exists"


@pytest.mark.asyncio
async def test_request_validation_details(client, admin_headers):
    response = await client.post(
        f"{API}/languages",
        json={"name": "Bad", "slug": "Not A Slug", "icon": "not-a-url"},
        headers=admin_headers,
    )

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    fields = {detail["field"] for detail in error["details"]}
    assert {"slug", "icon"} <= fields


@pytest.mark.asyncio
async def test_list_languages_pagination_and_filters(client, admin_headers):
    for i in range(12):
        await create_language(client, admin_headers, slug=f"lang-{i}", name=f"Lang {i}")
    python = await create_language(client, admin_headers, slug="python", name="Python")
    await client.post(f"{API}/languages/{python['id']}/deactivate", headers=admin_headers)

    page_two = await client.get(f"{API}/languages", params={"page": 2})
    inactive = await client.get(f"{API}/languages", params={"isActive": "false"})
    too_big = await client.get(f"{API}/languages", params={"limit": 500})

    body = page_two.json()
    assert body["pagination"] == {
        "page": 2,
        "limit": 10,
        "total": 13,
        "totalPages": 2,
        "hasNext": False,
        "hasPrev": True,
    }
    assert len(body["data"]) == 3
    assert [lang["slug"] for lang in inactive.json()["data"]] == ["python"]
    assert too_big.status_code == 422


@pytest.mark.asyncio
async def test_module_flow_and_reorder(client, admin_headers):
    lang = await create_language(client, admin_headers)
    first = await create_module(client, admin_headers, lang["id"], "basics", order=0)
    second = await create_module(client, admin_headers, lang["id"], "advanced", order=1)

    duplicate = await client.post(
        f"{API}/modules",
        json={"languageId": lang["id"], "title": "Again", "slug": "basics", "order": 2},
        headers=admin_headers,
    )
    assert duplicate.status_code == 422

    reorder = await client.post(
        f"{API}/modules/language/{lang['id']}/reorder",
        json={"modules": [{"id": first["id"], "order": 1}, {"id": second["id"], "order": 0}]},
        headers=admin_headers,
    )
    assert reorder.status_code == 204

    listed = await client.get(f"{API}/modules/language/{lang['id']}")
    assert [m["slug"] for m in listed.json()["data"]] == ["advanced", "basics"]

    by_slug = await client.get(f"{API}/modules/language/{lang['id']}/slug/basics")
    assert by_slug.json()["data"]["order"] == 1

    updated = await client.put(
        f"{API}/modules/{first['id']}", json={"description": "Start here"}, headers=admin_headers
    )
    assert updated.json()["data"]["title"] == "Basics"
    assert updated.json()["data"]["description"] == "Start here"


@pytest.mark.asyncio
async def test_module_for_unknown_language(client, admin_headers):
    response = await client.post(
        f"{API}/modules",
        json={
            "languageId": "00000000-0000-0000-0000-000000000000",
            "title": "Orphan",
            "slug": "orphan",
            "order": 0,
        },
        headers=admin_headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


@pytest.mark.asyncio
async def test_reorder_with_foreign_module_changes_nothing(client, admin_headers):
    python = await create_language(client, admin_headers)
    go = await create_language(client, admin_headers, slug="go", name="Go")
    own = await create_module(client, admin_headers, python["id"], "basics", order=0)
    foreign = await create_module(client, admin_headers, go["id"], "go-basics", order=0)

    response = await client.post(
        f"{API}/modules/language/{python['id']}/reorder",
        json={"modules": [{"id": own["id"], "order": 7}, {"id": foreign["id"], "order": 8}]},
        headers=admin_headers,
    )

    assert response.status_code == 422
    stored = await client.get(f"{API}/modules/{own['id']}")
    assert stored.json()["data"]["order"] == 0


@pytest.mark.asyncio
async def test_reorder_accepts_parent_id_in_any_case(client, admin_headers):
    lang = await create_language(client, admin_headers)
    first = await create_module(client, admin_headers, lang["id"], "basics", order=0)
    second = await create_module(client, admin_headers, lang["id"], "advanced", order=1)

    response = await client.post(
        f"{API}/modules/language/{lang['id'].upper()}/reorder",
        json={"modules": [{"id": first["id"], "order": 1}, {"id": second["id"], "order": 0}]},
        headers=admin_headers,
    )

    assert response.status_code == 204, response.text
    listed = await client.get(f"{API}/modules/language/{lang['id']}")
    assert [m["slug"] for m in listed.json()["data"]] == ["advanced", "basics"]


@pytest.mark.asyncio
async def test_reorder_with_malformed_parent_id(client, admin_headers):
    response = await client.post(
        f"{API}/materials/module/not-a-uuid/reorder",
        json={"materials": []},
        headers=admin_headers,
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_reorder_storage_failure_leaves_orders_unchanged(app, admin_headers, monkeypatch):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        lang = await create_language(client, admin_headers)
        first = await create_module(client, admin_headers, lang["id"], "basics", order=0)
        second = await create_module(client, admin_headers, lang["id"], "advanced", order=1)

        original_execute = AsyncSession.execute
        module_updates = []

        async def failing_execute(self, statement, *args, **kwargs):
            if isinstance(statement, Update) and getattr(statement.table, "name", None) == "modules":
                module_updates.append(statement)
                if len(module_updates) == 2:
                    raise RuntimeError("storage unavailable")
            return await original_execute(self, statement, *args, **kwargs)

        monkeypatch.setattr(AsyncSession, "execute", failing_execute)
        response = await client.post(
            f"{API}/modules/language/{lang['id']}/reorder",
            json={"modules": [{"id": first["id"], "order": 1}, {"id": second["id"], "order": 0}]},
            headers=admin_headers,
        )
        monkeypatch.undo()

        assert len(module_updates) == 2
        assert response.status_code == 500
        assert response.json()["status"] == "error"
        assert response.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"

        for before in (first, second):
            stored = (await client.get(f"{API}/modules/{before['id']}")).json()["data"]
            assert stored["order"] == before["order"]
            assert datetime.fromisoformat(stored["updatedAt"]) == datetime.fromisoformat(
                before["updatedAt"]
            )


@pytest.mark.asyncio
async def test_material_flow(client, admin_headers, user_headers):
    lang = await create_language(client, admin_headers)
    mod = await create_module(client, admin_headers, lang["id"], "basics")

    created = []
    for order, (title, kind) in enumerate([("Intro", "VIDEO"), ("Notes", "ARTICLE")]):
        response = await client.post(
            f"{API}/materials",
            json={
                "moduleId": mod["id"],
                "title": title,
                "type": kind,
                "content": f"{title} body",
                "order": order,
                "duration": 5,
            },
            headers=user_headers,
        )
        assert response.status_code == 201, response.text
        created.append(response.json()["data"])

    videos = await client.get(f"{API}/materials", params={"type": "VIDEO"})
    assert [m["title"] for m in videos.json()["data"]] == ["Intro"]

    reorder = await client.post(
        f"{API}/materials/module/{mod['id']}/reorder",
        json={"materials": [{"id": created[0]["id"], "order": 1}, {"id": created[1]["id"], "order": 0}]},
        headers=user_headers,
    )
    assert reorder.status_code == 204

    listed = await client.get(f"{API}/materials/module/{mod['id']}")
    assert [m["title"] for m in listed.json()["data"]] == ["Notes", "Intro"]

    patched = await client.put(
        f"{API}/materials/{created[0]['id']}", json={"duration": None}, headers=user_headers
    )
    assert patched.json()["data"]["duration"] is None
    assert patched.json()["data"]["type"] == "VIDEO"

    removed = await client.delete(f"{API}/materials/{created[0]['id']}", headers=admin_headers)
    assert removed.status_code == 204


@pytest.mark.asyncio
async def test_rate_limit(database):
    app = create_app(
        make_settings(rate_limit_enabled=True, rate_limit_max_requests=2), database
    )
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        for _ in range(2):
            assert (await client.get(f"{API}/languages")).status_code == 200
        limited = await client.get(f"{API}/languages")

    assert limited.status_code == 429
    assert limited.json()["error"]["code"] == "RATE_LIMIT_EXCEEDED"
    assert int(limited.headers["Retry-After"]) >= 1
