import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import BoardRole, Membership, Task
from tests.integration.helpers import API, add_member, create_board, register


@pytest.mark.asyncio
async def test_create_board_then_list(client: AsyncClient, db_session):
    alice = await register(client, "Alice")

    board = await create_board(client, alice, "X")
    response = await client.get(f"{API}/boards", headers=alice["headers"])

    assert response.status_code == 200
    [listed] = response.json()
    assert listed["name"] == "X"
    assert listed["role"] == "OWNER"
    assert listed["id"] == board["id"]
    assert set(listed) == {"id", "name", "created_at", "updated_at", "role"}

    memberships = (await db_session.exec(select(Membership))).all()
    assert len(memberships) == 1
    assert memberships[0].role == BoardRole.owner
    assert str(memberships[0].user_id) == alice["user"]["id"]


@pytest.mark.asyncio
async def test_list_only_own_boards(client: AsyncClient):
    alice = await register(client, "Alice")
    bob = await register(client, "Bob")
    await create_board(client, alice, "Alice's")
    shared = await create_board(client, bob, "Shared")
    await create_board(client, bob, "Private")
    await add_member(client, shared["id"], bob, alice)

    response = await client.get(f"{API}/boards", headers=alice["headers"])

    boards = {b["name"]: b["role"] for b in response.json()}
    assert boards == {"Alice's": "OWNER", "Shared": "MEMBER"}


@pytest.mark.asyncio
async def test_create_board_requires_name(client: AsyncClient):
    alice = await register(client, "Alice")

    response = await client.post(f"{API}/boards", json={"name": "   "}, headers=alice["headers"])

    assert response.status_code == 400
    assert response.json()["error"] == "Board name is required"


@pytest.mark.asyncio
async def test_outsider_gets_not_found(client: AsyncClient):
    alice = await register(client, "Alice")
    mallory = await register(client, "Mallory")
    board = await create_board(client, alice)

    response = await client.get(f"{API}/boards/{board['id']}", headers=mallory["headers"])

    assert response.status_code == 404
    assert response.json()["error"] == "Board not found or access denied"


@pytest.mark.asyncio
async def test_malformed_board_id_is_not_found(client: AsyncClient):
    alice = await register(client, "Alice")

    response = await client.get(f"{API}/boards/not-a-uuid", headers=alice["headers"])

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_rename_board_by_role(client: AsyncClient):
    alice = await register(client, "Alice")
    bob = await register(client, "Bob")
    carol = await register(client, "Carol")
    board = await create_board(client, alice)
    await add_member(client, board["id"], alice, bob, "MAINTAINER")
    await add_member(client, board["id"], alice, carol, "MEMBER")

    by_maintainer = await client.patch(
        f"{API}/boards/{board['id']}", json={"name": "Renamed"}, headers=bob["headers"]
    )
    by_member = await client.patch(
        f"{API}/boards/{board['id']}", json={"name": "Nope"}, headers=carol["headers"]
    )

    assert by_maintainer.status_code == 200
    assert by_maintainer.json()["name"] == "Renamed"
    assert by_maintainer.json()["role"] == "MAINTAINER"
    assert by_member.status_code == 403
    assert by_member.json()["error"] == "Only owners and maintainers can update boards"


@pytest.mark.asyncio
async def test_only_owner_deletes_board(client: AsyncClient):
    alice = await register(client, "Alice")
    bob = await register(client, "Bob")
    board = await create_board(client, alice)
    await add_member(client, board["id"], alice, bob, "MAINTAINER")

    response = await client.delete(f"{API}/boards/{board['id']}", headers=bob["headers"])

    assert response.status_code == 403
    assert response.json()["error"] == "Only owners can delete boards"


@pytest.mark.asyncio
async def test_delete_board_removes_members_and_tasks(client: AsyncClient, db_session):
    alice = await register(client, "Alice")
    bob = await register(client, "Bob")
    board = await create_board(client, alice)
    await add_member(client, board["id"], alice, bob)
    await client.post(
        f"{API}/boards/{board['id']}/tasks", json={"title": "T1"}, headers=bob["headers"]
    )

    response = await client.delete(f"{API}/boards/{board['id']}", headers=alice["headers"])

    assert response.status_code == 204
    assert (await db_session.exec(select(Membership))).all() == []
    assert (await db_session.exec(select(Task))).all() == []

    former = await client.get(f"{API}/boards/{board['id']}/tasks", headers=bob["headers"])
    assert former.status_code == 404
