from httpx import AsyncClient

API = "/api"
PASSWORD = "secret123"


async def register(client: AsyncClient, name: str, email: str = None) -> dict:
    """Register a user and return {"token", "user", "headers"}"""
    response = await client.post(
        f"{API}/auth/register",
        json={
            "email": email or f"{name.lower()}@example.com",
            "name": name,
            "password": PASSWORD,
        },
    )
    assert response.status_code == 201, response.text
    data = response.json()
    data["headers"] = {"Authorization": f"Bearer {data['token']}"}
    return data


async def create_board(client: AsyncClient, owner: dict, name: str = "Roadmap") -> dict:
    response = await client.post(f"{API}/boards", json={"name": name}, headers=owner["headers"])
    assert response.status_code == 201, response.text
    return response.json()


async def add_member(
    client: AsyncClient, board_id: str, actor: dict, target: dict, role: str = "MEMBER"
):
    return await client.post(
        f"{API}/boards/{board_id}/members",
        json={"user_id": target["user"]["id"], "role": role},
        headers=actor["headers"],
    )
