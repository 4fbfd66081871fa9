"""최애 그룹 API 테스트.

Oshi group API tests — CRUD, search modes, ownership scoping and
cascading deletion of members.
"""

from httpx import AsyncClient

from tests.conftest import auth_header, make_token

URL = "/api/v1/oshi-groups"


class TestGroupAuth:
    """인증 테스트."""

    async def test_no_token(self, client: AsyncClient):
        """토큰 없이 요청 시 거부."""
        res = await client.get(URL)
        assert res.status_code in (401, 403)

    async def test_invalid_token(self, client: AsyncClient):
        """잘못된 토큰은 401."""
        res = await client.get(URL, headers=auth_header("not-a-jwt"))
        assert res.status_code == 401

    async def test_non_numeric_subject(self, client: AsyncClient):
        """숫자가 아닌 sub는 401."""
        res = await client.get(URL, headers=auth_header(make_token("abc")))
        assert res.status_code == 401


class TestGroupCreate:
    """그룹 생성 테스트."""

    async def test_create_group(self, client: AsyncClient, user_token):
        """그룹 생성 성공."""
        res = await client.post(URL, json={
            "group_name": "K-ON",
            "company": "Sakuragaoka",
            "description": "Light music club",
        }, headers=auth_header(user_token))
        assert res.status_code == 201
        data = res.json()
        assert data["group_name"] == "K-ON"
        assert data["company"] == "Sakuragaoka"
        assert data["user_id"] == 9
        assert isinstance(data["id"], int)

    async def test_create_without_optional_fields(self, client: AsyncClient, user_token):
        """회사/설명 없이 생성."""
        res = await client.post(URL, json={"group_name": "Solo"}, headers=auth_header(user_token))
        assert res.status_code == 201
        assert res.json()["company"] is None
        assert res.json()["description"] is None

    async def test_create_empty_name_rejected(self, client: AsyncClient, user_token):
        """빈 그룹 이름은 422."""
        res = await client.post(URL, json={"group_name": ""}, headers=auth_header(user_token))
        assert res.status_code == 422

    async def test_description_too_long(self, client: AsyncClient, user_token):
        """1000자 초과 설명은 422."""
        res = await client.post(URL, json={
            "group_name": "Long",
            "description": "x" * 1001,
        }, headers=auth_header(user_token))
        assert res.status_code == 422


class TestGroupRead:
    """그룹 조회 테스트."""

    async def test_list_only_own_groups(self, client: AsyncClient, group, other_group, user_token):
        """자신의 그룹만 조회."""
        res = await client.get(URL, headers=auth_header(user_token))
        assert res.status_code == 200
        names = [g["group_name"] for g in res.json()]
        assert names == ["Test Group"]

    async def test_get_group(self, client: AsyncClient, group, user_token):
        """그룹 상세 조회."""
        res = await client.get(f"{URL}/{group.id}", headers=auth_header(user_token))
        assert res.status_code == 200
        assert res.json()["group_name"] == "Test Group"

    async def test_get_other_users_group(self, client: AsyncClient, other_group, user_token):
        """다른 사용자 그룹은 404."""
        res = await client.get(f"{URL}/{other_group.id}", headers=auth_header(user_token))
        assert res.status_code == 404

    async def test_full_match_search(self, client: AsyncClient, group, user_token):
        """완전 일치 검색."""
        headers = auth_header(user_token)
        res = await client.get(URL, params={"group_name": "Test Group", "full": True}, headers=headers)
        assert [g["id"] for g in res.json()] == [group.id]

        res = await client.get(URL, params={"group_name": "Test", "full": True}, headers=headers)
        assert res.json() == []

    async def test_fuzzy_search(self, client: AsyncClient, group, user_token):
        """부분 일치 검색 (대소문자 무시)."""
        res = await client.get(URL, params={"group_name": "test g", "fuzzy": True}, headers=auth_header(user_token))
        assert res.status_code == 200
        assert [g["id"] for g in res.json()] == [group.id]

    async def test_search_mode_must_be_exclusive(self, client: AsyncClient, group, user_token):
        """full/fuzzy 둘 다 또는 둘 다 아님은 400."""
        headers = auth_header(user_token)
        res = await client.get(URL, params={"group_name": "Test", "full": True, "fuzzy": True}, headers=headers)
        assert res.status_code == 400
        res = await client.get(URL, params={"group_name": "Test"}, headers=headers)
        assert res.status_code == 400

    async def test_company_search(self, client: AsyncClient, group, user_token):
        """회사명 검색."""
        headers = auth_header(user_token)
        res = await client.get(URL, params={"company": "Test Agency"}, headers=headers)
        assert [g["id"] for g in res.json()] == [group.id]
        res = await client.get(URL, params={"company": "Nobody"}, headers=headers)
        assert res.json() == []


class TestGroupUpdate:
    """그룹 수정 테스트."""

    async def test_update_name(self, client: AsyncClient, group, user_token):
        """그룹 이름 수정."""
        res = await client.put(f"{URL}/{group.id}", json={"group_name": "HTT"}, headers=auth_header(user_token))
        assert res.status_code == 200
        assert res.json()["group_name"] == "HTT"
        assert res.json()["company"] == "Test Agency"

    async def test_null_name_rejected(self, client: AsyncClient, group, user_token):
        """group_name에 null은 422, 다른 필드의 null은 허용."""
        headers = auth_header(user_token)
        res = await client.put(f"{URL}/{group.id}", json={"group_name": None}, headers=headers)
        assert res.status_code == 422

        res = await client.put(f"{URL}/{group.id}", json={"company": None}, headers=headers)
        assert res.status_code == 200
        assert res.json()["company"] is None
        assert res.json()["group_name"] == "Test Group"

    async def test_update_other_users_group(self, client: AsyncClient, other_group, user_token):
        """다른 사용자 그룹 수정은 404."""
        res = await client.put(f"{URL}/{other_group.id}", json={"group_name": "X"}, headers=auth_header(user_token))
        assert res.status_code == 404


class TestGroupDelete:
    """그룹 삭제 테스트."""

    async def test_delete_cascades_members(self, client: AsyncClient, group, member, user_token):
        """그룹 삭제 후 멤버도 사라짐."""
        headers = auth_header(user_token)
        res = await client.delete(f"{URL}/{group.id}", headers=headers)
        assert res.status_code == 204

        res = await client.get(f"{URL}/{group.id}", headers=headers)
        assert res.status_code == 404
        res = await client.get(f"/api/v1/oshi-members/{member.id}", headers=headers)
        assert res.status_code == 404
        res = await client.get("/api/v1/oshi-members/exists", params={"member_name": "Yui"}, headers=headers)
        assert res.json() == {"exists": False}

    async def test_delete_other_users_group(self, client: AsyncClient, other_group, user_token, other_token):
        """다른 사용자 그룹 삭제는 404, 그룹은 유지."""
        res = await client.delete(f"{URL}/{other_group.id}", headers=auth_header(user_token))
        assert res.status_code == 404
        res = await client.get(f"{URL}/{other_group.id}", headers=auth_header(other_token))
        assert res.status_code == 200


class TestGroupMembers:
    """그룹 멤버 목록 테스트."""

    async def test_list_members(self, client: AsyncClient, group, member, user_token):
        """그룹 멤버 목록 조회."""
        res = await client.get(f"{URL}/{group.id}/members", headers=auth_header(user_token))
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 1
        assert data[0]["member_name"] == "Yui"

    async def test_list_members_other_user(self, client: AsyncClient, group, member, other_token):
        """다른 사용자는 404."""
        res = await client.get(f"{URL}/{group.id}/members", headers=auth_header(other_token))
        assert res.status_code == 404
