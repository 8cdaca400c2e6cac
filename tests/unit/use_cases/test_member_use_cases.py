from uuid import uuid4

import pytest

from src.app.errors import (
    ALREADY_MEMBER,
    BOARD_NOT_FOUND,
    CANNOT_ADD_MEMBER,
    CANNOT_REMOVE_MEMBER,
    CANNOT_UPDATE_MEMBER_ROLE,
    INVALID_ROLE,
    LAST_OWNER_REMOVAL,
    LAST_OWNER_ROLE_CHANGE,
    MEMBER_NOT_FOUND,
    USER_NOT_FOUND,
)
from src.app.repositories.membership_repository import MembershipAlreadyExists
from src.app.use_cases.members import (
    AddMemberCommand,
    AddMemberUseCase,
    ListMembersUseCase,
    RemoveMemberUseCase,
    SearchUsersUseCase,
    UpdateMemberRoleCommand,
    UpdateMemberRoleUseCase,
)
from src.domain.entities import BoardRole
from tests.fixtures.factories import make_membership, make_user, memberships_by_user


# ============================================================================
# list members
# ============================================================================


@pytest.mark.asyncio
async def test_list_members_includes_user_profile(mock_uow):
    board_id = uuid4()
    alice, bob = make_user("Alice"), make_user("Bob")
    owner = make_membership(board_id, BoardRole.owner, alice.id)
    member = make_membership(board_id, BoardRole.member, bob.id)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(owner, member)
    mock_uow.memberships.list_by_board_with_users.return_value = [(owner, alice), (member, bob)]

    result = await ListMembersUseCase(mock_uow).execute(board_id, bob.id)

    assert [(m.user.name, m.role) for m in result.value] == [
        ("Alice", BoardRole.owner),
        ("Bob", BoardRole.member),
    ]
    assert result.value[0].user.email == "alice@example.com"


@pytest.mark.asyncio
async def test_list_members_requires_membership(mock_uow):
    result = await ListMembersUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.error == BOARD_NOT_FOUND
    mock_uow.memberships.list_by_board_with_users.assert_not_awaited()


# ============================================================================
# add member
# ============================================================================


@pytest.mark.asyncio
async def test_maintainer_adds_member(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.maintainer)
    target = make_user("Bob")
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor)
    mock_uow.users.get_by_id.return_value = target

    result = await AddMemberUseCase(mock_uow).execute(
        board_id, actor.user_id, AddMemberCommand(user_id=str(target.id))
    )

    assert result.is_ok()
    assert result.value.role == BoardRole.member
    assert result.value.user_id == str(target.id)
    assert result.value.user.name == "Bob"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_add_member_with_explicit_role(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.owner)
    target = make_user("Bob")
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor)
    mock_uow.users.get_by_id.return_value = target

    result = await AddMemberUseCase(mock_uow).execute(
        board_id, actor.user_id, AddMemberCommand(user_id=str(target.id), role="MAINTAINER")
    )

    assert result.value.role == BoardRole.maintainer


@pytest.mark.asyncio
async def test_member_cannot_add_member(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.member)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor)

    result = await AddMemberUseCase(mock_uow).execute(
        board_id, actor.user_id, AddMemberCommand(user_id=str(uuid4()))
    )

    assert result.error == CANNOT_ADD_MEMBER
    assert result.error.message == "Only owners and maintainers can add members"
    mock_uow.memberships.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_add_member_unknown_user(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.owner)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor)

    result = await AddMemberUseCase(mock_uow).execute(
        board_id, actor.user_id, AddMemberCommand(user_id=str(uuid4()))
    )

    assert result.error == USER_NOT_FOUND


@pytest.mark.asyncio
async def test_add_member_twice_conflicts(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.owner)
    target = make_user("Bob")
    existing = make_membership(board_id, BoardRole.member, target.id)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor, existing)
    mock_uow.users.get_by_id.return_value = target

    result = await AddMemberUseCase(mock_uow).execute(
        board_id, actor.user_id, AddMemberCommand(user_id=str(target.id))
    )

    assert result.error == ALREADY_MEMBER
    mock_uow.memberships.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_add_member_race_reported_as_conflict(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.owner)
    target = make_user("Bob")
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor)
    mock_uow.users.get_by_id.return_value = target
    mock_uow.memberships.create.side_effect = MembershipAlreadyExists("duplicate")

    result = await AddMemberUseCase(mock_uow).execute(
        board_id, actor.user_id, AddMemberCommand(user_id=str(target.id))
    )

    assert result.error == ALREADY_MEMBER
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_add_member_invalid_role(mock_uow):
    result = await AddMemberUseCase(mock_uow).execute(
        uuid4(), uuid4(), AddMemberCommand(user_id=str(uuid4()), role="ADMIN")
    )

    assert result.error == INVALID_ROLE
    mock_uow.memberships.get_by_user_and_board.assert_not_awaited()


# ============================================================================
# update member role
# ============================================================================


@pytest.mark.asyncio
async def test_invalid_role_checked_first(mock_uow):
    result = await UpdateMemberRoleUseCase(mock_uow).execute(
        uuid4(), uuid4(), uuid4(), UpdateMemberRoleCommand(role="SUPERUSER")
    )

    assert result.error == INVALID_ROLE
    assert result.error.message == "Invalid role. Must be OWNER, MAINTAINER, or MEMBER"
    mock_uow.memberships.get_by_user_and_board.assert_not_awaited()


@pytest.mark.asyncio
async def test_promote_member_to_maintainer(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.owner)
    bob = make_user("Bob")
    target = make_membership(board_id, BoardRole.member, bob.id)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor, target)
    mock_uow.users.get_by_id.return_value = bob

    result = await UpdateMemberRoleUseCase(mock_uow).execute(
        board_id, actor.user_id, bob.id, UpdateMemberRoleCommand(role="MAINTAINER")
    )

    assert result.value.role == BoardRole.maintainer
    assert target.role == BoardRole.maintainer
    mock_uow.memberships.count_by_role.assert_not_awaited()
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_member_cannot_change_roles(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.member)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor)

    result = await UpdateMemberRoleUseCase(mock_uow).execute(
        board_id, actor.user_id, uuid4(), UpdateMemberRoleCommand(role="OWNER")
    )

    assert result.error == CANNOT_UPDATE_MEMBER_ROLE


@pytest.mark.asyncio
async def test_update_role_of_unknown_member(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.owner)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor)

    result = await UpdateMemberRoleUseCase(mock_uow).execute(
        board_id, actor.user_id, uuid4(), UpdateMemberRoleCommand(role="MEMBER")
    )

    assert result.error == MEMBER_NOT_FOUND


@pytest.mark.asyncio
async def test_sole_owner_cannot_demote_self(mock_uow):
    board_id = uuid4()
    owner = make_membership(board_id, BoardRole.owner)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(owner)
    mock_uow.memberships.count_by_role.return_value = 1

    result = await UpdateMemberRoleUseCase(mock_uow).execute(
        board_id, owner.user_id, owner.user_id, UpdateMemberRoleCommand(role="MEMBER")
    )

    assert result.error == LAST_OWNER_ROLE_CHANGE
    assert result.error.message == "Cannot change the role of the last owner"
    assert owner.role == BoardRole.owner
    mock_uow.memberships.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_maintainer_demotes_co_owner(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.maintainer)
    carol = make_user("Carol")
    target = make_membership(board_id, BoardRole.owner, carol.id)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor, target)
    mock_uow.memberships.count_by_role.return_value = 2
    mock_uow.users.get_by_id.return_value = carol

    result = await UpdateMemberRoleUseCase(mock_uow).execute(
        board_id, actor.user_id, carol.id, UpdateMemberRoleCommand(role="MEMBER")
    )

    assert result.value.role == BoardRole.member
    mock_uow.boards.lock.assert_awaited_once_with(board_id)


@pytest.mark.asyncio
async def test_demotion_rejected_when_recount_finds_no_owner(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.maintainer)
    target = make_membership(board_id, BoardRole.owner)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor, target)
    # another transaction demoted the co-owner between the check and the write
    mock_uow.memberships.count_by_role.side_effect = [2, 0]
    mock_uow.users.get_by_id.return_value = make_user("Carol")

    result = await UpdateMemberRoleUseCase(mock_uow).execute(
        board_id, actor.user_id, target.user_id, UpdateMemberRoleCommand(role="MEMBER")
    )

    assert result.error == LAST_OWNER_ROLE_CHANGE
    mock_uow.commit.assert_not_awaited()


# ============================================================================
# remove member
# ============================================================================


@pytest.mark.asyncio
async def test_owner_removes_member(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.owner)
    target = make_membership(board_id, BoardRole.member)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor, target)

    result = await RemoveMemberUseCase(mock_uow).execute(board_id, actor.user_id, target.user_id)

    assert result.is_ok()
    mock_uow.memberships.delete.assert_awaited_once_with(target)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_member_cannot_remove_members(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.member)
    target = make_membership(board_id, BoardRole.member)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor, target)

    result = await RemoveMemberUseCase(mock_uow).execute(board_id, actor.user_id, target.user_id)

    assert result.error == CANNOT_REMOVE_MEMBER
    mock_uow.memberships.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_remove_unknown_member(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.owner)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor)

    result = await RemoveMemberUseCase(mock_uow).execute(board_id, actor.user_id, uuid4())

    assert result.error == MEMBER_NOT_FOUND


@pytest.mark.asyncio
async def test_last_owner_cannot_leave(mock_uow):
    board_id = uuid4()
    owner = make_membership(board_id, BoardRole.owner)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(owner)
    mock_uow.memberships.count_by_role.return_value = 1

    result = await RemoveMemberUseCase(mock_uow).execute(board_id, owner.user_id, owner.user_id)

    assert result.error == LAST_OWNER_REMOVAL
    mock_uow.memberships.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_owner_can_leave_when_another_owner_remains(mock_uow):
    board_id = uuid4()
    owner = make_membership(board_id, BoardRole.owner)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(owner)
    mock_uow.memberships.count_by_role.return_value = 2

    result = await RemoveMemberUseCase(mock_uow).execute(board_id, owner.user_id, owner.user_id)

    assert result.is_ok()
    mock_uow.memberships.delete.assert_awaited_once_with(owner)
    assert mock_uow.memberships.count_by_role.await_count == 2


@pytest.mark.asyncio
async def test_owner_departure_rejected_when_recount_finds_no_owner(mock_uow):
    board_id = uuid4()
    owner = make_membership(board_id, BoardRole.owner)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(owner)
    mock_uow.memberships.count_by_role.side_effect = [2, 0]

    result = await RemoveMemberUseCase(mock_uow).execute(board_id, owner.user_id, owner.user_id)

    assert result.error == LAST_OWNER_REMOVAL
    mock_uow.memberships.delete.assert_awaited_once_with(owner)
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_removing_plain_member_skips_owner_recount(mock_uow):
    board_id = uuid4()
    actor = make_membership(board_id, BoardRole.owner)
    target = make_membership(board_id, BoardRole.member)
    mock_uow.memberships.get_by_user_and_board.side_effect = memberships_by_user(actor, target)

    result = await RemoveMemberUseCase(mock_uow).execute(board_id, actor.user_id, target.user_id)

    assert result.is_ok()
    mock_uow.memberships.count_by_role.assert_not_awaited()


# ============================================================================
# search users
# ============================================================================


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["", "a", "  b  ", None])
async def test_short_query_skips_store(mock_uow, query):
    result = await SearchUsersUseCase(mock_uow).execute(query, uuid4())

    assert result.value == []
    mock_uow.users.search.assert_not_awaited()
    mock_uow.__aenter__.assert_not_awaited()


@pytest.mark.asyncio
async def test_search_trims_query_and_passes_limit(mock_uow):
    caller = uuid4()
    mock_uow.users.search.return_value = [make_user("Alice")]

    result = await SearchUsersUseCase(mock_uow).execute("  ali ", caller, limit=5)

    assert [u.name for u in result.value] == ["Alice"]
    assert result.value[0].created_at.endswith("Z")
    mock_uow.users.search.assert_awaited_once_with("ali", caller, 5)
