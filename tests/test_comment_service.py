"""Tests for comment submission, moderation and cascade deletion against a real session."""
import pytest

from portfolio.core.exceptions import NotFound, ValidationError
from portfolio.services.comment_service import PENDING_APPROVAL_MESSAGE, CommentService
from portfolio.services.comment_store import CommentStore


def form(post_id: int, **overrides) -> dict:
    data = {
        "blog_post_id": post_id,
        "name": "Ada",
        "email": "ada@example.com",
        "content": "Great article, thanks!",
    }
    data.update(overrides)
    return data


@pytest.fixture
def service(db) -> CommentService:
    return CommentService(CommentStore(db))


class TestSubmit:
    @pytest.mark.asyncio
    async def test_new_comment_is_unapproved(self, service, make_post):
        post_id = await make_post()

        result = await service.submit(form(post_id))

        assert result.comment.id > 0
        assert result.comment.is_approved is False
        assert result.comment.blog_post_id == post_id
        assert result.comment.parent_id is None
        assert result.message == PENDING_APPROVAL_MESSAGE

    @pytest.mark.asyncio
    async def test_moderator_name_gets_no_auto_approval(self, service, make_post):
        post_id = await make_post()

        result = await service.submit(form(post_id, name="admin", email="owner@example.com"))

        assert result.comment.is_approved is False

    @pytest.mark.asyncio
    async def test_content_length_boundary(self, service, make_post):
        post_id = await make_post()

        with pytest.raises(ValidationError) as exc:
            await service.submit(form(post_id, content="abcd"))
        assert exc.value.field == "content"

        result = await service.submit(form(post_id, content="abcde"))
        assert result.comment.content == "abcde"

    @pytest.mark.asyncio
    async def test_email_must_be_well_formed(self, service, make_post):
        post_id = await make_post()

        with pytest.raises(ValidationError) as exc:
            await service.submit(form(post_id, email="not-an-email"))
        assert exc.value.field == "email"

        result = await service.submit(form(post_id, email="a@b.com"))
        assert result.comment.email == "a@b.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides,field",
        [
            ({"name": "A"}, "name"),
            ({"blog_post_id": 0}, "blog_post_id"),
            ({"parent_id": -3}, "parent_id"),
        ],
    )
    async def test_rejects_bad_fields(self, service, overrides, field):
        with pytest.raises(ValidationError) as exc:
            await service.submit(form(1, **overrides))
        assert exc.value.field == field
        assert field in exc.value.message

    @pytest.mark.asyncio
    async def test_reply_parent_from_another_post_is_accepted(self, service, make_post):
        """Known gap: the parent's post is not compared with the reply's post."""
        first = await make_post()
        second = await make_post()
        parent = (await service.submit(form(first))).comment

        reply = (await service.submit(form(second, parent_id=parent.id))).comment

        assert reply.blog_post_id == second
        assert reply.parent_id == parent.id


class TestListing:
    @pytest.mark.asyncio
    async def test_newest_first_and_unfiltered(self, service, make_post):
        post_id = await make_post()
        first = (await service.submit(form(post_id, content="first comment"))).comment
        second = (await service.submit(form(post_id, content="second comment"))).comment
        third = (await service.submit(form(post_id, content="third comment"))).comment
        await service.approve(second.id)

        comments = await service.list_for_post(post_id)

        assert [c.id for c in comments] == [third.id, second.id, first.id]
        assert [c.is_approved for c in comments] == [False, True, False]

    @pytest.mark.asyncio
    async def test_only_the_requested_post(self, service, make_post):
        mine = await make_post()
        other = await make_post()
        await service.submit(form(mine))
        await service.submit(form(other))

        comments = await service.list_for_post(mine)

        assert len(comments) == 1
        assert comments[0].blog_post_id == mine

    @pytest.mark.asyncio
    async def test_pending_queue(self, service, make_post):
        post_id = await make_post()
        waiting = (await service.submit(form(post_id))).comment
        approved = (await service.submit(form(post_id))).comment
        await service.approve(approved.id)

        pending = await service.pending()

        assert [c.id for c in pending] == [waiting.id]


class TestApprove:
    @pytest.mark.asyncio
    async def test_approve_flips_flag(self, service, make_post):
        post_id = await make_post()
        comment = (await service.submit(form(post_id))).comment

        approved = await service.approve(comment.id)

        assert approved.is_approved is True
        assert (await service.store.get(comment.id)).is_approved is True

    @pytest.mark.asyncio
    async def test_approve_twice_stays_approved(self, service, make_post):
        post_id = await make_post()
        comment = (await service.submit(form(post_id))).comment

        await service.approve(comment.id)
        again = await service.approve(comment.id)

        assert again.is_approved is True

    @pytest.mark.asyncio
    async def test_approve_unknown_id(self, service):
        with pytest.raises(NotFound):
            await service.approve(9999)


class TestRemove:
    @pytest.mark.asyncio
    async def test_cascade_removes_reply_chain(self, service, make_post):
        post_id = await make_post()
        root = (await service.submit(form(post_id))).comment
        r1 = (await service.submit(form(post_id, parent_id=root.id))).comment
        r2 = (await service.submit(form(post_id, parent_id=r1.id))).comment
        sibling = (await service.submit(form(post_id))).comment

        deleted = await service.remove(root.id)

        assert deleted == 3
        for comment_id in (root.id, r1.id, r2.id):
            assert await service.store.get(comment_id) is None
            assert await service.store.list_children(comment_id) == []
        remaining = await service.list_for_post(post_id)
        assert [c.id for c in remaining] == [sibling.id]

    @pytest.mark.asyncio
    async def test_collect_subtree_is_breadth_first(self, service, make_post):
        post_id = await make_post()
        root = (await service.submit(form(post_id))).comment
        a = (await service.submit(form(post_id, parent_id=root.id))).comment
        b = (await service.submit(form(post_id, parent_id=root.id))).comment
        a1 = (await service.submit(form(post_id, parent_id=a.id))).comment

        assert await service.collect_subtree(root.id) == [root.id, a.id, b.id, a1.id]

    @pytest.mark.asyncio
    async def test_delete_twice_is_a_no_op(self, service, make_post):
        post_id = await make_post()
        comment = (await service.submit(form(post_id))).comment

        assert await service.remove(comment.id) == 1
        assert await service.remove(comment.id) == 0

    @pytest.mark.asyncio
    async def test_delete_of_reply_already_removed_by_cascade(self, service, make_post):
        post_id = await make_post()
        root = (await service.submit(form(post_id))).comment
        reply = (await service.submit(form(post_id, parent_id=root.id))).comment

        await service.remove(root.id)

        assert await service.remove(reply.id) == 0

    @pytest.mark.asyncio
    async def test_delete_never_existing_id(self, service):
        assert await service.remove(424242) == 0


class TestRemoveForPost:
    @pytest.mark.asyncio
    async def test_takes_cross_post_replies(self, service, make_post):
        post_a = await make_post()
        post_b = await make_post()
        top = (await service.submit(form(post_a))).comment
        stray = (await service.submit(form(post_b, parent_id=top.id))).comment
        other = (await service.submit(form(post_b))).comment

        deleted = await service.remove_for_post(post_a)

        assert deleted == 2
        assert await service.store.get(stray.id) is None
        assert [c.id for c in await service.list_for_post(post_b)] == [other.id]

    @pytest.mark.asyncio
    async def test_post_without_comments(self, service, make_post):
        post_id = await make_post()

        assert await service.remove_for_post(post_id) == 0
