"""Unit tests for CommentField."""

import pytest

from commentfield.config import CommentFieldSettings
from commentfield.domain.repository import CommentFieldtype
from commentfield.domain.service import CommentField
from commentfield.domain.value import CommentId, CommentStatus, PageId
from tests.conftest import make_comment, make_field, make_page
from tests.harness import create_env_fixture

# Unit test fixture - fresh in-memory stores
unit_env = create_env_fixture()

PAGE = PageId(1)
OTHER_PAGE = PageId(2)


def _seed_thread(comment_field: CommentField):
    """Seed page 1 with A (root) <- B <- C.

    Returns:
        The saved comments (A, B, C)
    """
    a = comment_field.add_comment(PAGE, make_comment(text="A"))
    b = comment_field.add_comment(PAGE, make_comment(parent_id=a.id, text="B"))
    c = comment_field.add_comment(PAGE, make_comment(parent_id=b.id, text="C"))
    return a, b, c


class TestAllowCommentParent:
    """Tests for the reply-to rules."""

    @pytest.mark.asyncio
    async def test_no_parent_is_always_allowed(self, unit_env):
        """Parent 0 is allowed even when threading is disabled."""
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype, depth=0)
        comment = make_comment(page_id=PAGE)

        assert comment_field.allow_comment_parent_id(comment, 0)

    @pytest.mark.asyncio
    async def test_comment_cannot_be_its_own_parent(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype, depth=5)
        a, _, _ = _seed_thread(comment_field)

        assert not comment_field.allow_comment_parent_id(a, a.id)
        assert not comment_field.allow_comment_parent(a, a)

    @pytest.mark.asyncio
    async def test_comment_from_other_field_rejected(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype, depth=5)
        a, _, _ = _seed_thread(comment_field)
        stranger = make_comment(page_id=PAGE, field_name="reviews")

        decision = comment_field.check_comment_parent_id(stranger, a.id)

        assert not decision.allowed
        assert "moved between fields" in decision.reasons[0]

    @pytest.mark.asyncio
    async def test_unattached_comment_uses_this_field(self, unit_env):
        """A draft with no field is treated as belonging to this field."""
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype, depth=5)
        a, _, _ = _seed_thread(comment_field)
        draft = make_comment(page_id=PAGE)

        assert draft.field_name is None
        assert comment_field.allow_comment_parent_id(draft, a.id)

    @pytest.mark.asyncio
    async def test_threading_disabled_rejects_any_parent(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        seeding_field = make_field(fieldtype, depth=5)
        a, _, _ = _seed_thread(seeding_field)
        comment_field = make_field(fieldtype, depth=0)
        draft = make_comment(page_id=PAGE)

        decision = comment_field.check_comment_parent_id(draft, a.id)

        assert not decision.allowed
        assert "not enabled" in decision.reasons[0]

    @pytest.mark.asyncio
    async def test_parent_missing_from_page_rejected(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype, depth=5)
        a, _, _ = _seed_thread(comment_field)
        elsewhere = make_comment(page_id=OTHER_PAGE)

        decision = comment_field.check_comment_parent_id(elsewhere, a.id)

        assert not decision.allowed
        assert "does not have parent comment" in decision.reasons[0]

    @pytest.mark.asyncio
    async def test_unknown_parent_rejected(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype, depth=5)
        _seed_thread(comment_field)
        draft = make_comment(page_id=PAGE)

        assert not comment_field.allow_comment_parent_id(draft, 999)

    @pytest.mark.asyncio
    async def test_comment_without_page_rejected(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype, depth=5)
        a, _, _ = _seed_thread(comment_field)

        assert not comment_field.allow_comment_parent_id(make_comment(), a.id)

    @pytest.mark.asyncio
    async def test_parent_below_max_depth_allowed(self, unit_env):
        """depth=2: B has depth 1 < 2, so a reply to B is allowed."""
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype, depth=2)
        a, b, _ = _seed_thread(comment_field)
        draft = make_comment(page_id=PAGE)

        assert comment_field.allow_comment_parent(draft, a)
        assert comment_field.allow_comment_parent(draft, b)

    @pytest.mark.asyncio
    async def test_parent_at_max_depth_rejected(self, unit_env):
        """depth=2: C has depth 2, which is not below 2."""
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype, depth=2)
        _, _, c = _seed_thread(comment_field)
        draft = make_comment(page_id=PAGE)

        decision = comment_field.check_comment_parent(draft, c)

        assert not decision.allowed
        assert "max allowed depth setting (2)" in decision.reasons[0]

    @pytest.mark.asyncio
    async def test_depth_one_allows_replies_to_roots_only(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype, depth=1)
        a, b, _ = _seed_thread(comment_field)
        draft = make_comment(page_id=PAGE)

        assert comment_field.allow_comment_parent(draft, a)
        assert not comment_field.allow_comment_parent(draft, b)

    @pytest.mark.asyncio
    async def test_descendant_cannot_become_parent(self, unit_env):
        """Re-parenting A under its grandchild C would create a cycle."""
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype, depth=10)
        a, b, c = _seed_thread(comment_field)

        decision = comment_field.check_comment_parent(a, c)

        assert not decision.allowed
        assert f"Comment {c.id} is already a child of comment {a.id}" in decision.reasons[0]
        assert not comment_field.allow_comment_parent(a, b)

    @pytest.mark.asyncio
    async def test_sibling_can_become_parent(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype, depth=10)
        a, _, _ = _seed_thread(comment_field)
        other_root = comment_field.add_comment(PAGE, make_comment(text="D"))

        assert comment_field.allow_comment_parent(other_root, a)


class TestVerboseReporting:
    """Rejection reasons go to the sink only when verbose."""

    @pytest.mark.asyncio
    async def test_verbose_reports_one_message_per_rejection(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        messages: list[str] = []
        comment_field = make_field(fieldtype, depth=0, report=messages.append)
        draft = make_comment(page_id=PAGE)

        result = comment_field.allow_comment_parent_id(draft, 7, verbose=True)

        assert result is False
        assert messages == [
            "Comment 0 cannot be reply-to comment 7: "
            "Comment depth is not enabled in field settings"
        ]

    @pytest.mark.asyncio
    async def test_not_verbose_reports_nothing(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        messages: list[str] = []
        comment_field = make_field(fieldtype, depth=0, report=messages.append)

        assert not comment_field.allow_comment_parent_id(make_comment(), 7)
        assert messages == []

    @pytest.mark.asyncio
    async def test_verbose_does_not_change_result(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        messages: list[str] = []
        comment_field = make_field(fieldtype, depth=2, report=messages.append)
        a, _, _ = _seed_thread(comment_field)
        draft = make_comment(page_id=PAGE)

        assert comment_field.allow_comment_parent(draft, a, verbose=True)
        assert messages == []

    @pytest.mark.asyncio
    async def test_verbose_page_rejection_reported(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        messages: list[str] = []
        comment_field = make_field(fieldtype, depth=2, report=messages.append)
        page = make_page(3, field_names=("body",))

        assert not comment_field.allow_comment_page(make_comment(), page, verbose=True)
        assert messages == ["Comment 0 cannot be on page 3: Page does not have field: comments"]


class TestAllowCommentPage:
    """Tests for the page placement rules."""

    @pytest.mark.asyncio
    async def test_page_without_field_rejected(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype)
        page = make_page(1, field_names=("body",))

        assert not comment_field.allow_comment_page(make_comment(), page)

    @pytest.mark.asyncio
    async def test_root_comment_allowed_on_page_with_field(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype)

        assert comment_field.allow_comment_page(make_comment(), make_page(1))

    @pytest.mark.asyncio
    async def test_comment_already_on_page_allowed(self, unit_env):
        """Even with a parent that no longer exists."""
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype)
        orphan = comment_field.add_comment(PAGE, make_comment(parent_id=404))

        assert comment_field.allow_comment_page(orphan, make_page(PAGE))

    @pytest.mark.asyncio
    async def test_reply_rejected_when_parent_not_on_target_page(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype)
        _, b, _ = _seed_thread(comment_field)
        comment_field.add_comment(OTHER_PAGE, make_comment(text="other"))

        decision = comment_field.check_comment_page(b, make_page(OTHER_PAGE))

        assert not decision.allowed
        assert "does not exist on page 2" in decision.reasons[0]

    @pytest.mark.asyncio
    async def test_reply_rejected_when_target_page_has_no_comments(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype)
        _, b, _ = _seed_thread(comment_field)

        assert not comment_field.allow_comment_page(b, make_page(OTHER_PAGE))

    @pytest.mark.asyncio
    async def test_reply_allowed_when_parent_on_target_page(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype)
        a, _, _ = _seed_thread(comment_field)
        draft = make_comment(parent_id=a.id)

        assert comment_field.allow_comment_page(draft, make_page(PAGE))

    @pytest.mark.asyncio
    async def test_comment_of_other_field_checks_its_own_field(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype)
        review = make_comment(field_name="reviews")

        assert not comment_field.allow_comment_page(review, make_page(1))
        assert comment_field.allow_comment_page(
            review, make_page(1, field_names=("reviews",))
        )

    @pytest.mark.asyncio
    async def test_parent_looked_up_in_comments_own_field(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype)
        reviews_field = make_field(fieldtype, name="reviews")
        page = make_page(OTHER_PAGE, field_names=("comments", "reviews"))
        parent = comment_field.add_comment(OTHER_PAGE, make_comment(text="comment"))
        review = make_comment(parent_id=parent.id, field_name="reviews")

        decision = comment_field.check_comment_page(review, page)

        assert not decision.allowed
        assert "does not exist on page 2" in decision.reasons[0]

        review_parent = reviews_field.add_comment(OTHER_PAGE, make_comment())
        reply = make_comment(parent_id=review_parent.id, field_name="reviews")
        assert comment_field.allow_comment_page(reply, page)


class TestAllowDeleteComment:
    """Tests for the delete rule."""

    @pytest.mark.asyncio
    async def test_comment_without_children_may_be_deleted(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype)
        _, _, c = _seed_thread(comment_field)

        assert comment_field.allow_delete_comment(c)

    @pytest.mark.asyncio
    async def test_comment_with_live_child_may_not_be_deleted(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype)
        _, b, _ = _seed_thread(comment_field)

        assert not comment_field.allow_delete_comment(b)

    @pytest.mark.asyncio
    async def test_child_marked_deleted_allows_delete(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype)
        _, b, c = _seed_thread(comment_field)

        comment_field.update_comment(PAGE, c, {"status": CommentStatus.DELETE})

        assert comment_field.allow_delete_comment(b)

    @pytest.mark.asyncio
    async def test_pending_and_spam_children_still_block_delete(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype)
        _, b, c = _seed_thread(comment_field)

        comment_field.update_comment(PAGE, c, {"status": CommentStatus.SPAM})

        assert not comment_field.allow_delete_comment(b)

    @pytest.mark.asyncio
    async def test_draft_comment_may_be_deleted(self, unit_env):
        """A draft (id 0) has no children even though roots have parent 0."""
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype)
        _seed_thread(comment_field)

        assert comment_field.allow_delete_comment(make_comment(page_id=PAGE))

    @pytest.mark.asyncio
    async def test_comment_without_page_may_be_deleted(self, unit_env):
        fieldtype = await unit_env.get(CommentFieldtype)
        comment_field = make_field(fieldtype)

        assert comment_field.allow_delete_comment(make_comment(id=CommentId(3)))


class RecordingFieldtype(CommentFieldtype):
    """Fieldtype that records the calls it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def find(self, selector, field, options=None):
        self.calls.append(("find", selector, field, options))
        return []

    def count(self, selector, field):
        self.calls.append(("count", selector, field))
        return 42

    def get_comment_by_code(self, page_id, field, code):
        self.calls.append(("get_comment_by_code", page_id, field, code))
        return None

    def get_comment_by_id(self, page_id, field, comment_id):
        self.calls.append(("get_comment_by_id", page_id, field, comment_id))
        return None

    def page_comments(self, page_id, field):
        self.calls.append(("page_comments", page_id, field))
        return None

    def add_comment(self, page_id, field, comment):
        self.calls.append(("add_comment", page_id, field, comment))
        return comment

    def update_comment(self, page_id, field, comment, properties):
        self.calls.append(("update_comment", page_id, field, comment, properties))
        return True

    def delete_comment(self, page_id, field, comment, notes=""):
        self.calls.append(("delete_comment", page_id, field, comment, notes))
        return True

    def vote_comment(self, page_id, field, comment, up=True, voter=""):
        self.calls.append(("vote_comment", page_id, field, comment, up, voter))
        return False


class TestDelegation:
    """Storage calls pass straight through with the field's settings."""

    def test_calls_pass_through_unchanged(self):
        fieldtype = RecordingFieldtype()
        settings = CommentFieldSettings(name="comments", depth=3)
        comment_field = CommentField(settings=settings, fieldtype=fieldtype)
        comment = make_comment(id=CommentId(5), page_id=PAGE)

        assert comment_field.find("status>=1", {"limit": 2}) == []
        assert comment_field.count("status>=1") == 42
        assert comment_field.get_comment_by_code(PAGE, "abc") is None
        assert comment_field.get_comment_by_id(PAGE, CommentId(5)) is None
        assert comment_field.update_comment(PAGE, comment, {"text": "x"}) is True
        assert comment_field.delete_comment(PAGE, comment, "spam") is True
        assert comment_field.vote_comment(PAGE, comment, up=False, voter="1.2.3.4") is False

        assert fieldtype.calls == [
            ("find", "status>=1", settings, {"limit": 2}),
            ("count", "status>=1", settings),
            ("get_comment_by_code", PAGE, settings, "abc"),
            ("get_comment_by_id", PAGE, settings, 5),
            ("update_comment", PAGE, settings, comment, {"text": "x"}),
            ("delete_comment", PAGE, settings, comment, "spam"),
            ("vote_comment", PAGE, settings, comment, False, "1.2.3.4"),
        ]

    def test_field_is_identified_by_name(self):
        comment_field = CommentField(
            settings=CommentFieldSettings(name="feedback", depth=1),
            fieldtype=RecordingFieldtype(),
        )

        assert comment_field.name == "feedback"
        assert str(comment_field) == "feedback"
        assert comment_field.max_depth == 1
