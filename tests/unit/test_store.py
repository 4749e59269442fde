"""Tests for the in-memory comment store."""

import pytest

from cursorpage.models.comments import Comment
from cursorpage.pagination import Cursor, Direction, next_cursor, prev_cursor
from cursorpage.store import InMemoryCommentStore


def ids(comments):
    return [c.id for c in comments]


class TestFetch:
    """Test fetching comments by cursor."""

    @pytest.mark.asyncio
    async def test_ascending_from_start(self, store: InMemoryCommentStore):
        cursor = Cursor(count=2, order="created_at", direction=Direction.ASC)

        assert ids(await store.fetch(cursor, 3)) == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_descending_from_start(self, store: InMemoryCommentStore):
        cursor = Cursor(count=2, order="created_at", direction=Direction.DESC)

        assert ids(await store.fetch(cursor, 3)) == [5, 4, 3]

    @pytest.mark.asyncio
    async def test_value_and_offset(self, store: InMemoryCommentStore):
        cursor = Cursor(value="3", offset=1, count=2, order="created_at", direction=Direction.ASC)

        assert ids(await store.fetch(cursor, 3)) == [5]

    @pytest.mark.asyncio
    async def test_descending_value_is_upper_bound(self, store: InMemoryCommentStore):
        cursor = Cursor(value="2", count=2, order="created_at", direction=Direction.DESC)

        assert ids(await store.fetch(cursor, 3)) == [3, 2, 1]

    @pytest.mark.asyncio
    async def test_numeric_not_lexical_ordering(self):
        store = InMemoryCommentStore([
            Comment(id=1, text="a", created_at=10, updated_at=0),
            Comment(id=2, text="b", created_at=9, updated_at=0),
        ])
        cursor = Cursor(value="9", count=5, order="created_at")

        assert ids(await store.fetch(cursor, 6)) == [2, 1]

    @pytest.mark.asyncio
    async def test_unknown_order(self, store: InMemoryCommentStore):
        with pytest.raises(ValueError, match="Cannot order comments"):
            await store.fetch(Cursor(order="text"), 3)

    @pytest.mark.asyncio
    async def test_non_integer_value(self, store: InMemoryCommentStore):
        with pytest.raises(ValueError, match="not valid"):
            await store.fetch(Cursor(value="abc", order="id"), 3)

    def test_add_and_clear(self):
        store = InMemoryCommentStore()
        store.add(Comment(id=1, text="a", created_at=0, updated_at=0))

        assert len(store) == 1
        store.clear()
        assert len(store) == 0


class TestWalk:
    """Page through the store with the cursor functions."""

    async def walk(self, store, cursor, advance):
        pages = []
        while cursor is not None:
            items = await store.fetch(cursor, cursor.count + 1)
            pages.append(ids(items[:cursor.count]))
            cursor = advance(cursor, items)
        return pages

    @pytest.mark.asyncio
    async def test_forward_ascending_with_ties(self, store: InMemoryCommentStore):
        cursor = Cursor(count=2, order="created_at", direction=Direction.ASC)
        pages = await self.walk(store, cursor, next_cursor)

        assert pages == [[1, 2], [3, 4], [5]]

    @pytest.mark.asyncio
    async def test_forward_descending_with_ties(self, store: InMemoryCommentStore):
        cursor = Cursor(count=2, order="updated_at", direction=Direction.DESC)
        pages = await self.walk(store, cursor, next_cursor)

        assert pages == [[5, 4], [3, 2], [1]]

    @pytest.mark.asyncio
    async def test_long_tie_run_is_not_skipped_or_repeated(self):
        store = InMemoryCommentStore([
            Comment(id=i, text=str(i), created_at=100 if 2 <= i <= 8 else i, updated_at=0)
            for i in range(1, 11)
        ])
        cursor = Cursor(count=2, order="created_at", direction=Direction.ASC)
        pages = await self.walk(store, cursor, next_cursor)
        seen = [i for page in pages for i in page]

        assert sorted(seen) == list(range(1, 11))
        assert len(seen) == len(set(seen))

    @pytest.mark.asyncio
    async def test_prev_goes_back_from_page_start(self, store: InMemoryCommentStore):
        first = Cursor(count=2, order="created_at", direction=Direction.ASC)
        items = await store.fetch(first, 3)
        second = next_cursor(first, items)
        page_two = await store.fetch(second, 3)

        back = prev_cursor(second, page_two)

        assert back.direction is Direction.DESC
        assert back.value == "2"
        assert back.offset == 1
