"""In-memory comment storage queried by cursor."""

import logging
import threading
from typing import Iterable, List, Optional

from ..models.comments import Comment
from ..pagination import Cursor, Direction

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = ("created_at", "updated_at", "id")


class InMemoryCommentStore:
    """
    Thread-safe in-memory list of comments.

    ``fetch`` plays the part of the SQL query a real caller would issue::

        SELECT * FROM comments
        WHERE  <order> >= :value          -- <= for descending
        ORDER BY <order> <direction>, id <direction>
        LIMIT  :offset, :limit

    Ordering values are compared as integers here; the pagination package
    itself only ever compares them for string equality.
    """

    def __init__(self, comments: Optional[Iterable[Comment]] = None):
        self._comments: List[Comment] = list(comments or [])
        self._lock = threading.RLock()

    def add(self, comment: Comment) -> None:
        with self._lock:
            self._comments.append(comment)

    def clear(self) -> None:
        with self._lock:
            self._comments.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._comments)

    async def fetch(self, cursor: Cursor, limit: int) -> List[Comment]:
        """
        Fetch up to limit comments starting at the cursor position.

        Args:
            cursor: Position to start from
            limit: Maximum rows to return, usually cursor.count + 1

        Returns:
            Comments in cursor order

        Raises:
            ValueError: If the order key is not sortable or value is not an integer
        """
        if cursor.order not in SORTABLE_FIELDS:
            raise ValueError(f"Cannot order comments by {cursor.order!r}, use one of {list(SORTABLE_FIELDS)}")

        order = cursor.order
        descending = cursor.direction is Direction.DESC

        with self._lock:
            rows = sorted(
                self._comments,
                key=lambda c: (getattr(c, order), c.id),
                reverse=descending
            )

        if cursor.value:
            try:
                bound = int(cursor.value)
            except ValueError:
                raise ValueError(f"Cursor value {cursor.value!r} is not valid for {order}")
            if descending:
                rows = [c for c in rows if getattr(c, order) <= bound]
            else:
                rows = [c for c in rows if getattr(c, order) >= bound]

        page = rows[cursor.offset:cursor.offset + limit]
        logger.debug(f"Fetched {len(page)} comments ordered by {order} {cursor.direction.sql} from value={cursor.value!r}")
        return page


def sample_comments() -> List[Comment]:
    """Comments with tied timestamps, used to seed the service."""
    return [
        Comment(id=1, text="a", created_at=0, updated_at=4),
        Comment(id=2, text="b", created_at=1, updated_at=4),
        Comment(id=3, text="c", created_at=2, updated_at=5),
        Comment(id=4, text="d", created_at=3, updated_at=5),
        Comment(id=5, text="e", created_at=3, updated_at=5),
    ]


# Global store instance
comment_store = InMemoryCommentStore(sample_comments())


def get_comment_store() -> InMemoryCommentStore:
    """Get the comment store."""
    return comment_store
