import logging
from threading import Lock

from post_server.model.post import Post

logger = logging.getLogger(__name__)


class PostNotFoundError(KeyError):
    def __init__(self, post_id: int):
        super().__init__(post_id)
        self.post_id = post_id

    def __str__(self):
        return f"Post {self.post_id} not found"


class PostStore:
    """
    In-memory collection of posts keyed by id.

    Every operation holds the same lock for its whole duration, so ids are
    handed out strictly in sequence even when requests run on several
    worker threads. Ids are never reused after a delete.
    """

    def __init__(self):
        self._records: dict[int, Post] = {}
        self._next_id = 1
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def get_all_posts(self) -> list[Post]:
        with self._lock:
            return list(self._records.values())

    def create_post(self, body: str) -> Post:
        with self._lock:
            post = Post(id=self._next_id, body=body)
            self._records[post.id] = post
            self._next_id += 1
        logger.debug(f"Stored post {post.id}")
        return post

    def get_post(self, post_id: int) -> Post:
        with self._lock:
            try:
                return self._records[post_id]
            except KeyError:
                raise PostNotFoundError(post_id) from None

    def delete_post(self, post_id: int) -> None:
        with self._lock:
            if post_id not in self._records:
                raise PostNotFoundError(post_id)
            del self._records[post_id]
