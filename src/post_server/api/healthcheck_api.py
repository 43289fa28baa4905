import logging

from fastapi import APIRouter, Depends, status

from post_server.api.posts_api import get_post_store
from post_server.db.post_db import PostStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/healthcheck", status_code=status.HTTP_200_OK)
def healthcheck(store: PostStore = Depends(get_post_store)):
    post_count = len(store)
    logger.debug(f"healthcheck, {post_count} posts in memory")
    return {"healthcheck": "Everything is OK!", "posts": post_count}
