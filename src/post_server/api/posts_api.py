import logging
import re

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from post_server.db.post_db import PostStore
from post_server.model.post import NewPost, Post

logger = logging.getLogger(__name__)

router = APIRouter()

_POST_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_MIN_POST_ID = -(2**63)
_MAX_POST_ID = 2**63 - 1


def get_post_store(request: Request) -> PostStore:
    return request.app.state.post_store


def parse_post_id(post_id: str) -> int:
    if _POST_ID_PATTERN.fullmatch(post_id):
        value = int(post_id)
        if _MIN_POST_ID <= value <= _MAX_POST_ID:
            return value
    logger.warning(f"Rejected post id: {post_id!r}")
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid post ID")


@router.get("/posts")
def get_posts(store: PostStore = Depends(get_post_store)) -> list[Post]:
    posts = store.get_all_posts()
    logger.info(f"Returning {len(posts)} posts")
    return posts


@router.post("/posts", status_code=status.HTTP_201_CREATED)
async def create_post(
    request: Request,
    store: PostStore = Depends(get_post_store),
) -> Post:
    try:
        payload = await request.body()
    except ClientDisconnect:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Error reading request body")

    try:
        # invalid UTF-8 inside strings becomes U+FFFD rather than a parse error
        new_post = NewPost.model_validate_json(payload.decode("utf-8", errors="replace"))
    except ValidationError as e:
        logger.warning(f"Rejected post payload: {e.error_count()} error(s)")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Error parsing request body")

    post = store.create_post(new_post.body)
    logger.info(f"Created post {post.id}")
    return post


# The item routes take the whole remainder of the path so that "/posts/" and
# "/posts/1/2" are answered with 400 instead of a redirect or 404.
@router.get("/posts/{post_id:path}")
def get_post(
    post_id: int = Depends(parse_post_id),
    store: PostStore = Depends(get_post_store),
) -> Post:
    try:
        return store.get_post(post_id)
    except KeyError:
        logger.warning(f"Post {post_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


@router.delete("/posts/{post_id:path}")
def delete_post(
    post_id: int = Depends(parse_post_id),
    store: PostStore = Depends(get_post_store),
):
    try:
        store.delete_post(post_id)
    except KeyError:
        logger.warning(f"Post {post_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    logger.info(f"Deleted post {post_id}")
    return Response(status_code=status.HTTP_200_OK)
