import pytest
from pydantic import ValidationError

from post_server.model.post import NewPost, Post


def test_post_json_round_trip():
    post = Post(id=7, body="round trip")
    assert Post.model_validate_json(post.model_dump_json()) == post


def test_post_json_shape():
    assert Post(id=1, body="hello").model_dump() == {"id": 1, "body": "hello"}


def test_post_is_immutable():
    post = Post(id=1, body="fixed")
    with pytest.raises(ValidationError):
        post.body = "changed"


def test_new_post_defaults_to_empty_body():
    assert NewPost.model_validate_json("{}").body == ""


def test_new_post_ignores_client_id():
    new_post = NewPost.model_validate_json('{"id": 99, "body": "x"}')
    assert new_post.model_dump() == {"body": "x"}


@pytest.mark.parametrize("payload", ['{"body": 5}', "[]", "not json", ""])
def test_new_post_rejects_bad_payload(payload):
    with pytest.raises(ValidationError):
        NewPost.model_validate_json(payload)


@pytest.mark.parametrize(
    "payload, expected_body",
    [
        ('{"body": null}', ""),
        ("null", ""),
        ('{"BODY": "shout"}', "shout"),
        ('{"bOdY": "a", "Body": "b"}', "b"),
    ],
)
def test_new_post_accepts_null_and_folded_keys(payload, expected_body):
    assert NewPost.model_validate_json(payload).body == expected_body
