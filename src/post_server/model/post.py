from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    body: str


class NewPost(BaseModel):
    body: str = ""

    @model_validator(mode="before")
    @classmethod
    def fold_body_key(cls, data):
        # a JSON null payload decodes to an empty post; "body" is matched
        # case-insensitively and the last matching key wins
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        folded = {}
        for key, value in data.items():
            if isinstance(key, str) and key.lower() == "body":
                folded["body"] = value
        return folded

    @field_validator("body", mode="before")
    @classmethod
    def null_body_is_empty(cls, value):
        return "" if value is None else value
