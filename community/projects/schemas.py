"""
Open source project schemas.
"""

from ninja import Schema
from pydantic import Field
from pydantic import field_validator

URI_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_.-]*$"


class ProjectPublishSchema(Schema):
    """Fields accepted by the new / modify project form."""

    id: int | None = None
    name: str = Field(min_length=1, max_length=127)
    uri: str = Field(min_length=1, max_length=127, pattern=URI_PATTERN)
    category: str = Field(default="", max_length=127)
    home: str = Field(default="", max_length=255)
    doc: str = Field(default="", max_length=255)
    download: str = Field(default="", max_length=255)
    src: str = Field(default="", max_length=255)
    logo: str = Field(default="", max_length=255)
    desc: str = ""
    repo: str = Field(default="", max_length=255)
    author: str = Field(default="", max_length=127)
    licence: str = Field(default="", max_length=127)
    lang: str = Field(default="", max_length=127)
    os: str = Field(default="", max_length=127)
    tags: str = Field(default="", max_length=127)

    @field_validator("id", mode="before")
    @classmethod
    def blank_id_is_none(cls, value):
        if value in ("", "0", 0):
            return None
        return value

    @field_validator("name", "uri", "author", "licence", "lang", "os", "tags", "category", mode="before")
    @classmethod
    def strip(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("home", "doc", "download", "src", "logo", "repo", mode="before")
    @classmethod
    def links_must_be_http(cls, value):
        """Links that are not absolute http(s) URLs are dropped."""
        if not isinstance(value, str):
            return value
        value = value.strip()
        if value and not value.startswith("http"):
            return ""
        return value

    def model_fields_for_save(self) -> dict:
        return self.model_dump(exclude={"id"})
