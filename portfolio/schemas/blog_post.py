"""Pydantic schemas for BlogPost."""
from pydantic import BaseModel, Field

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class BlogPostBase(BaseModel):
    title: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN)
    excerpt: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    cover_image_url: str
    published_at: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1, max_length=100)
    is_featured: bool = False
    tags: list[str] = Field(default_factory=list)


class BlogPostCreate(BlogPostBase):
    pass


class BlogPostUpdate(BaseModel):
    title: str | None = Field(None, min_length=1)
    slug: str | None = Field(None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    excerpt: str | None = Field(None, min_length=1)
    content: str | None = Field(None, min_length=1)
    cover_image_url: str | None = None
    published_at: str | None = Field(None, min_length=1)
    author: str | None = Field(None, min_length=1, max_length=100)
    is_featured: bool | None = None
    tags: list[str] | None = None


class BlogPostResponse(BlogPostBase):
    id: int

    model_config = {"from_attributes": True}
