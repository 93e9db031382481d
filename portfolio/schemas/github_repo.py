"""Pydantic schemas for GitHub repositories."""
from pydantic import BaseModel, Field


class GithubRepoBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str
    stars: int = Field(0, ge=0)
    forks: int = Field(0, ge=0)
    url: str = Field(..., min_length=1)
    tags: list[str] = Field(default_factory=list)


class GithubRepoCreate(GithubRepoBase):
    pass


class GithubRepoUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    stars: int | None = Field(None, ge=0)
    forks: int | None = Field(None, ge=0)
    url: str | None = Field(None, min_length=1)
    tags: list[str] | None = None


class GithubRepoResponse(GithubRepoBase):
    id: int

    model_config = {"from_attributes": True}
