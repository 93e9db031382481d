"""Pydantic schemas for portfolio apps."""
from pydantic import BaseModel, Field


class PortfolioAppBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    icon_url: str
    screenshot_urls: list[str] = Field(default_factory=list)
    featured: bool = False
    play_store_url: str | None = None
    github_url: str | None = None
    rating: str | None = Field(None, max_length=20)
    downloads: str | None = Field(None, max_length=40)


class PortfolioAppCreate(PortfolioAppBase):
    pass


class PortfolioAppUpdate(BaseModel):
    title: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    category: str | None = Field(None, min_length=1, max_length=100)
    icon_url: str | None = None
    screenshot_urls: list[str] | None = None
    featured: bool | None = None
    play_store_url: str | None = None
    github_url: str | None = None
    rating: str | None = Field(None, max_length=20)
    downloads: str | None = Field(None, max_length=40)


class PortfolioAppResponse(PortfolioAppBase):
    id: int

    model_config = {"from_attributes": True}
