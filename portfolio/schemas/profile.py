"""Pydantic schemas for the developer profile."""
from datetime import date

from pydantic import BaseModel, EmailStr, Field


class Experience(BaseModel):
    company: str
    position: str
    start_date: date
    end_date: date | None = None
    description: str = ""


class Education(BaseModel):
    school: str
    degree: str
    field: str
    graduation_date: date


class SocialLink(BaseModel):
    platform: str
    url: str


class ProfileBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=1, max_length=200)
    bio: str
    email: EmailStr
    phone: str | None = None
    location: str | None = None
    avatar_url: str | None = None
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    social_links: list[SocialLink] = Field(default_factory=list)


class ProfileUpdate(ProfileBase):
    pass


class ProfileResponse(ProfileBase):
    id: int

    model_config = {"from_attributes": True}
