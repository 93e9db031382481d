"""Pydantic schemas for code samples."""
from pydantic import BaseModel, Field


class CodeSampleBase(BaseModel):
    title: str = Field(..., min_length=1)
    language: str = Field(..., min_length=1, max_length=50)
    code: str = Field(..., min_length=1)


class CodeSampleCreate(CodeSampleBase):
    pass


class CodeSampleUpdate(BaseModel):
    title: str | None = Field(None, min_length=1)
    language: str | None = Field(None, min_length=1, max_length=50)
    code: str | None = Field(None, min_length=1)


class CodeSampleResponse(CodeSampleBase):
    id: int

    model_config = {"from_attributes": True}
