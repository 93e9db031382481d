"""Pydantic schemas for upload responses."""
from pydantic import BaseModel


class UploadedFile(BaseModel):
    url: str
    original_name: str
    size: int
    mimetype: str


class UploadedFiles(BaseModel):
    files: list[UploadedFile]
