# gallery/schemas.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class ImageEntry(BaseModel):
    name: str
    url: str
    size: int
    modified: datetime


class ImagePage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    images: list[ImageEntry]
    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")
    total_images: int = Field(alias="totalImages")


class ErrorBody(BaseModel):
    error: str
