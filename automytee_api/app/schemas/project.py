"""
Pydantic schemas for showcase projects.

Projects are authored in the admin panel and listed on the public
site.  ``technologies`` keeps insertion order, which is also the
display order.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

PROJECT_STATUSES = ("active", "in-progress", "completed")

ProjectStatus = Literal["active", "in-progress", "completed"]


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str = Field(..., examples=["Warehouse sorting line"])
    description: str
    category: str = Field(..., examples=["Industrial automation"])
    image: Optional[str] = Field(None, description="Data URI or URL of the cover image")
    technologies: List[str] = Field(default_factory=list)
    link: Optional[str] = None
    status: ProjectStatus = "active"
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")
