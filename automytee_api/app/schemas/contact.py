"""
Pydantic schemas for contact submissions.

Submissions arrive from the public contact form and are triaged by
administrators, who move them between the ``new``, ``read`` and
``replied`` states in any order.  Field names on the wire are
camelCase; the Python attributes are snake_case aliases.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

CONTACT_STATUSES = ("new", "read", "replied")

ContactStatus = Literal["new", "read", "replied"]


class ContactRead(BaseModel):
    """Schema for reading a contact submission."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    full_name: str = Field(..., alias="fullName", examples=["Ada Lovelace"])
    company_name: Optional[str] = Field(None, alias="companyName")
    email: str = Field(..., examples=["ada@example.com"])
    project_type: Optional[str] = Field(None, alias="projectType")
    message: str
    status: ContactStatus = "new"
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")
