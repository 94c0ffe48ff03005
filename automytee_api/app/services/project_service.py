"""
Service layer for showcase projects.

Projects are authored in the admin panel.  The public listing only
shows the most recent entries; the cap is applied by the endpoint so
that administrators can still ask the service for everything.
"""

from ..core.db import PROJECTS_COLLECTION
from ..schemas.project import ProjectRead
from .resource_service import ResourceService
from .validation import PROJECT_RULES


class ProjectService(ResourceService):
    """Service class for managing projects."""

    resource_name = "Project"
    collection_name = PROJECTS_COLLECTION
    rules = PROJECT_RULES
    read_schema = ProjectRead
