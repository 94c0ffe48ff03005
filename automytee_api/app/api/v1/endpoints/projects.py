"""
Project endpoints for API v1.

The public site reads ``GET /projects``; authoring routes are used by
the admin panel.  The listing is capped at
``settings.projects_list_limit`` records and marked as never cached so
visitors do not see a stale showcase.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Response, status

from automytee_api.app.core.config import settings
from automytee_api.app.schemas.common import Envelope
from automytee_api.app.schemas.project import ProjectRead
from automytee_api.app.services.project_service import ProjectService

router = APIRouter()


@router.get("", response_model=Envelope[List[ProjectRead]])
async def list_projects(response: Response) -> Dict[str, Any]:
    """Return the most recent projects, newest first."""
    response.headers["Cache-Control"] = "no-store, max-age=0"
    projects = await ProjectService.list_records(limit=settings.projects_list_limit or None)
    return {"success": True, "data": projects}


@router.post("", response_model=Envelope[ProjectRead], status_code=status.HTTP_201_CREATED)
async def create_project(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    project = await ProjectService.create(payload)
    return {"success": True, "data": project}


@router.get("/{project_id}", response_model=Envelope[ProjectRead])
async def get_project(project_id: str) -> Dict[str, Any]:
    project = await ProjectService.get_by_id(project_id)
    return {"success": True, "data": project}


@router.put("/{project_id}", response_model=Envelope[ProjectRead])
async def update_project(project_id: str, payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Update a project.

    Fields missing from the body keep their stored values; the merged
    record must still satisfy the create rules.
    """
    project = await ProjectService.update(project_id, payload)
    return {"success": True, "data": project}


@router.delete("/{project_id}", response_model=Envelope[Dict[str, Any]])
async def delete_project(project_id: str) -> Dict[str, Any]:
    data = await ProjectService.delete(project_id)
    return {"success": True, "data": data}
