"""
Contact submission endpoints for API v1.

``POST /contacts`` is called by the public contact form; the
remaining routes back the admin panel.  Handlers only delegate to
``ContactService`` and wrap its result in the response envelope.
Errors raised by the service are rendered by the exception handlers
registered in ``main.py``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, status

from automytee_api.app.schemas.common import Envelope
from automytee_api.app.schemas.contact import ContactRead
from automytee_api.app.services.contact_service import ContactService

router = APIRouter()


@router.get("", response_model=Envelope[List[ContactRead]])
async def list_contacts() -> Dict[str, Any]:
    """Return every contact submission, newest first."""
    contacts = await ContactService.list_records()
    return {"success": True, "data": contacts}


@router.post("", response_model=Envelope[ContactRead], status_code=status.HTTP_201_CREATED)
async def create_contact(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Store a submission from the public contact form and echo it back."""
    contact = await ContactService.create(payload)
    return {"success": True, "data": contact}


@router.get("/{contact_id}", response_model=Envelope[ContactRead])
async def get_contact(contact_id: str) -> Dict[str, Any]:
    contact = await ContactService.get_by_id(contact_id)
    return {"success": True, "data": contact}


@router.put("/{contact_id}", response_model=Envelope[ContactRead])
async def update_contact(contact_id: str, payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Update a submission, most often its ``status``."""
    contact = await ContactService.update(contact_id, payload)
    return {"success": True, "data": contact}


@router.delete("/{contact_id}", response_model=Envelope[Dict[str, Any]])
async def delete_contact(contact_id: str) -> Dict[str, Any]:
    data = await ContactService.delete(contact_id)
    return {"success": True, "data": data}
