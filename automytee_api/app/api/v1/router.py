"""
Top-level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
When new resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import contacts, health, projects

router = APIRouter()

router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(health.router, prefix="/health", tags=["health"])
