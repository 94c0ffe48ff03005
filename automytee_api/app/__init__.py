"""
Application package initializer.

The API is organised by layer: ``core`` holds configuration, logging,
errors and the document store; ``schemas`` the response models;
``services`` the validation and CRUD logic; ``api`` the versioned
routers.  Each resource (contacts, projects) has a module in every
layer.
"""

from .main import app  # noqa: F401
