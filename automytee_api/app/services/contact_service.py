"""
Service layer for contact submissions.

Submissions are created by the public contact form and afterwards
only touched by administrators, typically to move ``status`` between
``new``, ``read`` and ``replied``.
"""

from ..core.db import CONTACTS_COLLECTION
from ..schemas.contact import ContactRead
from .resource_service import ResourceService
from .validation import CONTACT_RULES


class ContactService(ResourceService):
    """Service class for managing contact submissions."""

    resource_name = "Contact"
    collection_name = CONTACTS_COLLECTION
    rules = CONTACT_RULES
    read_schema = ContactRead
