"""Client-side controllers for the admin panel and the contact form.

The controllers hold the state a browser page would hold: the lists
of contacts and projects, the project authoring form and a queue of
notifications to show the user.  They talk to the server only through
:class:`automytee_client.AutomyteeAPI`.

After every successful mutation (create, update, delete, status
change) the admin controller re-requests the full lists instead of
patching its cached copies.  That costs a round trip but the
displayed state can never drift from what is stored.

Project authoring follows a small state machine::

    idle -> composing -> submitting -> idle        (success)
                         submitting -> composing   (failure, form kept)

``editing_id`` tells an update apart from a create; it does not change
the shape of the state machine.
"""

from __future__ import annotations

import base64
import enum
import logging
import mimetypes
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from automytee_client import AutomyteeAPI


logger = logging.getLogger(__name__)

MAX_IMAGE_BYTES = 2 * 1024 * 1024


class FormPhase(str, enum.Enum):
    IDLE = "idle"
    COMPOSING = "composing"
    SUBMITTING = "submitting"


@dataclass
class Notification:
    """A transient message for the user (a toast in the browser)."""

    level: str
    message: str


def parse_technologies(raw: str) -> List[str]:
    """Split the comma-separated technologies input, keeping order."""
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class ProjectForm:
    """Values of the project authoring form.

    ``technologies`` is kept as the raw comma-separated text the user
    typed; it is split only when the form is submitted.
    """

    title: str = ""
    description: str = ""
    category: str = ""
    image: str = ""
    technologies: str = ""
    link: str = ""
    status: str = "active"

    @classmethod
    def from_project(cls, project: Dict[str, Any]) -> "ProjectForm":
        return cls(
            title=project.get("title") or "",
            description=project.get("description") or "",
            category=project.get("category") or "",
            image=project.get("image") or "",
            technologies=", ".join(project.get("technologies") or []),
            link=project.get("link") or "",
            status=project.get("status") or "active",
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "image": self.image,
            "technologies": parse_technologies(self.technologies),
            "link": self.link,
            "status": self.status,
        }


def encode_image(path: str | Path) -> str:
    """Read an image file and return it as a ``data:`` URI.

    Raises ``ValueError`` when the file is larger than 2 MB.
    """
    path = Path(path)
    raw = path.read_bytes()
    if len(raw) > MAX_IMAGE_BYTES:
        raise ValueError("Image size should be less than 2MB")
    mime = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    return f"data:{mime};base64,{base64.b64encode(raw).decode('ascii')}"


class AdminController:
    """State holder for the admin panel."""

    def __init__(self, api: AutomyteeAPI) -> None:
        self.api = api
        self.contacts: List[Dict[str, Any]] = []
        self.projects: List[Dict[str, Any]] = []
        self.loading = False
        self.form = ProjectForm()
        self.editing_id: Optional[str] = None
        self.phase = FormPhase.IDLE
        self.notifications: List[Notification] = []

    def _notify(self, level: str, message: str) -> None:
        logger.log(logging.ERROR if level == "error" else logging.INFO, message)
        self.notifications.append(Notification(level, message))

    def _fail(self, prefix: str, error: Dict[str, Any]) -> bool:
        self._notify("error", f"{prefix}: {error.get('message')}")
        return False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def refresh(self) -> bool:
        """Re-fetch both lists from the server.

        On failure the previously loaded lists are left as they were.
        """
        self.loading = True
        try:
            contacts, error = self.api.list_contacts()
            if error:
                return self._fail("Failed to load data", error)
            projects, error = self.api.list_projects()
            if error:
                return self._fail("Failed to load data", error)
            self.contacts = contacts
            self.projects = projects
            return True
        finally:
            self.loading = False

    # ------------------------------------------------------------------
    # Contacts
    # ------------------------------------------------------------------
    def update_contact_status(self, contact_id: str, status: str) -> bool:
        _, error = self.api.set_contact_status(contact_id, status)
        if error:
            return self._fail("Failed to update status", error)
        self._notify("success", "Status updated")
        self.refresh()
        return True

    def delete_contact(self, contact_id: str) -> bool:
        _, error = self.api.delete_contact(contact_id)
        if error:
            return self._fail("Failed to delete contact", error)
        self._notify("success", "Contact deleted")
        self.refresh()
        return True

    # ------------------------------------------------------------------
    # Project authoring
    # ------------------------------------------------------------------
    def open_form(self) -> None:
        """Start composing a new project."""
        self.form = ProjectForm()
        self.editing_id = None
        self.phase = FormPhase.COMPOSING

    def start_edit(self, project: Dict[str, Any]) -> None:
        """Load an existing project into the form for editing."""
        self.form = ProjectForm.from_project(project)
        self.editing_id = project["id"]
        self.phase = FormPhase.COMPOSING

    def reset_form(self) -> None:
        self.form = ProjectForm()
        self.editing_id = None
        self.phase = FormPhase.IDLE

    def attach_image(self, path: str | Path) -> bool:
        if self.phase is not FormPhase.COMPOSING:
            raise RuntimeError("No project form is open")
        try:
            self.form.image = encode_image(path)
        except (OSError, ValueError) as exc:
            self._notify("error", str(exc))
            return False
        return True

    def submit_project(self) -> bool:
        """Send the form as a create or an update.

        On success the form is cleared and the lists are re-fetched.
        On failure the form keeps its values so the user can fix them
        and submit again.
        """
        if self.phase is not FormPhase.COMPOSING:
            raise RuntimeError("No project form is open")
        self.phase = FormPhase.SUBMITTING
        payload = self.form.to_payload()
        if self.editing_id:
            _, error = self.api.update_project(self.editing_id, payload)
            verb = "update"
        else:
            _, error = self.api.create_project(payload)
            verb = "add"
        if error:
            self.phase = FormPhase.COMPOSING
            return self._fail(f"Failed to {verb} project", error)

        self._notify("success", "Project updated successfully" if self.editing_id else "Project added successfully")
        self.reset_form()
        self.refresh()
        return True

    def delete_project(self, project_id: str) -> bool:
        _, error = self.api.delete_project(project_id)
        if error:
            return self._fail("Failed to delete project", error)
        self._notify("success", "Project deleted")
        self.refresh()
        return True


class ContactFormController:
    """State holder for the public contact form."""

    FIELDS = ("fullName", "companyName", "email", "projectType", "message")

    def __init__(self, api: AutomyteeAPI) -> None:
        self.api = api
        self.form: Dict[str, str] = {name: "" for name in self.FIELDS}
        self.is_submitting = False
        self.notifications: List[Notification] = []

    def submit(self) -> bool:
        """Send the form; clear it on success, keep it on failure."""
        self.is_submitting = True
        try:
            _, error = self.api.create_contact(dict(self.form))
        finally:
            self.is_submitting = False
        if error:
            if error.get("status_code") is None:
                message = "An error occurred. Please try again later."
            else:
                message = "Failed to send message. Please try again."
            self.notifications.append(Notification("error", message))
            return False
        self.notifications.append(
            Notification("success", "Message sent successfully! We'll get back to you soon.")
        )
        self.form = {name: "" for name in self.FIELDS}
        return True
