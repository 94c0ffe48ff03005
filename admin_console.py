#!/usr/bin/env python3
"""
Command-line admin console for the Automytee content API.

Drives :class:`site_controllers.AdminController` from a terminal, which
is handy on a server without a browser.  The API location is taken
from ``--base-url`` or the ``AUTOMYTEE_BASE_URL`` environment variable.

Usage:
    python admin_console.py contacts
    python admin_console.py projects
    python admin_console.py set-status 65f0c2a1e4b0a1b2c3d4e5f6 replied
    python admin_console.py delete-contact 65f0c2a1e4b0a1b2c3d4e5f6 --yes
    python admin_console.py delete-project 65f0c2a1e4b0a1b2c3d4e5f6 --yes
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from automytee_client import AutomyteeAPI
from site_controllers import AdminController


def _print_contacts(controller: AdminController) -> None:
    for contact in controller.contacts:
        print(f"{contact['id']}  [{contact['status']:<7}]  {contact['fullName']} <{contact['email']}>")
    print(f"{len(controller.contacts)} contact(s)")


def _print_projects(controller: AdminController) -> None:
    for project in controller.projects:
        techs = ", ".join(project.get("technologies") or [])
        print(f"{project['id']}  [{project['status']:<11}]  {project['title']} ({project['category']}) {techs}")
    print(f"{len(controller.projects)} project(s)")


def _flush(controller: AdminController) -> bool:
    """Print pending notifications; return False if any was an error."""
    ok = True
    for note in controller.notifications:
        stream = sys.stderr if note.level == "error" else sys.stdout
        print(f"[{note.level}] {note.message}", file=stream)
        ok = ok and note.level != "error"
    controller.notifications.clear()
    return ok


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manage contact submissions and projects.")
    ap.add_argument("--base-url", default=os.getenv("AUTOMYTEE_BASE_URL", "http://localhost:8000"))
    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("contacts", help="List contact submissions")
    sub.add_parser("projects", help="List projects")
    status = sub.add_parser("set-status", help="Change a contact's status")
    status.add_argument("contact_id")
    status.add_argument("status", choices=["new", "read", "replied"])
    for name, label in (("delete-contact", "contact"), ("delete-project", "project")):
        p = sub.add_parser(name, help=f"Delete a {label}")
        p.add_argument("record_id")
        p.add_argument("--yes", action="store_true", help="Do not ask for confirmation")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(message)s")
    controller = AdminController(AutomyteeAPI(base_url=args.base_url))

    if args.command in {"delete-contact", "delete-project"} and not args.yes:
        answer = input(f"Are you sure you want to delete {args.record_id}? [y/N] ")
        if answer.strip().lower() not in {"y", "yes"}:
            print("Aborted.")
            return 1

    if args.command == "contacts":
        controller.refresh()
        if _flush(controller):
            _print_contacts(controller)
            return 0
        return 1
    if args.command == "projects":
        controller.refresh()
        if _flush(controller):
            _print_projects(controller)
            return 0
        return 1
    if args.command == "set-status":
        controller.update_contact_status(args.contact_id, args.status)
    elif args.command == "delete-contact":
        controller.delete_contact(args.record_id)
    elif args.command == "delete-project":
        controller.delete_project(args.record_id)
    return 0 if _flush(controller) else 1


if __name__ == "__main__":
    sys.exit(main())
