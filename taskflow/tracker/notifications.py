# -*- coding: utf-8 -*-
"""Notification events raised by project/ticket/comment activity."""
from __future__ import annotations

from common.notify import NotificationEvent


def ticket_assigned(assignee, ticket, actor) -> NotificationEvent:
    project = ticket.project
    text = (
        f"Hello {assignee.name},\n\n"
        f"{actor.name} assigned you a ticket in {project.title}:\n\n"
        f"    {ticket.display_key}: {ticket.title}\n"
        f"    Priority: {ticket.priority}\n"
    )
    return NotificationEvent(
        kind="ticket_assigned",
        to_email=assignee.email,
        subject=f"Ticket Assigned: {ticket.title}",
        text=text,
        context={"ticket_id": ticket.pk, "project_id": project.pk},
    )


def ticket_status_changed(recipient, ticket, old_status: str, new_status: str, actor) -> NotificationEvent:
    text = (
        f"Hello {recipient.name},\n\n"
        f"{actor.name} moved {ticket.display_key} \"{ticket.title}\" "
        f"in {ticket.project.title}.\n\n"
        f"Status changed: {old_status} -> {new_status}\n"
    )
    return NotificationEvent(
        kind="ticket_status_changed",
        to_email=recipient.email,
        subject=f"Ticket Status Updated: {ticket.title}",
        text=text,
        context={"ticket_id": ticket.pk, "old_status": old_status, "new_status": new_status},
    )


def new_comment(recipient, comment, actor) -> NotificationEvent:
    ticket = comment.ticket
    text = (
        f"Hello {recipient.name},\n\n"
        f"{actor.name} commented on {ticket.display_key} \"{ticket.title}\" "
        f"in {ticket.project.title}:\n\n"
        f"{comment.text}\n"
    )
    return NotificationEvent(
        kind="new_comment",
        to_email=recipient.email,
        subject=f"New Comment on: {ticket.title}",
        text=text,
        context={"ticket_id": ticket.pk, "comment_id": comment.pk},
    )


def added_to_project(member, project, actor) -> NotificationEvent:
    text = f"Hello {member.name},\n\n{actor.name} added you to the project {project.title}.\n"
    if project.description:
        text += f"\n{project.description}\n"
    return NotificationEvent(
        kind="added_to_project",
        to_email=member.email,
        subject=f"Added to Project: {project.title}",
        text=text,
        context={"project_id": project.pk},
    )
