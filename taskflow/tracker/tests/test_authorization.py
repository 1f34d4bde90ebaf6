import pytest

from tracker.models import Comment, Project, Ticket
from tracker.services import authorization
from tracker.services.membership import expand_membership, unassign_removed_members


@pytest.mark.django_db
def test_owner_is_member_without_being_in_team(alice, bob):
    p = Project.objects.create(title="Solo", key="SOLO", owner=alice)
    p.team_members.add(bob)

    assert not p.team_members.filter(pk=alice.pk).exists()
    assert authorization.is_member(p, alice)
    assert authorization.is_owner(p, alice)
    assert authorization.is_member(p, bob)
    assert not authorization.is_owner(p, bob)


@pytest.mark.django_db
def test_outsider_is_neither(project, dave):
    assert not authorization.is_member(project, dave)
    assert not authorization.is_owner(project, dave)
    assert not authorization.is_member(project, None)


@pytest.mark.django_db
def test_ticket_delete_and_comment_authorship(project, alice, bob, carol):
    project.team_members.add(bob, carol)
    ticket = Ticket.objects.create(project=project, ticket_number=1, title="T", creator=bob)
    comment = Comment.objects.create(ticket=ticket, user=carol, text="hi")

    assert authorization.can_delete_ticket(ticket, alice)
    assert authorization.can_delete_ticket(ticket, bob)
    assert not authorization.can_delete_ticket(ticket, carol)

    assert authorization.is_comment_author(comment, carol)
    assert not authorization.is_comment_author(comment, alice)


@pytest.mark.django_db
def test_expand_membership_is_idempotent(project, carol):
    assert expand_membership(project, carol) is True
    assert expand_membership(project, carol) is False
    assert expand_membership(project, None) is False
    assert project.team_members.filter(pk=carol.pk).count() == 1


@pytest.mark.django_db
def test_unassign_only_touches_this_project(project, alice, carol):
    other = Project.objects.create(title="Other", key="OTH", owner=alice)
    here = Ticket.objects.create(project=project, ticket_number=1, title="here", creator=alice, assignee=carol)
    there = Ticket.objects.create(project=other, ticket_number=1, title="there", creator=alice, assignee=carol)

    assert unassign_removed_members(project, [carol.pk]) == 1

    here.refresh_from_db()
    there.refresh_from_db()
    assert here.assignee is None
    assert there.assignee == carol
