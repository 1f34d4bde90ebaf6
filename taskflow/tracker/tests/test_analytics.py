import pytest

from tracker.models import Comment, Project, Ticket


@pytest.mark.django_db
def test_dashboard(client_for, alice, bob, project):
    Project.objects.create(title="Old", key="OLD", owner=alice, status="archived")
    Project.objects.create(title="Bob's", key="BOB", owner=bob)
    t1 = Ticket.objects.create(project=project, ticket_number=1, title="a", creator=alice, assignee=alice, priority="high")
    Ticket.objects.create(project=project, ticket_number=2, title="b", creator=bob, status="done")
    Comment.objects.create(ticket=t1, user=bob, text="hello")

    data = client_for(alice).get("/api/analytics/dashboard/").json()

    assert data["projects"] == {"total": 2, "active": 1, "archived": 1, "completed": 0}
    assert data["tickets"]["total"] == 2
    assert data["tickets"]["my_assigned"] == 1
    assert data["tickets"]["my_created"] == 1
    assert data["tickets"]["by_status"] == {"todo": 1, "in-progress": 0, "done": 1}
    assert data["tickets"]["by_priority"] == {"low": 0, "medium": 1, "high": 1, "critical": 0}

    kinds = [a["type"] for a in data["recent_activity"]]
    assert sorted(kinds) == ["comment_added", "ticket_created", "ticket_created"]


@pytest.mark.django_db
def test_dashboard_for_newcomer(client_for, dave):
    data = client_for(dave).get("/api/analytics/dashboard/").json()
    assert data["projects"]["total"] == 0
    assert data["tickets"]["total"] == 0
    assert data["recent_activity"] == []


@pytest.mark.django_db
def test_project_stats(client_for, alice, dave, project):
    url = f"/api/analytics/project/{project.pk}/"

    empty = client_for(alice).get(url).json()
    assert empty["total_tickets"] == 0
    assert empty["last_activity"] is not None

    Ticket.objects.create(project=project, ticket_number=1, title="a", creator=alice, status="in-progress")
    data = client_for(alice).get(url).json()
    assert data["total_tickets"] == 1
    assert data["by_status"]["in-progress"] == 1

    assert client_for(dave).get(url).status_code == 403
    assert client_for(alice).get("/api/analytics/project/99999/").status_code == 404
