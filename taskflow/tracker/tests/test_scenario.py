import pytest

from tracker.models import Project, Ticket


@pytest.mark.django_db
def test_membership_lifecycle_end_to_end(client_for, alice, bob, carol, dave):
    as_alice = client_for(alice)

    created = as_alice.post("/api/projects/", {"title": "Bugs", "key": "BUG"}, format="json")
    assert created.status_code == 201
    project_id = created.json()["id"]

    dup = client_for(bob).post("/api/projects/", {"title": "Mine", "key": "bug"}, format="json")
    assert dup.status_code == 400
    assert Project.objects.count() == 1

    t1 = as_alice.post("/api/tickets/", {"project_id": project_id, "title": "First"}, format="json").json()
    t2 = as_alice.post("/api/tickets/", {"project_id": project_id, "title": "Second"}, format="json").json()
    assert (t1["ticket_number"], t2["ticket_number"]) == (1, 2)
    assert t1["assignee"] is None

    assigned = as_alice.put(f"/api/tickets/{t1['id']}/", {"assignee_id": carol.pk}, format="json")
    assert assigned.status_code == 200
    team = as_alice.get(f"/api/projects/{project_id}/").json()["team_members"]
    assert carol.pk in [m["id"] for m in team]

    removed = as_alice.delete(f"/api/projects/{project_id}/members/", {"user_id": carol.pk}, format="json")
    assert removed.status_code == 200
    assert Ticket.objects.get(pk=t1["id"]).assignee is None

    assert client_for(dave).get(f"/api/projects/{project_id}/").status_code in (403, 404)
