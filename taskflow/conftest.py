import pytest
from rest_framework.test import APIClient

from accounts.models import User
from common.notify import EmailNotifier
from tracker.models import Project


@pytest.fixture(autouse=True)
def fast_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
    settings.EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
    settings.FRONTEND_URL = "http://frontend.test"


def _make_user(name, **extra):
    return User.objects.create_user(
        email=f"{name.lower()}@example.com",
        password="secret123",
        name=name,
        is_email_verified=True,
        **extra
    )


@pytest.fixture
def alice(db):
    return _make_user("Alice")


@pytest.fixture
def bob(db):
    return _make_user("Bob")


@pytest.fixture
def carol(db):
    return _make_user("Carol")


@pytest.fixture
def dave(db):
    return _make_user("Dave")


@pytest.fixture
def admin(db):
    return _make_user("Admin", role=User.Role.ADMIN)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    def _client(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client
    return _client


@pytest.fixture
def notifier():
    return EmailNotifier.from_settings()


@pytest.fixture
def project(alice):
    p = Project.objects.create(title="Bug Tracker", key="BUG", owner=alice)
    p.team_members.add(alice)
    return p
