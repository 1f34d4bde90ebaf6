# ============================================
# accounts/selectors/user_selector.py
# ============================================
from typing import List, Optional

from django.db.models import Q, QuerySet

from accounts.models import User


class UserSelector:

    @staticmethod
    def get_user_by_email(email: str) -> Optional[User]:
        if not email:
            return None
        try:
            return User.objects.get(email=User.objects.normalize_email(email))
        except User.DoesNotExist:
            return None

    @staticmethod
    def list_users() -> QuerySet:
        return User.objects.all().order_by("name", "email")

    @staticmethod
    def project_ids_for(user: User) -> List[int]:
        """IDs of every project ``user`` owns or has joined."""
        owned = set(user.owned_projects.values_list("id", flat=True))
        joined = set(user.member_projects.values_list("id", flat=True))
        return sorted(owned | joined)

    @staticmethod
    def list_team_members(user: User) -> QuerySet:
        """Users sharing at least one project with ``user``, owners included."""
        project_ids = UserSelector.project_ids_for(user)
        return (
            User.objects
            .filter(Q(owned_projects__in=project_ids) | Q(member_projects__in=project_ids))
            .distinct()
            .order_by("name", "email")
        )
