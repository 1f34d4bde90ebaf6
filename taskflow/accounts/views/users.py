# ============================================
# accounts/views/users.py
# ============================================
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.selectors.user_selector import UserSelector
from accounts.serializers.user import (
    ProfileUpdateSerializer,
    RoleUpdateSerializer,
    UserBriefSerializer,
    UserOutputSerializer,
)
from accounts.services import user_service
from common.schema import MessageSerializer, extend_schema, path_int, std_errors


class MeAPIView(APIView):

    @extend_schema(tags=["Users"], summary="Current user", responses={200: UserOutputSerializer, **std_errors(401)})
    def get(self, request):
        return Response(UserOutputSerializer(request.user).data)


class ProfileAPIView(APIView):
    """
    PUT: Update own profile

    Request body:
    - name: string (optional)
    - avatar: string (optional)
    - email_notifications: bool (optional)
    """

    @extend_schema(
        tags=["Users"],
        summary="Update own profile",
        request=ProfileUpdateSerializer,
        responses={200: UserOutputSerializer, **std_errors(400, 401)},
    )
    def put(self, request):
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = user_service.update_profile(user=request.user, **serializer.validated_data)
        return Response(UserOutputSerializer(user).data)


class UserListAPIView(APIView):

    @extend_schema(tags=["Users"], summary="All users", responses={200: UserOutputSerializer(many=True)})
    def get(self, request):
        users = UserSelector.list_users()
        return Response(UserOutputSerializer(users, many=True).data)


class TeamAPIView(APIView):

    @extend_schema(
        tags=["Users"],
        summary="Users sharing at least one project with me",
        responses={200: UserBriefSerializer(many=True)},
    )
    def get(self, request):
        users = UserSelector.list_team_members(request.user)
        return Response(UserBriefSerializer(users, many=True).data)


class RoleAPIView(APIView):

    @extend_schema(
        tags=["Users"],
        summary="Change a user's role (admin only)",
        request=RoleUpdateSerializer,
        responses={200: UserOutputSerializer, **std_errors()},
    )
    def put(self, request):
        serializer = RoleUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = user_service.change_role(actor=request.user, **serializer.validated_data)
        return Response(UserOutputSerializer(user).data)


class UserDetailAPIView(APIView):
    """
    DELETE: Delete a user (admin only)

    Path params:
    - user_id: int
    """

    @extend_schema(
        tags=["Users"],
        summary="Delete a user that owns no project and has no assigned ticket",
        parameters=[path_int("user_id", "User ID")],
        responses={200: MessageSerializer, **std_errors()},
    )
    def delete(self, request, user_id):
        summary = user_service.delete_user(actor=request.user, user_id=user_id)
        return Response({"message": "User deleted successfully", **summary})
