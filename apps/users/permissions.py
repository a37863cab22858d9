"""Role-based permission classes shared by the API views."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore

from .models import Role


class IsAdminRole(permissions.BasePermission):
    """Only administrators may access."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        user = request.user
        if not user.is_authenticated:
            return False
        return user.is_admin()


class IsClientOrAdmin(permissions.BasePermission):
    """Authenticated users holding one of the known roles."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        user = request.user
        if not user.is_authenticated:
            return False
        return user.role in (Role.CLIENT, Role.ADMIN)


class IsAdminRoleOrReadOnly(permissions.BasePermission):
    """Allow administrators to write, but anyone authenticated can read."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        user = request.user
        if not user.is_authenticated:
            return False
        if request.method in permissions.SAFE_METHODS:
            return True
        return user.is_admin()
