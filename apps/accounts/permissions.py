from rest_framework import permissions


class IsClubAdmin(permissions.BasePermission):
    """
    Permission that allows only users with the admin role.
    """

    message = 'Access denied. Admin only.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, 'is_admin', False))
