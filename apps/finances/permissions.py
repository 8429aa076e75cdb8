from rest_framework import permissions


class CanViewPlayerAccount(permissions.BasePermission):
    """
    Admins may read any account; players only their own.

    Expects the player id in ``view.kwargs['player_id']``.
    """

    message = 'You can only view your own account.'

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if user.is_admin:
            return True
        player_id = view.kwargs.get('player_id')
        return user.player_id is not None and str(user.player_id) == str(player_id)
