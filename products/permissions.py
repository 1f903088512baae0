from rest_framework import permissions


ANONYMOUS = None
ADMIN = 'Admin'

# Required role per view action. ANONYMOUS lets any caller through,
# including unauthenticated ones. Deleting is open to anonymous callers
# while creating and editing need the Admin role.
PRODUCT_OPERATION_ROLES = {
    'list': ANONYMOUS,
    'retrieve': ANONYMOUS,
    'create_form': ADMIN,
    'create': ADMIN,
    'edit_form': ADMIN,
    'update': ADMIN,
    'edit': ADMIN,
    'delete_confirm': ANONYMOUS,
    'delete_execute': ANONYMOUS,
    'destroy': ANONYMOUS,
    'metadata': ANONYMOUS,
}

CATEGORY_OPERATION_ROLES = {
    'list': ANONYMOUS,
    'metadata': ANONYMOUS,
}


def user_has_role(user, role_name):
    """True when ``user`` is authenticated and a member of ``role_name``."""
    if not (user and user.is_authenticated):
        return False
    return user.has_role(role_name)


class OperationRolePermission(permissions.BasePermission):
    """
    Checks the role a view requires for the current action.

    The view supplies the table through its ``operation_roles`` attribute.
    Actions missing from the table are denied. Requests whose method maps
    to no action are let through so the view can answer 405.
    """

    def has_permission(self, request, view):
        operation_roles = getattr(view, 'operation_roles', {})
        action = getattr(view, 'action', None)

        if action is None:
            return True

        if action not in operation_roles:
            return False

        required_role = operation_roles[action]
        if required_role is ANONYMOUS:
            return True

        return user_has_role(request.user, required_role)
