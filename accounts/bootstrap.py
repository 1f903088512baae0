"""
Seed routine for roles and the default administrator.

Every phase checks for existing state before writing, so the routine can
run on every ``migrate`` and from ``manage.py seed_roles`` without creating
duplicates.
"""

import logging
from dataclasses import dataclass, field

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.db import transaction

logger = logging.getLogger(__name__)


@dataclass
class BootstrapReport:
    """What a single run of the seed routine created."""
    roles_created: list = field(default_factory=list)
    admin_created: bool = False
    admin_role_assigned: bool = False

    @property
    def changed(self):
        return bool(self.roles_created) or self.admin_created or self.admin_role_assigned


def ensure_roles(role_names=None):
    """Create each role if no role of that name exists. Returns created names."""
    created_names = []
    for role_name in role_names or settings.BOOTSTRAP_ROLES:
        _, created = Group.objects.get_or_create(name=role_name)
        if created:
            created_names.append(role_name)
            logger.info("Created role %s", role_name)
    return created_names


def ensure_default_admin(email=None, password=None):
    """
    Return ``(user, created)`` for the default administrator account.

    A new account is staff so it can sign in to the Django admin, where
    categories are maintained. An existing account is left untouched.
    """
    User = get_user_model()
    email = email or settings.DEFAULT_ADMIN_EMAIL

    user = User.objects.filter(email=email).first()
    if user is not None:
        return user, False

    user = User.objects.create_user(
        email=email,
        password=password or settings.DEFAULT_ADMIN_PASSWORD,
        is_staff=True,
    )
    logger.info("Created default admin account %s", email)
    return user, True


def ensure_role_assignment(user, role_name):
    """Add ``user`` to ``role_name`` unless already a member. Returns True if added."""
    if user.groups.filter(name=role_name).exists():
        return False

    role = Group.objects.get(name=role_name)
    user.groups.add(role)
    logger.info("Assigned role %s to %s", role_name, user.email)
    return True


@transaction.atomic
def ensure_bootstrap_state():
    """
    Guarantee the baseline identity data exists.

    1. Roles Admin, User and Guest (checked one by one).
    2. The default admin account.
    3. The admin account's membership of the Admin role.
    """
    report = BootstrapReport()
    report.roles_created = ensure_roles()

    admin_user, report.admin_created = ensure_default_admin()
    report.admin_role_assigned = ensure_role_assignment(
        admin_user, settings.BOOTSTRAP_ADMIN_ROLE
    )

    if report.changed:
        logger.info("Bootstrap state updated: %s", report)
    else:
        logger.debug("Bootstrap state already present")
    return report
