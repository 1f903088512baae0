from django.apps import AppConfig
from django.conf import settings
from django.db.models.signals import post_migrate


def seed_after_migrate(sender, **kwargs):
    """Run the seed routine once the schema is in place."""
    if not settings.SEED_ON_MIGRATE:
        return

    from .bootstrap import ensure_bootstrap_state
    ensure_bootstrap_state()


class AccountsConfig(AppConfig):
    """
    Configuration for the Accounts app.
    Owns the principal model and the role/admin seed routine.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'accounts'
    verbose_name = 'Accounts and Roles'

    def ready(self):
        post_migrate.connect(seed_after_migrate, sender=self)
