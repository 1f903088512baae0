from django.core.management.base import BaseCommand

from accounts.bootstrap import ensure_bootstrap_state


class Command(BaseCommand):
    help = 'Ensures the Admin/User/Guest roles and the default admin account exist'

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS('Checking bootstrap state...'))

        report = ensure_bootstrap_state()

        for role_name in report.roles_created:
            self.stdout.write(f'  Created role: {role_name}')
        if report.admin_created:
            self.stdout.write('  Created default admin account')
        if report.admin_role_assigned:
            self.stdout.write('  Assigned Admin role to default admin account')

        if report.changed:
            self.stdout.write(self.style.SUCCESS('Bootstrap state updated.'))
        else:
            self.stdout.write(self.style.SUCCESS('Nothing to do, bootstrap state already present.'))
