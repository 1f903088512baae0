from io import StringIO

from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.core.management import call_command
from django.test import TestCase, override_settings
from rest_framework.test import APITestCase
from rest_framework import status

from .bootstrap import ensure_bootstrap_state

User = get_user_model()

ROLE_NAMES = {'Admin', 'User', 'Guest'}


class UserModelTest(TestCase):
    """Test cases for the email-based User model"""

    def test_create_user(self):
        user = User.objects.create_user(email="Someone@EXAMPLE.com", password="pass12345")
        self.assertEqual(user.email, "Someone@example.com")
        self.assertTrue(user.check_password("pass12345"))
        self.assertFalse(user.is_staff)
        self.assertEqual(str(user), "Someone@example.com")

    def test_create_user_requires_email(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(email="", password="pass12345")

    def test_create_superuser(self):
        user = User.objects.create_superuser(email="root@example.com", password="pass12345")
        self.assertTrue(user.is_staff)
        self.assertTrue(user.is_superuser)

    def test_has_role(self):
        user = User.objects.create_user(email="guest@example.com", password="pass12345")
        guest, _ = Group.objects.get_or_create(name='Guest')
        self.assertFalse(user.has_role('Guest'))
        user.groups.add(guest)
        self.assertTrue(user.has_role('Guest'))
        self.assertFalse(user.has_role('Admin'))
        self.assertEqual(user.role_names, ['Guest'])


@override_settings(
    DEFAULT_ADMIN_EMAIL='admin@example.com',
    DEFAULT_ADMIN_PASSWORD='Admin@123',
)
class BootstrapTest(TestCase):
    """Test cases for the role and default admin seed routine"""

    def setUp(self):
        # Start from an empty identity store; migrate already seeded one
        User.objects.all().delete()
        Group.objects.all().delete()

    def assert_seeded_once(self):
        self.assertEqual(Group.objects.count(), 3)
        self.assertEqual(set(Group.objects.values_list('name', flat=True)), ROLE_NAMES)
        admins = User.objects.filter(email='admin@example.com')
        self.assertEqual(admins.count(), 1)
        self.assertEqual(admins.get().groups.filter(name='Admin').count(), 1)
        self.assertEqual(User.groups.through.objects.count(), 1)

    def test_first_run_creates_everything(self):
        report = ensure_bootstrap_state()

        self.assertEqual(sorted(report.roles_created), sorted(ROLE_NAMES))
        self.assertTrue(report.admin_created)
        self.assertTrue(report.admin_role_assigned)
        self.assert_seeded_once()

        admin = User.objects.get(email='admin@example.com')
        self.assertTrue(admin.check_password('Admin@123'))
        self.assertTrue(admin.is_staff)
        self.assertFalse(admin.is_superuser)

    def test_running_twice_creates_no_duplicates(self):
        ensure_bootstrap_state()
        report = ensure_bootstrap_state()

        self.assertFalse(report.changed)
        self.assert_seeded_once()

    def test_each_phase_fills_only_what_is_missing(self):
        Group.objects.create(name='User')
        User.objects.create_user(email='admin@example.com', password='already-set')

        report = ensure_bootstrap_state()

        self.assertEqual(sorted(report.roles_created), ['Admin', 'Guest'])
        self.assertFalse(report.admin_created)
        self.assertTrue(report.admin_role_assigned)
        self.assert_seeded_once()
        # An existing admin keeps its password and flags
        existing = User.objects.get(email='admin@example.com')
        self.assertTrue(existing.check_password('already-set'))
        self.assertFalse(existing.is_staff)

    def test_seed_roles_command(self):
        out = StringIO()
        call_command('seed_roles', stdout=out)
        self.assertIn('Created role: Admin', out.getvalue())
        self.assertIn('Assigned Admin role', out.getvalue())

        out = StringIO()
        call_command('seed_roles', stdout=out)
        self.assertIn('Nothing to do', out.getvalue())
        self.assert_seeded_once()


class SeedOnMigrateTest(TestCase):
    """The post_migrate hook seeds the test database as well"""

    def test_roles_and_admin_exist_after_migrate(self):
        self.assertTrue(ROLE_NAMES.issubset(set(Group.objects.values_list('name', flat=True))))
        admin = User.objects.get(email='admin@example.com')
        self.assertTrue(admin.has_role('Admin'))


class TokenAPITest(APITestCase):
    """Test cases for JWT token endpoints"""

    def setUp(self):
        self.user = User.objects.create_user(email="editor@example.com", password="editorpass123")

    def test_obtain_token(self):
        response = self.client.post(
            '/api/auth/token/',
            {'email': 'editor@example.com', 'password': 'editorpass123'},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data)
        self.assertIn('refresh', response.data)

    def test_obtain_token_wrong_password(self):
        response = self.client.post(
            '/api/auth/token/',
            {'email': 'editor@example.com', 'password': 'nope'},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_token_grants_admin_operations(self):
        admin_role, _ = Group.objects.get_or_create(name='Admin')
        self.user.groups.add(admin_role)
        token = self.client.post(
            '/api/auth/token/',
            {'email': 'editor@example.com', 'password': 'editorpass123'},
            format='json'
        ).data['access']

        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
        response = self.client.get('/api/products/create/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
