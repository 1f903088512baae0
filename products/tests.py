from unittest import mock

from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.db import DatabaseError
from django.test import TestCase
from rest_framework.test import APITestCase, APIClient
from rest_framework import status
from decimal import Decimal

from . import services
from .services import INVALID_FORM_BODY
from .exceptions import (
    GENERIC_SAVE_ERROR,
    ConcurrencyConflict,
    ProductNotFound,
    ProductValidationFailed,
)
from .models import Category, Product, UpdateOutcome

User = get_user_model()


def make_products(category, count, prefix="Product"):
    return [
        Product.objects.create(name=f"{prefix} {i:02d}", price=Decimal("1.00") + i, category=category)
        for i in range(count)
    ]


class CategoryModelTest(TestCase):
    """Test cases for Category model"""

    def setUp(self):
        self.category = Category.objects.create(name="Electronics")

    def test_category_str(self):
        """Test category string representation"""
        self.assertEqual(str(self.category), "Electronics")

    def test_products_reverse_relation(self):
        """Test products are reachable from their category"""
        Product.objects.create(name="Mouse", price=Decimal("9.99"), category=self.category)
        self.assertEqual(self.category.products.count(), 1)


class ProductModelTest(TestCase):
    """Test cases for Product model and its versioned store operations"""

    def setUp(self):
        self.category = Category.objects.create(name="Electronics")
        self.other_category = Category.objects.create(name="Books")
        self.product = Product.objects.create(
            name="Wireless Mouse",
            price=Decimal("29.99"),
            category=self.category,
        )

    def test_product_creation(self):
        """Test product is created with version 1"""
        self.assertEqual(self.product.name, "Wireless Mouse")
        self.assertEqual(self.product.price, Decimal("29.99"))
        self.assertEqual(self.product.version, 1)

    def test_product_str(self):
        self.assertEqual(str(self.product), "Wireless Mouse")

    def test_update_if_current_applies_and_bumps_version(self):
        outcome = Product.objects.update_if_current(
            self.product.pk, 1,
            name="Trackball", price=Decimal("39.00"), category=self.other_category,
        )
        self.assertIs(outcome, UpdateOutcome.UPDATED)
        self.product.refresh_from_db()
        self.assertEqual(self.product.name, "Trackball")
        self.assertEqual(self.product.category, self.other_category)
        self.assertEqual(self.product.version, 2)

    def test_update_if_current_reports_conflict_on_stale_version(self):
        Product.objects.filter(pk=self.product.pk).update(version=5)
        outcome = Product.objects.update_if_current(self.product.pk, 1, name="Stale")
        self.assertIs(outcome, UpdateOutcome.CONFLICT)
        self.product.refresh_from_db()
        self.assertEqual(self.product.name, "Wireless Mouse")

    def test_update_if_current_reports_absent_row(self):
        pk = self.product.pk
        self.product.delete()
        self.assertIs(Product.objects.update_if_current(pk, 1, name="Ghost"), UpdateOutcome.ABSENT)

    def test_delete_if_exists(self):
        pk = self.product.pk
        self.assertTrue(Product.objects.delete_if_exists(pk))
        self.assertFalse(Product.objects.delete_if_exists(pk))

    def test_search_is_case_insensitive(self):
        self.assertEqual(Product.objects.search("MOUSE").count(), 1)
        self.assertEqual(Product.objects.search("").count(), 1)
        self.assertEqual(Product.objects.search("keyboard").count(), 0)


class ProductQueryServiceTest(TestCase):
    """Test cases for listing, searching and paging products"""

    def setUp(self):
        self.category = Category.objects.create(name="Hardware")
        self.products = make_products(self.category, 25)

    def test_empty_search_returns_everything(self):
        page = services.list_products()
        self.assertEqual(page.total_count, 25)
        self.assertEqual(page.total_pages, 3)
        self.assertEqual(page.page_number, 1)
        self.assertEqual(len(page.items), 10)
        self.assertEqual(page.current_filter, "")

    def test_search_filters_by_name_substring(self):
        Product.objects.create(name="Blue Widget", price=Decimal("5.00"), category=self.category)
        Product.objects.create(name="widget stand", price=Decimal("6.00"), category=self.category)

        page = services.list_products("Widget")

        # Matching is case-insensitive
        self.assertEqual([p.name for p in page.items], ["Blue Widget", "widget stand"])
        self.assertEqual(page.total_count, 2)
        self.assertEqual(page.current_filter, "Widget")
        for product in page.items:
            self.assertIn("widget", product.name.lower())

    def test_pages_are_disjoint_ordered_and_complete(self):
        seen = []
        for number in (1, 2, 3):
            page = services.list_products(page=number)
            self.assertLessEqual(len(page.items), 10)
            seen.extend(p.pk for p in page.items)

        expected = list(
            Product.objects.order_by("name", "id").values_list("pk", flat=True)
        )
        self.assertEqual(seen, expected)
        self.assertEqual(len(set(seen)), 25)

        names = [Product.objects.get(pk=pk).name for pk in seen]
        self.assertEqual(names, sorted(names))

    def test_last_page_is_partial(self):
        page = services.list_products(page=3)
        self.assertEqual(len(page.items), 5)
        self.assertTrue(page.has_previous)
        self.assertFalse(page.has_next)

    def test_page_past_the_end_is_empty_with_metadata(self):
        page = services.list_products(page=7)
        self.assertEqual(page.items, [])
        self.assertEqual(page.page_number, 7)
        self.assertEqual(page.total_count, 25)
        self.assertEqual(page.total_pages, 3)

    def test_invalid_page_numbers_fall_back_to_first_page(self):
        for raw in (None, 0, -3, "abc", ""):
            page = services.list_products(page=raw)
            self.assertEqual(page.page_number, 1)
            self.assertEqual(page.items[0].name, "Product 00")

    def test_no_matches_has_zero_pages(self):
        page = services.list_products("does-not-exist")
        self.assertEqual(page.items, [])
        self.assertEqual(page.total_count, 0)
        self.assertEqual(page.total_pages, 0)

    def test_get_product_detail_resolves_category(self):
        product = services.get_product_detail(self.products[0].pk)
        with self.assertNumQueries(0):
            self.assertEqual(product.category.name, "Hardware")

    def test_get_product_detail_not_found(self):
        with self.assertRaises(ProductNotFound):
            services.get_product_detail(None)
        with self.assertRaises(ProductNotFound):
            services.get_product_detail(999999)

    def test_list_categories_sorted_by_name(self):
        Category.objects.create(name="Appliances")
        names = [c.name for c in services.list_categories()]
        self.assertEqual(names, ["Appliances", "Hardware"])


class ProductCommandServiceTest(TestCase):
    """Test cases for create, update and delete"""

    def setUp(self):
        self.category = Category.objects.create(name="Gadgets")
        self.other_category = Category.objects.create(name="Tools")
        self.product = Product.objects.create(
            name="Widget", price=Decimal("9.99"), category=self.category
        )
        self.other_product = Product.objects.create(
            name="Gizmo", price=Decimal("4.50"), category=self.category
        )

    def edit_payload(self, product, **overrides):
        payload = {
            'id': product.pk,
            'name': product.name,
            'price': str(product.price),
            'category_id': product.category_id,
            'version': product.version,
        }
        payload.update(overrides)
        return payload

    def test_create_product_round_trip(self):
        product = services.create_product({
            'name': 'Widget', 'price': '9.99', 'category_id': self.category.pk
        })
        self.assertIsNotNone(product.pk)

        stored = services.get_product_detail(product.pk)
        self.assertEqual(stored.name, 'Widget')
        self.assertEqual(stored.price, Decimal('9.99'))
        self.assertEqual(stored.category_id, self.category.pk)

    def test_create_product_accepts_minimum_price(self):
        product = services.create_product({
            'name': 'Penny sweet', 'price': '0.01', 'category_id': self.category.pk
        })
        self.assertEqual(product.price, Decimal('0.01'))

    def test_create_product_rejects_zero_price(self):
        with self.assertRaises(ProductValidationFailed) as ctx:
            services.create_product({
                'name': 'Freebie', 'price': '0.00', 'category_id': self.category.pk
            })
        self.assertIn('price', ctx.exception.errors)
        self.assertEqual(Product.objects.count(), 2)

    def test_create_product_rejects_missing_or_blank_name(self):
        for name_value in (None, '', '   '):
            data = {'price': '3.00', 'category_id': self.category.pk}
            if name_value is not None:
                data['name'] = name_value
            with self.assertRaises(ProductValidationFailed) as ctx:
                services.create_product(data)
            self.assertIn('name', ctx.exception.errors)
        self.assertEqual(Product.objects.count(), 2)

    def test_create_product_requires_existing_category(self):
        with self.assertRaises(ProductValidationFailed) as ctx:
            services.create_product({'name': 'Orphan', 'price': '3.00'})
        self.assertIn('category_id', ctx.exception.errors)

        with self.assertRaises(ProductValidationFailed) as ctx:
            services.create_product({'name': 'Orphan', 'price': '3.00', 'category_id': 424242})
        self.assertIn('category_id', ctx.exception.errors)
        self.assertEqual(Product.objects.count(), 2)

    def test_validation_failure_returns_input_and_categories(self):
        data = {'name': '', 'price': '5.00', 'category_id': self.category.pk}
        with self.assertRaises(ProductValidationFailed) as ctx:
            services.create_product(data)

        exc = ctx.exception
        self.assertEqual(exc.product['price'], '5.00')
        self.assertEqual(
            [c['name'] for c in exc.categories], ['Gadgets', 'Tools']
        )

    def test_create_product_store_failure_is_downgraded(self):
        with mock.patch.object(Product.objects, 'create', side_effect=DatabaseError('disk full')):
            with self.assertLogs('products.services', level='ERROR') as logs:
                with self.assertRaises(ProductValidationFailed) as ctx:
                    services.create_product({
                        'name': 'Widget', 'price': '9.99', 'category_id': self.category.pk
                    })

        self.assertEqual(ctx.exception.errors, {'non_field_errors': [GENERIC_SAVE_ERROR]})
        self.assertEqual(ctx.exception.product['name'], 'Widget')
        self.assertEqual(len(ctx.exception.categories), 2)
        self.assertTrue(any('creating the product' in line for line in logs.output))
        self.assertEqual(Product.objects.count(), 2)

    def test_update_product_replaces_all_fields(self):
        updated = services.update_product(
            self.product.pk,
            self.edit_payload(
                self.product, name='Widget Pro', price='19.99', category_id=self.other_category.pk
            ),
        )
        self.assertEqual(updated.pk, self.product.pk)
        self.assertEqual(updated.name, 'Widget Pro')
        self.assertEqual(updated.price, Decimal('19.99'))
        self.assertEqual(updated.category, self.other_category)
        self.assertEqual(updated.version, 2)

    def test_update_with_mismatched_id_is_not_found(self):
        # The other product exists, the mismatch alone decides
        payload = self.edit_payload(self.other_product, name='Hijack')
        with self.assertRaises(ProductNotFound):
            services.update_product(self.product.pk, payload)

        self.other_product.refresh_from_db()
        self.assertEqual(self.other_product.name, 'Gizmo')

    def test_non_object_body_is_a_validation_failure(self):
        for body in ([1, 2], 'Widget', None):
            with self.assertRaises(ProductValidationFailed) as ctx:
                services.create_product(body)
            self.assertEqual(ctx.exception.errors, {'non_field_errors': [INVALID_FORM_BODY]})
            self.assertEqual(len(ctx.exception.categories), 2)

            with self.assertRaises(ProductValidationFailed):
                services.update_product(self.product.pk, body)

        self.assertEqual(Product.objects.count(), 2)
        self.product.refresh_from_db()
        self.assertEqual(self.product.version, 1)

    def test_update_without_payload_id_is_not_found(self):
        payload = self.edit_payload(self.product)
        del payload['id']
        with self.assertRaises(ProductNotFound):
            services.update_product(self.product.pk, payload)

    def test_update_mismatch_checked_before_validation(self):
        with self.assertRaises(ProductNotFound):
            services.update_product(self.product.pk, {'id': self.product.pk + 1000})

    def test_update_invalid_input_changes_nothing(self):
        with self.assertRaises(ProductValidationFailed) as ctx:
            services.update_product(
                self.product.pk, self.edit_payload(self.product, price='0')
            )
        self.assertIn('price', ctx.exception.errors)
        self.assertEqual(len(ctx.exception.categories), 2)
        self.product.refresh_from_db()
        self.assertEqual(self.product.price, Decimal('9.99'))
        self.assertEqual(self.product.version, 1)

    def test_second_concurrent_update_conflicts(self):
        first = self.edit_payload(self.product, name='First writer')
        second = self.edit_payload(self.product, name='Second writer')

        services.update_product(self.product.pk, first)
        with self.assertRaises(ConcurrencyConflict) as ctx:
            services.update_product(self.product.pk, second)

        self.assertEqual(ctx.exception.current_version, 2)
        self.product.refresh_from_db()
        self.assertEqual(self.product.name, 'First writer')
        self.assertEqual(self.product.version, 2)

    def test_update_of_deleted_product_is_not_found(self):
        payload = self.edit_payload(self.product, name='Too late')
        self.product.delete()
        with self.assertRaises(ProductNotFound):
            services.update_product(payload['id'], payload)

    def test_get_edit_form(self):
        form = services.get_edit_form(self.product.pk)
        self.assertEqual(form['product'], self.product)
        self.assertEqual(len(form['categories']), 2)

    def test_get_edit_form_missing_logs_warning(self):
        with self.assertLogs('products.services', level='WARNING') as logs:
            with self.assertRaises(ProductNotFound):
                services.get_edit_form(987654)
        self.assertTrue(any('987654' in line for line in logs.output))

    def test_get_create_form_lists_categories(self):
        form = services.get_create_form()
        self.assertEqual([c['name'] for c in form['categories']], ['Gadgets', 'Tools'])

    def test_delete_confirmation_requires_existing_product(self):
        product = services.get_delete_confirmation(self.product.pk)
        self.assertEqual(product.category.name, 'Gadgets')
        with self.assertRaises(ProductNotFound):
            services.get_delete_confirmation(555555)

    def test_delete_product(self):
        self.assertTrue(services.delete_product(self.product.pk))
        self.assertFalse(Product.objects.filter(pk=self.product.pk).exists())

    def test_delete_missing_product_is_a_no_op(self):
        self.assertFalse(services.delete_product(555555))
        self.assertFalse(services.delete_product(None))
        self.assertEqual(Product.objects.count(), 2)


class ProductAPITest(APITestCase):
    """Test cases for Product API endpoints and the role matrix"""

    def setUp(self):
        self.client = APIClient()
        admin_role, _ = Group.objects.get_or_create(name='Admin')
        user_role, _ = Group.objects.get_or_create(name='User')

        self.admin_user = User.objects.create_user(
            email="catalog-admin@example.com",
            password="adminpass123"
        )
        self.admin_user.groups.add(admin_role)
        self.regular_user = User.objects.create_user(
            email="user@example.com",
            password="userpass123"
        )
        self.regular_user.groups.add(user_role)

        self.category = Category.objects.create(name="Electronics")
        self.product = Product.objects.create(
            name="Wireless Mouse",
            price=Decimal("29.99"),
            category=self.category,
        )

    def product_payload(self, **overrides):
        data = {
            'id': self.product.id,
            'name': 'Wireless Mouse',
            'price': '29.99',
            'category_id': self.category.id,
            'version': 1,
        }
        data.update(overrides)
        return data

    def test_list_products(self):
        """Test listing products (public access)"""
        response = self.client.get('/api/products/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['items']), 1)
        self.assertEqual(response.data['page'], 1)
        self.assertEqual(response.data['total_count'], 1)
        self.assertEqual(response.data['total_pages'], 1)

    def test_search_products(self):
        """Test searching products echoes the filter"""
        Product.objects.create(name="Keyboard", price=Decimal("49.00"), category=self.category)
        response = self.client.get('/api/products/?search=mouse')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([p['name'] for p in response.data['items']], ['Wireless Mouse'])
        self.assertEqual(response.data['current_filter'], 'mouse')

    def test_list_page_past_the_end(self):
        response = self.client.get('/api/products/?page=9')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['items'], [])
        self.assertEqual(response.data['page'], 9)
        self.assertEqual(response.data['total_count'], 1)

    def test_retrieve_product(self):
        """Test retrieving a single product with its category"""
        response = self.client.get(f'/api/products/{self.product.id}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['name'], "Wireless Mouse")
        self.assertEqual(response.data['category']['name'], "Electronics")

    def test_retrieve_missing_product(self):
        response = self.client.get('/api/products/999999/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_create_product_as_admin(self):
        """Test creating product as admin"""
        self.client.force_authenticate(user=self.admin_user)
        data = {'name': 'Keyboard', 'price': '79.99', 'category_id': self.category.id}
        response = self.client.post('/api/products/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['category']['id'], self.category.id)
        self.assertEqual(Product.objects.count(), 2)

    def test_create_product_anonymous(self):
        """Test creating product without credentials (should fail)"""
        data = {'name': 'Keyboard', 'price': '79.99', 'category_id': self.category.id}
        response = self.client.post('/api/products/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(Product.objects.count(), 1)

    def test_create_product_as_regular_user(self):
        """Test creating product without the Admin role (should fail)"""
        self.client.force_authenticate(user=self.regular_user)
        data = {'name': 'Keyboard', 'price': '79.99', 'category_id': self.category.id}
        response = self.client.post('/api/products/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_create_product_validation(self):
        """Test product creation validation returns the form context"""
        self.client.force_authenticate(user=self.admin_user)
        data = {'name': '', 'price': '-10'}
        response = self.client.post('/api/products/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('name', response.data['errors'])
        self.assertIn('price', response.data['errors'])
        self.assertIn('category_id', response.data['errors'])
        self.assertEqual(response.data['categories'], [{'id': self.category.id, 'name': 'Electronics'}])
        self.assertEqual(Product.objects.count(), 1)

    def test_create_with_list_body_returns_400(self):
        self.client.force_authenticate(user=self.admin_user)
        response = self.client.post('/api/products/', [1, 2], format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['errors'], {'non_field_errors': [INVALID_FORM_BODY]})
        self.assertEqual(Product.objects.count(), 1)

    def test_update_with_list_body_returns_400(self):
        self.client.force_authenticate(user=self.admin_user)
        response = self.client.put(f'/api/products/{self.product.id}/', [1], format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['categories'], [{'id': self.category.id, 'name': 'Electronics'}])
        self.product.refresh_from_db()
        self.assertEqual(self.product.version, 1)

    def test_unsupported_method_returns_405(self):
        """PATCH has no action, for admins and anonymous callers alike"""
        response = self.client.patch(
            f'/api/products/{self.product.id}/', {'name': 'Patched'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)

        self.client.force_authenticate(user=self.admin_user)
        response = self.client.patch(
            f'/api/products/{self.product.id}/', {'name': 'Patched'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.product.refresh_from_db()
        self.assertEqual(self.product.name, 'Wireless Mouse')

    def test_create_form(self):
        self.client.force_authenticate(user=self.admin_user)
        response = self.client.get('/api/products/create/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['categories']), 1)

    def test_create_form_requires_admin(self):
        response = self.client.get('/api/products/create/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_edit_form(self):
        self.client.force_authenticate(user=self.admin_user)
        response = self.client.get(f'/api/products/{self.product.id}/edit/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['product']['version'], 1)
        self.assertEqual(len(response.data['categories']), 1)

        response = self.client.get('/api/products/999999/edit/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_product(self):
        """Test updating product with PUT"""
        self.client.force_authenticate(user=self.admin_user)
        response = self.client.put(
            f'/api/products/{self.product.id}/',
            self.product_payload(price='24.99'),
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['version'], 2)
        self.product.refresh_from_db()
        self.assertEqual(self.product.price, Decimal("24.99"))

    def test_update_product_through_edit_form_post(self):
        self.client.force_authenticate(user=self.admin_user)
        response = self.client.post(
            f'/api/products/{self.product.id}/edit/',
            self.product_payload(name='Silent Mouse'),
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.product.refresh_from_db()
        self.assertEqual(self.product.name, 'Silent Mouse')

    def test_update_requires_admin(self):
        self.client.force_authenticate(user=self.regular_user)
        response = self.client.put(
            f'/api/products/{self.product.id}/', self.product_payload(), format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_update_id_mismatch_returns_not_found(self):
        self.client.force_authenticate(user=self.admin_user)
        other = Product.objects.create(name="Other", price=Decimal("1.00"), category=self.category)
        response = self.client.put(
            f'/api/products/{self.product.id}/',
            self.product_payload(id=other.id),
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_conflict_returns_409(self):
        self.client.force_authenticate(user=self.admin_user)
        first = self.client.put(
            f'/api/products/{self.product.id}/',
            self.product_payload(name='First'),
            format='json'
        )
        second = self.client.put(
            f'/api/products/{self.product.id}/',
            self.product_payload(name='Second'),
            format='json'
        )
        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(second.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(second.data['current_version'], 2)
        self.product.refresh_from_db()
        self.assertEqual(self.product.name, 'First')

    def test_update_deleted_product_returns_404(self):
        self.client.force_authenticate(user=self.admin_user)
        payload = self.product_payload()
        self.product.delete()
        response = self.client.put(f'/api/products/{payload["id"]}/', payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_confirm_is_anonymous(self):
        response = self.client.get(f'/api/products/{self.product.id}/delete/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['category']['name'], 'Electronics')

        response = self.client.get('/api/products/999999/delete/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_execute_is_anonymous(self):
        response = self.client.post(f'/api/products/{self.product.id}/delete/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(Product.objects.count(), 0)

    def test_delete_missing_product_succeeds(self):
        response = self.client.post('/api/products/999999/delete/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        response = self.client.delete('/api/products/999999/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(Product.objects.count(), 1)

    def test_delete_product(self):
        """Test deleting product with DELETE"""
        response = self.client.delete(f'/api/products/{self.product.id}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(Product.objects.count(), 0)


class CategoryAPITest(APITestCase):
    """Test cases for the category choice endpoint"""

    def setUp(self):
        self.client = APIClient()
        Category.objects.create(name="Toys")
        Category.objects.create(name="Books")

    def test_list_categories(self):
        """Test listing categories (public access)"""
        response = self.client.get('/api/categories/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([c['name'] for c in response.data], ['Books', 'Toys'])

    def test_categories_are_read_only(self):
        response = self.client.post('/api/categories/', {'name': 'Games'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(Category.objects.count(), 2)
