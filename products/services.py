"""
Product query and command services.

Views call these functions; they talk to the store through the Product
manager and signal failures with the exceptions in ``products.exceptions``.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from django.conf import settings
from django.core.paginator import Paginator
from django.db import DatabaseError, transaction

from .exceptions import (
    GENERIC_SAVE_ERROR,
    ConcurrencyConflict,
    ProductNotFound,
    ProductValidationFailed,
)
from .models import Category, Product, UpdateOutcome
from .serializers import CategorySerializer, ProductEditSerializer, ProductFormSerializer

logger = logging.getLogger(__name__)

INVALID_FORM_BODY = "Expected the product fields as an object."

FORM_FIELDS = ('id', 'name', 'price', 'category_id', 'version')


@dataclass
class ProductPage:
    """One page of the product list plus the metadata to render pager controls."""
    items: list
    page_number: int
    page_size: int
    total_count: int
    total_pages: int
    current_filter: str = ''

    @property
    def has_previous(self):
        return self.page_number > 1

    @property
    def has_next(self):
        return self.page_number < self.total_pages


def _normalize_page(page):
    """Absent, non-numeric and non-positive page numbers all mean page 1."""
    try:
        page = int(page)
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


def _parse_id(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _submitted(data):
    """The submitted form values, echoed back when a form is rejected."""
    return {key: data.get(key) for key in FORM_FIELDS if key in data}


def _category_choices():
    return CategorySerializer(list_categories(), many=True).data


def _require_form_data(data):
    """Reject request bodies that are not a set of named fields."""
    if not isinstance(data, Mapping):
        logger.warning("Product form body is a %s, not an object.", type(data).__name__)
        raise ProductValidationFailed(
            {'non_field_errors': [INVALID_FORM_BODY]}, categories=_category_choices()
        )


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def list_categories():
    """All categories ordered by name, for form choice lists."""
    return Category.objects.order_by('name')


def list_products(search_string=None, page=None, page_size=None):
    """
    Return one page of products whose name contains ``search_string``
    (case-insensitive), ordered by name.

    A page past the end yields an empty ``items`` list with the real
    totals rather than an error.
    """
    page_number = _normalize_page(page)
    page_size = page_size or settings.PRODUCTS_PAGE_SIZE
    search_string = (search_string or '').strip()

    queryset = Product.objects.search(search_string).ordered_by_name()
    paginator = Paginator(queryset, page_size)

    total_count = paginator.count
    total_pages = paginator.num_pages if total_count else 0

    if page_number <= total_pages:
        items = list(paginator.page(page_number).object_list)
    else:
        items = []

    return ProductPage(
        items=items,
        page_number=page_number,
        page_size=page_size,
        total_count=total_count,
        total_pages=total_pages,
        current_filter=search_string,
    )


def get_product_detail(product_id):
    """Return the product with its category resolved, or raise ProductNotFound."""
    product_id = _parse_id(product_id)
    if product_id is None:
        raise ProductNotFound()

    product = Product.objects.with_category().filter(pk=product_id).first()
    if product is None:
        raise ProductNotFound()
    return product


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def get_create_form():
    """Everything the create form needs: the category choices."""
    return {'categories': _category_choices()}


def create_product(data):
    """
    Validate and insert a new product.

    Raises ProductValidationFailed for bad input or when the store rejects
    the insert; the store error itself is only logged.
    """
    _require_form_data(data)
    logger.info(
        "Product received with the following details: Name=%s, Price=%s, CategoryId=%s",
        data.get('name'), data.get('price'), data.get('category_id'),
    )

    serializer = ProductFormSerializer(data=data)
    if not serializer.is_valid():
        logger.warning("Product form is invalid. Returning validation errors.")
        for field_name, messages in serializer.errors.items():
            for message in messages:
                logger.error("Validation error on %s: %s", field_name, message)
        raise ProductValidationFailed(
            serializer.errors, product=_submitted(data), categories=_category_choices()
        )

    try:
        logger.info("Attempting to add a new product.")
        fields = serializer.to_store_fields()
        logger.info("Product CategoryId: %s", fields['category'].pk)

        logger.info("Attempting to save changes to the database.")
        with transaction.atomic():
            product = Product.objects.create(**fields)
        logger.info("Changes saved successfully. Product id=%s", product.pk)
        return product
    except DatabaseError:
        logger.exception("An error occurred while creating the product.")
        raise ProductValidationFailed(
            {'non_field_errors': [GENERIC_SAVE_ERROR]},
            product=_submitted(data),
            categories=_category_choices(),
        )


def get_edit_form(product_id):
    """The product to edit plus the category choices."""
    parsed_id = _parse_id(product_id)
    product = Product.objects.filter(pk=parsed_id).first() if parsed_id is not None else None
    if product is None:
        logger.warning("Product with ID %s not found.", product_id)
        raise ProductNotFound()
    return {'product': product, 'categories': _category_choices()}


def update_product(product_id, data):
    """
    Replace name, price and category of an existing product.

    The id in ``data`` must equal ``product_id``; a mismatch is reported as
    not found before anything is looked up. The update only applies if the
    stored version still equals ``data['version']``.
    """
    _require_form_data(data)
    product_id = _parse_id(product_id)
    if product_id is None or _parse_id(data.get('id')) != product_id:
        raise ProductNotFound()

    serializer = ProductEditSerializer(data=data)
    if not serializer.is_valid():
        logger.warning("Edit form for product %s is invalid.", product_id)
        raise ProductValidationFailed(
            serializer.errors, product=_submitted(data), categories=_category_choices()
        )

    expected_version = serializer.validated_data['version']
    try:
        with transaction.atomic():
            outcome = Product.objects.update_if_current(
                product_id, expected_version, **serializer.to_store_fields()
            )
    except DatabaseError:
        logger.exception("An error occurred while updating product %s.", product_id)
        raise ProductValidationFailed(
            {'non_field_errors': [GENERIC_SAVE_ERROR]},
            product=_submitted(data),
            categories=_category_choices(),
        )

    if outcome is UpdateOutcome.ABSENT:
        logger.info("Product %s was deleted before the update was applied.", product_id)
        raise ProductNotFound()

    if outcome is UpdateOutcome.CONFLICT:
        current_version = (
            Product.objects.filter(pk=product_id).values_list('version', flat=True).first()
        )
        logger.info(
            "Concurrent update on product %s: expected version %s, stored version %s.",
            product_id, expected_version, current_version,
        )
        raise ConcurrencyConflict(product_id, current_version)

    logger.info("Product %s updated to version %s.", product_id, expected_version + 1)
    return get_product_detail(product_id)


def get_delete_confirmation(product_id):
    """The product about to be deleted, with its category. 404 if missing."""
    return get_product_detail(product_id)


def delete_product(product_id):
    """
    Delete the product if it exists. Deleting a missing product is a
    no-op. Returns True when a row was removed.
    """
    product_id = _parse_id(product_id)
    if product_id is None:
        return False

    with transaction.atomic():
        deleted = Product.objects.delete_if_exists(product_id)

    if deleted:
        logger.info("Product %s deleted.", product_id)
    else:
        logger.info("Product %s already absent, nothing to delete.", product_id)
    return deleted
