import enum

from django.db import models
from django.db.models import F
from django.core.validators import MinValueValidator
from decimal import Decimal


MIN_PRICE = Decimal('0.01')


class UpdateOutcome(enum.Enum):
    """Result of a versioned product update."""
    UPDATED = 'updated'
    CONFLICT = 'conflict'
    ABSENT = 'absent'


class Category(models.Model):
    """
    Category model for organizing products.
    Categories are managed through the Django admin only.
    """
    name = models.CharField(
        max_length=100,
        unique=True,
        help_text="Category name (must be unique)"
    )

    class Meta:
        verbose_name = "Category"
        verbose_name_plural = "Categories"
        ordering = ['name']

    def __str__(self):
        return self.name


class ProductQuerySet(models.QuerySet):

    def search(self, search_string):
        """Case-insensitive substring match on name; blank matches everything."""
        if not search_string:
            return self
        return self.filter(name__icontains=search_string)

    def ordered_by_name(self):
        # id breaks ties so consecutive pages never overlap
        return self.order_by('name', 'id')

    def with_category(self):
        return self.select_related('category')


class ProductManager(models.Manager.from_queryset(ProductQuerySet)):

    def update_if_current(self, pk, expected_version, **fields):
        """
        Overwrite ``fields`` on the product only if it is still at
        ``expected_version``, bumping the version on success.
        """
        updated = self.filter(pk=pk, version=expected_version).update(
            version=F('version') + 1,
            **fields
        )
        if updated:
            return UpdateOutcome.UPDATED
        if self.filter(pk=pk).exists():
            return UpdateOutcome.CONFLICT
        return UpdateOutcome.ABSENT

    def delete_if_exists(self, pk):
        """Hard delete; a missing row is not an error. Returns True if a row went away."""
        deleted, _ = self.filter(pk=pk).delete()
        return deleted > 0


class Product(models.Model):
    """
    Catalog product.

    ``version`` is the optimistic-concurrency marker: it starts at 1 and
    every successful update through ``Product.objects.update_if_current``
    increments it.
    """
    name = models.CharField(
        max_length=200,
        help_text="Product name"
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(MIN_PRICE)],
        help_text="Product price (must be positive)"
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name='products',
        help_text="Product category"
    )
    version = models.PositiveIntegerField(
        default=1,
        editable=False,
        help_text="Row version, incremented on every update"
    )

    objects = ProductManager()

    class Meta:
        verbose_name = "Product"
        verbose_name_plural = "Products"
        ordering = ['name']
        indexes = [
            models.Index(fields=['name'], name='product_name_idx'),
        ]

    def __str__(self):
        return self.name
