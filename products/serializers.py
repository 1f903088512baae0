from rest_framework import serializers

from .models import Category, Product, MIN_PRICE


class CategorySerializer(serializers.ModelSerializer):
    """
    Category choice as offered on the create and edit forms.
    """

    class Meta:
        model = Category
        fields = ['id', 'name']
        read_only_fields = ['id']


class ProductListSerializer(serializers.ModelSerializer):
    """
    Lightweight serializer for product list views.
    Does not resolve the category.
    """

    class Meta:
        model = Product
        fields = ['id', 'name', 'price', 'category_id', 'version']
        read_only_fields = fields


class ProductDetailSerializer(serializers.ModelSerializer):
    """
    Detailed serializer for detail and delete-confirm views.
    Includes the resolved category.
    """
    category = CategorySerializer(read_only=True)

    class Meta:
        model = Product
        fields = ['id', 'name', 'price', 'category_id', 'category', 'version']
        read_only_fields = fields


class ProductFormSerializer(serializers.Serializer):
    """
    Validates the create form: name, price and category.
    """
    name = serializers.CharField(
        max_length=200,
        error_messages={
            'required': 'The Name field is required.',
            'blank': 'The Name field is required.',
        }
    )
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=MIN_PRICE,
        error_messages={
            'required': 'The Price field is required.',
            'null': 'The Price field is required.',
            'min_value': 'Price must be a positive value.',
        }
    )
    category_id = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        error_messages={
            'required': 'The CategoryId field is required.',
            'null': 'The CategoryId field is required.',
            'does_not_exist': 'Category "{pk_value}" does not exist.',
        },
        help_text="ID of an existing category"
    )

    def validate_name(self, value):
        """Reject whitespace-only names"""
        value = value.strip()
        if not value:
            raise serializers.ValidationError("The Name field is required.")
        return value

    def to_store_fields(self):
        """Validated data as keyword arguments for the Product model."""
        data = self.validated_data
        return {
            'name': data['name'],
            'price': data['price'],
            'category': data['category_id'],
        }


class ProductEditSerializer(ProductFormSerializer):
    """
    Validates the edit form. Besides the create fields it carries the
    product id (which must match the URL) and the version the client loaded.
    """
    id = serializers.IntegerField(required=False, allow_null=True)
    version = serializers.IntegerField(
        min_value=1,
        error_messages={
            'required': 'The Version field is required.',
        }
    )
