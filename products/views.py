from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from . import services
from .models import Product
from .serializers import (
    CategorySerializer,
    ProductListSerializer,
    ProductDetailSerializer,
    ProductFormSerializer,
    ProductEditSerializer,
)
from .permissions import (
    OperationRolePermission,
    PRODUCT_OPERATION_ROLES,
    CATEGORY_OPERATION_ROLES,
)


@extend_schema_view(
    list=extend_schema(
        tags=['Categories'],
        summary='List all categories',
        description='Category choices for the product create and edit forms.',
    ),
)
class CategoryViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    Read-only category listing.

    Provides:
    - list: GET /api/categories/
    """
    serializer_class = CategorySerializer
    permission_classes = [OperationRolePermission]
    operation_roles = CATEGORY_OPERATION_ROLES

    def get_queryset(self):
        return services.list_categories()


@extend_schema_view(
    list=extend_schema(
        tags=['Products'],
        summary='List products',
        description='Products ordered by name, 10 per page, optionally filtered by a case-insensitive name search.',
        parameters=[
            OpenApiParameter(
                name='search',
                type=OpenApiTypes.STR,
                description='Substring to look for in product names'
            ),
            OpenApiParameter(
                name='page',
                type=OpenApiTypes.INT,
                description='1-based page number (defaults to 1)'
            ),
        ]
    ),
    retrieve=extend_schema(
        tags=['Products'],
        summary='Get product details',
        description='Retrieve a product together with its category.',
    ),
    create=extend_schema(
        tags=['Products'],
        summary='Create a new product',
        description='Create a new product (Admin only).',
        request=ProductFormSerializer,
        responses={201: ProductDetailSerializer},
    ),
    update=extend_schema(
        tags=['Products'],
        summary='Update product',
        description='Replace name, price and category of a product (Admin only). '
                    'The body must repeat the product id and the version that was loaded.',
        request=ProductEditSerializer,
        responses={200: ProductDetailSerializer},
    ),
    destroy=extend_schema(
        tags=['Products'],
        summary='Delete product',
        description='Delete a product. Deleting a product that does not exist succeeds.',
    ),
)
class ProductViewSet(viewsets.GenericViewSet):
    """
    ViewSet for product browsing and administration.

    Provides:
    - list: GET /api/products/?search=&page=
    - retrieve: GET /api/products/{id}/
    - create_form: GET /api/products/create/
    - create: POST /api/products/
    - edit_form: GET /api/products/{id}/edit/
    - edit: POST /api/products/{id}/edit/
    - update: PUT /api/products/{id}/
    - delete_confirm: GET /api/products/{id}/delete/
    - delete_execute: POST /api/products/{id}/delete/
    - destroy: DELETE /api/products/{id}/

    Required roles per action live in ``PRODUCT_OPERATION_ROLES``.
    """
    queryset = Product.objects.all()
    serializer_class = ProductDetailSerializer
    permission_classes = [OperationRolePermission]
    operation_roles = PRODUCT_OPERATION_ROLES

    def list(self, request):
        page = services.list_products(
            search_string=request.query_params.get('search'),
            page=request.query_params.get('page'),
        )
        return Response({
            'items': ProductListSerializer(page.items, many=True).data,
            'page': page.page_number,
            'page_size': page.page_size,
            'total_count': page.total_count,
            'total_pages': page.total_pages,
            'has_previous': page.has_previous,
            'has_next': page.has_next,
            'current_filter': page.current_filter,
        })

    def retrieve(self, request, pk=None):
        product = services.get_product_detail(pk)
        return Response(ProductDetailSerializer(product).data)

    @extend_schema(
        tags=['Products'],
        summary='Create form',
        description='Category choices for a new product (Admin only).',
    )
    @action(detail=False, methods=['get'], url_path='create')
    def create_form(self, request):
        return Response(services.get_create_form())

    def create(self, request):
        product = services.create_product(request.data)
        return Response(
            ProductDetailSerializer(services.get_product_detail(product.pk)).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(
        tags=['Products'],
        summary='Edit form',
        description='The product as currently stored plus category choices (Admin only).',
    )
    @action(detail=True, methods=['get'], url_path='edit')
    def edit_form(self, request, pk=None):
        form = services.get_edit_form(pk)
        return Response({
            'product': ProductListSerializer(form['product']).data,
            'categories': form['categories'],
        })

    @extend_schema(
        tags=['Products'],
        summary='Submit edit form',
        description='Same as PUT /api/products/{id}/ (Admin only).',
        request=ProductEditSerializer,
        responses={200: ProductDetailSerializer},
    )
    @edit_form.mapping.post
    def edit(self, request, pk=None):
        return self.update(request, pk=pk)

    def update(self, request, pk=None):
        product = services.update_product(pk, request.data)
        return Response(ProductDetailSerializer(product).data)

    @extend_schema(
        tags=['Products'],
        summary='Confirm delete',
        description='The product that would be deleted, with its category.',
    )
    @action(detail=True, methods=['get'], url_path='delete')
    def delete_confirm(self, request, pk=None):
        product = services.get_delete_confirmation(pk)
        return Response(ProductDetailSerializer(product).data)

    @extend_schema(
        tags=['Products'],
        summary='Execute delete',
        description='Delete the product. Succeeds even if it no longer exists.',
    )
    @delete_confirm.mapping.post
    def delete_execute(self, request, pk=None):
        return self.destroy(request, pk=pk)

    def destroy(self, request, pk=None):
        services.delete_product(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
