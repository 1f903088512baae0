from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import CategoryViewSet, ProductViewSet

# Create a router and register our viewsets
router = DefaultRouter()
router.register(r'categories', CategoryViewSet, basename='category')
router.register(r'products', ProductViewSet, basename='product')

# The API URLs are determined automatically by the router
urlpatterns = [
    path('', include(router.urls)),
]

"""
Available endpoints:

CATEGORIES:
- GET    /api/categories/                 - List category choices

PRODUCTS:
- GET    /api/products/                   - List products (paged, searchable)
- GET    /api/products/{id}/              - Product details with category
- GET    /api/products/create/            - Create form: category choices (Admin)
- POST   /api/products/                   - Create a product (Admin)
- GET    /api/products/{id}/edit/         - Edit form: product + category choices (Admin)
- POST   /api/products/{id}/edit/         - Submit edit form (Admin)
- PUT    /api/products/{id}/              - Update a product (Admin)
- GET    /api/products/{id}/delete/       - Delete confirmation
- POST   /api/products/{id}/delete/       - Delete a product
- DELETE /api/products/{id}/              - Delete a product

Query Parameters:

Products:
- ?search=keyword   (case-insensitive substring of the name)
- ?page=2           (1-based, 10 products per page)
"""
