from django.contrib import admin
from django.utils.html import format_html
from .models import Category, Product


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    """
    Admin interface for Category model.
    Categories are only created and edited here.
    """
    list_display = ['name', 'product_count']
    search_fields = ['name']
    ordering = ['name']

    def product_count(self, obj):
        """Display count of products in category"""
        count = obj.products.count()
        return format_html('<strong>{}</strong>', count)
    product_count.short_description = 'Products'


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """
    Admin interface for Product model.
    """
    list_display = ['name', 'price', 'category', 'version']
    list_filter = ['category']
    search_fields = ['name']
    list_select_related = ['category']
    readonly_fields = ['version']
    autocomplete_fields = ['category']
    ordering = ['name']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'category')
        }),
        ('Pricing', {
            'fields': ('price',)
        }),
        ('Concurrency', {
            'fields': ('version',),
            'classes': ('collapse',)
        }),
    )

    def save_model(self, request, obj, form, change):
        """Admin edits count as updates and bump the version"""
        if change:
            obj.version += 1
        super().save_model(request, obj, form, change)
