from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('product_name', 'brand', 'product_type', 'color', 'is_active', 'updated_at')
    list_filter = ('brand', 'product_type', 'is_active')
    search_fields = ('product_name', 'slug', 'brand', 'color')
    prepopulated_fields = {'slug': ('product_name',)}
