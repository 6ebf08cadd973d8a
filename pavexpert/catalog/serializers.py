"""
Django REST Framework serializers for the catalog API.
"""

from rest_framework import serializers

from .models import Product
from .services import get_brand_color


class ProductListSerializer(serializers.ModelSerializer):
    """
    Minimal product info for listings.

    Fields:
        - id, product_name, slug, brand, product_type
        - main_image: thumbnail path as stored
        - brand_color: accent colour for the brand line
    """
    brand_color = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = ['id', 'product_name', 'slug', 'brand', 'product_type', 'main_image', 'brand_color']

    def get_brand_color(self, obj):
        return get_brand_color(obj.brand)


class ProductDetailSerializer(ProductListSerializer):
    specifications = serializers.SerializerMethodField()

    class Meta(ProductListSerializer.Meta):
        fields = ProductListSerializer.Meta.fields + [
            'color', 'size', 'thickness', 'thickness_in',
            'sqft_pallet', 'sqft_layer', 'lnft_pallet', 'layer_pallet', 'pcs_pallet',
            'product_note', 'colors_available', 'thicknesses_available',
            'color_images', 'project_images', 'specifications',
        ]

    def get_specifications(self, obj):
        return [{'label': label, 'value': value} for label, value in obj.specification_rows()]


class LightboxSerializer(serializers.Serializer):
    open = serializers.BooleanField(source='lightbox_open')
    index = serializers.IntegerField(source='lightbox_index', allow_null=True)
    image = serializers.CharField(source='lightbox_image', allow_null=True)


class GallerySnapshotSerializer(serializers.Serializer):
    """
    Resolved gallery state (`GallerySnapshot`) for one product.

    Fields:
        - color_images / project_images: the padded 10-slot rows
        - combined: colour slots followed by project slots
        - displayed / current_index: inline gallery state
        - placeholders: per combined slot, 'color'/'project' or null
        - lightbox: {open, index, image}
    """
    color_images = serializers.SerializerMethodField()
    project_images = serializers.SerializerMethodField()
    combined = serializers.SerializerMethodField()
    displayed = serializers.CharField()
    current_index = serializers.IntegerField()
    placeholders = serializers.SerializerMethodField()
    lightbox = LightboxSerializer(source='*')

    def get_color_images(self, obj):
        return list(obj.gallery.sequence.color)

    def get_project_images(self, obj):
        return list(obj.gallery.sequence.project)

    def get_combined(self, obj):
        return list(obj.gallery.sequence.combined)

    def get_placeholders(self, obj):
        return obj.placeholder_kinds()
