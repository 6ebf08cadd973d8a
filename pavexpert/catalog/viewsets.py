"""
Django REST Framework ViewSets for the catalog API.
"""

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .models import Product
from .serializers import GallerySnapshotSerializer, ProductDetailSerializer, ProductListSerializer
from .services import build_product_gallery, resolve_gallery_request


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only products.

    Provides:
        - list: GET /api/products/
        - retrieve: GET /api/products/{slug}/
        - gallery: GET /api/products/{slug}/gallery/?image=&nav=&lightbox=&key=
    """
    permission_classes = [AllowAny]
    lookup_field = 'slug'

    def get_queryset(self):
        queryset = Product.objects.active().order_by('product_name', 'id')
        brand = self.request.query_params.get('brand')
        if brand:
            queryset = queryset.filter(brand__iexact=brand)
        return queryset

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return ProductDetailSerializer
        return ProductListSerializer

    @action(detail=True, methods=['get'], url_path='gallery')
    def gallery(self, request, slug=None):
        """
        Gallery slots and resolved gallery/lightbox state, same query
        parameters as the product page.
        """
        product = self.get_object()
        snapshot = resolve_gallery_request(build_product_gallery(product), request.query_params)
        return Response(GallerySnapshotSerializer(snapshot).data)
