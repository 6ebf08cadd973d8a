"""
Django REST Framework API URLs with Router.
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .viewsets import ProductViewSet

router = DefaultRouter()
router.register(r'products', ProductViewSet, basename='api-product')

urlpatterns = [
    path('', include(router.urls)),
]

# GET /api/products/                  - product list
# GET /api/products/{slug}/           - product detail
# GET /api/products/{slug}/gallery/   - gallery slots and state
