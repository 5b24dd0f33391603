"""Catalog URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.catalog.views import CatalogViewSet

router = DefaultRouter(trailing_slash=False)
router.register("catalog", CatalogViewSet, basename="catalog")

urlpatterns = router.urls
