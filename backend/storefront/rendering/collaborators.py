# storefront/rendering/collaborators.py
"""
Contracts of the services that feed data into rendered sections.

They live outside this package; the dispatcher only calls them through
resolvers registered per ``Renderer.data_source``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Protocol, TypedDict


class Category(TypedDict):
    id: str
    name: str
    image: str
    order: int
    isActive: bool


class CatalogService(Protocol):
    def list_categories(self) -> List[Category]: ...

    def list_products(self, **filters: Any) -> List[Dict[str, Any]]: ...


class BannerService(Protocol):
    def list_sliders(self) -> List[Dict[str, Any]]: ...

    def list_side_banners(self) -> List[Dict[str, Any]]: ...


class ImageUploadService(Protocol):
    def upload(self, data: bytes, filename: str) -> str:
        """Store the binary and return its public URL."""
        ...


def catalog_resolvers(catalog: CatalogService) -> Dict[str, Any]:
    return {
        "catalog.categories": lambda section: [
            c for c in catalog.list_categories() if c.get("isActive", True)
        ],
        "catalog.featured": lambda section: catalog.list_products(featured=True),
        "catalog.products": lambda section: catalog.list_products(),
        "catalog.new_arrivals": lambda section: catalog.list_products(sort="newest"),
    }


def banner_resolvers(banners: BannerService) -> Dict[str, Any]:
    return {
        "banners.sliders": lambda section: banners.list_sliders(),
        "banners.side": lambda section: banners.list_side_banners(),
        "banners.carousel": lambda section: {
            "sliders": banners.list_sliders(),
            "side_banners": banners.list_side_banners(),
        },
    }
