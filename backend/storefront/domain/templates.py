# storefront/domain/templates.py
from __future__ import annotations

import copy
from typing import Any, Dict, List

from .exceptions import UnknownTemplateError

# Installed (and persisted) when a store has no saved layout yet.
DEFAULT_LAYOUT: List[Dict[str, Any]] = [
    {
        "id": "hero-default",
        "type": "hero",
        "title": "Hero Banner",
        "enabled": True,
        "order": 0,
        "settings": {
            "showOverlay": True,
            "overlayOpacity": 50,
            "textAlignment": "center",
            "backgroundColor": "#1F2937",
            "title": "Welcome to Our Store",
            "subtitle": "Discover amazing products at great prices",
            "buttonText": "Shop Now",
            "buttonLink": "/products",
        },
        "animations": {"entrance": "fadeIn", "duration": 1000, "delay": 0},
    },
    {
        "id": "featured-default",
        "type": "featured",
        "title": "Featured Products",
        "enabled": True,
        "order": 1,
        "settings": {
            "itemsPerRow": 4,
            "showDescription": True,
            "showPrice": True,
            "backgroundColor": "#FFFFFF",
            "title": "Featured Products",
            "subtitle": "Check out our best-selling items",
        },
        "animations": {"entrance": "slideUp", "duration": 800, "delay": 200},
    },
    {
        "id": "categories-default",
        "type": "categories",
        "title": "Product Categories",
        "enabled": True,
        "order": 2,
        "settings": {
            "displayStyle": "grid",
            "itemsPerRow": 6,
            "showNames": True,
            "backgroundColor": "#F9FAFB",
            "title": "Shop by Category",
            "subtitle": "Browse our product categories",
        },
        "animations": {"entrance": "fadeInUp", "duration": 600, "delay": 400},
    },
]

LAYOUT_TEMPLATES: Dict[str, Dict[str, Any]] = {
    "modern-ecommerce": {
        "name": "Modern E-commerce",
        "description": "Professional layout with modern design elements",
        "category": "ecommerce",
        "sections": [
            {
                "id": "hero-1",
                "type": "hero",
                "title": "Main Hero",
                "enabled": True,
                "order": 0,
                "settings": {"showOverlay": True, "overlayOpacity": 40, "textAlignment": "center"},
            },
            {
                "id": "banner-1",
                "type": "banner",
                "title": "Promotional Banner",
                "enabled": True,
                "order": 1,
                "settings": {"backgroundColor": "#EF4444", "textColor": "#FFFFFF"},
            },
            {
                "id": "featured-1",
                "type": "featured",
                "title": "Featured Products",
                "enabled": True,
                "order": 2,
                "settings": {"itemsPerRow": 4, "showDescription": True, "showPrice": True},
            },
            {
                "id": "categories-1",
                "type": "categories",
                "title": "Shop by Category",
                "enabled": True,
                "order": 3,
                "settings": {"displayStyle": "grid", "itemsPerRow": 6, "showNames": True},
            },
        ],
    },
    "fashion-boutique": {
        "name": "Fashion Boutique",
        "description": "Elegant design perfect for fashion brands",
        "category": "fashion",
        "sections": [
            {
                "id": "hero-2",
                "type": "hero",
                "title": "Fashion Hero",
                "enabled": True,
                "order": 0,
                "settings": {"showOverlay": True, "overlayOpacity": 30, "textAlignment": "left"},
            },
            {
                "id": "video-1",
                "type": "video",
                "title": "Brand Story",
                "enabled": True,
                "order": 1,
                "settings": {"autoplay": False, "showControls": True},
            },
            {
                "id": "featured-2",
                "type": "featured",
                "title": "New Collection",
                "enabled": True,
                "order": 2,
                "settings": {"itemsPerRow": 3, "showDescription": True, "showPrice": True},
            },
        ],
    },
    "minimal-store": {
        "name": "Minimal Store",
        "description": "Clean and simple design focusing on products",
        "category": "minimal",
        "sections": [
            {
                "id": "hero-3",
                "type": "hero",
                "title": "Simple Hero",
                "enabled": True,
                "order": 0,
                "settings": {"showOverlay": False, "textAlignment": "center"},
            },
            {
                "id": "products-1",
                "type": "products",
                "title": "All Products",
                "enabled": True,
                "order": 1,
                "settings": {"itemsPerRow": 4, "showFilters": True, "sortOptions": True},
            },
        ],
    },
}

# Single-section entries appended next to the existing layout.
COMPONENT_TEMPLATES: Dict[str, Dict[str, Any]] = {
    "hero-promo": {
        "name": "Promotional Hero",
        "type": "hero",
        "category": "Marketing",
        "tags": ["promotion", "banner", "cta"],
        "section": {
            "title": "Special Offer - Limited Time!",
            "settings": {
                "backgroundColor": "#ef4444",
                "textColor": "#ffffff",
                "content": "Save up to 50% on selected items",
            },
        },
    },
    "product-showcase": {
        "name": "Product Showcase",
        "type": "featured",
        "category": "E-commerce",
        "tags": ["products", "showcase", "featured"],
        "section": {
            "title": "Featured Products",
            "settings": {"itemsPerRow": 3, "showPrices": True},
        },
    },
    "testimonial-grid": {
        "name": "Customer Reviews Grid",
        "type": "reviews",
        "category": "Social Proof",
        "tags": ["reviews", "testimonials", "grid"],
        "section": {
            "title": "What Our Customers Say",
            "settings": {"layout": "grid", "itemsPerRow": 2},
        },
    },
    "newsletter-signup": {
        "name": "Newsletter Signup",
        "type": "newsletter",
        "category": "Lead Generation",
        "tags": ["newsletter", "email", "signup"],
        "section": {
            "title": "Stay Updated",
            "settings": {"content": "Subscribe for exclusive offers and updates"},
        },
    },
}


def default_layout() -> List[Dict[str, Any]]:
    return copy.deepcopy(DEFAULT_LAYOUT)


def get_layout_template(template_id: str) -> Dict[str, Any]:
    template = LAYOUT_TEMPLATES.get(template_id)
    if template is None:
        raise UnknownTemplateError(f"Unknown layout template: {template_id}")
    return copy.deepcopy(template)


def get_component_template(template_id: str) -> Dict[str, Any]:
    template = COMPONENT_TEMPLATES.get(template_id)
    if template is None:
        raise UnknownTemplateError(f"Unknown component template: {template_id}")
    return copy.deepcopy(template)
