# storefront/domain/registry.py
from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class SectionType(str, Enum):
    HERO = "hero"
    FEATURED = "featured"
    CATEGORIES = "categories"
    PRODUCTS = "products"
    TEXT = "text"
    IMAGE = "image"
    TESTIMONIALS = "testimonials"
    BANNER = "banner"
    COUNTDOWN = "countdown"
    NEWSLETTER = "newsletter"
    VIDEO = "video"
    SOCIAL = "social"
    FAQ = "faq"
    CONTACT = "contact"
    GALLERY = "gallery"
    BLOG = "blog"
    TEAM = "team"
    STATS = "stats"
    PRICING = "pricing"
    FEATURES = "features"
    TIMELINE = "timeline"
    MAP = "map"
    SEARCH = "search"
    REVIEWS = "reviews"
    BRANDS = "brands"
    ACCORDION = "accordion"
    TABS = "tabs"
    CAROUSEL = "carousel"
    COMPARISON = "comparison"
    CTA = "cta"
    DIVIDER = "divider"
    SPACER = "spacer"
    BREADCRUMB = "breadcrumb"
    ALERT = "alert"
    PROGRESS = "progress"
    CHAT = "chat"
    CALENDAR = "calendar"
    SLIDERS = "sliders"
    SIDE_BANNERS = "side-banners"
    CAROUSEL_WITH_SIDE_BANNERS = "carousel-with-side-banners"
    NEW_ARRIVALS = "new-arrivals"


@dataclass(frozen=True)
class Renderer:
    """
    Handle for the presentation unit of a section type.

    component:   name of the client-side component that draws the section
    data_source: name of the external collaborator feeding it, if any
    fallback:    True for the generic placeholder used for unknown types
    """
    component: str
    data_source: Optional[str] = None
    fallback: bool = False


DEFAULT_ANIMATIONS: Dict[str, Any] = {
    "entrance": "fadeIn",
    "duration": 600,
    "delay": 0,
}

FALLBACK_RENDERER = Renderer(component="PlaceholderSection", fallback=True)

# Only types whose renderer reads specific keys get non-empty defaults.
_DEFAULT_SETTINGS: Dict[str, Dict[str, Any]] = {
    "hero": {
        "showOverlay": True,
        "overlayOpacity": 50,
        "textAlignment": "center",
        "backgroundColor": "#1F2937",
        "title": "Welcome to Our Store",
        "subtitle": "Discover amazing products at great prices",
        "buttonText": "Shop Now",
        "buttonLink": "/products",
    },
    "featured": {
        "itemsPerRow": 4,
        "showDescription": True,
        "showPrice": True,
        "backgroundColor": "#FFFFFF",
        "title": "Featured Products",
    },
    "categories": {
        "displayStyle": "grid",
        "itemsPerRow": 6,
        "showNames": True,
        "backgroundColor": "#F9FAFB",
        "title": "Shop by Category",
    },
    "products": {"itemsPerRow": 4, "showFilters": True, "sortOptions": True},
    "new-arrivals": {"title": "New Arrivals", "maxRows": 2},
    "video": {"videoUrl": "", "autoplay": False, "showControls": True},
    "banner": {"backgroundColor": "#EF4444", "textColor": "#FFFFFF"},
    "sliders": {"backgroundColor": "#FFFFFF"},
    "side-banners": {"backgroundColor": "#FFFFFF"},
    "newsletter": {"content": "Subscribe for exclusive offers and updates"},
    "spacer": {"height": 48},
    "divider": {"style": "solid"},
    "gallery": {"itemsPerRow": 3},
    "testimonials": {"layout": "grid", "itemsPerRow": 2},
}

_RENDERERS: Dict[str, Renderer] = {
    "hero": Renderer("Hero", data_source="hero"),
    "featured": Renderer("FeaturedProducts", data_source="catalog.featured"),
    "categories": Renderer("CategoryGrid", data_source="catalog.categories"),
    "products": Renderer("ProductGrid", data_source="catalog.products"),
    "new-arrivals": Renderer("NewArrivals", data_source="catalog.new_arrivals"),
    "sliders": Renderer("HomepageSliders", data_source="banners.sliders"),
    "side-banners": Renderer("SideCategoryBanners", data_source="banners.side"),
    "carousel-with-side-banners": Renderer(
        "CarouselWithSideBanners", data_source="banners.carousel"
    ),
    "text": Renderer("TextSection"),
    "image": Renderer("ImageSection"),
    "video": Renderer("VideoSection"),
    "banner": Renderer("PromoBanner"),
    "countdown": Renderer("CountdownSection"),
    "newsletter": Renderer("NewsletterSection"),
    "testimonials": Renderer("TestimonialsSection"),
    "gallery": Renderer("GallerySection"),
    "blog": Renderer("BlogSection"),
    "team": Renderer("TeamSection"),
    "stats": Renderer("StatsSection"),
    "pricing": Renderer("PricingSection"),
    "features": Renderer("FeaturesSection"),
    "timeline": Renderer("TimelineSection"),
    "accordion": Renderer("AccordionSection"),
    "search": Renderer("SearchSection"),
    "map": Renderer("MapSection"),
    "cta": Renderer("CallToAction"),
    "divider": Renderer("Divider"),
    "spacer": Renderer("Spacer"),
    "alert": Renderer("AlertSection"),
}


def is_known_type(section_type: Any) -> bool:
    return section_type in SectionType._value2member_map_


def describe(section_type: Any) -> Dict[str, Dict[str, Any]]:
    """
    Default settings and animations for a section type.

    Unknown types get empty settings and the stock animations; lookups
    never raise so stored layouts from newer builds still load.
    Returned dicts are fresh copies.
    """
    settings = _DEFAULT_SETTINGS.get(section_type, {}) if isinstance(section_type, str) else {}

    return {
        "default_settings": copy.deepcopy(settings),
        "default_animations": dict(DEFAULT_ANIMATIONS),
    }


def renderer_for(section_type: Any) -> Renderer:
    if not isinstance(section_type, str):
        return FALLBACK_RENDERER
    return _RENDERERS.get(section_type, FALLBACK_RENDERER)


def type_label(section_type: Any) -> str:
    """Human label used for generated titles ("new-arrivals" -> "New Arrivals")."""
    text = str(section_type or "section")
    return " ".join(part.capitalize() for part in text.replace("_", "-").split("-") if part)
