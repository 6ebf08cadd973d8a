"""
Template tags that draw gallery slots.

Every tag takes a raw ref (or a parsed one) and picks one of three
renderings: the stored image, the "coming soon" label for generated
placeholder slots, or a generic placeholder box for anything else.

Usage:
    {% load gallery_images %}
    {% diamond_image ref alt="Color 1" active=True %}
    {% main_image snapshot.displayed %}
    {% lightbox_image snapshot.lightbox_image %}
    {% lightbox_thumbnail ref index=forloop.counter0 active=True %}
"""

from django import template
from django.templatetags.static import static
from django.utils.html import format_html

from catalog.services.branding import get_brand_color
from catalog.services.gallery import Placeholder, RealImage, parse_image_ref

register = template.Library()

COMING_SOON_LINES = ("Coming", "Soon...")
LOGO_MARK = "catalog/img/logo-mark.svg"


def _coming_soon(css_class):
    return format_html(
        '<span class="{}">{}<br>{}</span>',
        css_class,
        COMING_SOON_LINES[0],
        COMING_SOON_LINES[1],
    )


@register.simple_tag
def placeholder_box(text="Image Coming Soon...", width=150, height=150,
                    background="#f3f4f6", color="#111827"):
    """Generic stand-in: logo mark over a caption, in a fixed-size box."""
    return format_html(
        '<div class="product-placeholder" style="width:{}px;height:{}px;background:{}">'
        '<img src="{}" alt="" width="32" height="32" class="product-placeholder__logo">'
        '<span class="product-placeholder__text" style="color:{}">{}</span>'
        '</div>',
        width,
        height,
        background,
        static(LOGO_MARK),
        color,
        text,
    )


@register.simple_tag
def diamond_image(ref, alt="", active=False):
    """
    Diamond-shaped thumbnail for the colour/project rows.

    `active` only adds the highlight class.
    """
    parsed = parse_image_ref(ref)
    classes = "diamond-thumb diamond-thumb--active" if active else "diamond-thumb"

    if isinstance(parsed, RealImage):
        inner = format_html(
            '<span class="diamond-thumb__image"><img src="{}" alt="{}" class="object-cover" loading="lazy"></span>',
            parsed.path,
            alt,
        )
        variant = "real"
    elif isinstance(parsed, Placeholder):
        inner = _coming_soon("diamond-thumb__label")
        variant = "placeholder"
    else:
        inner = format_html(
            '<span class="diamond-thumb__generic">{}</span>',
            placeholder_box(text=alt, width=36, height=36, background="#f3f4f6", color="#6b7280"),
        )
        variant = "generic"

    return format_html('<div class="{} diamond-thumb--{}">{}</div>', classes, variant, inner)


@register.simple_tag
def main_image(ref, alt="Product Image"):
    """Large image in the main gallery slot."""
    parsed = parse_image_ref(ref)
    if isinstance(parsed, RealImage):
        return format_html(
            '<img src="{}" alt="{}" class="main-image object-contain">',
            parsed.path,
            alt,
        )
    if isinstance(parsed, Placeholder):
        return _coming_soon("main-image__label")
    return placeholder_box(text=parsed.label, width=280, height=210, background="#f9fafb", color="#111827")


@register.simple_tag
def lightbox_image(ref, alt="Full Image"):
    """Full-size image inside the lightbox overlay."""
    if ref is None:
        return ""
    parsed = parse_image_ref(ref)
    if isinstance(parsed, RealImage):
        return format_html(
            '<img src="{}" alt="{}" class="lightbox__image object-contain">',
            parsed.path,
            alt,
        )
    if isinstance(parsed, Placeholder):
        return _coming_soon("lightbox__label")
    return placeholder_box(text=parsed.raw or alt, width=600, height=400, background="#222", color="#fff")


@register.simple_tag
def lightbox_thumbnail(ref, index=0, active=False):
    """Square thumbnail in the lightbox strip."""
    parsed = parse_image_ref(ref)
    classes = "lightbox-thumb lightbox-thumb--active" if active else "lightbox-thumb"
    if isinstance(parsed, RealImage):
        inner = format_html(
            '<img src="{}" alt="Thumb {}" width="64" height="64" class="object-cover">',
            parsed.path,
            index + 1,
        )
    else:
        inner = format_html('<span class="lightbox-thumb__text">{}</span>', parsed.raw)
    return format_html('<span class="{}">{}</span>', classes, inner)


@register.filter
def brand_color(brand):
    return get_brand_color(brand)
