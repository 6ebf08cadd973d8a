"""
Product views: catalog listing and the product detail page with its gallery.

The gallery is fully server rendered. Each arrow, thumbnail and lightbox
control is a link whose query string replays the interaction (see
`catalog.services.gallery_requests`).
"""

import logging

from django.shortcuts import get_object_or_404, render
from django.utils.http import urlencode

from ..models import Product
from ..services import build_product_gallery, get_brand_color, resolve_gallery_request
from ..services.gallery import ARROW_LEFT, ARROW_RIGHT, ESCAPE, SLOT_COUNT

logger = logging.getLogger(__name__)


def _query(**params):
    cleaned = {key: value for key, value in params.items() if value is not None}
    return f"?{urlencode(cleaned)}" if cleaned else "?"


def _thumb_rows(snapshot):
    """
    Colour and project thumbnail rows: (ref, alt, active, url) per slot.
    """
    sequence = snapshot.gallery.sequence
    rows = {}
    for name, refs, offset, label in (
        ('color', sequence.color, 0, 'Color'),
        ('project', sequence.project, SLOT_COUNT, 'Project'),
    ):
        rows[name] = [
            {
                'ref': ref,
                'alt': f'{label} {idx + 1}',
                'active': ref == snapshot.displayed,
                'url': _query(image=offset + idx),
            }
            for idx, ref in enumerate(refs)
        ]
    return rows


def _gallery_links(snapshot):
    """
    Links for the inline arrows, the main image and the lightbox controls.
    """
    current = max(snapshot.current_index, 0)
    links = {
        'prev': _query(image=current, nav='prev'),
        'next': _query(image=current, nav='next'),
        'open_lightbox': _query(image=current, lightbox=current),
    }
    if snapshot.lightbox_open:
        index = snapshot.lightbox_index
        links.update({
            'lightbox_close': _query(image=current),
            'lightbox_prev': _query(image=current, lightbox=index, key=ARROW_LEFT),
            'lightbox_next': _query(image=current, lightbox=index, key=ARROW_RIGHT),
            'lightbox_escape': _query(image=current, lightbox=index, key=ESCAPE),
            'lightbox_thumbs': [
                {
                    'ref': ref,
                    'index': idx,
                    'active': idx == index,
                    'url': _query(image=current, lightbox=idx),
                }
                for idx, ref in enumerate(snapshot.gallery.sequence.combined)
            ],
        })
    return links


def product_list(request):
    """
    Active products with their thumbnail image.
    """
    products = Product.objects.active().order_by('product_name', 'id')
    brand = request.GET.get('brand', '').strip()
    if brand:
        products = products.filter(brand__iexact=brand)
    return render(
        request,
        'catalog/product_list.html',
        {
            'products': products,
            'brand': brand,
        },
    )


def product_detail(request, slug):
    """
    Product detail page: gallery on one side, specification table on the other.

    Query parameters (all optional):
        image: displayed slot index
        nav: next|prev, applied to `image`
        lightbox: open the lightbox at this slot
        key: key press for the open lightbox (Escape, ArrowLeft, ArrowRight)
    """
    product = get_object_or_404(Product.objects.active(), slug=slug)
    gallery = build_product_gallery(product)
    snapshot = resolve_gallery_request(gallery, request.GET)

    if request.GET.get('key') and not snapshot.key_handled:
        logger.debug("Key %r ignored for product %s", request.GET.get('key'), product.slug)

    return render(
        request,
        'catalog/product_detail.html',
        {
            'product': product,
            'brand_color': get_brand_color(product.brand),
            'snapshot': snapshot,
            'thumbs': _thumb_rows(snapshot),
            'links': _gallery_links(snapshot),
            'spec_rows': product.specification_rows(),
        },
    )
