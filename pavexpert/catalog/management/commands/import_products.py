"""
Import product records from a JSON file (upsert by slug).

The file holds a JSON array of records in the site's product data shape:
product_name, slug, brand, product_type, color, size, thickness, ...,
product_color_images, product_project_images, product_image_thumbnail.
"""
import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils.text import slugify

from catalog.models import Product

logger = logging.getLogger(__name__)

TEXT_FIELDS = ('brand', 'product_type', 'color', 'size', 'thickness', 'product_note')
DECIMAL_FIELDS = ('thickness_in', 'sqft_pallet', 'sqft_layer', 'lnft_pallet')
INTEGER_FIELDS = ('layer_pallet', 'pcs_pallet')
LIST_FIELDS = {
    'colors_available': 'colors_available',
    'thicknesses_available': 'thicknesses_available',
    'product_color_images': 'color_images',
    'product_project_images': 'project_images',
}


def _to_decimal(value):
    if value in (None, ''):
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


def _to_int(value):
    if value in (None, ''):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _to_str_list(value):
    if not value:
        return []
    if isinstance(value, str):
        value = [value]
    return [str(item) for item in value if item not in (None, '')]


def record_to_fields(record):
    """
    Map one JSON record to Product field values. Returns (slug, defaults).
    """
    name = (record.get('product_name') or '').strip()
    if not name:
        raise CommandError(f"Product record without product_name: {record!r}")
    slug = (record.get('slug') or '').strip() or slugify(name)

    defaults = {'product_name': name, 'is_active': True}
    for field in TEXT_FIELDS:
        value = record.get(field)
        defaults[field] = '' if value is None else str(value)
    for field in DECIMAL_FIELDS:
        defaults[field] = _to_decimal(record.get(field))
    for field in INTEGER_FIELDS:
        defaults[field] = _to_int(record.get(field))
    for source, field in LIST_FIELDS.items():
        defaults[field] = _to_str_list(record.get(source))
    defaults['main_image'] = str(record.get('product_image_thumbnail') or '')
    return slug, defaults


class Command(BaseCommand):
    help = 'Imports product records (with gallery image paths) from a JSON file'

    def add_arguments(self, parser):
        parser.add_argument('path', type=str, help='JSON file with an array of product records')
        parser.add_argument(
            '--deactivate-missing',
            action='store_true',
            help='Mark products whose slug is not in the file as inactive',
        )

    def handle(self, *args, **options):
        path = Path(options['path'])
        try:
            payload = json.loads(path.read_text(encoding='utf-8'))
        except OSError as exc:
            raise CommandError(f"Cannot read {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise CommandError(f"Invalid JSON in {path}: {exc}") from exc

        if not isinstance(payload, list):
            raise CommandError("Expected a JSON array of product records")

        created = updated = 0
        seen_slugs = []
        with transaction.atomic():
            for record in payload:
                if not isinstance(record, dict):
                    raise CommandError(f"Product record must be an object, got {type(record).__name__}")
                slug, defaults = record_to_fields(record)
                _, was_created = Product.objects.update_or_create(slug=slug, defaults=defaults)
                logger.debug("%s product %s", "Created" if was_created else "Updated", slug)
                seen_slugs.append(slug)
                if was_created:
                    created += 1
                else:
                    updated += 1

            deactivated = 0
            if options['deactivate_missing']:
                deactivated = (
                    Product.objects.exclude(slug__in=seen_slugs)
                    .filter(is_active=True)
                    .update(is_active=False)
                )

        message = f'Imported products: {created} created, {updated} updated'
        if options['deactivate_missing']:
            message += f', {deactivated} deactivated'
        self.stdout.write(self.style.SUCCESS(message))
