from django.db import models
from django.urls import reverse


class ProductQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)


class Product(models.Model):
    """
    A paver/hardscape product as shown on the catalog detail page.

    Gallery inputs are stored as ordered lists of image paths; placeholder
    slots are never stored, they are generated when the gallery is built.
    """
    product_name = models.CharField(max_length=200, verbose_name='Product name')
    slug = models.SlugField(max_length=220, unique=True)
    brand = models.CharField(max_length=100, blank=True, db_index=True)
    product_type = models.CharField(max_length=100, blank=True, verbose_name='Product type')

    color = models.CharField(max_length=100, blank=True)
    size = models.CharField(max_length=50, blank=True)
    thickness = models.CharField(max_length=50, blank=True)
    thickness_in = models.DecimalField(max_digits=5, decimal_places=2, blank=True, null=True, verbose_name='Thickness (in)')
    sqft_pallet = models.DecimalField(max_digits=8, decimal_places=2, blank=True, null=True, verbose_name='Sqft/Pallet')
    sqft_layer = models.DecimalField(max_digits=8, decimal_places=2, blank=True, null=True, verbose_name='Sqft/Layer')
    lnft_pallet = models.DecimalField(max_digits=8, decimal_places=2, blank=True, null=True, verbose_name='Lnft/Pallet')
    layer_pallet = models.PositiveIntegerField(blank=True, null=True, verbose_name='Layer/Pallet')
    pcs_pallet = models.PositiveIntegerField(blank=True, null=True, verbose_name='Pcs/Pallet')
    product_note = models.TextField(blank=True, verbose_name='Product note')
    colors_available = models.JSONField(default=list, blank=True, verbose_name='Colors available')
    thicknesses_available = models.JSONField(default=list, blank=True, verbose_name='Thicknesses available')

    main_image = models.CharField(max_length=500, blank=True, verbose_name='Main image path')
    color_images = models.JSONField(default=list, blank=True, verbose_name='Color image paths')
    project_images = models.JSONField(default=list, blank=True, verbose_name='Project image paths')

    is_active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ProductQuerySet.as_manager()

    class Meta:
        ordering = ['product_name', 'id']
        verbose_name = 'Product'
        verbose_name_plural = 'Products'

    def __str__(self):
        return self.product_name

    def get_absolute_url(self):
        return reverse('product_detail', kwargs={'slug': self.slug})

    def gallery_record(self):
        """The record shape the gallery builder consumes."""
        return {
            'mainImage': self.main_image or '',
            'colorImages': self.color_images or [],
            'projectImages': self.project_images or [],
        }

    def specification_rows(self):
        """
        Label/value pairs for the specification table, in display order.
        """
        def _plain(value):
            if value is None:
                return ''
            if hasattr(value, 'normalize'):
                # Decimal('2.50') -> '2.5'
                return format(value.normalize(), 'f')
            return value

        def _joined(values):
            if not values:
                return ''
            if isinstance(values, str):
                values = [values]
            return ', '.join(str(item) for item in values if item not in (None, ''))

        return [
            ('Color', self.color),
            ('Product Type', self.product_type),
            ('Size', self.size),
            ('Thickness', self.thickness),
            ('Thickness (in)', _plain(self.thickness_in)),
            ('Sqft/Pallet', _plain(self.sqft_pallet)),
            ('Sqft/Layer', _plain(self.sqft_layer)),
            ('Lnft/Pallet', _plain(self.lnft_pallet)),
            ('Layer/Pallet', _plain(self.layer_pallet)),
            ('Pcs/Pallet', _plain(self.pcs_pallet)),
            ('Colors Available', _joined(self.colors_available)),
            ('Thicknesses Available', _joined(self.thicknesses_available)),
        ]
