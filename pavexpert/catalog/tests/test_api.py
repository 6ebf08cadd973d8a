"""
Tests for the catalog REST API (viewsets.py).
"""
from django.urls import reverse
from rest_framework.test import APITestCase

from catalog.models import Product


class ProductApiTests(APITestCase):
    @classmethod
    def setUpTestData(cls):
        cls.product = Product.objects.create(
            product_name='Holland Stardust',
            slug='holland-stardust',
            brand='Las Vegas Paver',
            color='Star Dust',
            main_image='/images/thumb.png',
            color_images=['/images/c1.png', '/images/c2.png'],
            project_images=[],
        )
        Product.objects.create(product_name='Hidden', slug='hidden', is_active=False)

    def test_list(self):
        response = self.client.get(reverse('api-product-list'))
        self.assertEqual(response.status_code, 200)
        slugs = [item['slug'] for item in response.data['results']]
        self.assertEqual(slugs, ['holland-stardust'])
        self.assertEqual(response.data['results'][0]['brand_color'], '#842B38')

    def test_detail(self):
        response = self.client.get(reverse('api-product-detail', kwargs={'slug': 'holland-stardust'}))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['color_images'], ['/images/c1.png', '/images/c2.png'])
        labels = [row['label'] for row in response.data['specifications']]
        self.assertEqual(labels[0], 'Color')
        self.assertIn('Pcs/Pallet', labels)

    def test_gallery_defaults(self):
        response = self.client.get(reverse('api-product-gallery', kwargs={'slug': 'holland-stardust'}))
        self.assertEqual(response.status_code, 200)
        data = response.data
        self.assertEqual(len(data['color_images']), 10)
        self.assertEqual(data['project_images'], [f'PI-{n}' for n in range(1, 11)])
        self.assertEqual(len(data['combined']), 20)
        self.assertEqual(data['displayed'], '/images/c1.png')
        self.assertEqual(data['current_index'], 0)
        self.assertEqual(data['placeholders'][0], None)
        self.assertEqual(data['placeholders'][2], 'color')
        self.assertEqual(data['lightbox'], {'open': False, 'index': None, 'image': None})

    def test_gallery_lightbox_state(self):
        response = self.client.get(
            reverse('api-product-gallery', kwargs={'slug': 'holland-stardust'}),
            {'lightbox': 4, 'key': 'ArrowLeft'},
        )
        self.assertEqual(response.data['lightbox'], {'open': True, 'index': 3, 'image': 'PC-2'})
        self.assertEqual(response.data['current_index'], 0)

    def test_unknown_and_inactive_products(self):
        for slug in ('missing', 'hidden'):
            with self.subTest(slug=slug):
                response = self.client.get(reverse('api-product-gallery', kwargs={'slug': slug}))
                self.assertEqual(response.status_code, 404)
