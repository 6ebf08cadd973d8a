from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_name', models.CharField(max_length=200, verbose_name='Product name')),
                ('slug', models.SlugField(max_length=220, unique=True)),
                ('brand', models.CharField(blank=True, db_index=True, max_length=100)),
                ('product_type', models.CharField(blank=True, max_length=100, verbose_name='Product type')),
                ('color', models.CharField(blank=True, max_length=100)),
                ('size', models.CharField(blank=True, max_length=50)),
                ('thickness', models.CharField(blank=True, max_length=50)),
                ('thickness_in', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True, verbose_name='Thickness (in)')),
                ('sqft_pallet', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True, verbose_name='Sqft/Pallet')),
                ('sqft_layer', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True, verbose_name='Sqft/Layer')),
                ('lnft_pallet', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True, verbose_name='Lnft/Pallet')),
                ('layer_pallet', models.PositiveIntegerField(blank=True, null=True, verbose_name='Layer/Pallet')),
                ('pcs_pallet', models.PositiveIntegerField(blank=True, null=True, verbose_name='Pcs/Pallet')),
                ('product_note', models.TextField(blank=True, verbose_name='Product note')),
                ('colors_available', models.JSONField(blank=True, default=list, verbose_name='Colors available')),
                ('thicknesses_available', models.JSONField(blank=True, default=list, verbose_name='Thicknesses available')),
                ('main_image', models.CharField(blank=True, max_length=500, verbose_name='Main image path')),
                ('color_images', models.JSONField(blank=True, default=list, verbose_name='Color image paths')),
                ('project_images', models.JSONField(blank=True, default=list, verbose_name='Project image paths')),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Product',
                'verbose_name_plural': 'Products',
                'ordering': ['product_name', 'id'],
            },
        ),
    ]
