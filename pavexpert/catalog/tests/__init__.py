"""
Tests for the catalog app.

Test structure:
- test_gallery_paths.py: ref classification and path normalisation
- test_gallery_placeholders.py: slot padding and sequences
- test_gallery_state.py: inline gallery, lightbox and key listeners
- test_gallery_builder.py: gallery building and query-string state
- test_gallery_tags.py: slot rendering template tags
- test_product.py: product pages
- test_api.py: REST API
- test_import_products.py: import_products management command
"""
