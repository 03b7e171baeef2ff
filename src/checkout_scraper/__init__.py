"""
Checkout Scraper
Scrapes an e-commerce listing page, visits each product, adds it to the cart
and drives a guest checkout for the last item.
"""

__version__ = '1.0.0'
