from .results import ListingCandidate, ProductDetail

__all__ = ['ListingCandidate', 'ProductDetail']
