from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ProductDetail(BaseModel):
    """Details scraped from a single product page"""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    price: Optional[str] = None
    description: Optional[str] = None
    availableSizes: Optional[List[str]] = None
    images: Optional[List[Optional[str]]] = None


class ListingCandidate(BaseModel):
    """One listing card; detail is attached after the product visit"""
    name: Optional[str] = None
    price: Optional[str] = None
    link: Optional[str] = None
    detail: Optional[ProductDetail] = None

    def attach_detail(self, detail: ProductDetail):
        if self.detail is not None:
            raise ValueError(f"Detail already attached for {self.link}")
        self.detail = detail
