"""Pydantic schemas for catalog API responses."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from config.constants import PRODUCT_DETAIL_PATH


class Product(BaseModel):
    """A catalog product as returned by the products endpoint."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    sku: str = Field(..., alias="stacklineSku", description="Unique product identifier")
    title: str
    category_name: str = Field(..., alias="categoryName")
    sub_category_name: str = Field(..., alias="subCategoryName")
    image_urls: List[str] = Field(default_factory=list, alias="imageUrls")

    @property
    def primary_image_url(self) -> Optional[str]:
        """First image URL, if the product has any."""
        for url in self.image_urls:
            if url:
                return url
        return None

    @property
    def detail_path(self) -> str:
        return PRODUCT_DETAIL_PATH.format(sku=self.sku)


class CategoryIndex(BaseModel):
    """Response of GET categories."""
    categories: List[str] = Field(default_factory=list)


class SubCategoryIndex(BaseModel):
    """Response of GET subcategories."""

    model_config = ConfigDict(populate_by_name=True)

    sub_categories: List[str] = Field(default_factory=list, alias="subCategories")


class ProductPage(BaseModel):
    """One page of products plus the total match count."""

    products: List[Product] = Field(default_factory=list)
    total: int = Field(0, ge=0, description="Total matches across all pages")

    @classmethod
    def empty(cls) -> "ProductPage":
        return cls(products=[], total=0)
