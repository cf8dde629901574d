"""Tests for the catalog API client."""

import httpx
import pytest

from src.catalog import CatalogAPIError, CatalogClient, Product, ProductPage


def make_client(handler) -> CatalogClient:
    """CatalogClient whose requests are answered by handler."""
    return CatalogClient(
        base_url="http://catalog.test/api",
        timeout=5,
        transport=httpx.MockTransport(handler),
    )


class TestCatalogClient:
    """Tests for the three catalog endpoints."""

    @pytest.mark.asyncio
    async def test_get_categories(self):
        """Test fetching the category index."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url)
            return httpx.Response(200, json={"categories": ["Electronics", "Garden"]})

        async with make_client(handler) as client:
            categories = await client.get_categories()

        assert categories == ["Electronics", "Garden"]
        assert str(seen[0]) == "http://catalog.test/api/categories"

    @pytest.mark.asyncio
    async def test_get_subcategories(self):
        """Test that the category is sent as a query parameter."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url)
            return httpx.Response(200, json={"subCategories": ["Hoses", "Tools"]})

        async with make_client(handler) as client:
            subs = await client.get_subcategories("Home & Garden")

        assert subs == ["Hoses", "Tools"]
        assert seen[0].path == "/api/subcategories"
        assert seen[0].params["category"] == "Home & Garden"

    @pytest.mark.asyncio
    async def test_get_products(self, sample_product_payload):
        """Test product page decoding and request parameters."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url)
            return httpx.Response(200, json={"products": [sample_product_payload], "total": 41})

        async with make_client(handler) as client:
            page = await client.get_products(
                search="buds", category="Electronics", sub_category="Headphones", limit=20, offset=40
            )

        assert isinstance(page, ProductPage)
        assert page.total == 41
        assert page.products[0].sku == "E9A4C1"
        assert page.products[0].sub_category_name == "Headphones"
        assert dict(seen[0].params) == {
            "search": "buds",
            "category": "Electronics",
            "subCategory": "Headphones",
            "limit": "20",
            "offset": "40",
        }

    @pytest.mark.asyncio
    async def test_get_products_omits_unset_filters(self):
        """Test that empty filters are not sent."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url)
            return httpx.Response(200, json={"products": [], "total": 0})

        async with make_client(handler) as client:
            page = await client.get_products(search="", limit=20, offset=0)

        assert page.products == []
        assert dict(seen[0].params) == {"limit": "20", "offset": "0"}

    @pytest.mark.asyncio
    async def test_request_count(self):
        """Test that requests are counted."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"categories": []})

        client = make_client(handler)
        await client.get_categories()
        await client.get_categories()
        await client.close()

        assert client.request_count == 2


class TestCatalogClientErrors:
    """Tests for failures surfacing as CatalogAPIError."""

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        """Test that a 500 raises with the status code."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"error": "boom"})

        async with make_client(handler) as client:
            with pytest.raises(CatalogAPIError) as exc_info:
                await client.get_products()

        assert exc_info.value.status_code == 500
        assert exc_info.value.path == "/products"

    @pytest.mark.asyncio
    async def test_transport_error(self):
        """Test that connection failures raise CatalogAPIError."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(CatalogAPIError) as exc_info:
                await client.get_categories()

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        """Test that a non-JSON body raises CatalogAPIError."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        async with make_client(handler) as client:
            with pytest.raises(CatalogAPIError):
                await client.get_categories()

    @pytest.mark.asyncio
    async def test_unexpected_payload(self):
        """Test that a payload failing validation raises CatalogAPIError."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"products": [{"title": "no sku"}], "total": 1})

        async with make_client(handler) as client:
            with pytest.raises(CatalogAPIError):
                await client.get_products()

    @pytest.mark.asyncio
    async def test_negative_total_rejected(self):
        """Test that a negative total is treated as a bad payload."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"products": [], "total": -1})

        async with make_client(handler) as client:
            with pytest.raises(CatalogAPIError):
                await client.get_products()


class TestProductModel:
    """Tests for the Product schema."""

    def test_aliases(self, sample_product_payload):
        """Test decoding the API's camelCase fields."""
        product = Product.model_validate(sample_product_payload)

        assert product.sku == "E9A4C1"
        assert product.category_name == "Electronics"
        assert product.primary_image_url == "https://images.example.com/earbuds.jpg"
        assert product.detail_path == "/product/E9A4C1"

    def test_missing_images(self, sample_product_payload):
        """Test that products without images are accepted."""
        del sample_product_payload["imageUrls"]
        product = Product.model_validate(sample_product_payload)

        assert product.image_urls == []
        assert product.primary_image_url is None

    def test_blank_first_image_skipped(self, sample_product_payload):
        """Test that an empty image URL is not used as the primary image."""
        sample_product_payload["imageUrls"] = ["", "https://images.example.com/2.jpg"]
        product = Product.model_validate(sample_product_payload)

        assert product.primary_image_url == "https://images.example.com/2.jpg"

    def test_dump_by_alias(self, sample_product_payload):
        """Test serializing back to the wire format."""
        product = Product.model_validate(sample_product_payload)

        assert product.model_dump(by_alias=True) == sample_product_payload
