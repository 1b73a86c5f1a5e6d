"""Tests for catalog models."""

from app.catalog.models import Product, ProductImage, normalize_slug


class TestNormalizeSlug:
    """Tests for normalize_slug."""

    def test_lowercases_and_replaces_spaces(self) -> None:
        """Spaces become underscores."""
        assert normalize_slug("Chill Crew Neck") == "chill_crew_neck"

    def test_drops_apostrophes(self) -> None:
        """Apostrophes are removed."""
        assert normalize_slug("Men's Tee") == "mens_tee"

    def test_already_normalized(self) -> None:
        """Normalized slugs are unchanged."""
        assert normalize_slug("kids_tee") == "kids_tee"


class TestProductToDict:
    """Tests for Product.to_dict."""

    def test_flattens_images(self) -> None:
        """Images are exposed as URLs only."""
        product = Product(
            id="1d5b2a2e-8a55-4d7b-9b9e-2f3f3c1f1a10",
            title="Tee",
            price=10.0,
            slug="tee",
            stock=1,
            sizes=["M"],
            gender="men",
            tags=[],
            images=[ProductImage(url="a.jpg"), ProductImage(url="b.jpg")],
        )

        data = product.to_dict()

        assert data["images"] == ["a.jpg", "b.jpg"]
        assert data["id"] == "1d5b2a2e-8a55-4d7b-9b9e-2f3f3c1f1a10"

    def test_without_images(self) -> None:
        """Images key can be left out."""
        product = Product(title="Tee", slug="tee", sizes=[], gender="men", tags=[])
        assert "images" not in product.to_dict(include_images=False)
