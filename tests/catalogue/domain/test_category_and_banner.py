import pytest
from protean.exceptions import ValidationError
from storefront.catalogue.banner.banner import Banner
from storefront.catalogue.category.category import Category
from storefront.catalogue.category.events import CategoryCreated, CategoryDetailsUpdated
from storefront.catalogue.slug import ensure_url_safe, slugify


class TestSlugify:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Electronics", "electronics"),
            ("Premium Fit T-Shirt", "premium-fit-t-shirt"),
            ("  Spring / Summer  2024 ", "spring-summer-2024"),
            ("Café & Bar", "caf-bar"),
        ],
    )
    def test_slugify(self, text, expected):
        assert slugify(text) == expected

    def test_ensure_url_safe_accepts_none(self):
        ensure_url_safe("slug", None)

    def test_ensure_url_safe_names_the_field(self):
        with pytest.raises(ValidationError) as exc:
            ensure_url_safe("category_slug", "Bad Slug")
        assert "category_slug" in exc.value.messages


class TestCategory:
    def test_create_raises_event(self):
        category = Category.create(id=1, name="Electronics", slug="electronics")
        assert isinstance(category._events[0], CategoryCreated)
        assert category._events[0].slug == "electronics"

    def test_invalid_slug(self):
        with pytest.raises(ValidationError):
            Category.create(id=1, name="Electronics", slug="Electronics!")

    def test_update_details_is_partial(self):
        category = Category.create(id=1, name="Electronics", slug="electronics", image_url="https://img/1.jpg")
        category.update_details(name="Gadgets")
        assert category.name == "Gadgets"
        assert category.slug == "electronics"
        assert category.image_url == "https://img/1.jpg"
        assert isinstance(category._events[-1], CategoryDetailsUpdated)


class TestBanner:
    def test_defaults(self):
        banner = Banner(id=1, title="Sale", image_url="https://img/banner.jpg")
        assert banner.display_order == 0
        assert banner.is_active is True

    def test_update_details_ignores_unknown_keys(self):
        banner = Banner(id=1, title="Sale", image_url="https://img/banner.jpg")
        banner.update_details(title="Big Sale", is_active=False, colour="red")
        assert banner.title == "Big Sale"
        assert banner.is_active is False
