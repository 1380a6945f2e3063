"""Application tests for category, product and banner commands."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.catalogue.banner.banner import Banner
from storefront.catalogue.banner.management import CreateBanner, DeleteBanner, UpdateBanner
from storefront.catalogue.category.category import Category
from storefront.catalogue.category.management import DeleteCategory, UpdateCategory
from storefront.catalogue.product.management import DeleteProduct, UpdateProduct
from storefront.catalogue.product.product import Product


class TestCategoryCommands:
    def test_create_assigns_sequential_ids(self, make_category):
        first = make_category(name="Electronics")
        second = make_category(name="Fashion")
        assert (first.id, second.id) == (1, 2)

    def test_slug_derived_from_name(self, make_category):
        assert make_category(name="Home & Garden").slug == "home-garden"

    def test_duplicate_slug_rejected(self, make_category):
        make_category(name="Electronics")
        with pytest.raises(ValidationError) as exc:
            make_category(name="Other", slug="electronics")
        assert "slug" in exc.value.messages

    def test_update_is_partial(self, make_category):
        category = make_category(name="Electronics", image_url="https://img/e.jpg")
        current_domain.process(
            UpdateCategory(category_id=category.id, changes=json.dumps({"name": "Gadgets"})),
            asynchronous=False,
        )
        updated = current_domain.repository_for(Category).get(category.id)
        assert updated.name == "Gadgets"
        assert updated.image_url == "https://img/e.jpg"

    def test_update_to_taken_slug_rejected(self, make_category):
        make_category(name="Electronics")
        fashion = make_category(name="Fashion")
        with pytest.raises(ValidationError):
            current_domain.process(
                UpdateCategory(category_id=fashion.id, changes=json.dumps({"slug": "electronics"})),
                asynchronous=False,
            )

    def test_delete_does_not_cascade_to_products(self, make_category, make_product):
        category = make_category(name="Electronics")
        product = make_product(category_id=category.id)

        current_domain.process(DeleteCategory(category_id=category.id), asynchronous=False)

        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Category).get(category.id)
        orphan = current_domain.repository_for(Product).get(product.id)
        assert orphan.category_id == category.id


class TestProductCommands:
    def test_create_persists_product(self, make_product):
        product = make_product(name="Smartwatch Pro Series", price=599.90, is_featured=True)
        assert product.id == 1
        assert product.slug == "smartwatch-pro-series"
        assert product.is_featured is True

    def test_duplicate_slug_rejected(self, make_product):
        make_product(name="Smartwatch", slug="smartwatch")
        with pytest.raises(ValidationError):
            make_product(name="Another watch", slug="smartwatch")

    def test_update_merges_changes(self, make_product):
        product = make_product(price=299.90, description="Wireless")
        current_domain.process(
            UpdateProduct(product_id=product.id, changes=json.dumps({"price": 249.90, "is_new": True})),
            asynchronous=False,
        )
        updated = current_domain.repository_for(Product).get(product.id)
        assert updated.price == 249.90
        assert updated.is_new is True
        assert updated.description == "Wireless"

    def test_update_missing_product(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpdateProduct(product_id=99, changes=json.dumps({"price": 1.0})),
                asynchronous=False,
            )

    def test_ids_not_reused_after_delete(self, make_product):
        first = make_product(name="First")
        current_domain.process(DeleteProduct(product_id=first.id), asynchronous=False)
        second = make_product(name="Second")
        assert second.id == first.id + 1


class TestRepositoryQueries:
    def test_catalogue_filters(self, make_category, make_product):
        electronics = make_category(name="Electronics")
        sports = make_category(name="Sports")
        make_product(name="Headphones", category_id=electronics.id, is_featured=True)
        make_product(name="Runner Shoes", category_id=sports.id, is_new=True)
        make_product(name="Smartwatch", category_id=electronics.id)

        repo = current_domain.repository_for(Product)
        assert [p.name for p in repo.in_category(electronics.id)] == ["Headphones", "Smartwatch"]
        assert [p.name for p in repo.featured()] == ["Headphones"]
        assert [p.name for p in repo.new_arrivals()] == ["Runner Shoes"]
        assert repo.find_by_slug("smartwatch").name == "Smartwatch"
        assert repo.find_by_slug("missing") is None


class TestBannerCommands:
    def _create(self, **overrides):
        data = {"title": "Sale", "image_url": "https://img/banner.jpg"}
        data.update(overrides)
        return current_domain.process(CreateBanner(**data), asynchronous=False)

    def test_banners_sorted_by_display_order(self):
        self._create(title="Second", display_order=2)
        self._create(title="First", display_order=1)
        self._create(title="Hidden", display_order=0, is_active=False)

        repo = current_domain.repository_for(Banner)
        assert [b.title for b in repo.in_display_order()] == ["Hidden", "First", "Second"]
        assert [b.title for b in repo.in_display_order(active_only=True)] == ["First", "Second"]

    def test_update_and_delete(self):
        banner_id = self._create()
        current_domain.process(
            UpdateBanner(banner_id=banner_id, changes=json.dumps({"subtitle": "Up to 50% off"})),
            asynchronous=False,
        )
        assert current_domain.repository_for(Banner).get(banner_id).subtitle == "Up to 50% off"

        current_domain.process(DeleteBanner(banner_id=banner_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Banner).get(banner_id)
