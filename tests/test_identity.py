"""
Tests for core.identity — product name, category and grouping key.
"""

import pytest

from report_engine.core.identity import UNCATEGORIZED, UNKNOWN_PRODUCT, ProductResolver
from report_engine.schemas import LineItem


def _item(**fields):
    return LineItem.model_validate(fields)


@pytest.fixture
def resolver(catalog, inventory):
    return ProductResolver(catalog=catalog, inventory=inventory)


class TestResolveName:

    def test_cached_name_wins(self, resolver):
        item = _item(itemId=7, categoryId="frames", name="Old Frame", customItemName="Custom")
        assert resolver.resolve_name(item) == ("Old Frame", False)

    def test_legacy_item_name_is_a_cached_name(self, resolver):
        assert resolver.resolve_name(_item(itemId=7, itemName="Legacy Frame"))[0] == "Legacy Frame"

    def test_custom_name_before_catalog(self, resolver):
        assert resolver.resolve_name(_item(itemId=7, customItemName="Frame A"))[0] == "Frame A"

    def test_catalog_within_category(self, resolver):
        assert resolver.resolve_name(_item(itemId=7, categoryId="frames")) == ("Frame A2", False)

    def test_catalog_global_scan_when_category_is_stale(self, resolver):
        assert resolver.resolve_name(_item(itemId="7", categoryId="gone"))[0] == "Frame A2"

    def test_inventory_fallback(self, resolver):
        assert resolver.resolve_name(_item(itemId="99"))[0] == "Gift Box"

    def test_placeholder_for_unknown_id(self, resolver):
        assert resolver.resolve_name(_item(itemId=55)) == ("Product 55", True)

    def test_unknown_product(self, resolver):
        assert resolver.resolve_name(_item()) == (UNKNOWN_PRODUCT, True)

    def test_own_category_beats_first_match(self):
        catalog = {"categories": [
            {"id": "a", "items": [{"id": 1, "name": "First"}]},
            {"id": "b", "items": [{"id": 1, "name": "Second"}]},
        ]}
        resolver = ProductResolver(catalog=catalog)

        assert resolver.resolve_name(_item(itemId=1, categoryId="b"))[0] == "Second"
        assert resolver.resolve_name(_item(itemId=1))[0] == "First"

    def test_works_without_catalog_or_inventory(self):
        assert ProductResolver().resolve_name(_item(itemId=3)) == ("Product 3", True)


class TestCanonicalName:

    def test_ignores_order_time_snapshot(self, resolver):
        assert resolver.canonical_name(_item(itemId=7, name="Old Frame")) == "Frame A2"

    def test_none_when_nothing_is_known(self, resolver):
        assert resolver.canonical_name(_item(itemId=55, name="Sticker")) is None


class TestResolveCategory:

    def test_catalog_category_name(self, resolver):
        assert resolver.resolve_category(_item(itemId=7, categoryId="frames")) == "Photo Frames"

    def test_inventory_category_before_raw_id(self, resolver):
        assert resolver.resolve_category(_item(itemId=7, categoryId="gone")) == "Frames"

    def test_category_id_is_capitalized(self, resolver):
        assert resolver.resolve_category(_item(customItemName="Pen", categoryId="customGifts")) == "CustomGifts"

    def test_uncategorized(self, resolver):
        assert resolver.resolve_category(_item(customItemName="Pen")) == UNCATEGORIZED


class TestResolve:

    def test_catalog_product_groups_by_id(self, resolver):
        product = resolver.resolve(_item(itemId=7, categoryId="frames"))

        assert product.key == "7"
        assert product.name == "Frame A2"
        assert product.category == "Photo Frames"
        assert product.generic is False

    def test_custom_product_groups_by_name(self, resolver):
        product = resolver.resolve(_item(customItemName="Engraved Pen"))
        assert product.key == "Engraved Pen"

    def test_unknown_product_groups_by_placeholder(self, resolver):
        product = resolver.resolve(_item())
        assert (product.key, product.generic) == (UNKNOWN_PRODUCT, True)
