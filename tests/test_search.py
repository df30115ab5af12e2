"""
==============================================================================
Search Filter Tests
==============================================================================

Tests for the pure name/description substring filter.

==============================================================================
"""

import pytest

from product_catalog.catalog.search import filter_products, matches_search


@pytest.fixture
def products(make_product):
    """Mixed catalog including NULL fields."""
    return [
        make_product("Apple Juice", "Fresh pressed"),
        make_product(None, "Unnamed widget part"),
        make_product("Widget", "A widget"),
        make_product("Bolt", None),
        make_product(None, None),
        make_product("Wide Shelf", "Oak"),
    ]


class TestMatchesSearch:
    """Tests for the per-product predicate."""

    def test_empty_search_matches_everything(self, make_product):
        """Empty text matches even a product with no fields."""
        assert matches_search(make_product(None, None), "") is True

    def test_name_match_ignores_case(self, make_product):
        """Name matching is case-insensitive."""
        assert matches_search(make_product("Widget", None), "wIDg") is True

    def test_description_match(self, make_product):
        """Description alone can match."""
        assert matches_search(make_product("Bolt", "Stainless steel"), "STEEL") is True

    def test_null_name_never_matches(self, make_product):
        """A NULL name is never a match and never raises."""
        assert matches_search(make_product(None, None), "a") is False

    def test_no_match(self, make_product):
        """Unrelated text is not a match."""
        assert matches_search(make_product("Widget", "A widget"), "xyz") is False

    def test_unicode_casefold(self, make_product):
        """Case folding handles non-ASCII text."""
        assert matches_search(make_product("Straße", None), "STRASSE") is True


class TestFilterProducts:
    """Tests for filter_products."""

    def test_empty_search_is_identity(self, products):
        """Empty search returns every product in the same order."""
        assert filter_products(products, "") == products

    def test_empty_search_returns_new_list(self, products):
        """The result is a new list, not the input."""
        result = filter_products(products, "")
        assert result is not products

    def test_filter_keeps_original_order(self, products):
        """Matches keep their relative order."""
        result = filter_products(products, "wid")
        assert [p.id for p in result] == [products[1].id, products[2].id, products[5].id]

    @pytest.mark.parametrize("search", ["a", "WID", "oak", "fresh", "zzz", " "])
    def test_filter_is_sound_and_complete(self, products, search):
        """Output is exactly the products whose name or description contain the text."""
        result = filter_products(products, search)
        needle = search.lower()

        def expected(product):
            return (
                (product.name is not None and needle in product.name.lower())
                or (product.description is not None and needle in product.description.lower())
            )

        assert result == [p for p in products if expected(p)]

    def test_null_name_product_excluded_for_name_only_text(self, products):
        """Products without a name only match through their description."""
        result = filter_products(products, "bolt")
        assert [p.name for p in result] == ["Bolt"]

    def test_no_results(self, products):
        """Unknown text yields an empty list."""
        assert filter_products(products, "xyz") == []

    def test_accepts_any_iterable(self, products):
        """Generators are accepted as input."""
        result = filter_products((p for p in products), "")
        assert len(result) == len(products)
