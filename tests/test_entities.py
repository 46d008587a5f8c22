# tests/test_entities.py
"""
Tests for entity identity, ordering and field rules.
"""

import pytest

from catalog_api.app.core.errors import CatalogError, ErrorKind
from catalog_api.app.schemas.book import BookCreate


class TestIdentity:
    def test_same_id_is_equal_despite_fields(self, make_product):
        assert make_product(id=1, name="a") == make_product(id=1, name="b")

    def test_different_ids_differ(self, make_product):
        assert make_product(id=1) != make_product(id=2)

    def test_unsaved_entities_only_equal_themselves(self, make_product):
        product = make_product()
        assert product == product
        assert product != make_product()

    def test_hash_follows_identity(self, make_product):
        assert len({make_product(id=1, name="a"), make_product(id=1, name="b")}) == 1

    def test_different_types_never_equal(self, make_product, make_user):
        assert make_product(id=1) != make_user(id=1)


class TestEmployeeOrdering:
    def test_salary_order(self, make_employee):
        low, high = make_employee(id=1, salary=50000), make_employee(id=2, salary=70000)
        assert low < high
        assert high > low
        assert low <= make_employee(id=3, salary=50000)
        assert high >= low

    def test_equal_salary_is_not_equality(self, make_employee):
        a, b = make_employee(id=1, salary=60000), make_employee(id=2, salary=60000)
        assert a <= b and a >= b
        assert a != b

    def test_full_name(self, make_employee):
        assert make_employee(first_name="Grace", last_name="Hopper").full_name == "Grace Hopper"


class TestValidation:
    def _kind(self, entity):
        with pytest.raises(CatalogError) as exc_info:
            entity.ensure_valid()
        return exc_info.value.kind

    def test_employee_rules(self, make_employee):
        assert self._kind(make_employee(salary=0)) is ErrorKind.INVALID_ARGUMENT
        assert self._kind(make_employee(first_name="  ")) is ErrorKind.INVALID_ARGUMENT

    def test_book_bounds(self, make_book):
        make_book(copies=2, available_copies=0).ensure_valid()
        assert self._kind(make_book(copies=2, available_copies=3)) is ErrorKind.INVALID_ARGUMENT
        assert self._kind(make_book(copies=2, available_copies=-1)) is ErrorKind.INVALID_ARGUMENT
        assert self._kind(make_book(title="")) is ErrorKind.INVALID_ARGUMENT

    def test_product_rules(self, make_product):
        assert self._kind(make_product(price=0)) is ErrorKind.INVALID_ARGUMENT
        assert self._kind(make_product(category="")) is ErrorKind.INVALID_ARGUMENT

    def test_user_rules(self, make_user):
        assert self._kind(make_user(age=-1)) is ErrorKind.INVALID_ARGUMENT
        assert self._kind(make_user(email=" ")) is ErrorKind.INVALID_ARGUMENT

    def test_book_create_defaults_available_to_total(self):
        book = BookCreate(title="Dune", category="SF", total_copies=4).to_entity()
        assert book.available_copies == 4
        assert book.lent_copies == 0
