"""Tests for adapters/_base.py — plain descriptors and records."""

from __future__ import annotations

import pytest

from sqla_admin_decor.adapters._base import BaseProperty, BaseRecord, BaseResource
from tests.conftest import MemoryResource, make_properties


class TestBaseProperty:
    def test_defaults(self):
        prop = BaseProperty("description")
        assert prop.name() == "description"
        assert prop.path() == "description"
        assert prop.type() == "string"
        assert prop.is_sortable() is True
        assert prop.is_id() is False
        assert prop.is_required() is False
        assert prop.available_values() is None
        assert prop.reference() is None

    @pytest.mark.parametrize("path", ["title", "name", "subject", "email", "Email"])
    def test_title_names(self, path: str):
        assert BaseProperty(path).is_title() is True

    def test_other_names_are_not_titles(self):
        assert BaseProperty("body").is_title() is False

    def test_password_is_hidden(self):
        assert BaseProperty("password").is_visible() is False
        assert BaseProperty("encryptedPassword").is_visible() is False
        assert BaseProperty("body").is_visible() is True

    def test_id_is_not_editable(self):
        assert BaseProperty("id", is_id=True).is_editable() is False
        assert BaseProperty("body").is_editable() is True

    def test_available_values_are_copied(self):
        values = ["a", "b"]
        prop = BaseProperty("kind", available_values=values)
        values.append("c")
        assert prop.available_values() == ["a", "b"]


class TestBaseResource:
    def test_is_abstract(self):
        with pytest.raises(TypeError):
            BaseResource()  # type: ignore[abstract]

    def test_name_defaults_to_id(self):
        assert MemoryResource([], resource_id="things").name() == "things"

    def test_database_type_defaults_to_none(self):
        assert MemoryResource([]).database_type() is None

    def test_find_property(self):
        resource = MemoryResource(make_properties("id", "title"))
        found = resource.find_property("title")
        assert found is not None
        assert found.name() == "title"
        assert resource.find_property("missing") is None


class TestBaseRecord:
    def test_flat_param(self):
        assert BaseRecord({"title": "Hello"}).param("title") == "Hello"

    def test_flat_dotted_key_wins(self):
        record = BaseRecord({"author.name": "flat", "author": {"name": "nested"}})
        assert record.param("author.name") == "flat"

    def test_nested_param(self):
        record = BaseRecord({"author": {"name": "Ann", "address": {"city": "Oslo"}}})
        assert record.param("author.name") == "Ann"
        assert record.param("author.address.city") == "Oslo"

    def test_missing_param_is_none(self):
        record = BaseRecord({"author": {"name": "Ann"}})
        assert record.param("missing") is None
        assert record.param("author.missing") is None
        assert record.param("author.name.first") is None

    def test_id(self):
        assert BaseRecord({"id": 5}).id() == 5
        assert BaseRecord({"uuid": "x"}, id_param="uuid").id() == "x"

    def test_params_is_a_copy(self):
        record = BaseRecord({"a": 1})
        record.params["a"] = 2
        assert record.param("a") == 1
