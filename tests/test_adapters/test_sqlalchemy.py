"""Tests for adapters/_sqlalchemy.py — model introspection."""

from __future__ import annotations

from sqla_admin_decor.adapters._sqlalchemy import SQLAlchemyRecord, SQLAlchemyResource
from sqla_admin_decor.decorators._resource import ResourceDecorator
from tests.conftest import Author, Post, User


class TestSQLAlchemyResource:
    def test_id_is_table_name(self, post_resource: SQLAlchemyResource):
        assert post_resource.id() == "posts"

    def test_name_is_class_name(self, post_resource: SQLAlchemyResource):
        assert post_resource.name() == "Post"

    def test_model(self, post_resource: SQLAlchemyResource):
        assert post_resource.model is Post

    def test_properties_follow_column_order(self, post_resource: SQLAlchemyResource):
        names = [p.name() for p in post_resource.properties()]
        assert names == [
            "id",
            "title",
            "body",
            "is_published",
            "status",
            "rating",
            "published_on",
            "author_id",
        ]

    def test_relationships_are_not_properties(self, user_resource: SQLAlchemyResource):
        names = [p.name() for p in user_resource.properties()]
        assert "posts" not in names

    def test_without_engine(self, post_resource: SQLAlchemyResource):
        assert post_resource.database_type() is None
        assert post_resource.database_name() == "default"

    def test_with_engine(self, engine):
        resource = SQLAlchemyResource(Post, engine=engine)
        assert resource.database_type() == "sqlite"
        # In-memory SQLite URLs carry the database name ":memory:".
        assert resource.database_name() == ":memory:"


class TestSQLAlchemyProperty:
    def _prop(self, resource: SQLAlchemyResource, name: str):
        return next(p for p in resource.properties() if p.name() == name)

    def test_primary_key_is_id(self, post_resource: SQLAlchemyResource):
        prop = self._prop(post_resource, "id")
        assert prop.is_id() is True
        assert prop.is_editable() is False
        assert prop.type() == "number"

    def test_types(self, post_resource: SQLAlchemyResource):
        types = {p.name(): p.type() for p in post_resource.properties()}
        assert types == {
            "id": "number",
            "title": "string",
            "body": "textarea",
            "is_published": "boolean",
            "status": "string",
            "rating": "float",
            "published_on": "date",
            "author_id": "reference",
        }

    def test_datetime_type(self, user_resource: SQLAlchemyResource):
        assert self._prop(user_resource, "created_at").type() == "datetime"

    def test_foreign_key_reference(self, post_resource: SQLAlchemyResource):
        assert self._prop(post_resource, "author_id").reference() == "users"
        assert self._prop(post_resource, "title").reference() is None

    def test_enum_available_values(self, post_resource: SQLAlchemyResource):
        assert self._prop(post_resource, "status").available_values() == [
            "draft",
            "published",
            "archived",
        ]

    def test_required(self, post_resource: SQLAlchemyResource):
        assert self._prop(post_resource, "title").is_required() is True
        assert self._prop(post_resource, "body").is_required() is False
        # Columns with a default are not required.
        assert self._prop(post_resource, "is_published").is_required() is False
        assert self._prop(post_resource, "id").is_required() is False

    def test_title_detection(self, post_resource, user_resource):
        assert self._prop(post_resource, "title").is_title() is True
        assert self._prop(user_resource, "email").is_title() is True

    def test_password_hidden(self, user_resource: SQLAlchemyResource):
        assert self._prop(user_resource, "password").is_visible() is False

    def test_column_exposed(self, post_resource: SQLAlchemyResource):
        assert self._prop(post_resource, "title").column.name == "title"


class TestExpressionProperty:
    """column_property expressions map to read-only properties."""

    def _prop(self, name: str):
        return next(p for p in SQLAlchemyResource(Author).properties() if p.name() == name)

    def test_expression_included_in_mapper_order(self):
        names = [p.name() for p in SQLAlchemyResource(Author).properties()]
        assert names == ["id", "first", "last", "full_name"]

    def test_expression_defaults(self):
        prop = self._prop("full_name")
        assert prop.is_expression is True
        assert prop.type() == "string"
        assert prop.is_id() is False
        assert prop.is_required() is False
        assert prop.reference() is None
        assert prop.is_editable() is False

    def test_table_columns_are_not_expressions(self):
        prop = self._prop("first")
        assert prop.is_expression is False
        assert prop.is_editable() is True
        assert prop.is_required() is True

    def test_expression_kept_out_of_edit_view(self):
        decorator = ResourceDecorator(SQLAlchemyResource(Author))
        assert "full_name" in [p.name for p in decorator.get_properties("show")]
        assert "full_name" not in [p.name for p in decorator.get_properties("edit")]


class TestSQLAlchemyRecord:
    def test_param(self, sample_data):
        post = sample_data["posts"][0]
        assert SQLAlchemyRecord(post).param("title") == "Public Post"

    def test_dotted_param_follows_relationship(self, sample_data):
        post = sample_data["posts"][0]
        assert SQLAlchemyRecord(post).param("author.first_name") == "Alice"

    def test_missing_param_is_none(self, sample_data):
        post = sample_data["posts"][0]
        assert SQLAlchemyRecord(post).param("nope") is None
        assert SQLAlchemyRecord(post).param("author.nope.deeper") is None

    def test_id_of_persisted_instance(self, sample_data):
        assert SQLAlchemyRecord(sample_data["posts"][1]).id() == 2

    def test_id_of_transient_instance(self):
        assert SQLAlchemyRecord(Post(title="new")).id() is None

    def test_build_record(self, post_resource, sample_data):
        record = post_resource.build_record(sample_data["posts"][0])
        assert isinstance(record, SQLAlchemyRecord)
        assert record.instance is sample_data["posts"][0]

    def test_user_record(self):
        record = SQLAlchemyRecord(User(id=1, email="a@b.c", first_name="A", password="p"))
        assert record.param("email") == "a@b.c"
