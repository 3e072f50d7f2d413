"""Tests for the JSON:API document shape validator."""

import pytest

from burgerapi.schemas.jsonapi import ROOT_PATH, validate_document


def _paths(result):
    return [violation.path for violation in result.violations]


class TestValidDocuments:
    """Documents that conform to the JSON:API shape"""

    def test_single_resource(self):
        result = validate_document(
            {"data": {"id": "1", "type": "places", "attributes": {"name": "A"}}}
        )
        assert result.valid
        assert result.violations == []

    def test_resource_collection_with_meta_and_links(self):
        result = validate_document(
            {
                "data": [
                    {"id": "1", "type": "places", "attributes": {"name": "A"}},
                    {"id": "2", "type": "places", "attributes": {"name": "B"}},
                ],
                "meta": {"total-count": 2},
                "links": {"self": "/places"},
                "jsonapi": {"version": "1.0"},
            }
        )
        assert result.valid

    def test_empty_data_list(self):
        assert validate_document({"data": []}).valid

    def test_resource_identifier_as_primary_data(self):
        assert validate_document({"data": {"id": 7, "type": "items"}}).valid

    def test_relationships_accept_identifiers_and_resources(self):
        document = {
            "data": {
                "id": "1",
                "type": "reviews",
                "relationships": {
                    "author": {"data": {"id": "3", "type": "users"}},
                    "items": {"data": [{"id": "4", "type": "items", "attributes": {"name": "X"}}]},
                    "photos": {"data": [], "links": {"related": "/reviews/1/photos"}},
                },
            },
            "included": [{"id": "3", "type": "users", "attributes": {"fullname": "Jane"}}],
        }
        assert validate_document(document).valid

    def test_error_document(self):
        document = {
            "errors": [
                {
                    "status": "404",
                    "title": "Not Found",
                    "detail": "Place not found",
                    "source": {"parameter": "id"},
                    "links": {"about": "https://api.example.com/docs/errors/404"},
                }
            ],
            "meta": {"id": "req-1"},
        }
        assert validate_document(document).valid

    def test_error_about_link_object(self):
        document = {
            "errors": [
                {"links": {"about": {"href": "https://api.example.com/docs", "meta": {}}}}
            ]
        }
        assert validate_document(document).valid


class TestInvalidDocuments:
    """Documents violating the JSON:API shape"""

    def test_data_and_errors_together(self):
        result = validate_document({"data": [], "errors": []})
        assert not result.valid
        assert _paths(result) == [ROOT_PATH]

    def test_neither_data_nor_errors(self):
        result = validate_document({"meta": {"id": "req-1"}})
        assert not result.valid
        assert _paths(result) == [ROOT_PATH]

    def test_resource_without_type(self):
        result = validate_document({"data": [{"id": "1", "attributes": {"name": "A"}}]})
        assert not result.valid
        assert _paths(result) == ["data.0.type"]

    def test_resource_with_empty_type(self):
        result = validate_document({"data": {"id": "1", "type": ""}})
        assert _paths(result) == ["data.type"]

    def test_resource_without_id(self):
        result = validate_document({"data": {"type": "places"}})
        assert _paths(result) == ["data.id"]

    def test_identifier_list_without_id_reports_once(self):
        result = validate_document({"data": [{"type": "places"}]})
        assert _paths(result) == ["data.0.id"]

    def test_relationship_linkage_path(self):
        document = {
            "data": {
                "id": "1",
                "type": "reviews",
                "relationships": {"author": {"data": {"id": "3"}}},
            }
        }
        result = validate_document(document)
        assert _paths(result) == ["data.relationships.author.data.type"]

    def test_scalar_primary_data(self):
        result = validate_document({"data": "places"})
        assert _paths(result) == ["data"]

    def test_error_status_must_be_string(self):
        result = validate_document({"errors": [{"status": 404, "title": "Not Found"}]})
        assert _paths(result) == ["errors.0.status"]

    def test_unknown_top_level_member(self):
        result = validate_document({"data": [], "extra": True})
        assert _paths(result) == ["extra"]

    def test_relative_about_link(self):
        result = validate_document({"errors": [{"links": {"about": "/docs"}}]})
        assert _paths(result) == ["errors.0.links.about"]


class TestNeverRaises:
    """Malformed input is reported, never raised"""

    @pytest.mark.parametrize("candidate", [None, "document", 42, ["data"], object()])
    def test_non_mapping_candidates(self, candidate):
        result = validate_document(candidate)
        assert not result.valid
        assert result.violations
