"""Tests for the JSON:API formatting pipeline."""

import copy
import logging

import pytest

from burgerapi.jsonapi import (
    DocumentValidationError,
    FormatterConfig,
    JSONAPIFormatter,
    ModelRecords,
    deep_merge,
)
from burgerapi.models.place import Place
from burgerapi.schemas.jsonapi import validate_document
from burgerapi.schemas.pagination import PageParams, PaginationContext
from tests.conftest import BASE_URL, REQUEST_URL


def _format(formatter, result, **options):
    return formatter.format(result, request_id="req-1", request_url=REQUEST_URL, **options)


class TestMeta:
    """Metadata merging"""

    def test_request_id_is_always_present(self, formatter):
        document = _format(formatter, {"data": []})
        assert document["meta"] == {"id": "req-1"}

    def test_defaults_and_call_meta_merge_in_order(self):
        formatter = JSONAPIFormatter(
            FormatterConfig(base_url=BASE_URL, meta={"version": "1", "source": "config"})
        )
        document = _format(formatter, {"data": []}, meta={"source": "call"})
        assert document["meta"] == {"id": "req-1", "version": "1", "source": "call"}

    def test_accumulated_meta_overrides_handler_meta(self, formatter):
        document = _format(formatter, {"data": [], "meta": {"id": "mine", "note": "kept"}})
        assert document["meta"] == {"id": "req-1", "note": "kept"}

    def test_config_meta_is_not_mutated(self):
        config = FormatterConfig(base_url=BASE_URL, meta={"nested": {"a": 1}})
        formatter = JSONAPIFormatter(config)
        _format(formatter, {"data": []}, meta={"nested": {"b": 2}})
        assert config.meta == {"nested": {"a": 1}}

    def test_deep_merge(self):
        assert deep_merge({"a": {"x": 1}}, None, {"a": {"y": 2}, "b": 3}) == {
            "a": {"x": 1, "y": 2},
            "b": 3,
        }


class TestEmptyResults:
    """Empty results short-circuit"""

    @pytest.mark.parametrize("result", [None, [], ModelRecords([])])
    def test_empty_result(self, formatter, result):
        document = _format(formatter, result)
        assert document == {"data": [], "meta": {"id": "req-1"}}

    def test_empty_result_skips_pagination(self, formatter):
        pagination = PaginationContext(count=0, limit=20, offset=0)
        document = _format(formatter, [], pagination=pagination)
        assert document == {"data": [], "meta": {"id": "req-1"}}

    def test_empty_result_keeps_defaults(self):
        formatter = JSONAPIFormatter(FormatterConfig(base_url=BASE_URL, meta={"api-version": "1"}))
        assert _format(formatter, None) == {
            "data": [],
            "meta": {"id": "req-1", "api-version": "1"},
        }


class TestPagination:
    """Pagination counters in meta"""

    def test_counters(self, formatter):
        pagination = PaginationContext(count=95, limit=20, offset=40)
        document = _format(formatter, {"data": [{"id": "1", "type": "places"}]}, pagination=pagination)
        assert document["meta"]["total-count"] == 95
        assert document["meta"]["current-page"] == 3
        assert document["meta"]["total-pages"] == 5

    def test_mapping_is_accepted(self, formatter):
        pagination = {"count": 41, "limit": 20, "offset": 0}
        document = _format(formatter, {"data": [{"id": "1", "type": "places"}]}, pagination=pagination)
        assert document["meta"]["current-page"] == 1
        assert document["meta"]["total-pages"] == 3

    def test_unaligned_offset_floors_to_containing_page(self):
        assert PaginationContext(count=100, limit=20, offset=30).current_page == 2

    def test_page_params(self):
        page = PageParams(page=3, size=20)
        assert page.limit == 20
        assert page.offset == 40
        assert page.with_count(95) == PaginationContext(count=95, limit=20, offset=40)


class TestSerializationDispatch:
    """Which results are serialized and which pass through"""

    def test_document_passes_through(self, formatter):
        data = [{"id": "1", "type": "places", "attributes": {"name": "A"}}]
        document = _format(formatter, {"data": data})
        assert document["data"] == data

    def test_raw_value_becomes_data(self, formatter):
        raw = [{"name": "A"}, {"name": "B"}]
        document = _format(formatter, raw)
        assert document["data"] == raw

    def test_type_and_attributes_options(self, formatter):
        document = _format(
            formatter,
            [{"id": 1, "name": "A", "location": "x"}],
            type="places",
            attributes=["name"],
        )
        assert document["data"] == [{"id": "1", "type": "places", "attributes": {"name": "A"}}]

    def test_empty_attribute_list_still_serializes(self, formatter):
        document = _format(formatter, [{"id": 1, "name": "A"}], type="tags", attributes=[])
        assert document["data"] == [{"id": "1", "type": "tags", "attributes": {}}]

    def test_type_without_attributes_passes_through(self, formatter):
        raw = {"id": 1, "name": "A"}
        document = _format(formatter, raw, type="places")
        assert document["data"] == raw

    def test_model_records(self, formatter):
        place = Place(id=4, name="Hooters", location="Sydney")
        document = _format(formatter, ModelRecords(place))
        assert document["data"]["type"] == "places"
        assert document["data"]["id"] == "4"

    def test_configured_key_style(self):
        formatter = JSONAPIFormatter(FormatterConfig(base_url=BASE_URL, key_style="dash-case"))
        document = _format(
            formatter, [{"id": 1, "item_id": 2}], type="reviews", attributes=["item_id"]
        )
        assert document["data"] == [{"id": "1", "type": "reviews", "attributes": {"item-id": 2}}]

    def test_input_is_not_mutated(self, formatter):
        response = {"data": [], "links": {"next": "/places?page=2"}, "meta": {"note": "x"}}
        snapshot = copy.deepcopy(response)
        _format(formatter, response)
        assert response == snapshot


class TestLinks:
    """Self link injection and absolute URLs"""

    def test_self_link_added(self, formatter):
        document = _format(formatter, {"data": []})
        assert document["links"] == {"self": REQUEST_URL}

    def test_handler_self_link_wins(self, formatter):
        document = _format(formatter, {"data": [], "links": {"self": "https://custom"}})
        assert document["links"]["self"] == "https://custom"

    def test_relative_links_resolved_against_base_url(self, formatter):
        document = _format(formatter, {"data": [], "links": {"related": "/places/5"}})
        assert document["links"]["related"] == "https://api.example.com/places/5"

    def test_absolute_links_unchanged(self, formatter):
        document = _format(formatter, {"data": [], "links": {"related": "https://other.com/x"}})
        assert document["links"]["related"] == "https://other.com/x"

    def test_link_object_href_resolved(self, formatter):
        document = _format(
            formatter,
            {"data": [], "links": {"next": {"href": "/places?page=2", "meta": {"page": 2}}}},
        )
        assert document["links"]["next"] == {
            "href": "https://api.example.com/places?page=2",
            "meta": {"page": 2},
        }


class TestValidationPolicy:
    """Advisory and strict validation"""

    def test_advisory_mode_tolerates_non_mapping_links(self, formatter):
        document = _format(formatter, {"data": [], "links": ["/places"]})
        assert document["links"] == {"self": REQUEST_URL}
        assert document["meta"] == {"id": "req-1"}

    def test_advisory_mode_tolerates_non_mapping_meta(self, formatter):
        document = _format(formatter, {"data": [], "meta": "note"})
        assert document["meta"] == {"id": "req-1"}
        assert document["links"] == {"self": REQUEST_URL}

    def test_advisory_mode_logs_and_continues(self, formatter, caplog):
        with caplog.at_level(logging.WARNING, logger="burgerapi.jsonapi.formatter"):
            document = _format(formatter, [{"name": "no id"}])
        assert document["data"] == [{"name": "no id"}]
        assert "JSON:API document violation" in caplog.text

    def test_strict_mode_raises(self):
        formatter = JSONAPIFormatter(FormatterConfig(base_url=BASE_URL, strict=True))
        with pytest.raises(DocumentValidationError) as exc_info:
            _format(formatter, [{"name": "no id"}])
        assert exc_info.value.violations

    def test_strict_mode_accepts_valid_documents(self):
        formatter = JSONAPIFormatter(FormatterConfig(base_url=BASE_URL, strict=True))
        document = _format(formatter, [{"id": 1, "name": "A"}], type="places", attributes=["name"])
        assert document["data"][0]["id"] == "1"

    @pytest.mark.parametrize(
        "result, options",
        [
            ({"data": {"id": "1", "type": "places"}}, {}),
            ([{"id": 1, "name": "A"}], {"type": "places", "attributes": ["name"]}),
            (ModelRecords([Place(id=1, name="A", location="x")]), {}),
            (None, {}),
        ],
    )
    def test_formatted_documents_are_valid(self, formatter, result, options):
        document = _format(formatter, result, **options)
        assert validate_document(document).valid
