# tests/unit/application/test_querystring.py
from __future__ import annotations

from typing import Any

import pytest

from fixtures.json_testkit import errors_of, value_of
from fixtures.records import Pair, SearchQuery, Shallow
from jsonbind.application.querystring import (
    QuerystringParserRegistry,
    QuerystringToRecordParser,
)
from jsonbind.bootstrap import create_querystring_registry
from jsonbind.domain.exceptions import (
    NoConverterFoundError,
    RegistryNotSealedError,
    RegistrySealedError,
)
from jsonbind.domain.messages import DUPLICATE_PARAMETER, MISSING_PARAMETER, UNEXPECTED_PARAMETER
from jsonbind.domain.result import DeserializationResult, Success
from jsonbind.domain.type_descriptor import TypeDescriptor


class FixedParser:
    """Manual querystring parser returning a constant."""

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.has_base(Shallow)

    def parse(self, parameters: Any, type_: TypeDescriptor) -> DeserializationResult:
        return Success(Shallow(0, "fixed"))


def test_parses_a_record(querystring_registry: QuerystringParserRegistry) -> None:
    result = querystring_registry.parse(
        {"term": ["shoes"], "page": ["2"], "exact": ["true"]}, SearchQuery
    )
    assert value_of(result) == SearchQuery("shoes", 2, True)


def test_optional_parameters_may_be_absent(
    querystring_registry: QuerystringParserRegistry,
) -> None:
    result = querystring_registry.parse({"term": ["shoes"], "page": ["1"]}, SearchQuery)
    assert value_of(result) == SearchQuery("shoes", 1, None)


def test_reports_every_problem(querystring_registry: QuerystringParserRegistry) -> None:
    result = querystring_registry.parse(
        {"sort": ["asc"], "term": ["a", "b"], "exact": ["yes"]}, SearchQuery
    )
    assert errors_of(result) == [
        ("sort", UNEXPECTED_PARAMETER),
        ("term", DUPLICATE_PARAMETER),
        ("page", MISSING_PARAMETER),
        ("exact", "expected true or false, found: 'yes'"),
    ]


def test_generic_records(querystring_registry: QuerystringParserRegistry) -> None:
    result = querystring_registry.parse({"first": ["1"], "second": ["x"]}, Pair[int])
    assert errors_of(result) == [("second", "expected integer, found: 'x'")]


def test_generated_parsers_are_cached(querystring_registry: QuerystringParserRegistry) -> None:
    parser = querystring_registry.resolve(SearchQuery)
    assert isinstance(parser, QuerystringToRecordParser)
    assert querystring_registry.resolve(SearchQuery) is parser


def test_only_records_are_auto_generated(
    querystring_registry: QuerystringParserRegistry,
) -> None:
    assert querystring_registry.supports(SearchQuery)
    assert not querystring_registry.supports(int)
    with pytest.raises(NoConverterFoundError, match="record types"):
        querystring_registry.resolve(int)


def test_manual_parsers_take_precedence() -> None:
    registry = create_querystring_registry()
    registry.register(FixedParser())
    registry.seal()

    assert value_of(registry.parse({}, Shallow)) == Shallow(0, "fixed")
    with pytest.raises(RegistrySealedError):
        registry.register(FixedParser())


def test_fields_without_string_parser_fail_at_generation(
    querystring_registry: QuerystringParserRegistry,
) -> None:
    with pytest.raises(NoConverterFoundError):
        querystring_registry.resolve(Pair[list[int]])


def test_overlong_integer_is_reported_per_parameter(
    querystring_registry: QuerystringParserRegistry,
) -> None:
    result = querystring_registry.parse({"term": ["a"], "page": ["9" * 5000]}, SearchQuery)
    [(path, message)] = errors_of(result)
    assert path == "page"
    assert "too many" in message


def test_wrong_number_of_type_arguments(
    querystring_registry: QuerystringParserRegistry,
) -> None:
    descriptor = TypeDescriptor(Pair, (TypeDescriptor(int), TypeDescriptor(str)))
    with pytest.raises(NoConverterFoundError, match="2 type argument"):
        querystring_registry.resolve(descriptor)


def test_resolve_before_seal_is_rejected() -> None:
    registry = create_querystring_registry()
    assert not registry.is_sealed
    with pytest.raises(RegistryNotSealedError):
        registry.resolve(SearchQuery)
    registry.clear()
    registry.seal()
    assert isinstance(registry.resolve(SearchQuery), QuerystringToRecordParser)
