"""Unit tests for raw configuration helpers."""

import pytest
from rdflib import URIRef

from lod_authority.errors import ConfigurationWarning
from lod_authority.raw import as_mapping, as_string_mapping, normalize_keys, predicate_uri


def test_normalize_keys_nested():
    raw = {1: {'@type': 'IriTemplate', True: [{'a': (1, 2)}]}}
    assert normalize_keys(raw) == {'1': {'@type': 'IriTemplate', 'True': [{'a': [1, 2]}]}}


def test_normalize_keys_scalars_untouched():
    assert normalize_keys('en') == 'en'
    assert normalize_keys(None) is None


def test_as_mapping():
    assert as_mapping(None, 'results') is None
    assert as_mapping({'a': 1}, 'results') == {'a': 1}
    with pytest.warns(ConfigurationWarning, match="results"):
        assert as_mapping('oops', 'results') is None


def test_as_string_mapping_drops_non_strings():
    with pytest.warns(ConfigurationWarning):
        assert as_string_mapping({'a': 'A', 'b': 2}, 'subauthorities') == {'a': 'A'}
    assert as_string_mapping(None, 'subauthorities') == {}


def test_predicate_uri():
    results = {'id_predicate': 'http://purl.org/dc/terms/identifier'}
    assert predicate_uri(results, 'id_predicate') == URIRef('http://purl.org/dc/terms/identifier')
    assert predicate_uri(results, 'sort_predicate') is None
    assert predicate_uri(None, 'id_predicate') is None
