"""Shared test fixtures for the lod_authority test suite."""

import pytest
from pathlib import Path

from lod_authority import settings
from lod_authority.config import AuthorityConfig


FIXTURES_DIR = Path(__file__).parent / "fixtures" / "authorities"


# ============================================================================
# Settings Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from process-wide settings and the environment."""
    monkeypatch.delenv(settings.DEFAULT_LANGUAGE_ENV, raising=False)
    monkeypatch.delenv(settings.CONFIG_DIR_ENV, raising=False)
    settings.reset_default_language()
    yield
    settings.reset_default_language()


# ============================================================================
# Authority Document Fixtures
# ============================================================================

@pytest.fixture
def fixtures_dir():
    """Directory holding the test authority documents."""
    return FIXTURES_DIR


@pytest.fixture
def full_config():
    """Search config exercising every supported block."""
    return AuthorityConfig("LOD_FULL_CONFIG", config_dir=FIXTURES_DIR).search


@pytest.fixture
def min_config():
    """Search config with only a url and id/label predicates."""
    return AuthorityConfig("LOD_MIN_CONFIG", config_dir=FIXTURES_DIR).search


@pytest.fixture
def term_only_config():
    """Search config of an authority that only configures term lookup."""
    return AuthorityConfig("LOD_TERM_ONLY_CONFIG", config_dir=FIXTURES_DIR).search


# ============================================================================
# Raw Search Block Fixtures
# ============================================================================

@pytest.fixture
def full_search_config():
    """The ``search`` block of lod_full_config.json as a Python dict."""
    return {
        'url': {
            '@context': 'http://www.w3.org/ns/hydra/context.jsonld',
            '@type': 'IriTemplate',
            'template': 'http://localhost/test_default/search?subauth={?subauth}&query={?query}&param1={?param1}&param2={?param2}',
            'variableRepresentation': 'BasicRepresentation',
            'mapping': [
                {
                    '@type': 'IriTemplateMapping',
                    'variable': 'query',
                    'property': 'hydra:freetextQuery',
                    'required': True
                },
                {
                    '@type': 'IriTemplateMapping',
                    'variable': 'subauth',
                    'property': 'hydra:freetextQuery',
                    'required': False,
                    'default': 'search_sub1_name'
                },
                {
                    '@type': 'IriTemplateMapping',
                    'variable': 'param1',
                    'property': 'hydra:freetextQuery',
                    'required': False,
                    'default': 'delta'
                },
                {
                    '@type': 'IriTemplateMapping',
                    'variable': 'param2',
                    'property': 'hydra:freetextQuery',
                    'required': False,
                    'default': 'echo'
                }
            ]
        },
        'qa_replacement_patterns': {
            'query': 'query',
            'subauth': 'subauth'
        },
        'language': ['en', 'fr', 'de'],
        'results': {
            'id_predicate': 'http://purl.org/dc/terms/identifier',
            'label_predicate': 'http://www.w3.org/2004/02/skos/core#prefLabel',
            'altlabel_predicate': 'http://www.w3.org/2004/02/skos/core#altLabel',
            'sort_predicate': 'http://www.w3.org/2004/02/skos/core#prefLabel'
        },
        'context': {
            'groups': {
                'dates': {
                    'group_label_i18n': 'qa.linked_data.authority.locnames_ld4l_cache.dates',
                    'group_label_default': 'Dates'
                }
            },
            'properties': [
                {
                    'property_label_i18n': 'qa.linked_data.authority.locgenres_ld4l_cache.authoritative_label',
                    'property_label_default': 'Authoritative Label',
                    'lpath': 'madsrdf:authoritativeLabel',
                    'selectable': True,
                    'drillable': False
                },
                {
                    'group_id': 'dates',
                    'property_label_i18n': 'qa.linked_data.authority.locnames_ld4l_cache.birth_date',
                    'property_label_default': 'Birth',
                    'lpath': 'madsrdf:identifiesRWO/madsrdf:birthDate/schema:label',
                    'selectable': False,
                    'drillable': False
                }
            ]
        },
        'subauthorities': {
            'search_sub1_key': 'search_sub1_name',
            'search_sub2_key': 'search_sub2_name',
            'search_sub3_key': 'search_sub3_name'
        }
    }
