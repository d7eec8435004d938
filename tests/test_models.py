"""Tests for core data models."""

import pytest

from bling_connector.core.models import (
    DEFAULT_BASE_URL,
    APIError,
    BlingError,
    ClientSettings,
    ConfigurationError,
    EntityConstructionError,
    EntityDomain,
    ReadOnlyEntityError,
    UnknownDomainError,
    parse_domain,
)


def test_entity_domain_values():
    """Test EntityDomain values are the accessor names."""
    assert EntityDomain.CONTATOS.value == "contatos"
    assert EntityDomain.CONTAS_PAGAR.value == "contas_pagar"
    assert len(EntityDomain) == 16
    assert len({d.value for d in EntityDomain}) == len(EntityDomain)


def test_client_settings_defaults():
    """Test ClientSettings defaults."""
    settings = ClientSettings()
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout_seconds == 10.0
    assert settings.max_retries == 3


def test_client_settings_to_dict():
    """Test converting ClientSettings to a dict."""
    settings = ClientSettings(base_url="https://x.test", timeout_seconds=5, max_retries=2)
    assert settings.to_dict() == {
        "base_url": "https://x.test",
        "timeout_seconds": 5,
        "max_retries": 2,
    }


def test_client_settings_from_dict_converts_and_defaults():
    """Test from_dict converts strings and keeps defaults for missing keys."""
    settings = ClientSettings.from_dict({"timeout_seconds": "2.5"})
    assert settings.timeout_seconds == 2.5
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.max_retries == 3


def test_client_settings_from_dict_invalid():
    """Test from_dict raises ValueError for unparsable values."""
    with pytest.raises(ValueError):
        ClientSettings.from_dict({"max_retries": "many"})


@pytest.mark.parametrize(
    "name, expected",
    [
        ("contatos", EntityDomain.CONTATOS),
        ("contas-pagar", EntityDomain.CONTAS_PAGAR),
        ("  Formas_De_Pagamento ", EntityDomain.FORMAS_DE_PAGAMENTO),
        (EntityDomain.ESTOQUES, EntityDomain.ESTOQUES),
    ],
)
def test_parse_domain(name, expected):
    """Test parsing domain names."""
    assert parse_domain(name) is expected


def test_parse_domain_unknown():
    """Test that unknown names raise UnknownDomainError listing supported ones."""
    with pytest.raises(UnknownDomainError) as exc_info:
        parse_domain("pedidos")

    assert "pedidos" in str(exc_info.value)
    assert "contatos" in str(exc_info.value)


def test_error_hierarchy():
    """Test that every connector error derives from BlingError."""
    for error_class in (
        ConfigurationError,
        EntityConstructionError,
        UnknownDomainError,
        ReadOnlyEntityError,
        APIError,
    ):
        assert issubclass(error_class, BlingError)


def test_api_error_defaults():
    """Test APIError default attributes."""
    error = APIError("failed")
    assert error.status_code is None
    assert error.error_type is None
    assert error.fields == []


@pytest.mark.parametrize("base_url", [None, 42, ""])
def test_client_settings_from_dict_rejects_bad_base_url(base_url):
    """Test that a null, non-string or empty base_url is rejected."""
    with pytest.raises(TypeError):
        ClientSettings.from_dict({"base_url": base_url})
