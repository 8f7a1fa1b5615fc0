"""Tests for `strawberry_subgraph/settings.py`."""

from django.conf import ENVIRONMENT_VARIABLE, LazySettings
from django.test import override_settings

from strawberry_subgraph import (
    FederatedSchemaConfig,
    PrinterOptions,
    build_federated_schema,
    settings,
)
from strawberry_subgraph.test import TestClient


def get_service_sdl(schema):
    response = TestClient(schema).query("query { _service { sdl } }")
    return response.data["_service"]["sdl"]


def test_defaults():
    """Test defaults.

    Test that `strawberry_subgraph_settings()` provides the default settings if they
    don't exist in the Django settings file.
    """
    assert settings.strawberry_subgraph_settings() == settings.DEFAULT_SUBGRAPH_SETTINGS


def test_non_defaults():
    """Test non defaults.

    Test that `strawberry_subgraph_settings()` provides the user's settings if they are
    defined in the Django settings file.
    """
    with override_settings(
        STRAWBERRY_SUBGRAPH=settings.StrawberrySubgraphSettings(
            FEDERATION_SPEC_URL="https://specs.apollo.dev/federation/v2.3",
            SDL_INCLUDE_DIRECTIVE_DEFINITIONS=False,
            SDL_INCLUDE_SCHEMA_DEFINITION=False,
        ),
    ):
        assert (
            settings.strawberry_subgraph_settings()
            == settings.StrawberrySubgraphSettings(
                FEDERATION_SPEC_URL="https://specs.apollo.dev/federation/v2.3",
                SDL_INCLUDE_DIRECTIVE_DEFINITIONS=False,
                SDL_INCLUDE_SCHEMA_DEFINITION=False,
            )
        )


def test_partial_settings_keep_defaults():
    with override_settings(
        STRAWBERRY_SUBGRAPH={"SDL_INCLUDE_SCHEMA_DEFINITION": False},
    ):
        assert settings.strawberry_subgraph_settings() == {
            **settings.DEFAULT_SUBGRAPH_SETTINGS,
            "SDL_INCLUDE_SCHEMA_DEFINITION": False,
        }


def test_federation_spec_url_setting(product_type):
    with override_settings(
        STRAWBERRY_SUBGRAPH={
            "FEDERATION_SPEC_URL": "https://specs.apollo.dev/federation/v2.3",
        },
    ):
        schema = build_federated_schema(FederatedSchemaConfig(types=[product_type]))

    assert get_service_sdl(schema).startswith(
        'schema @link(url: "https://specs.apollo.dev/federation/v2.3", import: [',
    )


def test_sdl_settings(product_type):
    with override_settings(
        STRAWBERRY_SUBGRAPH={
            "SDL_INCLUDE_DIRECTIVE_DEFINITIONS": False,
            "SDL_INCLUDE_SCHEMA_DEFINITION": False,
        },
    ):
        schema = build_federated_schema(FederatedSchemaConfig(types=[product_type]))

    sdl = get_service_sdl(schema)
    assert sdl.startswith('type Product @key(fields: "id", resolvable: true) {')
    assert "directive @" not in sdl


def test_printer_options_take_precedence(product_type):
    with override_settings(
        STRAWBERRY_SUBGRAPH={"SDL_INCLUDE_SCHEMA_DEFINITION": False},
    ):
        schema = build_federated_schema(
            FederatedSchemaConfig(types=[product_type]),
            printer_options=PrinterOptions(include_schema_definition=True),
        )

    sdl = get_service_sdl(schema)
    assert sdl.startswith("schema @link(")
    assert "directive @" not in sdl


def test_settings_module_read_before_first_access(monkeypatch):
    """Settings are read even when Django did not load them yet."""
    lazy_settings = LazySettings()
    assert not lazy_settings.configured

    monkeypatch.setenv(ENVIRONMENT_VARIABLE, "tests.subgraph_settings")
    monkeypatch.setattr(settings, "settings", lazy_settings)

    assert settings.strawberry_subgraph_settings() == {
        **settings.DEFAULT_SUBGRAPH_SETTINGS,
        "FEDERATION_SPEC_URL": "https://specs.apollo.dev/federation/v2.3",
    }


def test_defaults_outside_django_project(monkeypatch):
    monkeypatch.delenv(ENVIRONMENT_VARIABLE, raising=False)
    monkeypatch.setattr(settings, "settings", LazySettings())

    assert settings.strawberry_subgraph_settings() == settings.DEFAULT_SUBGRAPH_SETTINGS
