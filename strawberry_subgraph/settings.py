"""Code for interacting with Django settings."""

import os
from typing import cast

from django.conf import ENVIRONMENT_VARIABLE, settings
from typing_extensions import TypedDict


class StrawberrySubgraphSettings(TypedDict):
    """Dictionary defining the shape `settings.STRAWBERRY_SUBGRAPH` should have.

    All settings are optional and have defaults as described in their docstrings and
    defined in `DEFAULT_SUBGRAPH_SETTINGS`.
    """

    #: URL of the federation specification linked from the schema block
    #: through the `@link` directive.
    FEDERATION_SPEC_URL: str

    #: If True, the SDL served by `_service` includes directive definitions.
    SDL_INCLUDE_DIRECTIVE_DEFINITIONS: bool

    #: If True, the SDL served by `_service` always starts with a `schema`
    #: block, even when every root type uses its default name.
    SDL_INCLUDE_SCHEMA_DEFINITION: bool


DEFAULT_SUBGRAPH_SETTINGS = StrawberrySubgraphSettings(
    FEDERATION_SPEC_URL="https://specs.apollo.dev/federation/v2.1",
    SDL_INCLUDE_DIRECTIVE_DEFINITIONS=True,
    SDL_INCLUDE_SCHEMA_DEFINITION=True,
)


def strawberry_subgraph_settings() -> StrawberrySubgraphSettings:
    """Get strawberry subgraph settings.

    Return the dictionary from `settings.STRAWBERRY_SUBGRAPH`, with defaults
    for missing keys. Outside of a Django project (no configured settings and
    no `DJANGO_SETTINGS_MODULE`) the defaults are returned as is.

    Preferred to direct access for the type hints and defaults.
    """
    defaults = DEFAULT_SUBGRAPH_SETTINGS
    # `configured` stays False until the lazy settings are first accessed
    if not settings.configured and not os.environ.get(ENVIRONMENT_VARIABLE):
        return cast("StrawberrySubgraphSettings", {**defaults})

    return cast(
        "StrawberrySubgraphSettings",
        {**defaults, **getattr(settings, "STRAWBERRY_SUBGRAPH", {})},
    )
