"""
src/i18n/dash_bindings.py — Dash integration for the translations registry.

install() publishes the registry on the Flask server behind a Dash app so
pages and callbacks can fetch it with get_installed(). register() wires a
language selector to change_language() and pushes the re-resolved strings of
the given states back into their components.
"""
from __future__ import annotations

from collections.abc import Mapping

import dash_bootstrap_components as dbc
from dash import Input, Output, dcc

from src.i18n.errors import NotRegisteredError
from src.i18n.models import TranslationState
from src.i18n.registry import Registry

CONFIG_KEY = "TRANSLATIONS"
SELECTOR_ID = "lang-select"
STORE_ID = "store-lang"


def install(app, registry: Registry) -> None:
    app.server.config[CONFIG_KEY] = registry


def get_installed(app) -> Registry:
    registry = app.server.config.get(CONFIG_KEY)
    if registry is None:
        raise NotRegisteredError()
    return registry


def language_selector(registry: Registry, selector_id: str = SELECTOR_ID) -> list:
    """Select of the available languages plus the store mirroring the choice."""
    return [
        dbc.Select(
            id=selector_id,
            options=[{"label": lang.upper(), "value": lang} for lang in registry.languages],
            value=registry.language,
            size="sm",
        ),
        dcc.Store(id=STORE_ID, data=registry.language),
    ]


def switch_language(
    registry: Registry, language: str, labels: Mapping[str, TranslationState]
) -> list:
    registry.change_language(language)
    return [registry.language] + [str(state) for state in labels.values()]


def register(
    app,
    registry: Registry,
    labels: Mapping[str, TranslationState],
    selector_id: str = SELECTOR_ID,
) -> None:
    """
    Register the language switch callback.

    `labels` maps component ids to the states whose text they display; each
    component's `children` is refreshed after every switch.
    """
    install(app, registry)

    @app.callback(
        [Output(STORE_ID, "data")] + [Output(cid, "children") for cid in labels],
        Input(selector_id, "value"),
        prevent_initial_call=True,
    )
    def update_language(language: str) -> list:
        return switch_language(registry, language, labels)
