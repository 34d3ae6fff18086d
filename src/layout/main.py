"""
src/layout/main.py
───────────────────
Demo page layout composition.

Built on every page load so the labels and the language selector reflect
the registry's current language, not the one active at import time.
"""
from collections.abc import Mapping

import dash_bootstrap_components as dbc
from dash import html

from src.i18n import dash_bindings
from src.i18n.models import TranslationState
from src.i18n.registry import Registry

MUTED = "#8b949e"


def create_layout(registry: Registry, labels: Mapping[str, TranslationState]) -> dbc.Container:
    """Assemble the page from the live label states."""
    return dbc.Container(
        [
            html.H2(str(labels["title"]), id="title", className="mt-4"),
            html.P(str(labels["subtitle"]), id="subtitle", style={"color": MUTED}),
            dbc.Row(
                [
                    dbc.Col(html.Span(str(labels["lang-label"]), id="lang-label"), width="auto"),
                    dbc.Col(dash_bindings.language_selector(registry), width=2),
                ],
                align="center",
                className="mb-3",
            ),
            html.P(str(labels["greeting"]), id="greeting"),
            html.P(str(labels["cart-summary"]), id="cart-summary"),
        ],
        fluid=True,
    )
