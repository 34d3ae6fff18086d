"""
app.py
──────
Live Translations — demo entry point.

Startup sequence:
  1. Load locale files and register the translations registry
  2. Create Dash app with DARKLY bootstrap theme
  3. Register the language switch callback
  4. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.settings import settings
from src.i18n import dash_bindings
from src.i18n.loader import load_translations
from src.i18n.registry import add_translations
from src.layout.main import create_layout

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("app")

# ── 1. Translations ───────────────────────────────────────────────────────────
log.info("Loading locales from %s", settings.LOCALES_DIR)
registry = add_translations(
    settings.DEFAULT_LANG,
    load_translations(settings.LOCALES_DIR, settings.DEFAULT_LANG),
)
paths = registry.translations
t = registry.t

labels = {
    "title": t(paths["app"]["title"]),
    "subtitle": t(paths["app"]["subtitle"]),
    "greeting": t(paths["greeting"], "Sam"),
    "cart-summary": t(paths["cart"]["summary"], 3, "42.50"),
    "lang-label": t(paths["language"]["label"]),
}

# ── 2. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="Live Translations",
)

server = app.server  # gunicorn entry point
app.layout = lambda: create_layout(registry, labels)  # rebuilt per page load

# ── 3. Register callbacks ─────────────────────────────────────────────────────
dash_bindings.register(app, registry, labels)

# ── 4. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
