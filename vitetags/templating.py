"""
Jinja2 integration: exposes manifest lookups as template globals.

Usage in templates:
    {{ vite_tags("main.js") }}
    <link rel="icon" href="{{ vite_url('public/img/favicon.ico') }}">
"""
from typing import Any

from jinja2 import Environment
from markupsafe import Markup

from vitetags.manifest import Manifest


def register_template_globals(target: Any, manifest: Manifest) -> None:
    """
    Register ``vite_tags`` and ``vite_url`` on a Jinja2 environment.

    Args:
        target: A ``jinja2.Environment`` or a FastAPI ``Jinja2Templates`` instance
        manifest: The manifest to resolve entries against
    """
    env: Environment = target if isinstance(target, Environment) else target.env

    def vite_tags(*entries: str) -> Markup:
        return Markup(str(manifest.create_tags(*entries)))

    env.globals["vite_tags"] = vite_tags
    env.globals["vite_url"] = manifest.get_url
