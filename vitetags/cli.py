"""
Command line interface.

Usage:
    vitetags tags main.js --manifest dist/.vite/manifest.json --base-path /dist/
    vitetags url views/foo.js

Options not given on the command line fall back to the ``VITE_*`` settings.
"""
import logging

import click
from pydantic import ValidationError

from vitetags.config import get_settings
from vitetags.errors import ManifestError
from vitetags.manifest import Manifest


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _build_manifest(settings, manifest_path, base_path, dev) -> Manifest:
    return Manifest(
        dev=settings.DEV if dev is None else dev,
        manifest_path=manifest_path or settings.MANIFEST_PATH,
        base_path=settings.BASE_PATH if base_path is None else base_path,
    )


manifest_option = click.option(
    "--manifest", "manifest_path", type=click.Path(dir_okay=False), help="Path to manifest.json"
)
base_path_option = click.option("--base-path", default=None, help="Public URL prefix of the build")
dev_option = click.option("--dev/--no-dev", default=None, help="Pass entries through to the dev server")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Resolve Vite manifest entries into HTML tags."""
    _configure_logging(verbose)


@cli.command()
@click.argument("entries", nargs=-1, required=True)
@manifest_option
@base_path_option
@dev_option
@click.option("--preload-images/--no-preload-images", default=None, help="Preload entry images")
@click.option("--preload-styles/--no-preload-styles", default=None, help="Preload stylesheet entries")
def tags(entries, manifest_path, base_path, dev, preload_images, preload_styles):
    """Print the tags needed to load ENTRIES."""
    try:
        settings = get_settings()
        manifest = _build_manifest(settings, manifest_path, base_path, dev)
        manifest.preload_images(settings.PRELOAD_IMAGES if preload_images is None else preload_images)
        manifest.preload_styles(settings.PRELOAD_STYLES if preload_styles is None else preload_styles)
        click.echo(str(manifest.create_tags(*entries)))
    except ValidationError as e:
        raise click.ClickException(f"Invalid VITE_* settings: {e}")
    except ManifestError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.argument("key")
@manifest_option
@base_path_option
@dev_option
def url(key, manifest_path, base_path, dev):
    """Print the public URL of the chunk KEY."""
    try:
        manifest = _build_manifest(get_settings(), manifest_path, base_path, dev)
        click.echo(manifest.get_url(key))
    except ValidationError as e:
        raise click.ClickException(f"Invalid VITE_* settings: {e}")
    except ManifestError as e:
        raise click.ClickException(str(e))


def main():
    cli()


if __name__ == "__main__":
    main()
