"""CLI entry point for api-doc-meta."""

from pathlib import Path

import click
import yaml
from pydantic import TypeAdapter

from api_doc_meta.config import ConfigError, Settings, SettingsStore, load_settings
from api_doc_meta.logging import configure_logging, get_logger
from api_doc_meta.resolver.document import ClassDoc, describe_class
from api_doc_meta.source.base import Declaration
from api_doc_meta.source.loader import DeclarationLoadError, load_declarations

logger = get_logger("cli")

_CLASS_DOCS = TypeAdapter(list[ClassDoc])


def _load_store(settings_path: Path | None) -> SettingsStore:
    try:
        return load_settings(settings_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


def _load_classes(decl_path: Path) -> list[Declaration]:
    try:
        return load_declarations(decl_path)
    except DeclarationLoadError as e:
        raise click.ClickException(str(e)) from e


def _settings_as_dict(settings: Settings) -> dict:
    return {
        key: sorted(value) if isinstance(value, frozenset) else value
        for key, value in settings.model_dump().items()
    }


@click.group()
def main():
    """API Doc Meta: resolve documentation metadata from declarations."""
    pass


@main.command()
@click.argument("decl_path", type=click.Path(exists=True, path_type=Path))
@click.option("--settings", "settings_path", default=None, type=click.Path(exists=True, path_type=Path), help="Settings YAML file.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write JSON here instead of stdout.")
@click.option("-v", "--verbose", is_flag=True, help="Log which source each value came from.")
def resolve(decl_path: Path, settings_path: Path | None, output: Path | None, verbose: bool):
    """Resolve titles, names, descriptions and flags for every class in a dump."""
    configure_logging(verbose=verbose)
    store = _load_store(settings_path)
    classes = _load_classes(decl_path)

    docs = []
    for class_decl in classes:
        logger.debug("Resolving %s", class_decl.qualified_name or class_decl.name)
        docs.append(describe_class(class_decl, store.for_declaration(class_decl)))

    payload = _CLASS_DOCS.dump_json(docs, indent=2).decode("utf-8")
    if output is None:
        click.echo(payload)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload + "\n", encoding="utf-8")
    click.echo(f"Resolved {len(docs)} classes into {output}")


@main.command()
@click.option("--settings", "settings_path", default=None, type=click.Path(exists=True, path_type=Path), help="Settings YAML file.")
@click.option("--project", default=None, help="Show the settings applied to this project.")
def show_settings(settings_path: Path | None, project: str | None):
    """Print the effective settings as YAML."""
    store = _load_store(settings_path)
    settings = store.for_project(project)
    click.echo(yaml.safe_dump(_settings_as_dict(settings), sort_keys=True), nl=False)
