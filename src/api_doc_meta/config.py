"""Resolution settings and their YAML loader.

One ``Settings`` snapshot applies per project. The resolver only reads it;
``SettingsStore`` hands out the right snapshot for a declaration.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from api_doc_meta.logging import get_logger
from api_doc_meta.source.base import Declaration

logger = get_logger("config")


class ConfigError(ValueError):
    """Raised when a settings file cannot be parsed or validated."""


class Settings(BaseModel):
    """Which documentation sources are consulted, and under which names."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # class title
    title_use_comment_tag: bool = True
    title_use_full_class_name: bool = False
    title_use_simple_class_name: bool = True
    title_tag: str = "DocView.Title"

    # operation name
    name_use_swagger3: bool = True
    name_use_swagger2: bool = True
    name_use_comment_tag: bool = True
    name_tag: str = "DocView.Name"

    # operation description
    desc_use_swagger3: bool = True
    desc_use_swagger2: bool = True

    # required fields
    required_use_comment_tag: bool = True
    required_tag: str = "DocView.Required"
    required_field_annotations: frozenset[str] = frozenset({
        "javax.validation.constraints.NotNull",
        "javax.validation.constraints.NotBlank",
        "javax.validation.constraints.NotEmpty",
    })

    # excluded fields
    exclude_field_names: frozenset[str] = frozenset({"serialVersionUID"})
    exclude_field_annotations: frozenset[str] = frozenset({
        "com.fasterxml.jackson.annotation.JsonIgnore",
    })


class SettingsStore:
    """Default settings plus per-project overrides."""

    def __init__(self, default: Settings | None = None, projects: dict[str, Settings] | None = None):
        self.default = default or Settings()
        self.projects = dict(projects or {})

    def for_project(self, project: str | None) -> Settings:
        if project is None:
            return self.default
        return self.projects.get(project, self.default)

    def for_declaration(self, declaration: Declaration) -> Settings:
        return self.for_project(declaration.project)


def load_settings(path: Path | None) -> SettingsStore:
    """Load a settings file; a missing path yields the defaults.

    Top-level keys are ``Settings`` fields. An optional ``projects`` mapping
    holds partial overrides layered on top of them per project.
    """
    if path is None or not path.exists():
        return SettingsStore()

    data = _read_yaml(path)
    projects_data = data.pop("projects", None) or {}
    if not isinstance(projects_data, dict):
        raise ConfigError(f"{path.name}: 'projects' must be a mapping")

    default = _build_settings(data, path.name)
    projects = {}
    for name, overrides in projects_data.items():
        if not isinstance(overrides, dict):
            raise ConfigError(f"{path.name}: project '{name}' must be a mapping")
        merged = {**default.model_dump(), **overrides}
        projects[str(name)] = _build_settings(merged, f"{path.name} (project {name})")

    logger.info("Loaded settings from %s (%d project overrides)", path, len(projects))
    return SettingsStore(default=default, projects=projects)


def _read_yaml(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {path.name}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return data


def _build_settings(data: dict[str, Any], source: str) -> Settings:
    bad_keys = [k for k in data if not isinstance(k, str)]
    if bad_keys:
        raise ConfigError(f"Invalid settings in {source}: keys must be strings, got {bad_keys!r}")
    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {source}: {e}") from e
