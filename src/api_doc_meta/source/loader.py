"""Declaration dump loader.

Reads a YAML or JSON dump of class declarations, as exported by the
syntax-tree provider, into Declaration models.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from api_doc_meta.logging import get_logger
from api_doc_meta.source.base import Declaration, DeclarationKind

logger = get_logger("loader")

# Member kind assumed when a dump omits it, keyed by the parent's kind.
_DEFAULT_MEMBER_KIND = {
    DeclarationKind.CLASS.value: DeclarationKind.METHOD.value,
    DeclarationKind.METHOD.value: DeclarationKind.PARAMETER.value,
}


class DeclarationLoadError(ValueError):
    """Raised when a declaration dump cannot be read."""


def load_declarations(file_path: Path) -> list[Declaration]:
    """Load class declarations from a YAML/JSON dump file.

    The root is either a list of classes or a mapping with a ``classes`` list.
    """
    text = file_path.read_text(encoding="utf-8")
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DeclarationLoadError(f"Failed to parse {file_path.name}: {e}") from e

    if isinstance(doc, dict):
        if "classes" not in doc:
            raise DeclarationLoadError(f"{file_path.name}: mapping root needs a 'classes' list")
        doc = doc["classes"]
    if doc is None:
        doc = []
    if not isinstance(doc, list):
        raise DeclarationLoadError(f"{file_path.name}: expected a list of classes")

    declarations = []
    for index, item in enumerate(doc):
        if not isinstance(item, dict):
            raise DeclarationLoadError(f"{file_path.name}: class #{index} is not a mapping")
        where = f"{file_path.name}: class #{index}"
        try:
            declarations.append(
                Declaration.model_validate(_with_kinds(item, DeclarationKind.CLASS.value, where))
            )
        except ValidationError as e:
            raise DeclarationLoadError(f"{file_path.name}: invalid class #{index}: {e}") from e

    logger.info("Loaded %d classes from %s", len(declarations), file_path)
    return declarations


def _with_kinds(item: dict, kind: str, where: str) -> dict:
    """Fill in missing ``kind`` keys down the member tree."""
    bad_keys = [k for k in item if not isinstance(k, str)]
    if bad_keys:
        raise DeclarationLoadError(f"{where}: keys must be strings, got {bad_keys!r}")

    result = dict(item)
    result.setdefault("kind", kind)
    member_kind = _DEFAULT_MEMBER_KIND.get(str(result["kind"]))
    members = result.get("members") or []
    result["members"] = [
        _with_kinds(m, member_kind, f"{where} > {result.get('name', '?')}")
        if isinstance(m, dict) and member_kind else m
        for m in members
    ]
    return result
