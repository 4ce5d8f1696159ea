import json
from pathlib import Path
from typing import Any, TypeVar, overload

from pydantic import TypeAdapter, ValidationError

T = TypeVar("T")


# -------------------------------
# Internal raw JSON reader (single source of truth)
# -------------------------------


def _read_json_raw(path: Path | str) -> Any:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"Unable to decode UTF-8 in {p}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {p}: {e}") from e

    if data is None:
        raise ValueError(f"Empty JSON document: {p}")

    return data


# -------------------------------
# Public typed JSON loader
# -------------------------------


@overload
def load_json_typed(path: Path | str, *, adapter: TypeAdapter[T]) -> T: ...


@overload
def load_json_typed(path: Path | str, *, model: type[T]) -> T: ...


def load_json_typed(
    path: Path | str,
    *,
    adapter: TypeAdapter[T] | None = None,
    model: type[T] | None = None,
) -> T:
    """Read JSON and validate/parse it into a typed object using Pydantic v2.

    Exactly one of {adapter, model} must be supplied.

    Example:
        load_json_typed("project.config.json", model=ProjectConfig)
    """
    if (adapter is None) == (model is None):
        raise ValueError("Provide exactly one of 'adapter' or 'model'.")

    data = _read_json_raw(path)

    try:
        if adapter is not None:
            return adapter.validate_python(data)
        return TypeAdapter(model).validate_python(data)  # type: ignore[arg-type]
    except ValidationError as e:
        # Normalize error so callers see the file path in the message
        raise ValueError(f"Invalid structure in {path}: {e}") from e
