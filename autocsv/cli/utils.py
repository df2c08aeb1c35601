from __future__ import annotations

import importlib

import click


def load_record_type(target: str) -> type:
    """Import ``package.module:ClassName`` and return the class."""
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise click.BadParameter(
            f"expected MODULE:CLASS, got {target!r}", param_hint="RECORD_TYPE"
        )
    try:
        obj: object = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(
            f"cannot import module {module_name!r}: {e}", param_hint="RECORD_TYPE"
        ) from e
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise click.BadParameter(
                f"{module_name!r} has no attribute {attr_path!r}",
                param_hint="RECORD_TYPE",
            ) from e
    if not isinstance(obj, type):
        raise click.BadParameter(
            f"{target!r} is not a class", param_hint="RECORD_TYPE"
        )
    return obj
