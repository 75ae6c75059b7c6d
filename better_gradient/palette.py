"""Color palette flattening."""

from __future__ import annotations

from typing import Any, Dict, Mapping

ColorPalette = Mapping[str, Any]


def flatten_colors(colors: ColorPalette, prefix: str = "") -> Dict[str, str]:
    """
    Flatten a nested color palette into dash-joined paths.

    Args:
        colors: Mapping whose values are color strings or further mappings,
            e.g. {'blue': {'500': '#3b82f6'}, 'white': '#fff'}
        prefix: Path of the enclosing mapping

    Returns:
        e.g. {'blue-500': '#3b82f6', 'white': '#fff'}. Values that are
        neither strings nor mappings are skipped.
    """
    result: Dict[str, str] = {}

    for key, value in colors.items():
        path = f"{prefix}-{key}" if prefix else str(key)

        if isinstance(value, str):
            result[path] = value
        elif isinstance(value, Mapping):
            result.update(flatten_colors(value, path))

    return result
