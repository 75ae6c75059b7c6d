"""
In-memory UtilityHost that renders plain CSS.

Resolves class names the way a utility-first CSS engine does: exact static
names first, then '<prefix>-<value>' against the registered value domains
(longest prefix wins), then arbitrary '<prefix>-[<value>]' values.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from .utilities import StyleMap, UtilityHost, UtilityResolver

ARBITRARY_VALUE_RE = re.compile(r"^(?P<prefix>[a-z-]+)-\[(?P<value>[^\]]+)\]$")

_SELECTOR_ESCAPES = {
    ":": "\\:",
    "/": "\\/",
    ".": "\\.",
    "%": "\\%",
    "#": "\\#",
    "[": "\\[",
    "]": "\\]",
    "(": "\\(",
    ")": "\\)",
    ",": "\\,",
    " ": "\\ ",
}


def escape_class(name: str) -> str:
    """Escape a class name for use in a CSS selector."""
    escaped = name
    for target, repl in _SELECTOR_ESCAPES.items():
        escaped = escaped.replace(target, repl)
    return escaped


@dataclass
class DynamicUtility:
    prefix: str
    values: Dict[str, str]
    resolver: UtilityResolver

    def class_names(self) -> Iterator[str]:
        for token in self.values:
            yield f"{self.prefix}-{token}"


class StylesheetHost(UtilityHost):
    """Collects registrations and renders them as CSS rules."""

    def __init__(self) -> None:
        self._static: Dict[str, StyleMap] = {}
        self._dynamic: List[DynamicUtility] = []

    def register_static(self, name: str, style_map: StyleMap) -> None:
        # Re-registering a name merges declarations, later ones win
        self._static.setdefault(name, {}).update(style_map)

    def register_dynamic(
        self,
        prefix: str,
        value_domain: Mapping[str, str],
        resolver: UtilityResolver,
    ) -> None:
        self._dynamic.append(DynamicUtility(prefix, dict(value_domain), resolver))
        self._dynamic.sort(key=lambda utility: len(utility.prefix), reverse=True)

    @property
    def static_names(self) -> List[str]:
        return list(self._static)

    @property
    def dynamic_prefixes(self) -> List[str]:
        return [utility.prefix for utility in self._dynamic]

    def resolve(self, class_name: str) -> Optional[StyleMap]:
        """
        Style map for a class name.

        Returns:
            The declarations, or None when no utility produces a rule
        """
        if class_name in self._static:
            return dict(self._static[class_name])

        arbitrary = ARBITRARY_VALUE_RE.match(class_name)
        for utility in self._dynamic:
            if arbitrary is not None:
                if arbitrary.group("prefix") == utility.prefix:
                    return utility.resolver(arbitrary.group("value")) or None
                continue
            if not class_name.startswith(f"{utility.prefix}-"):
                continue
            token = class_name[len(utility.prefix) + 1:]
            if token in utility.values:
                return utility.resolver(utility.values[token]) or None
        return None

    def render_rule(self, class_name: str, style_map: StyleMap) -> Optional[str]:
        """One CSS rule; None when every declaration is empty."""
        declarations = [f"{prop}: {value}" for prop, value in style_map.items() if value]
        if not declarations:
            return None
        return f".{escape_class(class_name)} {{ {'; '.join(declarations)}; }}"

    def all_class_names(self) -> List[str]:
        names = list(self._static)
        for utility in reversed(self._dynamic):
            names.extend(name for name in utility.class_names() if name not in self._static)
        return names

    def render(self, class_names: Optional[Iterable[str]] = None) -> str:
        """
        Render a stylesheet.

        Args:
            class_names: Only emit rules for these classes (unknown names
                are skipped). Defaults to every static utility and every
                value in each dynamic utility's domain.

        Returns:
            CSS text, one rule per line
        """
        names = self.all_class_names() if class_names is None else list(class_names)
        rules: List[str] = []
        seen = set()
        for name in names:
            if name in seen:
                continue
            seen.add(name)
            style_map = self.resolve(name)
            if style_map is None:
                continue
            rule = self.render_rule(name, style_map)
            if rule is not None:
                rules.append(rule)
        return "\n".join(rules) + ("\n" if rules else "")
