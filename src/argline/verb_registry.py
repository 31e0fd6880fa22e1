"""Verb registry: the ops understood by the argline tool surface.

Used by the reference card generator, the tool description builder, and
the op dispatcher to reject unknown verbs and params.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class VerbSpec:
    """Specification for a single op verb."""

    verb: str
    syntax: str
    category: str
    params: list[str] = field(default_factory=list)
    description: str = ""


class VerbRegistry:
    """Registry of verb specifications with reference card generation."""

    def __init__(self) -> None:
        self._verbs: list[VerbSpec] = []
        self._map: dict[str, VerbSpec] = {}

    def register(self, spec: VerbSpec) -> None:
        self._verbs.append(spec)
        self._map[spec.verb] = spec

    def register_many(self, specs: list[VerbSpec]) -> None:
        for spec in specs:
            self.register(spec)

    def lookup(self, verb: str) -> VerbSpec | None:
        return self._map.get(verb)

    @property
    def verbs(self) -> list[VerbSpec]:
        """All registered verb specifications (insertion order)."""
        return list(self._verbs)

    def categories(self) -> list[str]:
        seen: list[str] = []
        for v in self._verbs:
            if v.category not in seen:
                seen.append(v.category)
        return seen

    def generate_reference_card(
        self,
        extra_sections: dict[str, str] | None = None,
    ) -> str:
        """Generate a reference card grouped by category.

        Each verb line shows its syntax followed by its description. Extra
        static sections are appended after the verb listings.
        """
        lines: list[str] = []
        for cat in self.categories():
            lines.append(f"### {cat.replace('_', ' ').title()}")
            for v in self._verbs:
                if v.category != cat:
                    continue
                lines.append(f"  {v.syntax:<34}{v.description}".rstrip())
            lines.append("")

        if extra_sections:
            for title, content in extra_sections.items():
                lines.append(f"## {title}")
                lines.append(content)
                lines.append("")

        return "\n".join(lines)


ARGLINE_VERBS: list[VerbSpec] = [
    VerbSpec(
        verb="positional",
        syntax="positional INDEX [unquote:yes]",
        category="extract",
        params=["unquote"],
        description="take the INDEX-th argument (zero-based)",
    ),
    VerbSpec(
        verb="flag",
        syntax="flag PATTERN",
        category="extract",
        description="remove the first argument matching PATTERN (regex, any case)",
    ),
    VerbSpec(
        verb="named",
        syntax="named PATTERN [unquote:yes]",
        category="extract",
        params=["unquote"],
        description="remove PATTERN and take the argument after it",
    ),
    VerbSpec(
        verb="reparse",
        syntax="reparse",
        category="maintain",
        description="re-tokenize so positional indices match the current line",
    ),
    VerbSpec(
        verb="remaining",
        syntax="remaining",
        category="inspect",
        description="show the line left after extractions",
    ),
    VerbSpec(
        verb="tokens",
        syntax="tokens",
        category="inspect",
        description="list token slots, cleared ones included",
    ),
]
