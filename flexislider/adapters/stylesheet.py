"""In-memory stylesheet.

Holds the rules a slider generates and renders them as CSS text, which a host
can inject into a page or compare in tests.
"""


class MemoryStyleRule:
    """A CSS rule with ordered declarations."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        self._declarations: dict[str, str] = {}

    def set(self, prop: str, value: str) -> None:
        self._declarations[prop] = value

    def get(self, prop: str) -> str | None:
        return self._declarations.get(prop)

    @property
    def declarations(self) -> dict[str, str]:
        return dict(self._declarations)

    def css_text(self) -> str:
        body = " ".join(f"{prop}: {value};" for prop, value in self._declarations.items())
        return f"{self.selector} {{ {body} }}" if body else f"{self.selector} {{ }}"


class MemoryStyleSheet:
    """An ordered list of rules."""

    def __init__(self) -> None:
        self.rules: list[MemoryStyleRule] = []

    def insert_rule(self, selector: str) -> MemoryStyleRule:
        rule = MemoryStyleRule(selector)
        self.rules.append(rule)
        return rule

    def css_text(self) -> str:
        return "\n".join(rule.css_text() for rule in self.rules)
