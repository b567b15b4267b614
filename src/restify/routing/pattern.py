"""Path template compiler.

Turns a template such as ``/users/:id([0-9]+)/files/**`` into an anchored
regular expression plus the names and positions of its slugs.

Template syntax::

    /literal/segments
    /:name            /:name(customRegex)
    /{name}           /{name:customRegex}
    /seg*             one segment wildcard
    /seg**            multi-segment wildcard

A trailing ``?query`` and ``#fragment`` on the matched path are accepted
and ignored.
"""

import re
from dataclasses import dataclass

from restify.errors import InvalidPatternError

# Appended to every compiled template. Never counted as slugs.
QUERY_FRAGMENT_SUFFIX = "([?].*)?([#].*)?$"
SUFFIX_GROUPS = 2

# Group body for a slug without a custom pattern: one non-empty segment
DEFAULT_SLUG_PATTERN = r"[^/?#]+"

_LEGAL_NAME = re.compile(r"[0-9A-Za-z-]+")
_META = re.compile(r"([.^$])")
_STAR_RUN = re.compile(r"\*+")


@dataclass(frozen=True, slots=True)
class PathPattern:
    """A compiled path template.

    ``slug_positions`` holds the zero-based index of each named segment in
    the slash-split template (without its leading ``/``).
    """

    raw_template: str
    regex: re.Pattern[str]
    slug_names: tuple[str, ...] = ()
    slug_positions: tuple[int, ...] = ()

    def match(self, path: str) -> tuple[str, ...] | None:
        """Match *path* in full and return the captured slug values.

        Returns ``None`` when the path does not match.
        """
        m = self.regex.fullmatch(path)
        if m is None:
            return None
        return m.groups()[:-SUFFIX_GROUPS]

    @property
    def has_slugs(self) -> bool:
        return bool(self.slug_names)


def assert_legal_slug_name(name: str) -> None:
    """Raise ``InvalidPatternError`` unless *name* is a usable slug name."""
    if not name or _LEGAL_NAME.fullmatch(name) is None:
        msg = f"Expected {name!r} to be a legal path parameter name ([0-9A-Za-z-]+)."
        raise InvalidPatternError(msg)


def _replace_star_run(m: re.Match[str]) -> str:
    run = m.group(0)
    if len(run) == 2:
        return ".*[^/]+"
    if len(run) == 1:
        return "[^/]+"
    msg = f'Expected "*" or "**", found {run!r}'
    raise InvalidPatternError(msg)


def _compile_segment(segment: str) -> tuple[str, str | None]:
    """Return ``(regex_source, slug_name)`` for one template segment."""
    if segment.startswith(":"):
        name = segment[1:]
        paren = name.find("(")
        if paren > -1 and name.endswith(")"):
            custom = name[paren + 1 : -1]
            name = name[:paren]
            assert_legal_slug_name(name)
            return f"({custom})", name
        assert_legal_slug_name(name)
        return f"({DEFAULT_SLUG_PATTERN})", name

    if segment.startswith("{") and segment.endswith("}"):
        name, _, custom = segment[1:-1].partition(":")
        assert_legal_slug_name(name)
        return f"({custom or DEFAULT_SLUG_PATTERN})", name

    # Literal, possibly with a glob like "*.js" or "**"
    escaped = _META.sub(r"\\\1", segment)
    return _STAR_RUN.sub(_replace_star_run, escaped, count=1), None


def compile_pattern(template: str) -> PathPattern:
    """Compile a path template.

    Raises ``InvalidPatternError`` for a template without a leading ``/``,
    an illegal slug name, an unsupported wildcard run, or a custom pattern
    that is not a valid regular expression or has capturing groups of its
    own.
    """
    if not template.startswith("/"):
        msg = f"Expected path {template!r} to start with '/'"
        raise InvalidPatternError(msg)

    slug_names: list[str] = []
    slug_positions: list[int] = []

    if template == "/":
        source = "^/" + QUERY_FRAGMENT_SUFFIX
    else:
        parts: list[str] = []
        for index, segment in enumerate(template[1:].split("/")):
            part, name = _compile_segment(segment)
            if name is not None:
                slug_names.append(name)
                slug_positions.append(index)
            parts.append(part)
        source = "^/" + "/".join(parts) + QUERY_FRAGMENT_SUFFIX

    try:
        regex = re.compile(source)
    except re.error as exc:
        msg = f"Cannot compile path {template!r}: {exc}"
        raise InvalidPatternError(msg) from exc

    if regex.groups - SUFFIX_GROUPS != len(slug_names):
        msg = (
            f"Cannot compile path {template!r}: custom patterns must not contain "
            "capturing groups; use (?:...) instead"
        )
        raise InvalidPatternError(msg)

    return PathPattern(
        raw_template=template,
        regex=regex,
        slug_names=tuple(slug_names),
        slug_positions=tuple(slug_positions),
    )
