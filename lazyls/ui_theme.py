"""UI theme definitions and selection helpers.

Themes map semantic roles (directory names, permission bits, size tiers,
tree guides) to pygments console attribute tokens such as ``"blue"`` or
``"*brightblue*"`` (bold). ``paint`` turns a token into ANSI escapes.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from pygments.console import ansiformat, codes


@dataclass(frozen=True)
class UITheme:
    """Semantic color-token palette used by renderers."""

    name: str
    dir: str
    recognized_file: str
    unrecognized_file: str
    executable: str
    symlink: str
    dead_link: str
    degraded: str
    read: str
    write: str
    execute: str
    no_access: str
    user: str
    group: str
    file_small: str
    file_medium: str
    file_large: str
    hour_old: str
    day_old: str
    no_modifier: str
    tree: str
    report: str
    error: str
    git_changed: str
    git_untracked: str


DARK_THEME = UITheme(
    name="dark",
    dir="*brightblue*",
    recognized_file="brightyellow",
    unrecognized_file="yellow",
    executable="*brightgreen*",
    symlink="brightcyan",
    dead_link="red",
    degraded="brightred",
    read="brightgreen",
    write="brightyellow",
    execute="brightred",
    no_access="gray",
    user="brightyellow",
    group="blue",
    file_small="green",
    file_medium="yellow",
    file_large="brightred",
    hour_old="brightgreen",
    day_old="green",
    no_modifier="cyan",
    tree="gray",
    report="brightblue",
    error="red",
    git_changed="yellow",
    git_untracked="green",
)

LIGHT_THEME = UITheme(
    name="light",
    dir="*blue*",
    recognized_file="magenta",
    unrecognized_file="black",
    executable="*green*",
    symlink="cyan",
    dead_link="red",
    degraded="red",
    read="green",
    write="yellow",
    execute="red",
    no_access="brightblack",
    user="magenta",
    group="blue",
    file_small="green",
    file_medium="yellow",
    file_large="red",
    hour_old="green",
    day_old="cyan",
    no_modifier="black",
    tree="brightblack",
    report="blue",
    error="red",
    git_changed="yellow",
    git_untracked="green",
)

PLAIN_THEME = UITheme(name="plain", **{field.name: "" for field in fields(UITheme) if field.name != "name"})

_THEMES: dict[str, UITheme] = {
    DARK_THEME.name: DARK_THEME,
    LIGHT_THEME.name: LIGHT_THEME,
}


def _bare_attr(token: str) -> str:
    while len(token) >= 2 and token[0] == token[-1] and token[0] in "+*_":
        token = token[1:-1]
    return token


def is_valid_token(token: str) -> bool:
    """Return whether ``token`` names a pygments console attribute."""
    return _bare_attr(token) in codes


def paint(token: str, text: str) -> str:
    """Wrap ``text`` in the ANSI codes for ``token``; empty tokens are no-ops."""
    if not token or not text:
        return text
    return ansiformat(token, text)


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to dark."""
    if not name:
        return DARK_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DARK_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete palette for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DARK_THEME",
    "LIGHT_THEME",
    "PLAIN_THEME",
    "is_valid_token",
    "paint",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
