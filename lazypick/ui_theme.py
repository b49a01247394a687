"""UI theme definitions and selection helpers.

Themes are ANSI palettes for picker chrome, match highlights, the selection
bar and the action bar.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PickerTheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    search_label: str
    search_placeholder: str
    hint: str
    header: str
    selected: str
    match: str
    match_selected: str
    action_selected: str
    action_idle: str
    action_description: str
    empty_message: str


DEFAULT_THEME = PickerTheme(
    name="default",
    reset="\033[0m",
    search_label="\033[34m",
    search_placeholder="\033[2m",
    hint="\033[90m",
    header="\033[1m",
    selected="\033[42;97;1m",
    match="\033[46;97;1m",
    match_selected="\033[45;97;1m",
    action_selected="\033[34m",
    action_idle="\033[90m",
    action_description="\033[90m",
    empty_message="\033[33m",
)

OCEAN_THEME = PickerTheme(
    name="ocean",
    reset="\033[0m",
    search_label="\033[1;38;5;45m",
    search_placeholder="\033[2;38;5;110m",
    hint="\033[2;38;5;110m",
    header="\033[1;38;5;39m",
    selected="\033[48;5;24;38;5;231;1m",
    match="\033[38;5;45;1m",
    match_selected="\033[48;5;31;38;5;231;1m",
    action_selected="\033[1;38;5;45m",
    action_idle="\033[2;38;5;110m",
    action_description="\033[38;5;153m",
    empty_message="\033[38;5;215m",
)

PLAIN_THEME = PickerTheme(
    name="plain",
    reset="",
    search_label="",
    search_placeholder="",
    hint="",
    header="",
    selected="",
    match="",
    match_selected="",
    action_selected="",
    action_idle="",
    action_description="",
    empty_message="",
)

_THEMES: dict[str, PickerTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> PickerTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def styled(text: str, style: str, theme: PickerTheme) -> str:
    """Wrap ``text`` in ``style`` and the theme reset; no-op for empty input."""
    if not text or not style:
        return text
    return f"{style}{text}{theme.reset}"
