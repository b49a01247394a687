"""Query match highlighting for picker rows.

Mirrors the ranker's tiers: an exact substring is highlighted as one span,
otherwise each character that advances through the separator-stripped query
is highlighted individually.
"""

from __future__ import annotations

from ..search.ranking import strip_separators
from ..ui_theme import PickerTheme, styled


def _is_separator(ch: str) -> bool:
    return ch.isspace() or ch in "-_/."


def _join_runs(chars: list[tuple[str, str]], theme: PickerTheme) -> str:
    """Merge consecutive characters that share a style into one styled run."""
    out: list[str] = []
    run: list[str] = []
    run_style = ""
    for ch, style in chars:
        if run and style != run_style:
            out.append(styled("".join(run), run_style, theme))
            run = []
        run_style = style
        run.append(ch)
    if run:
        out.append(styled("".join(run), run_style, theme))
    return "".join(out)


def scattered_highlight_spans(text: str, query: str) -> list[int]:
    """Return indexes in ``text`` that consume the stripped ``query`` in order."""
    needle = strip_separators(query.lower())
    positions: list[int] = []
    needle_idx = 0
    for idx, ch in enumerate(text):
        if needle_idx >= len(needle):
            break
        if _is_separator(ch):
            continue
        if ch.lower() == needle[needle_idx]:
            positions.append(idx)
            needle_idx += 1
    return positions


def highlight_matches(text: str, query: str, theme: PickerTheme, selected: bool = False) -> str:
    """Highlight ``query`` inside ``text``.

    Selected rows keep the selection background on unmatched text and use the
    stronger ``match_selected`` style for hits.
    """
    base_style = theme.selected if selected else ""
    hit_style = theme.match_selected if selected else theme.match
    if not query:
        return styled(text, base_style, theme)

    exact_idx = text.lower().find(query.lower())
    if exact_idx >= 0:
        end = exact_idx + len(query)
        return (
            styled(text[:exact_idx], base_style, theme)
            + styled(text[exact_idx:end], hit_style, theme)
            + styled(text[end:], base_style, theme)
        )

    hits = set(scattered_highlight_spans(text, query))
    return _join_runs(
        [(ch, hit_style if idx in hits else base_style) for idx, ch in enumerate(text)],
        theme,
    )


def highlight_item_text(
    display_text: str,
    searchable_text: str,
    query: str,
    theme: PickerTheme,
    selected: bool = False,
) -> str:
    """Highlight matches only within the searchable part of ``display_text``.

    When the searchable text does not appear verbatim inside the display text,
    the whole display text is highlighted instead.
    """
    base_style = theme.selected if selected else ""
    if not query:
        return styled(display_text, base_style, theme)

    start = display_text.find(searchable_text) if searchable_text else -1
    if start < 0:
        return highlight_matches(display_text, query, theme, selected)

    end = start + len(searchable_text)
    return (
        styled(display_text[:start], base_style, theme)
        + highlight_matches(display_text[start:end], query, theme, selected)
        + styled(display_text[end:], base_style, theme)
    )
