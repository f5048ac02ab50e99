"""Registry backed by the Pygments lexer and style catalog."""

from __future__ import annotations

import logging

from pygments.lexers import get_all_lexers
from pygments.styles import get_all_styles

from codeshot.registry.base import LanguageInfo, StaticRegistry, ThemeInfo

logger = logging.getLogger(__name__)


def load_pygments_registry() -> StaticRegistry:
    """Languages are Pygments lexers, themes are Pygments styles.

    The first alias of each lexer is its canonical id; the remaining aliases
    are accepted as well. Lexers without any alias cannot be referenced by
    name and are skipped.
    """
    languages = []
    for name, aliases, _filenames, _mimetypes in get_all_lexers():
        if not aliases:
            continue
        languages.append(LanguageInfo(id=aliases[0], name=name, aliases=tuple(aliases[1:])))

    themes = [ThemeInfo(id=style, name=style) for style in sorted(get_all_styles())]
    logger.info("Pygments registry: %d languages, %d themes", len(languages), len(themes))
    return StaticRegistry(languages, themes)
