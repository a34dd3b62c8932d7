from __future__ import annotations
"""Extension presets for C-family source trees.

Two dialects are covered, each with three presets:

    C++ : CPP_HEADER, CPP_IMPLEMENTATION, CPP (both)
    C   : C_HEADER,   C_IMPLEMENTATION,   C   (both)

Matching is exact and case-sensitive against `Path.suffix`, so ".H" is not
a header under these presets. User tokens from `-s/--ext` go through
`normalize_extensions`, which follows the same rule as other suffix flags:

    normalize_extensions(["h"])    -> (".h",)
    normalize_extensions([".hpp"]) -> (".hpp",)
"""

from typing import Sequence, Tuple

CPP_IMPLEMENTATION: Tuple[str, ...] = ('.cc', '.cpp', '.cxx')
CPP_HEADER: Tuple[str, ...] = ('.h', '.hh', '.hpp', '.hxx')
CPP: Tuple[str, ...] = CPP_IMPLEMENTATION + CPP_HEADER

C: Tuple[str, ...] = ('.c', '.h')
C_HEADER: Tuple[str, ...] = ('.h',)
C_IMPLEMENTATION: Tuple[str, ...] = ('.c',)

_PRESETS = {
    ('cpp', 'all'): CPP,
    ('cpp', 'header'): CPP_HEADER,
    ('cpp', 'implementation'): CPP_IMPLEMENTATION,
    ('c', 'all'): C,
    ('c', 'header'): C_HEADER,
    ('c', 'implementation'): C_IMPLEMENTATION,
}

LANGUAGES = ('cpp', 'c')
KINDS = ('all', 'header', 'implementation')


def extension_preset(lang: str = 'cpp', kind: str = 'all') -> Tuple[str, ...]:
    """Return the preset for dialect `lang` and file `kind`.

    Raises:
        KeyError: If the pair is not a known preset.
    """
    key = ((lang or '').strip().lower(), (kind or '').strip().lower())
    try:
        return _PRESETS[key]
    except KeyError:
        raise KeyError(f'unknown extension preset {lang!r}/{kind!r}') from None


def normalize_extensions(tokens: Sequence[str] | None) -> Tuple[str, ...]:
    """Prefix a dot on bare tokens and drop blanks, keeping first-seen order."""
    if not tokens:
        return ()
    out: list[str] = []
    for raw in tokens:
        s = (raw or '').strip()
        if not s:
            continue
        if not s.startswith('.'):
            s = f'.{s}'
        if s not in out:
            out.append(s)
    return tuple(out)


def is_extension_allowed(suffix: str, allowed: Sequence[str]) -> bool:
    """Return True if `suffix` (including its dot) is in the allow-list."""
    return bool(suffix) and suffix in allowed
