import re
from typing import List

_MATH_DELIM_RE = re.compile(r'(?<!\\)(\$\$|\$)')  # matches unescaped $ or $$

# Symbols produced by the solver/display strings that need math mode in LaTeX.
_TEXT_SYMBOLS = {
    'θ': r'$\theta$',
    '°': r'$^\circ$',
    '²': r'$^2$',
    'π': r'$\pi$',
}

_MATH_SYMBOLS = {
    'θ': r'\theta ',
    '°': r'^\circ',
    '²': r'^2',
    'π': r'\pi ',
}


def _escape_text_segment(text: str) -> str:
    repl = {
        '\\': r'\textbackslash{}',
        '&':  r'\&',
        '%':  r'\%',
        '#':  r'\#',
        '_':  r'\_',
        '{':  r'\{',
        '}':  r'\}',
        '~':  r'\textasciitilde{}',
        '^':  r'\textasciicircum{}',
    }
    out = []
    for c in text:
        if c in repl:
            out.append(repl[c])
        elif c in _TEXT_SYMBOLS:
            out.append(_TEXT_SYMBOLS[c])
        else:
            out.append(c)
    return ''.join(out)


def _convert_symbols_in_math(s: str) -> str:
    return ''.join(_MATH_SYMBOLS.get(c, c) for c in s)


def latex_escape_keep_math(s: str) -> str:
    """Escape text for LaTeX, leaving ``$...$`` segments as math.

    Solver symbols (θ, °, ², π) become their LaTeX math equivalents in both
    text and math segments.
    """
    parts: List[str] = []
    pos = 0
    in_math = False
    current_delim = None  # '$' or '$$'

    for m in _MATH_DELIM_RE.finditer(s):
        delim = m.group(1)
        start, end = m.span()

        chunk = s[pos:start]
        parts.append(_convert_symbols_in_math(chunk) if in_math else _escape_text_segment(chunk))

        parts.append(delim)
        if not in_math:
            in_math = True
            current_delim = delim
        elif delim == current_delim:
            in_math = False
            current_delim = None
        pos = end

    tail = s[pos:]
    parts.append(_convert_symbols_in_math(tail) if in_math else _escape_text_segment(tail))
    return ''.join(parts)
