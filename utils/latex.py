"""LaTeX text helpers"""

# Characters with special meaning in LaTeX and their literal forms
LATEX_REPLACEMENTS = {
    '&': r'\&',
    '%': r'\%',
    '$': r'\$',
    '#': r'\#',
    '_': r'\_',
    '{': r'\{',
    '}': r'\}',
    '~': r'\textasciitilde{}',
    '^': r'\^{}',
    '\\': r'\textbackslash{}',
}


def escape(text: str) -> str:
    """Escape LaTeX special characters in user-supplied text.

    Single pass, so the braces introduced by a replacement are never
    escaped again.
    """
    return ''.join(LATEX_REPLACEMENTS.get(ch, ch) for ch in text)
