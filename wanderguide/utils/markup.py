import html
import re

_BOLD = re.compile(r"\*\*(.*?)\*\*")


def render_html(text: str) -> str:
    """
    Convert chat markup to HTML: **bold** -> <strong>, one line per newline.
    Everything else is escaped.
    """
    lines = []
    for line in (text or "").split("\n"):
        parts = _BOLD.split(line)
        out = []
        for i, part in enumerate(parts):
            escaped = html.escape(part)
            # odd indexes are the captured bold spans
            out.append(f"<strong>{escaped}</strong>" if i % 2 == 1 else escaped)
        lines.append("".join(out))
    return "<br>\n".join(lines)
