"""XML prompt renderer: description, changed files, original contents, diff."""

from __future__ import annotations

from typing import List, Mapping, Sequence
from xml.sax.saxutils import quoteattr

DEFAULT_DESCRIPTION = (
    "Please analyze the git diff changes. Review the best practices of all files, "
    "including new files. Please use KISS+YAGNI+DRY+SOLID principles. "
    "Assess the new changes against existing files, suggest improvements, and ask "
    "clarifying questions if needed. Complete your review by providing a summary of "
    "the changes in paragraph form followed by a bulleted list of suggested changes."
)


def cdata(text: str) -> str:
    """Wrap *text* in CDATA, splitting any embedded ``]]>`` terminator."""
    return "<![CDATA[" + text.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def _block(text: str) -> str:
    # Keep the closing marker on its own line.
    if text and not text.endswith("\n"):
        text += "\n"
    return cdata("\n" + text)


def render(
    diff_text: str,
    change_set: Sequence[str],
    contents: Mapping[str, str],
    *,
    description: str = DEFAULT_DESCRIPTION,
) -> str:
    """Return the full review prompt document."""
    lines: List[str] = ["<prompt>"]
    lines.append(f"  <description>{cdata(description or DEFAULT_DESCRIPTION)}</description>")

    lines.append("  <changedFiles>")
    for name in change_set:
        if not name.strip():
            continue
        lines.append(f"    <file name={quoteattr(name)}/>")
    lines.append("  </changedFiles>")

    lines.append("  <files>")
    for name, content in contents.items():
        lines.append(f"    <file name={quoteattr(name)}>")
        lines.append(_block(content))
        lines.append("    </file>")
    lines.append("  </files>")

    lines.append("  <gitDiff>")
    lines.append(_block(diff_text))
    lines.append("  </gitDiff>")
    lines.append("</prompt>")
    return "\n".join(lines) + "\n"
