"""Read a module header from the leading comment of a Terraform file."""

from pathlib import Path


def _strip_block_line(line: str) -> str:
    """Remove the leading " * " decoration of a block comment line."""
    s = line.strip()
    if s.startswith("*"):
        s = s[1:]
        if s.startswith(" "):
            s = s[1:]
    return s.rstrip()


def _read_block_comment(lines: list[str]) -> str:
    first = lines[0].strip()[2:].lstrip("*")
    if "*/" in first:
        return first.split("*/", 1)[0].strip()

    body = [first.strip()] if first.strip() else []
    for line in lines[1:]:
        if "*/" in line:
            tail = _strip_block_line(line.split("*/", 1)[0])
            if tail:
                body.append(tail)
            break
        body.append(_strip_block_line(line))
    return "\n".join(body).strip("\n")


def _read_line_comments(lines: list[str]) -> str:
    body = []
    for line in lines:
        s = line.strip()
        if s.startswith("//"):
            s = s[2:]
        elif s.startswith("#"):
            s = s[1:]
        else:
            break
        body.append(s[1:] if s.startswith(" ") else s)
    return "\n".join(body).strip("\n")


def read_header(path: Path) -> str:
    """
    Return the leading comment block of a file, without comment markers.

    Recognises a ``/* ... */`` (or ``/** ... */``) block, or consecutive
    lines starting with ``#`` or ``//``. Blank lines before the comment are
    skipped; anything else before it means there is no header.
    """
    lines = path.read_text(encoding="utf-8").splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    if not lines:
        return ""

    first = lines[0].strip()
    if first.startswith("/*"):
        return _read_block_comment(lines)
    if first.startswith(("#", "//")):
        return _read_line_comments(lines)
    return ""
