CONTEXT_CHARS = 50
ELLIPSIS = "..."


def link_context(text: str, link: str, width: int = CONTEXT_CHARS) -> str:
    """
    Excerpt of `text` around the first occurrence of `link`.

    `[[link]]` is searched first, then the piped form `[[link|`, whose excerpt
    runs through the closing `]]`. Up to `width` characters are kept on each
    side; truncated sides get an ellipsis. Returns "" when the link is not
    found.
    """
    for needle in (f"[[{link}]]", f"[[{link}|"):
        pos = text.find(needle)
        if pos == -1:
            continue

        start = max(0, pos - width)
        end = min(pos + len(needle) + width, len(text))
        if needle.endswith("|"):
            close = text.find("]]", pos)
            if close != -1:
                end = min(close + 2 + width, len(text))

        prefix = ELLIPSIS if start > 0 else ""
        suffix = ELLIPSIS if end < len(text) else ""
        return f"{prefix}{text[start:end]}{suffix}"

    return ""
