import re
from typing import Iterator

# [[target]] or [[Display|target]]; contents may not contain "]"
WIKI_LINK_RE = re.compile(r"\[\[([^\]|]+)(?:\|([^\]]+))?\]\]")


def iter_wiki_links(text: str) -> Iterator[str]:
    """Yield link targets left to right, duplicates included."""
    for m in WIKI_LINK_RE.finditer(text):
        target = m.group(2) or m.group(1) or ""
        if target:
            yield target


def parse_wiki_links(text: str) -> list[str]:
    return list(iter_wiki_links(text))
