import logging

from .context import link_context
from .links import parse_wiki_links
from .model import DAILY, STANDALONE, BacklinkInfo
from .ports import NoteStore
from .resolver import NoteResolver
from .utils import strip_note_suffix

log = logging.getLogger(__name__)

TITLE_PREFIX = "# "


def note_title(text: str, fallback: str) -> str:
    """First level-1 heading of a note, or `fallback` if there is none."""
    for line in text.splitlines():
        if line.startswith(TITLE_PREFIX):
            while line.startswith(TITLE_PREFIX):
                line = line[len(TITLE_PREFIX):]
            return line
    return fallback


class BacklinkIndexer:
    """
    Find notes that link to a given note by scanning the whole corpus.

    There is no stored index: every call re-reads the daily directory and
    then the standalone directory, in store enumeration order. A source note
    contributes at most one record, built from its first matching link.
    """

    def __init__(self, store: NoteStore, resolver: NoteResolver | None = None):
        self.store = store
        self.resolver = resolver or NoteResolver(store)

    def _matching_link(self, links: list[str], filename: str, stem: str) -> str | None:
        for link in links:
            _, target = self.resolver.resolve(link)
            if target == filename or link == stem:
                return link
        return None

    def find_backlinks(self, filename: str) -> list[BacklinkInfo]:
        stem = strip_note_suffix(filename)
        backlinks: list[BacklinkInfo] = []

        for kind in (DAILY, STANDALONE):
            for source in self.store.list_note_files(kind):
                if source == filename:
                    continue

                content = self.store.read_note_text(kind, source)
                link = self._matching_link(parse_wiki_links(content), filename, stem)
                if link is None:
                    continue

                backlinks.append(
                    BacklinkInfo(
                        from_note=source,
                        from_title=note_title(content, source),
                        context=link_context(content, link),
                    )
                )

        log.debug("Found %d backlinks to %s", len(backlinks), filename)
        return backlinks
