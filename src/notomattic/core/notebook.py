import logging

from .backlinks import BacklinkIndexer
from .links import parse_wiki_links
from .model import STANDALONE, BacklinkInfo, WikiLink
from .ports import WritableNoteStore
from .resolver import NoteResolver
from .utils import note_name_to_filename

log = logging.getLogger(__name__)


class Notebook:
    """Wiki-link operations over a note store, as used by the CLI and API."""

    def __init__(self, store: WritableNoteStore):
        self.store = store
        self.resolver = NoteResolver(store)
        self.backlinks = BacklinkIndexer(store, self.resolver)

    def resolve(self, reference: str) -> tuple[bool, str]:
        return self.resolver.resolve(reference)

    def scan_links(self, content: str) -> list[WikiLink]:
        """Resolve every link in `content` so an editor can mark broken ones."""
        links = []
        for name in parse_wiki_links(content):
            exists, target = self.resolver.resolve(name)
            links.append(WikiLink(text=name, target=target, exists=exists))
        return links

    def get_backlinks(self, filename: str) -> list[BacklinkInfo]:
        return self.backlinks.find_backlinks(filename)

    def create_note_from_link(self, name: str) -> str:
        """Create a standalone note for an unresolved link; return its filename."""
        filename = note_name_to_filename(name)
        self.store.create_note_file(STANDALONE, filename, f"# {name}\n\n")
        log.info("Created note %s from link %r", filename, name)
        return filename
