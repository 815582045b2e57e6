import logging

from .model import DAILY, STANDALONE
from .ports import NoteStore
from .utils import daily_filename, note_name_to_filename

log = logging.getLogger(__name__)


class NoteResolver:
    """
    Map a link reference to ``(exists, filename)``.

    Standalone notes are tried first by slug, then daily notes by the literal
    name. When neither exists the slug filename is returned so callers can
    offer to create it. Every call hits the store; nothing is cached.
    """

    def __init__(self, store: NoteStore):
        self.store = store

    def resolve(self, reference: str) -> tuple[bool, str]:
        filename = note_name_to_filename(reference)
        if self.store.file_exists(STANDALONE, filename):
            return True, filename

        daily = daily_filename(reference)
        if self.store.file_exists(DAILY, daily):
            return True, daily

        log.debug("Unresolved link %r -> %s", reference, filename)
        return False, filename
