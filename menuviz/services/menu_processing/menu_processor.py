import time
import logging
from typing import Generator, Iterator, List

from .menu_processing_events import ProgressEvent
from ..menu_parsing.menu_parser import MenuParser
from ..menu_images.strategies.image_resolver_strategy import ImageResolverStrategy
from ..shared.menu_store import MenuStore
from ...errors import MenuProcessingError, NoMenuItemsError
from ...models.menu import MenuItem, MenuSession, RawMenuInput
from ...models.menu_candidate import MenuCandidate

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Failed to process menu. Please try again."


class MenuProcessor:
    """Parses a menu, resolves an image for every dish and stores the results.

    `stream` is the primary contract: a generator of ProgressEvents ending in
    exactly one `complete` or `error`. Items are handled one at a time, in
    parse order; a failing item yields `item-error` and the run moves on.
    Closing the generator stops the run before the next item.
    """

    def __init__(self, parser: MenuParser, resolver: ImageResolverStrategy, store: MenuStore):
        self.parser = parser
        self.resolver = resolver
        self.store = store

    def parse(self, raw: RawMenuInput) -> List[MenuCandidate]:
        """Parse and fail with NoMenuItemsError when nothing usable came out."""
        candidates = self.parser.parse(raw)
        if not candidates:
            raise NoMenuItemsError()
        return candidates

    def stream(self, raw: RawMenuInput) -> Iterator[ProgressEvent]:
        t_total = time.perf_counter()
        yield ProgressEvent.status("Starting menu processing...")
        yield ProgressEvent.status(raw.status_message)

        try:
            candidates = self.parse(raw)
        except MenuProcessingError as e:
            logger.warning(f"Menu parsing failed ({e.status_code}): {e.message}")
            yield ProgressEvent.error(e.message, e.status_code)
            return
        except Exception:
            logger.exception("Unexpected error while parsing menu")
            yield ProgressEvent.error(INTERNAL_ERROR_MESSAGE, 500)
            return

        yield ProgressEvent.parsed([c.name for c in candidates])

        try:
            session = self.store.create_session(raw.original_text)
            menu_items = yield from self.enrich(session, candidates)
        except Exception:
            logger.exception("Unexpected error while processing menu items")
            yield ProgressEvent.error(INTERNAL_ERROR_MESSAGE, 500)
            return

        total_ms = round((time.perf_counter() - t_total) * 1000.0, 2)
        logger.info(f"Session {session.id}: {len(menu_items)}/{len(candidates)} items in {total_ms} ms")
        yield ProgressEvent.complete(session.id, [item.to_dict() for item in menu_items])

    def enrich(self, session: MenuSession,
               candidates: List[MenuCandidate]) -> Generator[ProgressEvent, None, List[MenuItem]]:
        """
        Resolve and persist each candidate in order.
        Yields processing / item-complete / item-error events; returns the stored items.
        """
        total = len(candidates)
        menu_items: List[MenuItem] = []

        for current, candidate in enumerate(candidates, start=1):
            yield ProgressEvent.processing(current, total, candidate.name)
            try:
                image_url = self.resolver.resolve(candidate.name, candidate.description)
                item = self.store.create_item(session.id, candidate.name, candidate.description, image_url)
            except Exception as e:
                logger.warning(f"Session {session.id}: item '{candidate.name}' failed: {e}")
                yield ProgressEvent.item_error(candidate.name, current, total, str(e) or type(e).__name__)
                continue

            menu_items.append(item)
            yield ProgressEvent.item_complete(item.to_dict(), current, total)

        return menu_items
