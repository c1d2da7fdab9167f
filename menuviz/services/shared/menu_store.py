import itertools
import threading
from typing import Dict, List, Optional

from ...models.menu import MenuItem, MenuSession


class MenuStore:
    """In-memory store for menu sessions and their items.

    Sessions and items each draw ids from their own counter starting at 1.
    Ids are allocated and inserted under one lock, so concurrent requests
    never share or reuse an id. Records are never updated or deleted; all
    state is lost when the process exits.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sessions: Dict[int, MenuSession] = {}
        self._items: Dict[int, MenuItem] = {}
        self._session_ids = itertools.count(1)
        self._item_ids = itertools.count(1)

    def create_session(self, original_text: str) -> MenuSession:
        with self._lock:
            session = MenuSession(id=next(self._session_ids), original_text=original_text)
            self._sessions[session.id] = session
        return session

    def get_session(self, session_id: int) -> Optional[MenuSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def list_sessions(self) -> List[MenuSession]:
        with self._lock:
            return list(self._sessions.values())

    def create_item(self, session_id: int, name: str, description: str, image_url: str) -> MenuItem:
        with self._lock:
            item = MenuItem(
                id=next(self._item_ids),
                session_id=session_id,
                name=name,
                description=description,
                image_url=image_url,
            )
            self._items[item.id] = item
        return item

    def get_item(self, item_id: int) -> Optional[MenuItem]:
        with self._lock:
            return self._items.get(item_id)

    def list_items_by_session(self, session_id: int) -> List[MenuItem]:
        with self._lock:
            return [item for item in self._items.values() if item.session_id == session_id]

    def list_all_items(self) -> List[MenuItem]:
        with self._lock:
            return list(self._items.values())
