# images/store.py
import base64
import binascii
import logging
import threading
from typing import Dict, List, Optional

from .models import CallerId, DeleteResult, Image, ImageEntry, UNKNOWN_CREATOR_NAME

logger = logging.getLogger(__name__)


class Store:
    """In-memory gallery state: images, display names and the id counter.

    Every operation runs under one lock, so a concurrent reader never sees a
    half-applied upload or delete.

    ``reclaim_ids`` selects the id allocation policy. When False, ids are
    handed out once and never reused. When True, every successful delete
    steps the counter back by one, which keeps compatibility with the legacy
    gallery but lets a later upload land on the id of an image that is still
    live and overwrite it.
    """

    def __init__(self, reclaim_ids: bool = False):
        self.reclaim_ids = reclaim_ids
        self.images: Dict[int, Image] = {}
        self.user_names: Dict[CallerId, str] = {}
        self.next_id = 0
        self._lock = threading.RLock()

    def set_name(self, caller: CallerId, name: str) -> None:
        with self._lock:
            self.user_names[caller] = name
        logger.info(f"Display name for {caller} set to {name!r}")

    def upload(self, caller: CallerId, name: str, data: bytes) -> int:
        with self._lock:
            image_id = self.next_id
            self.next_id += 1
            if image_id in self.images:
                # only reachable with reclaim_ids
                logger.warning(f"Upload reuses live image id {image_id}, overwriting {self.images[image_id]}")
            self.images[image_id] = Image(id=image_id, name=name, creator=caller, data=data)
        logger.info(f"Image {image_id} ({name!r}, {len(data)} bytes) uploaded by {caller}")
        return image_id

    def delete(self, caller: CallerId, image_id: int) -> DeleteResult:
        with self._lock:
            image = self.images.get(image_id)
            if image is None:
                return DeleteResult.NOT_FOUND
            if image.creator != caller:
                logger.info(f"{caller} may not delete image {image_id} owned by {image.creator}")
                return DeleteResult.NOT_AUTHORIZED
            del self.images[image_id]
            if self.reclaim_ids:
                self.next_id -= 1
        logger.info(f"Image {image_id} deleted by {caller}")
        return DeleteResult.SUCCESS

    def identify(self, caller: CallerId) -> CallerId:
        return caller

    def list(self, limit: Optional[int] = None) -> List[ImageEntry]:
        logger.debug(f"list called with limit: {limit}")
        with self._lock:
            entries = []
            for image_id, image in self.images.items():
                if limit is not None and len(entries) >= limit:
                    break
                creator_name = self.user_names.get(image.creator, UNKNOWN_CREATOR_NAME)
                entries.append(ImageEntry(image_id, image.name, creator_name, image.data))
        logger.debug(f"Returning {len(entries)} images")
        return entries

    def get(self, image_id: int) -> Optional[bytes]:
        with self._lock:
            image = self.images.get(image_id)
            return image.data if image is not None else None

    def snapshot(self) -> dict:
        """Plain, JSON-serializable copy of the whole state.

        Image order is kept so a restored store lists images the same way.
        """
        with self._lock:
            return {
                'next_id': self.next_id,
                'images': [
                    {
                        'id': image.id,
                        'name': image.name,
                        'creator': image.creator.value,
                        'data_base64': base64.b64encode(image.data).decode('utf-8'),
                    }
                    for image in self.images.values()
                ],
                'user_names': {caller.value: name for caller, name in self.user_names.items()},
            }

    @classmethod
    def restore(cls, snapshot: dict, reclaim_ids: bool = False) -> "Store":
        store = cls(reclaim_ids=reclaim_ids)
        try:
            store.next_id = _snapshot_int(snapshot['next_id'], 'next_id')
            for row in snapshot['images']:
                image = Image(
                    id=_snapshot_int(row['id'], 'image id'),
                    name=_snapshot_str(row['name'], 'image name'),
                    creator=CallerId(_snapshot_str(row['creator'], 'image creator')),
                    data=base64.b64decode(row['data_base64'], validate=True),
                )
                if image.id in store.images:
                    raise ValueError(f"Duplicate image id {image.id} in snapshot")
                store.images[image.id] = image
            for caller, name in snapshot['user_names'].items():
                caller_id = CallerId(_snapshot_str(caller, 'caller id'))
                store.user_names[caller_id] = _snapshot_str(name, 'display name')
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Malformed store snapshot: {e!r}") from e
        except binascii.Error as e:
            raise ValueError(f"Invalid image data in snapshot: {e}") from e
        if not reclaim_ids and store.images and store.next_id <= max(store.images):
            # a legacy counter may sit at or below a live id; move it past every id
            logger.warning(f"Snapshot next_id {store.next_id} would reuse a live image id, "
                           f"raising it to {max(store.images) + 1}")
            store.next_id = max(store.images) + 1
        logger.info(f"Store restored with {len(store.images)} images, next id {store.next_id}")
        return store


def _snapshot_int(value, what):
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"Invalid {what} {value!r} in snapshot")
    return value


def _snapshot_str(value, what):
    if not isinstance(value, str):
        raise ValueError(f"Invalid {what} {value!r} in snapshot")
    return value
