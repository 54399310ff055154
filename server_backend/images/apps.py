# images/apps.py
from django.apps import AppConfig, apps
from django.conf import settings

from .store import Store


class ImagesConfig(AppConfig):
    name = 'images'

    def ready(self):
        self.store = Store(reclaim_ids=settings.GALLERY_RECLAIM_IDS)

    def reset_store(self, reclaim_ids=None):
        if reclaim_ids is None:
            reclaim_ids = settings.GALLERY_RECLAIM_IDS
        self.store = Store(reclaim_ids=reclaim_ids)
        return self.store


def get_store():
    return apps.get_app_config('images').store
