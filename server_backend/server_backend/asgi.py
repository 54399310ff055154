import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "server_backend.settings")

from django.core.asgi import get_asgi_application

django_asgi_app = get_asgi_application()

from channels.routing import ProtocolTypeRouter, URLRouter
from django.conf import settings
import images.routing

import logging

logger = logging.getLogger("django")

application = ProtocolTypeRouter({
    "http": django_asgi_app,
    "websocket": URLRouter(
        images.routing.websocket_urlpatterns
    ),
})

logger.debug("ASGI application initialized")
logger.debug(f"Setting GALLERY_RECLAIM_IDS is set to: {settings.GALLERY_RECLAIM_IDS}")
