# images/routing.py
from django.urls import path

from .consumers import GalleryConsumer

websocket_urlpatterns = [
    path('ws/gallery/', GalleryConsumer.as_asgi()),
]
