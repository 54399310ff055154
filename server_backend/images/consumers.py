import json
from channels.generic.websocket import AsyncWebsocketConsumer
import logging
from channels.layers import get_channel_layer
from asgiref.sync import async_to_sync

logger = logging.getLogger(__name__)

GALLERY_GROUP = 'gallery'


class GalleryConsumer(AsyncWebsocketConsumer):
    async def connect(self):
        await self.channel_layer.group_add(
            GALLERY_GROUP,
            self.channel_name
        )
        await self.accept()
        logger.info(f"Gallery socket {self.channel_name} connected")

    async def disconnect(self, close_code):
        await self.channel_layer.group_discard(
            GALLERY_GROUP,
            self.channel_name
        )
        logger.info(f"Gallery socket {self.channel_name} disconnected ({close_code})")

    async def receive(self, text_data=None, bytes_data=None):
        try:
            data = json.loads(text_data)
            message_type = data.get("type") if isinstance(data, dict) else None

            handlers = {
                "ping": self.handle_ping,
            }

            handler = handlers.get(message_type)
            if handler:
                await handler(data)
            else:
                logger.warning(f"Unknown message type: {message_type}")

        except (TypeError, json.JSONDecodeError):
            logger.error("Invalid JSON received")

    async def handle_ping(self, data):
        await self.send(text_data=json.dumps({'type': 'pong'}))

    async def broadcast_message(self, event):
        await self.send(text_data=json.dumps(event["data"]))

    @classmethod
    def send_message_to_group(cls, json_data, group_name=GALLERY_GROUP):
        channel_layer = get_channel_layer()
        if channel_layer is None:
            logger.warning(f"No channel layer configured, dropping {json_data.get('type')} event")
            return
        async_to_sync(channel_layer.group_send)(
            group_name,
            {"type": "broadcast_message", "data": json_data})
