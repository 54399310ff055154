from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.http import HttpResponse
import base64
import logging

from accounts.authentication import caller_from_request
from .apps import get_store
from .consumers import GalleryConsumer
from .models import DeleteResult
from .serializers import ImageEntrySerializer, ImageListQuerySerializer, ImageUploadSerializer

logger = logging.getLogger(__name__)

DELETE_STATUS = {
    DeleteResult.SUCCESS: status.HTTP_200_OK,
    DeleteResult.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    DeleteResult.NOT_AUTHORIZED: status.HTTP_403_FORBIDDEN,
}


@api_view(['GET', 'POST'])
def image_list(request):
    """
    GET: list images, at most ?limit=N of them.
    POST: upload an image owned by the caller.
    """
    store = get_store()

    if request.method == 'POST':
        serializer = ImageUploadSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        caller = caller_from_request(request)
        name = serializer.validated_data['name']
        image_id = store.upload(caller, name, serializer.validated_data['data_base64'])
        GalleryConsumer.send_message_to_group({
            'type': 'image_uploaded',
            'id': image_id,
            'name': name,
            'creator': str(caller),
        })
        return Response({'id': image_id, 'name': name}, status=status.HTTP_201_CREATED)

    query = ImageListQuerySerializer(data=request.query_params)
    if not query.is_valid():
        return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)
    entries = store.list(query.validated_data.get('limit'))
    serializer = ImageEntrySerializer(entries, many=True)
    return Response(serializer.data)


@api_view(['GET', 'DELETE'])
def image_detail(request, image_id):
    """
    GET: raw image bytes. Any caller may read any image.
    DELETE: remove the image, only if the caller uploaded it.
    """
    store = get_store()

    if request.method == 'DELETE':
        caller = caller_from_request(request)
        result = store.delete(caller, image_id)
        if result is DeleteResult.SUCCESS:
            GalleryConsumer.send_message_to_group({
                'type': 'image_deleted',
                'id': image_id,
            })
        return Response({'result': result.value}, status=DELETE_STATUS[result])

    data = store.get(image_id)
    if data is None:
        return Response({'error': 'Image not found'}, status=status.HTTP_404_NOT_FOUND)
    return HttpResponse(data, content_type='application/octet-stream')


@api_view(['GET'])
def image_single_info(request, image_id):
    """
    Return the id + base64 image data for a single image.
    """
    data = get_store().get(image_id)
    if data is None:
        return Response({'error': 'Image not found'}, status=status.HTTP_404_NOT_FOUND)

    return Response({
        'id': image_id,
        'data_base64': base64.b64encode(data).decode('utf-8'),
    })
