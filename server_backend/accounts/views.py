# accounts/views.py
from rest_framework import status
from rest_framework.response import Response
from rest_framework.decorators import api_view

from images.apps import get_store
from images.consumers import GalleryConsumer
from images.models import ANONYMOUS
from .authentication import caller_from_request
from .serializers import SetNameSerializer


@api_view(['GET'])
def whoami(request):
    caller = get_store().identify(caller_from_request(request))
    return Response({
        'caller': str(caller),
        'anonymous': caller == ANONYMOUS,
    }, status=status.HTTP_200_OK)


@api_view(['POST'])
def set_name(request):
    serializer = SetNameSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    caller = caller_from_request(request)
    name = serializer.validated_data['name']
    get_store().set_name(caller, name)

    GalleryConsumer.send_message_to_group({
        'type': 'name_set',
        'caller': str(caller),
        'name': name,
    })
    return Response({'caller': str(caller), 'name': name}, status=status.HTTP_200_OK)
