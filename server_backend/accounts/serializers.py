from rest_framework import serializers

from images.serializers import FreeTextField


class SetNameSerializer(serializers.Serializer):
    name = FreeTextField()
