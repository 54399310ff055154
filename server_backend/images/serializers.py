import base64
import binascii

from rest_framework import serializers
from django.core.validators import ProhibitNullCharactersValidator


class FreeTextField(serializers.CharField):
    """CharField that passes NUL characters through; names are stored as given."""

    def __init__(self, **kwargs):
        kwargs.setdefault('allow_blank', True)
        kwargs.setdefault('trim_whitespace', False)
        super().__init__(**kwargs)
        self.validators = [
            validator for validator in self.validators
            if not isinstance(validator, ProhibitNullCharactersValidator)
        ]


class Base64BytesField(serializers.Field):
    default_error_messages = {
        'invalid': 'Enter valid base64 encoded data.',
    }

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        try:
            return base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError):
            self.fail('invalid')

    def to_representation(self, value):
        return base64.b64encode(value).decode('utf-8')


class ImageUploadSerializer(serializers.Serializer):
    name = FreeTextField()
    data_base64 = Base64BytesField()


class ImageEntrySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    creator_name = serializers.CharField()
    data_base64 = Base64BytesField(source='data')


class ImageListQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(required=False, min_value=0)
