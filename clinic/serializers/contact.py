import html

import bleach
from rest_framework import serializers

NAME_MAX_LENGTH = 255
CITY_MAX_LENGTH = 20


def _clean(v):
    # Drop every tag, then undo the entity escaping bleach applies to the kept text
    return html.unescape(bleach.clean((v or '').strip(), tags=set(), attributes={}, strip=True)).strip()


class ContactSerializer(serializers.ModelSerializer):
    """Fields and checks shared by doctors and patients.

    Length limits apply to the cleaned text, not the raw input.
    """
    name = serializers.CharField(max_length=1024)
    city = serializers.CharField(max_length=256)
    email = serializers.EmailField(max_length=254)
    phoneNumber = serializers.CharField(source='phone_number', min_length=10, max_length=32)

    def validate_name(self, v):
        v = _clean(v)
        if len(v) < 3:
            raise serializers.ValidationError('name must be at least 3 characters')
        if len(v) > NAME_MAX_LENGTH:
            raise serializers.ValidationError(f'name must be at most {NAME_MAX_LENGTH} characters')
        return v

    def validate_city(self, v):
        v = _clean(v)
        if not v:
            raise serializers.ValidationError('city must not be blank')
        if len(v) > CITY_MAX_LENGTH:
            raise serializers.ValidationError(f'city must be at most {CITY_MAX_LENGTH} characters')
        return v
