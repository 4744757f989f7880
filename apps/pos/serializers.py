from rest_framework import serializers

from .models import Pos


class PosSerializer(serializers.ModelSerializer):
    """Wire representation of a POS, with camelCase field names"""
    houseNumber = serializers.CharField(source='house_number', max_length=10)
    # PositiveIntegerField range
    postalCode = serializers.IntegerField(source='postal_code', min_value=1, max_value=2147483647)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Pos
        fields = [
            'id', 'name', 'description', 'type', 'campus',
            'street', 'houseNumber', 'postalCode', 'city',
            'createdAt', 'updatedAt'
        ]
        read_only_fields = ['id', 'createdAt', 'updatedAt']
        # Name uniqueness is checked by the service layer so that it maps to 409
        extra_kwargs = {
            'name': {'validators': []},
            'description': {'required': False, 'allow_blank': True},
        }


class PosNameQuerySerializer(serializers.Serializer):
    """Query parameters for looking up a POS by name"""
    name = serializers.CharField(max_length=255)
