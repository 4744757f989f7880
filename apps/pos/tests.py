from django.test import TestCase
from .models import Pos
from .serializers import PosSerializer


class PosSerializerTestCase(TestCase):
    def setUp(self):
        self.payload = {
            'name': 'Café Botanik',
            'description': 'Coffee between the greenhouses',
            'type': 'CAFE',
            'campus': 'INF',
            'street': 'Im Neuenheimer Feld',
            'houseNumber': '361',
            'postalCode': 69120,
            'city': 'Heidelberg',
        }

    def test_valid_payload_maps_to_model_fields(self):
        """Test that camelCase wire names map onto model field names"""
        serializer = PosSerializer(data=self.payload)
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.validated_data['house_number'], '361')
        self.assertEqual(serializer.validated_data['postal_code'], 69120)

    def test_read_only_fields_are_dropped(self):
        """Test that id and timestamps never reach validated data"""
        payload = dict(self.payload, id=12, createdAt='2020-01-01T00:00:00Z', updatedAt='2020-01-01T00:00:00Z')
        serializer = PosSerializer(data=payload)
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertNotIn('id', serializer.validated_data)
        self.assertNotIn('created_at', serializer.validated_data)
        self.assertNotIn('updated_at', serializer.validated_data)

    def test_duplicate_name_passes_validation(self):
        """Test that uniqueness is left to the service layer"""
        Pos.objects.create(
            name='Café Botanik',
            type='CAFE',
            campus='INF',
            street='Im Neuenheimer Feld',
            house_number='361',
            postal_code=69120,
            city='Heidelberg'
        )
        serializer = PosSerializer(data=self.payload)
        self.assertTrue(serializer.is_valid(), serializer.errors)

    def test_blank_name_rejected(self):
        serializer = PosSerializer(data=dict(self.payload, name='   '))
        self.assertFalse(serializer.is_valid())
        self.assertIn('name', serializer.errors)

    def test_postal_code_must_be_positive(self):
        serializer = PosSerializer(data=dict(self.payload, postalCode=0))
        self.assertFalse(serializer.is_valid())
        self.assertIn('postalCode', serializer.errors)

    def test_house_number_length(self):
        serializer = PosSerializer(data=dict(self.payload, houseNumber='12345678901'))
        self.assertFalse(serializer.is_valid())
        self.assertIn('houseNumber', serializer.errors)

    def test_output_uses_wire_names(self):
        """Test serializing a saved POS"""
        pos = Pos.objects.create(
            name='Automat Mathematikon',
            type='VENDING_MACHINE',
            campus='INF',
            street='Im Neuenheimer Feld',
            house_number='205',
            postal_code=69120,
            city='Heidelberg'
        )
        data = PosSerializer(pos).data
        self.assertEqual(data['id'], pos.id)
        self.assertEqual(data['houseNumber'], '205')
        self.assertEqual(data['postalCode'], 69120)
        self.assertEqual(data['description'], '')
        self.assertIsNotNone(data['createdAt'])
        self.assertIsNotNone(data['updatedAt'])
