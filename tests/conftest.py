"""
Pytest configuration and fixtures for CampusCoffee tests
"""
import pytest
from rest_framework.test import APIClient
from apps.pos.models import Pos


@pytest.fixture
def api_client():
    """Return an API client for testing"""
    return APIClient()


@pytest.fixture
def pos_payload():
    """A valid POS request body"""
    return {
        'name': 'Schmelzpunkt',
        'description': 'Great waffles',
        'type': 'CAFE',
        'campus': 'ALTSTADT',
        'street': 'Hauptstraße',
        'houseNumber': '90',
        'postalCode': 69117,
        'city': 'Heidelberg',
    }


@pytest.fixture
def pos(db):
    """Create a test POS"""
    return Pos.objects.create(
        name='Bäcker Görtz',
        description='Freshly baked goods',
        type='BAKERY',
        campus='INF',
        street='Berliner Str.',
        house_number='43',
        postal_code=69120,
        city='Heidelberg'
    )


@pytest.fixture
def another_pos(db):
    """Create a second test POS on another campus"""
    return Pos.objects.create(
        name='Mensa Bergheim',
        description='Lunch',
        type='CAFETERIA',
        campus='BERGHEIM',
        street='Bergheimer Str.',
        house_number='58a',
        postal_code=69115,
        city='Heidelberg'
    )
