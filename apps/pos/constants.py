"""Constants for the pos app."""

POS_TYPE_CHOICES = [
    ('CAFE', 'Cafe'),
    ('VENDING_MACHINE', 'Vending Machine'),
    ('BAKERY', 'Bakery'),
    ('CAFETERIA', 'Cafeteria'),
    ('COFFEE', 'Coffee Shop'),
]

CAMPUS_CHOICES = [
    ('ALTSTADT', 'Altstadt'),
    ('BERGHEIM', 'Bergheim'),
    ('INF', 'Im Neuenheimer Feld'),
    ('MAIN', 'Main Campus'),
]

POS_TYPES = [value for value, _ in POS_TYPE_CHOICES]
CAMPUSES = [value for value, _ in CAMPUS_CHOICES]
