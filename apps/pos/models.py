from django.db import models

from .constants import CAMPUS_CHOICES, CAMPUSES, POS_TYPE_CHOICES, POS_TYPES


class TimestampedModel(models.Model):
    """Abstract base model with timestamp fields."""
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Pos(TimestampedModel):
    """A point of sale on one of the campuses, with its postal address."""
    # Basic info
    name = models.CharField(max_length=255, unique=True, db_index=True)
    description = models.TextField(blank=True, default='')
    type = models.CharField(max_length=20, choices=POS_TYPE_CHOICES)
    campus = models.CharField(max_length=20, choices=CAMPUS_CHOICES)

    # Address
    street = models.CharField(max_length=255)
    house_number = models.CharField(max_length=10)
    postal_code = models.PositiveIntegerField()
    city = models.CharField(max_length=255)

    # Mutable via update; id and timestamps are managed by the server
    MUTABLE_FIELDS = (
        'name', 'description', 'type', 'campus',
        'street', 'house_number', 'postal_code', 'city',
    )

    class Meta:
        ordering = ['id']
        verbose_name = "POS"
        verbose_name_plural = "POS"
        indexes = [
            models.Index(fields=['campus', 'type'], name='pos_campus_type_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(type__in=POS_TYPES),
                name='pos_type_valid'
            ),
            models.CheckConstraint(
                condition=models.Q(campus__in=CAMPUSES),
                name='pos_campus_valid'
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.get_type_display()}) | {self.get_campus_display()}"

    @property
    def address(self):
        """Single-line postal address."""
        return f"{self.street} {self.house_number}, {self.postal_code} {self.city}"
