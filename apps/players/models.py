from django.core.validators import RegexValidator
from django.db import models
import uuid


birthday_validator = RegexValidator(
    regex=r'^(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$',
    message='Birthday must be in MM-DD format',
)


class Player(models.Model):
    """Club player. Referenced by contributions and match participations."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)

    # Contact details
    mobile_number = models.CharField(max_length=32, blank=True)
    email = models.EmailField(max_length=255, blank=True)
    birthday = models.CharField(max_length=5, blank=True, validators=[birthday_validator])

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'players'
        indexes = [
            models.Index(fields=['last_name', 'first_name'], name='players_last_na_4b1f0e_idx'),
            models.Index(fields=['created_at'], name='players_created_9d2c41_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()
