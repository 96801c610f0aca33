"""Django models for the bangs application."""

from django.db import models


class StoredValue(models.Model):
    """A single key of the durable key-value store."""

    key = models.CharField(max_length=64, unique=True)
    # e.g. {"g": {"trigger": "g", "url": "https://www.google.com/search?q={{{s}}}", ...}}
    value = models.JSONField(null=True)
    updated = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        """Return string representation of StoredValue."""
        return f"{self.key} (updated {self.updated:%Y-%m-%d %H:%M})"
