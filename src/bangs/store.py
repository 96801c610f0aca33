"""Durable key-value store backed by the StoredValue model."""

from collections.abc import Iterable
from collections.abc import Mapping
from typing import Any

from django.db import DatabaseError
from django.db import transaction

from bangs.exceptions import StoreAccessError
from bangs.models import StoredValue

VERSION_KEY = "bangsVersion"
ENTRIES_KEY = "bangs"


class DurableStore:
    """Read and write named JSON values that survive process restarts."""

    def get_many(self, keys: Iterable[str]) -> dict[str, Any]:
        """Return the stored values for ``keys``; absent keys are left out."""
        try:
            rows = StoredValue.objects.filter(key__in=list(keys))
            return {row.key: row.value for row in rows}
        except DatabaseError as e:
            msg = f"Could not read from the durable store: {e}"
            raise StoreAccessError(msg) from e

    def set_many(self, values: Mapping[str, Any]) -> None:
        """Write all ``values`` as one unit."""
        try:
            with transaction.atomic():
                for key, value in values.items():
                    StoredValue.objects.update_or_create(
                        key=key,
                        defaults={"value": value},
                    )
        except DatabaseError as e:
            msg = f"Could not write to the durable store: {e}"
            raise StoreAccessError(msg) from e
