from typing import Any

from django.core.management.base import BaseCommand

from bangs.catalog import get_catalog


class Command(BaseCommand):
    help = "Synchronize the bang cache with the dataset and the durable store."

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: ARG002
        cache = get_catalog().sync()
        self.stdout.write(
            self.style.SUCCESS(f"Bangs version {cache.version}: {len(cache)} entries"),
        )
