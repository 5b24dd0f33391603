from __future__ import annotations

import json
import random
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from modules.catalog.dtos import CatalogEntryInput
from modules.catalog.repositories.django_repository import CatalogDjangoRepository
from modules.catalog.serializers import CatalogEntrySerializer
from modules.catalog.services import CatalogService


class Command(BaseCommand):
    help = "Seed the catalog with placeholder entries or entries from a JSON file."

    def add_arguments(self, parser):
        parser.add_argument(
            "--count",
            type=int,
            default=20,
            help="Number of placeholder entries to create (ignored with --file).",
        )
        parser.add_argument(
            "--file",
            type=Path,
            help="JSON array of catalog entries in the API wire format.",
        )

    def handle(self, *args, **options):
        if options["file"] is not None:
            dtos = self._load_file(options["file"])
        else:
            if options["count"] < 0:
                raise CommandError("--count must not be negative.")
            dtos = self._placeholders(options["count"])

        service = CatalogService(repository=CatalogDjangoRepository())
        created = service.create_entries(dtos)

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: catalog entries={len(created)}")
        )

    def _placeholders(self, count: int) -> list[CatalogEntryInput]:
        rng = random.Random(42)
        return [
            CatalogEntryInput(
                item_name=f"Item{i}",
                brand=f"Brand{i}",
                star_rating=(i % 5) + 1,
                price=i,
                quantity=rng.randint(0, 200),
            )
            for i in range(count)
        ]

    def _load_file(self, path: Path) -> list[CatalogEntryInput]:
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise CommandError(f"Cannot read {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise CommandError(f"{path} is not valid JSON: {exc}") from exc

        if not isinstance(payload, list):
            raise CommandError(f"{path} must contain a JSON array.")

        serializer = CatalogEntrySerializer(data=payload, many=True)
        if not serializer.is_valid():
            raise CommandError(f"Invalid catalog entries: {serializer.errors}")
        return [CatalogEntryInput(**row) for row in serializer.validated_data]
