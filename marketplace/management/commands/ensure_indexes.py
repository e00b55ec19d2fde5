import logging

from django.core.management.base import BaseCommand, CommandError
from pymongo.errors import PyMongoError

from infrastructure.container import container
from infrastructure.database import ensure_indexes


logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Creates the MongoDB indexes used by product discovery and chat lookups."

    def handle(self, *args, **options):
        db = container.database()
        self.stdout.write(self.style.SUCCESS(f"Ensuring indexes on database '{db.name}'..."))

        try:
            names = ensure_indexes(db)
        except PyMongoError as e:
            logger.error(f"Index creation failed: {e}", exc_info=True)
            raise CommandError(f"Index creation failed: {e}")

        for name in names:
            self.stdout.write(self.style.SUCCESS(f"Ensured index: {name}"))

        self.stdout.write(self.style.SUCCESS(f"Index setup complete. {len(names)} indexes ensured."))
