import json
import sys

from bioranges.config.settings import Settings
from bioranges.ingestion.exceptions import IngestionError
from bioranges.ingestion.factory import RowSourceFactory
from bioranges.loader import BiomarkerLoader
from bioranges.logging.logger import Log
from bioranges.normalization.indicator import optimal_deviation, value_position


def main() -> int:
    """Entry point: settings -> source -> one load cycle -> JSON on stdout."""
    settings = Settings()
    Log.configure(settings.log_level)

    source = RowSourceFactory.create(settings)
    loader = BiomarkerLoader(
        source,
        demographic_candidates=settings.demographic_candidates,
        default_demographic=settings.default_demographic,
    )
    try:
        entities = loader.load()
    except IngestionError as exc:
        Log.error(f"Error loading biomarker data: {exc}")
        return 1
    finally:
        source.close()

    payload = [
        {
            **entity.to_dict(),
            "value_position": value_position(entity),
            "optimal_deviation": optimal_deviation(entity),
        }
        for entity in entities
    ]
    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
