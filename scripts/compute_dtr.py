"""Compute and store DTRs for a month period.

Usage: python scripts/compute_dtr.py 2025 1 first 101 102 103

All records created by one run share a batch id.
"""

from __future__ import annotations

import logging
import sys
import uuid
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.dtr_system.dtr_system.common.validators import require_int_between, require_period
from src.dtr_system.dtr_system.container import build_container
from src.dtr_system.dtr_system.core.exceptions import DomainError

logger = logging.getLogger("dtr-system.compute")


def main() -> None:
    if len(sys.argv) < 5:
        raise SystemExit("Usage: compute_dtr.py YEAR MONTH PERIOD DTR_USER_ID [DTR_USER_ID ...]")

    settings = load_settings()
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    year = require_int_between(sys.argv[1], "year", 1900, 9999)
    month = require_int_between(sys.argv[2], "month", 1, 12)
    period = require_period(sys.argv[3])
    user_ids = sys.argv[4:]

    container = build_container(db_config=settings.DB_CONFIG, punch_db_config=settings.PUNCH_DB_CONFIG)
    batch_id = uuid.uuid4().hex

    saved = 0
    for user_id in user_ids:
        try:
            compute_id, _ = container.computed_dtr_service.compute_and_save(
                dtr_user_id=user_id,
                year=year,
                month=month,
                period=period,
                created_by="compute_dtr.py",
                batch_id=batch_id,
            )
        except DomainError as e:
            logger.warning("Skipped %s: %s", user_id, e)
            continue
        saved += 1
        print(f"OK: {user_id} -> computeid {compute_id}")

    print(f"Batch {batch_id}: saved {saved}/{len(user_ids)} ({period.label})")


if __name__ == "__main__":
    main()
