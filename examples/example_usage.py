"""Example: compute a DTR through the service layer, without Flask.

Controllers stay thin; the computation lives in the services.
"""

from datetime import date

from config import load_settings

from src.dtr_system.dtr_system.container import build_container


def main():
    settings = load_settings()
    container = build_container(db_config=settings.DB_CONFIG, punch_db_config=settings.PUNCH_DB_CONFIG)
    result = container.compute_service.calculate(dtr_user_id="1", start=date(2025, 1, 1), end=date(2025, 1, 15))
    print(result.to_dict()["data"])


if __name__ == "__main__":
    main()
