"""Example: compute a time bank through the service layer (no Flask).

Controllers are a thin layer; the accounting lives in the ledger services.
"""

import importlib
import json
from datetime import date

from config import get_settings_module

from src.timebank.timebank.common.datetime_utils import now_local
from src.timebank.timebank.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, org_timezone=settings.ORG_TIMEZONE)
    today = now_local(container.org_timezone).date()

    result = container.time_bank.compute_time_bank(1, date(2024, 1, 1), date(2024, 1, 31), as_of=today)
    print(json.dumps(result.to_dict(detailed=True), indent=2))


if __name__ == "__main__":
    main()
