#!/usr/bin/env python3
"""Run a single quota check for one user and print the outcome.

Useful for exercising a state store backend by hand: the usage figures come
from the command line and notifications are kept in memory.

Usage:
    QUOTA_WARNING_STORE_BACKEND=sqlite \\
        python scripts/check_user.py --user alice --quota-bytes 10737418240 --relative 0.97
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from quota_warning.config import settings  # noqa: E402
from quota_warning.notifications import InMemoryNotificationSink  # noqa: E402
from quota_warning.services import QuotaAlertEvaluator  # noqa: E402
from quota_warning.sources import StaticUsageSource  # noqa: E402
from quota_warning.storage import create_state_store  # noqa: E402

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


async def run(user_id: str, quota_bytes: int, relative: float) -> dict:
    source = StaticUsageSource()
    source.set_usage(user_id, quota_bytes, relative)

    store = await create_state_store(settings)
    sink = InMemoryNotificationSink()
    try:
        evaluator = QuotaAlertEvaluator(source, store, sink, settings=settings.quota)
        result = await evaluator.check(user_id)
    finally:
        await store.close()

    output = result.to_dict()
    output["open_notifications"] = [n.model_dump(mode="json") for n in sink.open_for(user_id)]
    return output


def main() -> int:
    parser = argparse.ArgumentParser(description="Check one user's quota usage")
    parser.add_argument("--user", required=True, help="User identifier")
    parser.add_argument("--quota-bytes", type=int, required=True, help="Quota in bytes (-3 for unlimited)")
    parser.add_argument("--relative", type=float, required=True, help="Used / quota, between 0 and 1")
    args = parser.parse_args()

    output = asyncio.run(run(args.user, args.quota_bytes, args.relative))
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
