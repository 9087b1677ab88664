"""
Cart Monitor
============
Uruchamia scenariusz "wyszukaj → dodaj do koszyka → sprawdź sumy" na mega-image.ro.

Uzycie:
    python main.py                          # frazy z .env (domyślnie lapte, paine)
    python main.py --term lapte --term oua  # własne frazy
    python main.py --base-url https://...   # inne środowisko
    python main.py --headed                 # z oknem przeglądarki
    python main.py --headless               # bez okna przeglądarki
"""

import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path

from cart_monitor.config import Settings, parse_args
from cart_monitor.scenario_executor import ScenarioExecutor

Path("logs").mkdir(exist_ok=True)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(message)s",
    datefmt="%H:%M:%S",
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(
            f"logs/run_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log",
            encoding="utf-8"
        )
    ]
)
logger = logging.getLogger(__name__)


async def run(settings: Settings) -> int:
    result = await ScenarioExecutor(settings).run()

    logger.info(f"\n{'='*60}")
    logger.info(f"[COMPLETED] Status: {'SUCCESS' if result.success else 'FAILED'}")
    if result.error:
        logger.info(f"Błąd: {result.error}")
    logger.info(f"Alerts: {len(result.alerts)}")
    logger.info(f"{'='*60}\n")

    return 0 if result.success and not result.alerts else 1


if __name__ == "__main__":
    settings = parse_args(sys.argv[1:], Settings.from_env())
    sys.exit(asyncio.run(run(settings)))
