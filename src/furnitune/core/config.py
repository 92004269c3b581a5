import os
import logging
from dotenv import load_dotenv
from pathlib import Path

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_SHIPPING_FEE = 100.0


class FurnituneConfig:
    """
    Central configuration management for Furnitune.
    Handles environment variables and paths.
    """

    @staticmethod
    def get_project_root() -> Path:
        # src/furnitune/core/ -> src/furnitune/ -> src/ -> root
        return Path(__file__).parent.parent.parent.parent

    @staticmethod
    def get_database_path() -> Path:
        default = FurnituneConfig.get_project_root() / "data" / "furnitune.db"
        return Path(os.getenv("FURNITUNE_DB_PATH", str(default)))

    @staticmethod
    def seed_enabled() -> bool:
        return os.getenv("FURNITUNE_SEED", "1").strip().lower() not in {"0", "false", "no"}

    @staticmethod
    def get_shipping_fee() -> float:
        raw = os.getenv("FURNITUNE_SHIPPING_FEE", str(DEFAULT_SHIPPING_FEE))
        try:
            return float(raw)
        except ValueError:
            logger.warning(f"Invalid FURNITUNE_SHIPPING_FEE {raw!r}, using {DEFAULT_SHIPPING_FEE}")
            return DEFAULT_SHIPPING_FEE

    @staticmethod
    def get_log_level() -> str:
        return os.getenv("FURNITUNE_LOG_LEVEL", "INFO").strip().upper()

    @staticmethod
    def get_currency_symbol() -> str:
        return os.getenv("FURNITUNE_CURRENCY_SYMBOL", "₱")
