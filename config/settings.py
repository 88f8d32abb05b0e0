"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings:
    """
    Defaults mirror the old validation scripts (localhost:5000).
    Every value can be overridden from the environment or config/.env.

    Probe timeouts (BASIC_TIMEOUT_S, COMPREHENSIVE_TIMEOUT_S,
    DIAGNOSTIC_TIMEOUT_S) are read per run by TimeoutConfig.from_env().
    """

    # ── Target ─────────────────────────────────────────────────────────────
    TARGET_URL: str = os.getenv('TARGET_URL', 'http://localhost:5000')

    # ── Concurrency ────────────────────────────────────────────────────────
    # 1 keeps the old sequential behaviour.
    MAX_CONCURRENT_PROBES: int = _int_env('MAX_CONCURRENT_PROBES', 1)

    # ── Demo server ────────────────────────────────────────────────────────
    DEMO_HOST: str = os.getenv('DEMO_HOST', '127.0.0.1')
    DEMO_PORT: int = _int_env('DEMO_PORT', 5000)
    APP_ENV:   str = os.getenv('APP_ENV', 'development')

    # ── Logging ────────────────────────────────────────────────────────────
    BASE_DIR:  Path = Path(__file__).resolve().parent.parent
    LOG_DIR:   Path = Path(os.getenv('LOG_DIR', str(BASE_DIR / 'data' / 'logs')))
    LOG_LEVEL: str  = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if not cls.TARGET_URL.startswith(('http://', 'https://')):
            raise ValueError("TARGET_URL must start with http:// or https://")
        if cls.MAX_CONCURRENT_PROBES < 1:
            raise ValueError("MAX_CONCURRENT_PROBES must be >= 1")
        if not 0 < cls.DEMO_PORT < 65536:
            raise ValueError("DEMO_PORT must be between 1 and 65535")


settings = Settings()
