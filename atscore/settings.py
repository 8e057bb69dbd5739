import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PACKAGE_DIR = Path(__file__).parent
DEFAULT_ROLES_PATH = PACKAGE_DIR / 'data' / 'roles.yaml'


def default_log_dir() -> Path:
    """Log directory under the current working directory, resolved at call time."""
    return Path.cwd() / 'logs'


@dataclass(frozen=True)
class Settings:
    """Runtime settings for hosts embedding the engine."""
    roles_path: Path = DEFAULT_ROLES_PATH
    log_dir: Optional[Path] = None
    log_level: str = 'INFO'
    max_workers: int = 4

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'Settings':
        """Build settings from environment variables (and an optional .env file)."""
        load_dotenv(env_file)

        max_workers = os.getenv('ATSCORE_MAX_WORKERS', '4')
        try:
            workers = max(1, int(max_workers))
        except ValueError:
            raise ValueError(f"ATSCORE_MAX_WORKERS must be an integer, got {max_workers!r}") from None

        return cls(
            roles_path=Path(os.getenv('ATSCORE_ROLES_PATH', str(DEFAULT_ROLES_PATH))),
            log_dir=Path(os.getenv('ATSCORE_LOG_DIR') or default_log_dir()),
            log_level=os.getenv('ATSCORE_LOG_LEVEL', 'INFO').upper(),
            max_workers=workers,
        )
