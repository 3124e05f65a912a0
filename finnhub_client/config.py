"""
Configuration management for the Finnhub client.
Loads settings from config.yaml and environment variables.
"""
import os
import yaml
from pathlib import Path
from pydantic import BaseModel
from dotenv import load_dotenv


class FinnhubConfig(BaseModel):
    """Finnhub API configuration"""
    api_key_env: str = "FINNHUB_API_KEY"
    base_url: str = "https://finnhub.io/api/v1"
    timeout_seconds: float = 5.0


class LoggingConfig(BaseModel):
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Config(BaseModel):
    """Main configuration container"""
    finnhub: FinnhubConfig = FinnhubConfig()
    logging: LoggingConfig = LoggingConfig()

    @property
    def finnhub_token(self) -> str:
        """Get the Finnhub API token from its environment variable"""
        token = os.getenv(self.finnhub.api_key_env)
        if not token:
            raise ValueError(
                f"Finnhub API token not found in environment variable: {self.finnhub.api_key_env}"
            )
        return token


def load_config(
    config_path: str = None,
    env_file: str = None,
    search_parent_dirs: bool = True
) -> Config:
    """
    Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to config.yaml file. If None, looks in the finnhub_client/ directory.
        env_file: Path to .env file. If None, searches for .env.local in current
                 and parent directories.
        search_parent_dirs: If True, checks <project>/config/finnhub_client.yaml when
                 the packaged config.yaml is missing.

    Returns:
        Config: Validated configuration object
    """
    # Load environment variables
    if env_file is None:
        current_dir = Path.cwd()
        for parent in [current_dir] + list(current_dir.parents):
            env_path = parent / '.env.local'
            if env_path.exists():
                load_dotenv(env_path)
                break
        else:
            load_dotenv('.env.local')
    else:
        load_dotenv(env_file)

    # Determine config file path
    if config_path is None:
        config_path = os.getenv('FINNHUB_CLIENT_CONFIG_PATH')

        if config_path is None:
            module_dir = Path(__file__).parent
            config_path = module_dir / "config.yaml"

            if not Path(config_path).exists() and search_parent_dirs:
                alt_config = module_dir.parent / "config" / "finnhub_client.yaml"
                if alt_config.exists():
                    config_path = alt_config

    with open(config_path, 'r') as f:
        config_data = yaml.safe_load(f) or {}

    return Config(**config_data)


# Global config instance
_config: Config = None


def get_config(
    config_path: str = None,
    env_file: str = None,
    reload: bool = False
) -> Config:
    """
    Get the global configuration instance.

    Args:
        config_path: Optional path to config file (only used on first load or reload)
        env_file: Optional path to .env file (only used on first load or reload)
        reload: If True, reload configuration from disk

    Returns:
        Config: Configuration instance
    """
    global _config
    if _config is None or reload:
        _config = load_config(config_path=config_path, env_file=env_file)
    return _config


def set_config(config: Config) -> None:
    """
    Manually set the global configuration instance.
    Useful for testing or programmatic configuration.
    """
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global configuration instance. Useful for testing."""
    global _config
    _config = None
