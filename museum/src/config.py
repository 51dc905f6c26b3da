import logging
import os
from pathlib import Path

import dotenv
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEV_SECRET_KEY = "django-insecure-virtual-museum-dev-key"


class Config(BaseModel):
    django_secret_key: str
    allowed_hosts: list[str] = []
    debug: bool = False
    log_level: str = "INFO"

    catalog_data_file: Path

    met_api_base_url: str = "https://collectionapi.metmuseum.org/public/collection/v1"
    artist_seed_query: str = "artist"
    artist_cache_ttl_seconds: int = 3600

    google_client_id: str = ""


def _int_from_env(name: str, default: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None or raw_value == "":
        return default
    try:
        return int(raw_value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw_value!r}")


def create_config() -> Config:
    env_files = [".env.dev", ".env.prod"]
    for env_file in env_files:
        if Path(env_file).exists():
            dotenv.load_dotenv(env_file)
            break

    django_secret_key = os.getenv("DJANGO_SECRET_KEY")
    debug = os.getenv("DEBUG", "False").lower() == "true"
    allowed_hosts = [
        host.strip()
        for host in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
        if host.strip()
    ]
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    catalog_data_file = Path(os.getenv("CATALOG_DATA_FILE", "data/museum.json"))

    met_api_base_url = os.getenv(
        "MET_API_BASE_URL",
        "https://collectionapi.metmuseum.org/public/collection/v1",
    ).rstrip("/")
    artist_seed_query = os.getenv("ARTIST_SEED_QUERY", "artist").strip()
    artist_cache_ttl_seconds = _int_from_env("ARTIST_CACHE_TTL_SECONDS", 3600)

    google_client_id = os.getenv("GOOGLE_CLIENT_ID", "")

    if not django_secret_key:
        logger.warning("DJANGO_SECRET_KEY is not set, falling back to the dev key")
        django_secret_key = DEV_SECRET_KEY
    if not met_api_base_url:
        raise ValueError("MET_API_BASE_URL is empty")
    if not artist_seed_query:
        raise ValueError("ARTIST_SEED_QUERY is empty")
    if artist_cache_ttl_seconds < 0:
        raise ValueError("ARTIST_CACHE_TTL_SECONDS must not be negative")

    return Config(
        django_secret_key=django_secret_key,
        allowed_hosts=allowed_hosts,
        debug=debug,
        log_level=log_level,
        catalog_data_file=catalog_data_file,
        met_api_base_url=met_api_base_url,
        artist_seed_query=artist_seed_query,
        artist_cache_ttl_seconds=artist_cache_ttl_seconds,
        google_client_id=google_client_id,
    )


config = create_config()

if __name__ == "__main__":
    config = create_config()
    print(config)
