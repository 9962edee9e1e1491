import os
import logging
from functools import lru_cache
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


# Valeur "infini" : pas de connexion entre deux villes
INF = float("inf")

# Nombre maximum de villes par défaut (recherche exhaustive en (n-1)!)
DEFAULT_MAX_CITIES = 10

# Plafond absolu, quelle que soit la configuration (11! tours)
HARD_MAX_CITIES = 12

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Settings(BaseModel):
    max_cities: int = Field(DEFAULT_MAX_CITIES, ge=1, le=HARD_MAX_CITIES)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Charge la configuration depuis l'environnement (et un éventuel .env).
    """
    load_dotenv(env_file)

    values = {}
    max_cities = os.getenv("VOYAGEUR_MAX_CITIES")
    if max_cities:
        values["max_cities"] = max_cities
    log_level = os.getenv("VOYAGEUR_LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level.upper()

    return Settings(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def configure_logging(level: Optional[str] = None) -> None:
    level = (level or get_settings().log_level).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Niveau de log invalide : {level}.")
    logging.basicConfig(level=level, format=LOG_FORMAT)
