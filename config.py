"""
config.py - Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks RACHMISTRZ_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Interpreter
    max_input_length: int = 1000   # znaków w jednej linii (POST /evaluate)
    max_sessions: int = 1024       # po przekroczeniu - eviction najdawniej używanej

    # App
    app_title: str = "Rachmistrz"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="RACHMISTRZ_", env_file=".env", extra="ignore")
