from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    orders_file: str = "data/orders.json"
    payment_methods_file: str = "data/paymentmethods.json"

    points_method_id: str = "PUNKTY"
    discount_unit: Literal["percent", "fraction"] = "percent"
    prioritize_orders: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
