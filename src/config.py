from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Form entry: loan amount is typed in ten-thousands (万元)
    loan_amount_unit: Decimal = Decimal("10000")
    currency_symbol: str = "¥"

    # Artificial latency before a calculation is answered (seconds)
    calculation_delay_seconds: float = 0.0


settings = Settings()
