from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "INMOCALC_"}

    # App
    log_level: str = "INFO"

    # Recommendations
    target_gross_yield: float = 0.065  # Gross yield used for max price / recommended rent

    # Projection
    expense_inflation: float = 0.02  # Yearly growth of fixed costs
    metrics_horizon_years: int = 10  # Window for the average net yield

    # IRR
    irr_guess: float = 0.06

    # Purchase taxes
    iva_new_build: float = 0.10  # VAT on new-build homes


settings = Settings()
