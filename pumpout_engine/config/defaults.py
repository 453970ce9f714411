"""Default configuration parameters for the bulk-plan engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PricingParams:
    """Pricing fallbacks for catalog entries."""
    default_price_per_additional_cents: int = 5000   # $50 per extra pump-out


@dataclass(frozen=True)
class LoggingParams:
    """structlog output settings."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    pricing: PricingParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        pricing=PricingParams(),
        logging=LoggingParams(),
    )
