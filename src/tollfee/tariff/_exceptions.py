class TariffError(ValueError):
    """Raised when a tariff interval list is malformed."""


class ConfigurationAnomaly(RuntimeWarning):
    """Issued when a time of day matches no tariff interval."""
