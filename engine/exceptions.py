# engine/exceptions.py

class ForecastError(Exception):
    pass


class InsufficientDataError(ForecastError):
    pass


class InvalidUniverseError(ForecastError):
    pass


class InvalidConfigurationError(ForecastError):
    pass


class DuplicateObservationError(ForecastError):
    pass
