# holiday_checker/exceptions.py


class HolidayCheckerError(Exception):
    """Base error; `status_code` is the HTTP status it is reported with."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(HolidayCheckerError):
    """A required setting, such as the upstream API key, is missing."""
    status_code = 500


class ValidationError(HolidayCheckerError):
    """The request is missing or has malformed parameters."""
    status_code = 400


class UpstreamError(HolidayCheckerError):
    """The holidays provider could not be reached or answered with an error."""
    status_code = 500
