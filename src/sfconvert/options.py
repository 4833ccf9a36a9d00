import datetime
import logging
import os
from dataclasses import dataclass

from dateutil import tz

logger = logging.getLogger(__name__)

__all__ = [
    'ConversionOptions',
    'default_options',
]

TRUTHY_STRINGS = {'1', 'true', 'yes', 'on'}


@dataclass
class ConversionOptions:
    """Options

    - local_timezone: Zone used to normalize TIMESTAMP_LTZ values. Accepts a
      tzinfo or an IANA zone name. None uses the process local zone, which
      honors the `TZ` environment variable (default: None)
    - nanosecond_precision: Return `pandas.Timestamp` for timestamp kinds so
      digits below the microsecond survive (default: False)
    """
    local_timezone: str | datetime.tzinfo | None = None
    nanosecond_precision: bool = False

    def __post_init__(self):
        if isinstance(self.local_timezone, str):
            zone = tz.gettz(self.local_timezone)
            if zone is None:
                raise ValueError(f'unknown timezone: {self.local_timezone}')
            self.local_timezone = zone
        elif self.local_timezone is not None and not isinstance(self.local_timezone, datetime.tzinfo):
            raise ValueError('local_timezone must be a zone name or tzinfo')

    @property
    def zone(self) -> datetime.tzinfo:
        """Zone that TIMESTAMP_LTZ offsets are resolved in.

        The process zone is looked up per call so a changed `TZ` is seen.
        """
        if self.local_timezone is None:
            return tz.tzlocal()
        return self.local_timezone

    @classmethod
    def from_env(cls, environ=None) -> 'ConversionOptions':
        """Build options from `SFCONVERT_*` environment variables.
        """
        environ = os.environ if environ is None else environ
        local_timezone = environ.get('SFCONVERT_LOCAL_TIMEZONE') or None
        precision = environ.get('SFCONVERT_NANOSECOND_PRECISION', '')
        options = cls(
            local_timezone=local_timezone,
            nanosecond_precision=precision.strip().lower() in TRUTHY_STRINGS,
        )
        logger.debug(f'Loaded conversion options from environment: {options}')
        return options


default_options = ConversionOptions()
