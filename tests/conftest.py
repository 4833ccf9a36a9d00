import datetime
import os
import time

import pytest
from sfconvert.options import ConversionOptions


@pytest.fixture
def new_york_options():
    """Options resolving TIMESTAMP_LTZ in a zone with daylight saving time"""
    return ConversionOptions(local_timezone='America/New_York')


@pytest.fixture
def fixed_offset_options():
    """Options resolving TIMESTAMP_LTZ in a fixed +02:00 zone"""
    zone = datetime.timezone(datetime.timedelta(hours=2))
    return ConversionOptions(local_timezone=zone)


@pytest.fixture
def nanosecond_options():
    """Options returning pandas Timestamps for timestamp kinds"""
    return ConversionOptions(local_timezone='UTC', nanosecond_precision=True)


@pytest.fixture
def utc():
    return datetime.timezone.utc


@pytest.fixture
def new_york_process_zone():
    """Set the process local zone to America/New_York, restoring it afterwards"""
    if not hasattr(time, 'tzset'):
        pytest.skip('time.tzset is not available on this platform')
    original = os.environ.get('TZ')
    os.environ['TZ'] = 'America/New_York'
    time.tzset()
    yield
    if original is None:
        os.environ.pop('TZ', None)
    else:
        os.environ['TZ'] = original
    time.tzset()
