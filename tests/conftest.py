import logging

import pytest

from chainset import ChainSet, Setting, config
from tests.records import Contact

logger = logging.getLogger(__name__)


def pytest_addoption(parser):
    parser.addoption(
        '--log',
        action='store',
        default='INFO',
        help='set logging level',
    )


@pytest.fixture(scope='session')
def logger(request):
    import logging

    loglevel = request.config.getoption('--log')

    numeric_level = getattr(logging, loglevel.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {loglevel}')

    logging.basicConfig()
    logger = logging.getLogger(__name__)
    logger.setLevel(numeric_level)
    return logger



@pytest.fixture
def contacts():
    return [
        Contact('Mario', 'Rossi', '6959595'),
        Contact('Luca', 'Rossi', '8855855'),
        Contact('Lucia', 'Rossi', '123455'),
        Contact('Sara', 'Verdi', '987654'),
        Contact('Deborah', 'Verdi', '2548963'),
        ]


@pytest.fixture
def ints():
    return ChainSet([5, 4, 23, -56, 1, -9])


@pytest.fixture
def names():
    return ChainSet(['Mario', 'Giovanni', 'Luca', 'Lucia', 'Sara', 'Deborah'])


@pytest.fixture
def unchecked_iteration():
    Setting.unlock()
    config.iteration.checked = False
    Setting.lock()
    yield
    Setting.unlock()
    config.iteration.checked = True
    Setting.lock()
