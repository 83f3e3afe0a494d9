import logging

logger = logging.getLogger(__name__)


from chainset.exception import *
from chainset.config import *
from chainset.iterator import *
from chainset.setutils import *
from chainset.chainset import *
from chainset.log import *
