"""Top-level package for arrayset."""

import importlib.metadata
import logging

from arrayset.adapters import ReadOnlyMutableSet  # noqa: F401
from arrayset.core import ArraySortedSet  # noqa: F401
from arrayset.exceptions import *  # noqa: F401,F403
from arrayset.ordering import *  # noqa: F401,F403

__version__ = importlib.metadata.version(__name__)

logging.getLogger(__name__).addHandler(logging.NullHandler())
