"""Pydantic schemas for payload validation and serialization."""

from .base import *  # noqa: F403
from .common import *  # noqa: F403
from .media import *  # noqa: F403
from .room_type import *  # noqa: F403
from .tour import *  # noqa: F403
from .tour_date import *  # noqa: F403
