import logging

from .models import Model
from .document import Document
from .collection import Collection
from .field_def import Field
from .types import Type
from .relationships import Relationship, BelongsTo, HasMany, HasOne, register
from .exceptions import (
  DocModelError,
  ConfigurationError,
  TypeConstraintError,
  UnknownRelationshipKind,
  MissingConnectionError,
)
from .util import configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
configure_logging()
