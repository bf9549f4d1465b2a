''' Relationship descriptors.

A Model only records relationships; how a "has many" actually fetches the
related documents is up to the storage backend. Backends (or applications)
add their own kinds with `register`:

  @register('has_and_belongs_to_many')
  class HasAndBelongsToMany(Relationship):
    ...
'''

import logging
import threading

from . import exceptions as exc
from .metaclasses import DocumentMC
from .util import camelize

log = logging.getLogger(__name__)

kinds = {}
_lock = threading.Lock()


def register(kind):
  ''' Class decorator adding a relationship class under `kind`. '''
  def decorator(cls):
    with _lock:
      kinds[kind] = cls
    cls.kind = kind
    return cls
  return decorator


def resolve(kind):
  ''' Find the relationship class for `kind`, given either as the tag
  ("belongs_to") or as the class name ("BelongsTo"). '''
  cls = kinds.get(kind)
  if cls is not None:
    return cls

  class_name = camelize(kind)
  for cls in kinds.values():
    if cls.__name__ == class_name:
      return cls
  raise exc.UnknownRelationshipKind(class_name, [c.__name__ for c in kinds.values()])


class Relationship(object):
  kind = None

  def __init__(self, accessor, document_class, related_class, **options):
    self.accessor = accessor
    self.document_class = document_class
    self.related_class = related_class
    self.options = options


  @property
  def related(self):
    ''' The related document class, looked up by name if it was given as a
    string. None until a class with that name exists. '''
    if isinstance(self.related_class, str):
      return DocumentMC.cls_by_name(self.related_class)
    return self.related_class


  def __repr__(self):
    related = self.related_class
    if not isinstance(related, str):
      related = related.__name__
    return '<%s %s.%s -> %s>' % (type(self).__name__,
                                 self.document_class.__name__,
                                 self.accessor, related)


@register('belongs_to')
class BelongsTo(Relationship):
  ''' The document holds the id of one related document. '''


@register('has_many')
class HasMany(Relationship):
  ''' Many related documents hold the id of this one. '''


@register('has_one')
class HasOne(Relationship):
  ''' One related document holds the id of this one. '''
