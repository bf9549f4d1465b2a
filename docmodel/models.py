import logging

from . import exceptions as exc
from . import fields
from . import metaclasses
from . import relationships
from .collection import Collection
from .document import Document
from .field_def import Field
from .util import pluralize

log = logging.getLogger(__name__)


class Model(object):
  ''' Describes the structure of one kind of document: its fields, its
  relationships, the collection it is stored in, and the classes used for
  documents and collections.

    post = Model('post')
    post.declare_field('title')
    post.declare_field(['view_count', 'like_count'], isa=int, default=0)
    post.declare_relationship('belongs_to', 'author', 'Author')
    posts = post.new_collection(connection)

  `collection_name` defaults to the plural of `name`, and `document_class`
  to a class synthesized on first use.
  '''

  collection_class = Collection
  document_base = Document

  def __init__(self, name='', collection_name=None, document_class=None,
               collection_class=None, counter=None):
    self.name = name or ''
    self._collection_name = collection_name
    self._document_class = None
    self._counter = counter
    self._fields = []
    self._relationships = {}

    if collection_class is not None:
      self.collection_class = collection_class
    if document_class is not None:
      self.document_class = document_class


  @property
  def collection_name(self):
    if self._collection_name is None:
      if not self.name:
        raise exc.ConfigurationError()
      self._collection_name = pluralize(self.name)
    return self._collection_name


  @collection_name.setter
  def collection_name(self, name):
    self._collection_name = name


  @property
  def document_class(self):
    with metaclasses._lock:
      if self._document_class is None:
        self._document_class = metaclasses.synthesize_document_class(
          self, self.document_base, self._counter)
    return self._document_class


  @document_class.setter
  def document_class(self, cls):
    # adopt hand-written classes that don't belong to a model yet
    if cls.__dict__.get('model') is None:
      cls.model = self
    self._document_class = cls


  def declare_field(self, names, meta=None, **kw):
    ''' Add one field, or several sharing the same metadata, and attach an
    accessor for each to the document class. Returns the model. '''
    meta = dict(meta or {}, **kw)
    cls = self.document_class

    new = [Field(name, **meta)
           for name in (names if isinstance(names, (list, tuple)) else [names])]
    for field in new:
      fields.check_name(cls, field.name)

    for field in new:
      if self.field(field.name) is not None:
        log.warning('field `%s` redeclared on model %r; replacing its accessor',
                    field.name, self.name)
      fields.attach(cls, field)
      self._fields.append(field)

    return self


  def field(self, name):
    for field in self._fields:
      if field.name == name:
        return field
    return None


  @property
  def fields(self):
    ''' Fields in the order they were declared. '''
    return tuple(self._fields)


  def declare_relationship(self, kind, accessor, related_class, **options):
    ''' Describe a relationship from this model's documents to another
    document class (or class name). `options` go to the relationship class
    untouched. Redeclaring an accessor replaces the earlier relationship. '''
    rel_cls = relationships.resolve(kind)
    args = {
      'accessor': accessor,
      'document_class': self.document_class,
      'related_class': related_class,
    }
    args.update(options)
    rel = rel_cls(**args)
    self._relationships[accessor] = rel
    log.debug('relationship %r on model %r', rel, self.name)
    return rel


  def relationship(self, accessor):
    return self._relationships.get(accessor)


  @property
  def relationships(self):
    return dict(self._relationships)


  def new_collection(self, connection, **options):
    if connection is None:
      raise exc.MissingConnectionError()
    if not self.collection_name:
      raise exc.ConfigurationError()
    args = {'connection': connection, 'model': self}
    args.update(options)
    return self.collection_class(**args)


  def __repr__(self):
    return '<Model %s>' % (self.name or '(anonymous)')
