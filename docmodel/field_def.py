from types import MappingProxyType

from . import types
from .util import _missing


class Field(object):
  ''' Read-only description of one document field: its name, its optional
  type constraint and its default.

  Anything else passed at declaration time is kept in `meta` untouched, for
  collaborators (serializers, form builders) that want it.
  '''

  __slots__ = ('_name', '_type', '_default', '_meta')

  def __init__(self, name, isa=None, default=_missing, **meta):
    if not isinstance(name, str):
      raise TypeError('field expects a string name, got %r' % (name,))
    if not name.isidentifier():
      raise ValueError('field name must be a non-empty identifier, got %r' % name)

    set_ = super(Field, self).__setattr__
    set_('_name', name)
    set_('_type', types.to_type(isa))
    set_('_default', default)
    set_('_meta', MappingProxyType(dict(meta)))


  def __setattr__(self, attr, value):
    raise AttributeError('Field objects are read-only')


  def __delattr__(self, attr):
    raise AttributeError('Field objects are read-only')


  @property
  def name(self):
    return self._name


  @property
  def type(self):
    return self._type


  @property
  def default(self):
    return self._default


  @property
  def has_default(self):
    return self._default is not _missing


  @property
  def meta(self):
    return self._meta


  def default_value(self):
    ''' The value a fresh document starts with. Callable defaults (`list`,
    `dict`, factories) are called so documents don't share them. '''
    if callable(self._default):
      return self._default()
    return self._default


  def __repr__(self):
    if self._type is None:
      return '<Field %s>' % self._name
    return '<Field %s isa=%r>' % (self._name, self._type)
