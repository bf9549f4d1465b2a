import functools
import logging

from . import types
from .field_def import Field
from .util import _missing, numify

log = logging.getLogger(__name__)


__all__ = ['accessor', 'attach', 'check_name']


def _write_steps(field):
  ''' Work out, once, what a write to `field` has to do to the value. '''
  isa = field.type
  steps = []
  if isa is None:
    return steps

  if isa.checkable:
    check = isa.check
    if isinstance(isa, types.Type):
      check = functools.partial(isa.check, field_name=field.name)

    def assert_(value):
      check(value)
      return value
    steps.append(assert_)

  if isa.numeric:
    steps.append(getattr(isa, 'coerce', numify))

  return steps


def accessor(field):
  ''' Build the read/write method for `field`.

    doc.title()         -> stored value
    doc.title('Hello')  -> doc, with the value checked, stored and marked dirty
  '''
  name = field.name
  steps = _write_steps(field)

  if not steps:
    def attr(self, value=_missing):
      raw = self.data
      if value is _missing:
        return raw.get(name)
      self.dirty[name] = True
      raw[name] = value
      return self

  elif len(steps) == 1:
    step, = steps
    def attr(self, value=_missing):
      raw = self.data
      if value is _missing:
        return raw.get(name)
      value = step(value)
      self.dirty[name] = True
      raw[name] = value
      return self

  else:
    def attr(self, value=_missing):
      raw = self.data
      if value is _missing:
        return raw.get(name)
      for step in steps:
        value = step(value)
      self.dirty[name] = True
      raw[name] = value
      return self

  attr.__name__ = name
  attr.__doc__ = 'Read or write the `%s` field.' % name
  attr.field = field
  return attr


def check_name(cls, name):
  ''' Refuse names that would replace something other than a field accessor,
  such as `data` or the `model` back-reference. '''
  if hasattr(cls, name) and \
     not isinstance(getattr(getattr(cls, name), 'field', None), Field):
    raise ValueError('%s already has a `%s` attribute that is not a field' %
                     (cls.__name__, name))


def attach(cls, field):
  ''' Install the accessor for `field` on `cls`, replacing any earlier one
  with the same name. '''
  check_name(cls, field.name)

  attr = accessor(field)
  attr.__qualname__ = '%s.%s' % (cls.__qualname__, field.name)
  attr.__module__ = cls.__module__
  setattr(cls, field.name, attr)
  log.debug('attribute %s in %s.%s isa=%r', field.name,
            cls.__module__, cls.__qualname__, field.type)
  return attr
