''' Type constraints for document fields.

A field declared with `isa=` gets one of these. Anything pydantic can build a
TypeAdapter for works as a schema: `int`, `str`, `list[int]`, a TypedDict, a
pydantic model, `Literal['draft', 'published']`, and so on.

The accessor only relies on a small protocol, so objects that already expose
it are used as they are:

  checkable     -- whether `check` should run on every write
  numeric       -- whether written values get coerced to numbers
  check(value)  -- raise TypeConstraintError if value doesn't fit
  coerce(value) -- optional; numeric conversion, defaults to util.numify
'''

import numbers

from pydantic import TypeAdapter, ValidationError, PydanticUserError

from . import exceptions as exc


class Type(object):
  ''' A pydantic-backed constraint. Numeric schemas validate in lax mode, so
  "42" passes an int check and is coerced afterwards; everything else
  validates strictly. '''

  checkable = True

  def __init__(self, schema, strict=None, name=None):
    try:
      self._adapter = TypeAdapter(schema)
    except (PydanticUserError, TypeError) as e:
      raise TypeError('isa expects a valid schema, got %r (%s)' % (schema, e))

    self.schema = schema
    self.numeric = is_numeric(schema)
    self.strict = (not self.numeric) if strict is None else strict
    self.name = name or getattr(schema, '__name__', None) or repr(schema)


  def check(self, value, field_name=None):
    try:
      return self._adapter.validate_python(value, strict=self.strict)
    except ValidationError as e:
      reason = '; '.join(err['msg'] for err in e.errors()) or str(e)
      raise exc.TypeConstraintError(field_name or self.name, value, reason)


  def coerce(self, value):
    return self._adapter.validate_python(value)


  def __repr__(self):
    return '<Type %s>' % self.name


def is_numeric(schema):
  try:
    return issubclass(schema, numbers.Number) and not issubclass(schema, bool)
  except TypeError:
    # generic aliases, Literal[...], TypedDict instances and the like
    return False


def to_type(isa):
  ''' Wrap a raw schema in a Type, or pass through objects that already
  speak the constraint protocol. '''
  if isa is None:
    return None
  if hasattr(isa, 'check') and hasattr(isa, 'numeric') and \
     hasattr(isa, 'checkable'):
    return isa
  return Type(isa)
