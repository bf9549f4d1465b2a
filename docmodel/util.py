import os
import numbers
import logging


class _Missing(object):
  ''' Stands in for "no argument given", so that None can still be written. '''

  def __repr__(self):
    return '<missing>'

  def __bool__(self):
    return False

_missing = _Missing()


DEBUG_ENV = 'DOCMODEL_DEBUG'


def configure_logging(environ=None):
  ''' Send the package's debug log to stderr when DOCMODEL_DEBUG is set. '''
  environ = os.environ if environ is None else environ
  log = logging.getLogger('docmodel')
  if not environ.get(DEBUG_ENV):
    return log

  if not any(getattr(h, '_docmodel_debug', False) for h in log.handlers):
    handler = logging.StreamHandler()
    handler.setFormatter(
      logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    handler._docmodel_debug = True
    log.addHandler(handler)
  log.setLevel(logging.DEBUG)
  return log


def ucfirst(s):
  return s[:1].upper() + s[1:]


def camelize(s):
  ''' belongs_to -> BelongsTo. Strings that already start uppercase pass
  through untouched. '''
  if not s or s[0].isupper():
    return s
  return ''.join(ucfirst(part) for part in s.split('_'))


def pluralize(name):
  return name if name.endswith('s') else name + 's'


def numify(value):
  ''' Coerce a number-like value to int, or float when it isn't integral. '''
  if isinstance(value, numbers.Number) and not isinstance(value, bool):
    return value
  try:
    return int(value)
  except (TypeError, ValueError):
    return float(value)
