# metaclasses.py
#
# Responsible for keeping track of Document subclasses, whether written by
# hand or synthesized for a Model that wasn't given a document class, so that
# relationships can refer to related documents by class name.

import logging
import threading

from .util import ucfirst

log = logging.getLogger(__name__)


class Counter(object):
  ''' Monotonic, thread-safe counter used to name anonymous document classes.
  Never reset; tests hand a fresh one to Model(counter=...). '''

  def __init__(self, start=1):
    self._next = start
    self._lock = threading.Lock()


  def next(self):
    with self._lock:
      n = self._next
      self._next += 1
    return n


  @property
  def peek(self):
    return self._next


anon_counter = Counter()

_lock = threading.RLock()


def only_for_user_defined_subclasses(mc):
  '''
  Stops the metaclass from registering docmodel's own base classes.
  '''

  do_not_register = ['Document']

  old__new__ = mc.__new__
  def new__new__(mcls, name, bases, attrs, **kw):
    if name in do_not_register and attrs.get('__module__') == 'docmodel.document':
      return type.__new__(mcls, name, bases, attrs, **kw)
    return old__new__(mcls, name, bases, attrs, **kw)
  mc.__new__ = staticmethod(new__new__)
  return mc


@only_for_user_defined_subclasses
class DocumentMC(type):
  user_cls_by_name = {}
  synthesized = {}


  def __new__(mcls, name, bases, attrs, anonymous=False):
    cls = super(DocumentMC, mcls).__new__(mcls, name, bases, attrs)

    with _lock:
      if anonymous:
        DocumentMC.synthesized[cls] = attrs.get('model')
      else:
        DocumentMC.user_cls_by_name[name] = cls
    return cls


  def __init__(cls, name, bases, attrs, anonymous=False):
    super(DocumentMC, cls).__init__(name, bases, attrs)


  @staticmethod
  def cls_by_name(cls_name):
    return DocumentMC.user_cls_by_name.get(cls_name)


def full_name(cls):
  return '%s.%s' % (cls.__module__, cls.__qualname__)


def synthesize_document_class(model, base, counter=None):
  ''' Create a fresh Document subclass owned by `model`. The class lives in a
  module path of its own (docmodel.document.__ANON_<n>__) so its full name is
  never handed out twice in one process. '''
  n = (counter or anon_counter).next()
  name = ucfirst(model.name) or 'AnonDoc'
  module = 'docmodel.document.__ANON_%s__' % n

  cls = DocumentMC(name, (base,), {
    '__module__': module,
    '__qualname__': name,
    'model': model,
  }, anonymous=True)

  log.debug('synthesized document class %s for model %r', full_name(cls), model)
  return cls
