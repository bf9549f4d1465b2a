from . import metaclasses


class Document(object, metaclass=metaclasses.DocumentMC):
  ''' Base class for every document, hand-written or synthesized by a Model.

  The raw field values live in `data`, and `dirty` records which fields were
  written since the document was loaded or last cleaned. Field accessors are
  attached to subclasses by Model.declare_field; `model` points back at the
  Model that governs the class.
  '''

  model = None
  collection = None
  dirty = None

  def __init__(self, data=None, collection=None):
    self._data = dict(data or {})
    self.dirty = {}
    self.collection = collection

    if self.model is not None:
      # the latest declaration of a name is the one its accessor uses
      latest = dict((field.name, field) for field in self.model.fields)
      for name, field in latest.items():
        if field.has_default and name not in self._data:
          self._data[name] = field.default_value()


  @property
  def data(self):
    return self._data


  @data.setter
  def data(self, data):
    self._data = data


  def is_dirty(self, name=None):
    if name is None:
      return bool(self.dirty)
    return self.dirty.get(name, False)


  def clean(self):
    ''' Forget which fields were written, e.g. after a save. '''
    self.dirty = {}
    return self


  def json(self):
    return dict(self._data)


  def __repr__(self):
    return '<%s %r>' % (type(self).__name__, self._data)
