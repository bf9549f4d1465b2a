class Collection(object):
  ''' Generic handle for the documents of one model, bound to a connection.
  The connection is never inspected here; storage backends subclass this and
  set their class as Model.collection_class. '''

  def __init__(self, connection, model, **options):
    self.connection = connection
    self.model = model
    self.options = options


  @property
  def name(self):
    return self.model.collection_name


  def create(self, data=None):
    ''' Build a new, unsaved document bound to this collection. '''
    return self.model.document_class(data, collection=self)


  def __repr__(self):
    return '<%s %s>' % (type(self).__name__, self.name)
