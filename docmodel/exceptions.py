class DocModelError(Exception):
  message = 'docmodel error'

  def __init__(self, *args):
    super(DocModelError, self).__init__(*args or (self.message,))

  def __str__(self):
    return self.message


class ConfigurationError(DocModelError):
  message = '''A model needs either a name or a collection_name before its
  collection name can be used.'''


class TypeConstraintError(DocModelError):
  def __init__(self, field_name, value, reason):
    self.field_name = field_name
    self.value = value
    self.reason = reason
    self.message = '%r is not a valid value for the `%s` field: %s' % \
                   (value, field_name, reason)
    super(TypeConstraintError, self).__init__(field_name, value, reason)


class UnknownRelationshipKind(DocModelError):
  def __init__(self, class_name, known=()):
    self.class_name = class_name
    self.message = 'No relationship class named `%s`. Known kinds are `%s`.' % \
                   (class_name, ', '.join(sorted(known)))
    super(UnknownRelationshipKind, self).__init__(class_name)


class MissingConnectionError(DocModelError):
  message = '''model.new_collection(connection) needs a connection.'''
