from decimal import Decimal

import pytest

import docmodel as dm
from docmodel import fields
from docmodel.field_def import Field

import schema


def test_read_before_write_is_none():
  doc = schema.author.document_class()
  assert doc.name() is None
  assert not doc.is_dirty()


def test_write_returns_document_for_chaining():
  doc = schema.Author()
  assert doc.name('Ann').email('ann@example.com') is doc
  assert doc.data == {'name': 'Ann', 'email': 'ann@example.com'}


def test_untyped_field_stores_value_untouched():
  doc = schema.post.document_class()
  value = object()
  doc.title(value)
  assert doc.title() is value
  doc.title(None)
  assert doc.title() is None
  assert doc.is_dirty('title')


def test_numeric_field_coerces_strings():
  doc = schema.post.document_class()
  doc.view_count('42')
  assert doc.view_count() == 42
  assert type(doc.view_count()) is int

  doc = schema.Comment()
  doc.score('2.5')
  assert doc.score() == 2.5


def test_constraint_violation_keeps_previous_value():
  doc = schema.post.document_class()
  doc.view_count(7).clean()

  with pytest.raises(dm.TypeConstraintError) as e:
    doc.view_count('seven')
  assert e.value.field_name == 'view_count'
  assert e.value.value == 'seven'
  assert 'view_count' in str(e.value)

  with pytest.raises(dm.TypeConstraintError):
    doc.view_count('4.5')

  assert doc.view_count() == 7
  assert not doc.is_dirty('view_count')


def test_non_numeric_types_are_strict():
  doc = schema.Author()
  with pytest.raises(dm.TypeConstraintError):
    doc.name(5)
  assert doc.name() is None
  assert doc.name('5').name() == '5'


def test_dirty_only_for_written_fields():
  doc = schema.post.document_class()
  doc.title('x')
  assert doc.dirty == {'title': True}
  assert doc.is_dirty('title')
  assert not doc.is_dirty('view_count')
  assert not doc.is_dirty('tags')


def test_defaults_fill_new_documents_without_dirtying_them():
  a = schema.post.document_class()
  b = schema.post.document_class({'view_count': 3})
  assert a.view_count() == 0
  assert b.view_count() == 3
  assert a.tags() == [] and a.tags() is not b.tags()
  assert not a.is_dirty()


def test_redeclared_field_replaces_accessor(model):
  model.declare_field('age')
  doc = model.document_class()
  doc.age('old')
  assert doc.age() == 'old'

  model.declare_field('age', isa=int)
  with pytest.raises(dm.TypeConstraintError):
    doc.age('old')
  assert doc.age('12').age() == 12


def test_field_cannot_shadow_document_attributes(model):
  for name in ('data', 'dirty', 'model', 'json'):
    with pytest.raises(ValueError):
      model.declare_field(name)
  assert model.fields == ()


def test_invalid_field_declarations(model):
  with pytest.raises(TypeError):
    model.declare_field(5)
  with pytest.raises(ValueError):
    model.declare_field('')
  with pytest.raises(TypeError):
    model.declare_field('x', isa=42)


class Even(object):
  ''' A hand-written constraint speaking the accessor protocol. '''
  checkable = True
  numeric = True

  def check(self, value):
    if int(value) % 2:
      raise dm.TypeConstraintError('even', value, 'not even')


class Opaque(object):
  checkable = False
  numeric = False

  def check(self, value):
    raise AssertionError('never called')


def test_custom_constraint_objects(model):
  model.declare_field('even', isa=Even())
  model.declare_field('blob', isa=Opaque())
  doc = model.document_class()

  assert doc.even('4').even() == 4
  with pytest.raises(dm.TypeConstraintError):
    doc.even(3)
  assert doc.blob('anything').blob() == 'anything'


def test_decimal_fields(model):
  model.declare_field('price', isa=Decimal)
  doc = model.document_class()
  assert doc.price('9.99').price() == Decimal('9.99')


def test_accessor_carries_its_field():
  field = Field('title', isa=str)
  attr = fields.accessor(field)
  assert attr.__name__ == 'title'
  assert attr.field is field


def test_field_is_read_only():
  field = Field('title', isa=str, default='', label='Title')
  with pytest.raises(AttributeError):
    field.name = 'other'
  with pytest.raises(AttributeError):
    del field.type
  with pytest.raises(TypeError):
    field.meta['label'] = 'x'
  assert field.meta == {'label': 'Title'}
  assert field.has_default and not Field('x').has_default


def test_model_back_reference_cannot_be_a_field(model):
  cls = model.document_class
  with pytest.raises(ValueError):
    model.declare_field('model')
  assert cls.model is model
  assert cls().model is model


def test_failed_declaration_adds_nothing(model):
  with pytest.raises(ValueError):
    model.declare_field(['ok', 'data'])
  assert model.fields == ()
  assert not hasattr(model.document_class, 'ok')


def test_defaults_follow_latest_declaration(model):
  model.declare_field('level', default=1)
  model.declare_field('level', isa=int, default=5)
  assert model.document_class().level() == 5
  assert model.field('level').default == 1
