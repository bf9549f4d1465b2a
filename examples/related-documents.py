#!/usr/bin/env python

# Declaring a few related document models and working with their documents
# without a storage backend. Run with DOCMODEL_DEBUG=1 to see every accessor
# and relationship as it is created.

from typing import Literal

import docmodel as dm


class User(dm.Document):
  pass


user = dm.Model('user', document_class=User)
user.declare_field('username', isa=str)
user.declare_field(['emails', 'roles'], default=list)
user.declare_relationship('has_many', 'docs', 'Doc', foreign_field='owner_id')


corpus = dm.Model('corpus', collection_name='corpora')
corpus.declare_field('title', isa=str)
corpus.declare_field('doc_count', isa=int, default=0)
corpus.declare_field('status', isa=Literal['open', 'archived'], default='open')
corpus.declare_relationship('belongs_to', 'owner', User)


class Doc(dm.Document):
  pass


doc = dm.Model('doc', document_class=Doc)
doc.declare_field('path', isa=str)
doc.declare_field('top_terms', isa=list[int])
doc.declare_field('similarity', isa=float)
doc.declare_relationship('belongs_to', 'corpus', corpus.document_class)


class Connection(object):
  ''' Whatever the storage backend hands out; the model never looks inside. '''


conn = Connection()
corpora = corpus.new_collection(conn)

c = corpora.create().title('Shakespeare').doc_count('37')
assert c.doc_count() == 37
assert c.status() == 'open'
assert c.dirty == {'title': True, 'doc_count': True}

d = Doc().path('/path/to/hamlet.txt').top_terms([3, 1, 4]).similarity('0.5')
assert d.similarity() == 0.5

try:
  c.status('deleted')
except dm.TypeConstraintError as e:
  print(e)

rel = user.relationship('docs')
print(rel, '->', rel.related)
print(corpus.collection_name, [f.name for f in corpus.fields])
