import pytest

import docmodel as dm
from docmodel import metaclasses


@pytest.fixture
def counter():
  return metaclasses.Counter()


@pytest.fixture
def model(counter):
  return dm.Model('user', counter=counter)


@pytest.fixture
def connection():
  return object()
