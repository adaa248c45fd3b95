from datetime import date

import pytest

from budgeter import create_app
from budgeter.config import TestConfig
from budgeter.extensions import db
from budgeter.models import Category


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    return db.session


@pytest.fixture
def clock_at():
    def _clock(year, month, day):
        return lambda: date(year, month, day)

    return _clock


@pytest.fixture
def make_category(session):
    def _make(name="Groceries", type="expense", color="#ff9800"):
        category = Category(name=name, type=type, color=color)
        session.add(category)
        session.commit()
        return category

    return _make
