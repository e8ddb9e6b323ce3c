"""Factory Boy helpers wired to the Flask-SQLAlchemy session."""

from __future__ import annotations

import factory

from streamauth.core.extensions import db


class BaseFactory(factory.alchemy.SQLAlchemyModelFactory):
    """Base class persisting through the app-scoped session.

    Objects are committed so that requests issued through the test client,
    which run on their own scoped session, can see them.
    """

    class Meta:
        abstract = True
        sqlalchemy_session_factory = lambda: db.session  # noqa: E731
        sqlalchemy_session_persistence = "commit"
