"""fixtureworks: named test-data factories with unique sequences.

Usage:
    import fixtureworks
    from fixtureworks import Factory

    fixtureworks.start()  # once per process; the pytest plugin does this for you


    class AppFactory(Factory):
        def article_factory(self):
            return {"title": self.sequence("Post Title")}


    AppFactory().build("article")  # {"title": "Post Title 0"}
"""

from fixtureworks.core.engine import (
    build,
    build_list,
    build_pair,
    create,
    create_list,
    create_pair,
)
from fixtureworks.core.exceptions import (
    FixtureWorksError,
    InvalidAttrsError,
    InvalidSequenceError,
    InvalidTemplateError,
    SequenceAlreadyStartedError,
    SequenceNotStartedError,
    UndefinedFactoryError,
    UndefinedSaveError,
    UnknownFieldError,
)
from fixtureworks.core.factory import Factory
from fixtureworks.models.template import FixedShape
from fixtureworks.sequence import next_value, reset, sequence, start, stop

__all__ = [
    "Factory",
    "FixedShape",
    "FixtureWorksError",
    "InvalidAttrsError",
    "InvalidSequenceError",
    "InvalidTemplateError",
    "SequenceAlreadyStartedError",
    "SequenceNotStartedError",
    "UndefinedFactoryError",
    "UndefinedSaveError",
    "UnknownFieldError",
    "build",
    "build_list",
    "build_pair",
    "create",
    "create_list",
    "create_pair",
    "next_value",
    "reset",
    "sequence",
    "start",
    "stop",
]
