"""Factory base class.

Subclass Factory and define one `<name>_factory` method per record kind.
The instance is its own resolver: build(), build_pair() and build_list()
forward to the engine with `self.factory` as the resolver.

Example:
    ```python
    from fixtureworks import Factory


    class AppFactory(Factory):
        def user_factory(self):
            return {
                "name": "John Doe",
                "email": self.sequence("email", lambda n: f"me-{n}@foo.com"),
                "admin": False,
            }

        def save_record(self, record):
            return repo.insert(record)


    factory = AppFactory()
    factory.build("user", admin=True)
    factory.build_list(3, "user")
    factory.create("user")  # persisted through save_record
    ```
"""

from collections.abc import Callable
from typing import Any

from fixtureworks.constants.sequence import FACTORY_METHOD_SUFFIX
from fixtureworks.core import engine
from fixtureworks.core.engine import Attrs
from fixtureworks.core.exceptions import UndefinedFactoryError, UndefinedSaveError
from fixtureworks.core.merge import normalize_attrs
from fixtureworks.models.template import Record, Template
from fixtureworks.sequence.helpers import sequence

Definition = Callable[["Factory"], Template]


class Factory:
    """Base class for a set of named factories.

    Overrides can be passed as a mapping, as (key, value) pairs, or as keyword
    arguments; keyword arguments win over the positional attrs.
    """

    sequence = staticmethod(sequence)

    @property
    def definitions(self) -> dict[str, Definition]:
        """Registered definitions, created on first use.

        Subclasses with their own __init__ need not call super().__init__().
        """
        return self.__dict__.setdefault("_definitions", {})

    def register(
        self, name: str, definition: Definition | None = None
    ) -> Definition | Callable[[Definition], Definition]:
        """Attach a factory definition without subclassing.

        Usable directly or as a decorator:

            factory.register("tag", lambda f: {"label": f.sequence("tag")})

            @factory.register("post")
            def post(f):
                return {"title": f.sequence("Post Title")}

        Registered definitions take precedence over `<name>_factory` methods.
        """
        if definition is None:

            def decorator(fn: Definition) -> Definition:
                self.definitions[name] = fn
                return fn

            return decorator

        self.definitions[name] = definition
        return definition

    def factory(self, factory_name: str) -> Template:
        """Resolve `factory_name` to a fresh template.

        Raises:
            UndefinedFactoryError: No registered definition and no
                `<factory_name>_factory` method.
        """
        definition = self.definitions.get(factory_name)
        if definition is not None:
            return definition(self)

        method = None
        if isinstance(factory_name, str):
            method = getattr(self, f"{factory_name}{FACTORY_METHOD_SUFFIX}", None)
        if not callable(method):
            raise UndefinedFactoryError(factory_name)
        return method()

    def save_record(self, record: Record) -> Any:
        """Persist a built record; used by create().

        Override in subclasses that talk to a data store, e.g. an ORM
        session's add-and-flush or a repository insert.

        Raises:
            UndefinedSaveError: Always, unless overridden.
        """
        raise UndefinedSaveError()

    def build(self, factory_name: str, attrs: Attrs = None, **overrides: Any) -> Record:
        """Build one record."""
        return engine.build(self.factory, factory_name, _combine(attrs, overrides))

    def build_pair(self, factory_name: str, attrs: Attrs = None, **overrides: Any) -> list[Record]:
        """Build two records."""
        return engine.build_pair(self.factory, factory_name, _combine(attrs, overrides))

    def build_list(
        self, number: int, factory_name: str, attrs: Attrs = None, **overrides: Any
    ) -> list[Record]:
        """Build `number` records."""
        return engine.build_list(self.factory, number, factory_name, _combine(attrs, overrides))

    def create(self, factory_name: str, attrs: Attrs = None, **overrides: Any) -> Any:
        """Build one record and save it with save_record()."""
        return engine.create(
            self.factory, self.save_record, factory_name, _combine(attrs, overrides)
        )

    def create_pair(self, factory_name: str, attrs: Attrs = None, **overrides: Any) -> list[Any]:
        """Build and save two records."""
        return engine.create_pair(
            self.factory, self.save_record, factory_name, _combine(attrs, overrides)
        )

    def create_list(
        self, number: int, factory_name: str, attrs: Attrs = None, **overrides: Any
    ) -> list[Any]:
        """Build and save `number` records."""
        return engine.create_list(
            self.factory, self.save_record, number, factory_name, _combine(attrs, overrides)
        )


def _combine(attrs: Attrs, overrides: dict[str, Any]) -> Attrs:
    if not overrides:
        return attrs
    return {**normalize_attrs(attrs), **overrides}
