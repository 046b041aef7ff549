"""Provider metadata used to pick prod or in-process implementations."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["persistence"]


class ProviderBase(Provider):
    """dishka provider tagged with the component it implements.

    A base such as ``PersistenceProvider`` sets ``__mock_component__``;
    its subclasses differ only in ``__is_mock__``, which get_provider()
    uses to choose between Postgres and the in-memory stores.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
