"""Dependency injection providers for the forum API.

Every provider class is listed in ``PROVIDERS``. A class that declares
``__mock_component__`` is a swappable component: its subclasses are the
production and the in-memory implementations, told apart by ``__is_mock__``.
"""

from typing import Iterable, Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def components() -> set[Component]:
    """Names of all swappable components."""
    return {p.__mock_component__ for p in PROVIDERS if p.__mock_component__}


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of ``base``.

    Raises:
        ValueError: If ``base`` is a component with no matching implementation
    """
    if base.__mock_component__ is None:
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


def build_providers(mocked: Iterable[Component] = ()) -> list[ProviderBase]:
    """Instantiate one provider per entry of ``PROVIDERS``.

    Args:
        mocked: Components to serve from their in-memory implementation

    Raises:
        ValueError: If ``mocked`` names an unknown component
    """
    mocked = set(mocked)
    unknown = mocked - components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "build_providers",
    "components",
    "get_provider",
]
