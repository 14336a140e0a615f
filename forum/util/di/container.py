"""Container assembly and FastAPI wiring."""

from typing import Iterable

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from forum.util.di import Component, build_providers


def create_container(mocked: Iterable[Component] = ()) -> AsyncContainer:
    """Build a container with production providers.

    Args:
        mocked: Components replaced by their in-memory implementation
            (tests only; the implementation must be imported first)
    """
    return make_async_container(*build_providers(mocked), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve ``FromDishka`` dependencies of ``app`` from ``container``."""
    setup_dishka(container, app)
