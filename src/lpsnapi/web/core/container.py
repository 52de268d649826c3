"""Dependency injection container for the lpsnapi application."""

from dependency_injector import containers, providers

from lpsnapi.species.lpsn_client import LPSNClient
from lpsnapi.system.path_resolver import PathResolver
from lpsnapi.web.core.config import get_config


class Container(containers.DeclarativeContainer):
    """Application dependency injection container."""

    path_resolver = providers.Singleton(PathResolver)

    # Configuration - singleton instance that uses our path_resolver
    config = providers.Singleton(
        get_config,
        path_resolver=path_resolver,
    )

    # LPSN scraping client - stateless, one instance for the whole app
    lpsn_client = providers.Singleton(
        LPSNClient,
        config=config,
    )
