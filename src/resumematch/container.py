"""Dependency injection container for the match service."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import MatchScoringEngine, ProfileNormalizer, ScoringWeights
from .pipeline import MatchPipeline, OutputWriter, ProfileLoader


class MatchContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    weights = providers.Singleton(ScoringWeights.from_settings, config)

    normalizer = providers.Singleton(ProfileNormalizer)

    match_engine = providers.Singleton(
        MatchScoringEngine,
        weights=weights,
    )

    loader = providers.Singleton(ProfileLoader)
    writer = providers.Singleton(OutputWriter)

    pipeline = providers.Factory(
        MatchPipeline,
        engine=match_engine,
        normalizer=normalizer,
        loader=loader,
        writer=writer,
    )


def create_container(*, settings: dict | None = None) -> MatchContainer:
    """Instantiate container with optional weight overrides."""

    container = MatchContainer()

    if not settings:
        return container

    container.config.from_dict(settings)
    return container
