"""
Reference Data Repositories

The engine reads through a single repository contract:
- get_profile / get_country     -> per-request lookups (None when unknown)
- list_careers / list_components -> reference catalog
- bulk_affinities               -> affinities for (careers x components)

InMemoryRepository backs tests and seed previews; the SQLAlchemy adapter backs
production. ReferenceDataCache keeps an immutable snapshot of the catalog that
is swapped on invalidate() rather than mutated under concurrent readers.
"""

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .contracts import (
    AssessmentComponent,
    Career,
    CareerComponentAffinity,
    Country,
    StudentProfile,
)

logger = logging.getLogger(__name__)


class ReferenceRepository(ABC):
    """Read contract the matching engine depends on."""

    @abstractmethod
    def get_profile(self, profile_id: str) -> Optional[StudentProfile]:
        ...

    @abstractmethod
    def list_careers(self) -> List[Career]:
        ...

    @abstractmethod
    def get_country(self, country_id: str) -> Optional[Country]:
        ...

    @abstractmethod
    def list_components(self) -> List[AssessmentComponent]:
        """All components, active or not, in display order."""

    @abstractmethod
    def bulk_affinities(
        self,
        career_ids: Sequence[str],
        component_ids: Sequence[str],
    ) -> List[CareerComponentAffinity]:
        ...


class InMemoryRepository(ReferenceRepository):
    """Dictionary-backed repository."""

    def __init__(
        self,
        profiles: Iterable[StudentProfile] = (),
        careers: Iterable[Career] = (),
        countries: Iterable[Country] = (),
        components: Iterable[AssessmentComponent] = (),
        affinities: Iterable[CareerComponentAffinity] = (),
    ):
        self.profiles: Dict[str, StudentProfile] = {p.id: p for p in profiles}
        self.careers: List[Career] = list(careers)
        self.countries: Dict[str, Country] = {c.id: c for c in countries}
        self.components: List[AssessmentComponent] = list(components)
        self.affinities: List[CareerComponentAffinity] = list(affinities)

    def add_profile(self, profile: StudentProfile) -> None:
        self.profiles[profile.id] = profile

    def get_profile(self, profile_id: str) -> Optional[StudentProfile]:
        return self.profiles.get(profile_id)

    def list_careers(self) -> List[Career]:
        return list(self.careers)

    def get_country(self, country_id: str) -> Optional[Country]:
        return self.countries.get(country_id)

    def list_components(self) -> List[AssessmentComponent]:
        return sorted(self.components, key=lambda c: (c.display_order, c.key))

    def bulk_affinities(
        self,
        career_ids: Sequence[str],
        component_ids: Sequence[str],
    ) -> List[CareerComponentAffinity]:
        careers, components = set(career_ids), set(component_ids)
        return [
            a for a in self.affinities
            if a.career_id in careers and a.component_id in components
        ]


# =============================================================================
# CACHE
# =============================================================================

@dataclass(frozen=True)
class ReferenceSnapshot:
    careers: Tuple[Career, ...]
    components: Tuple[AssessmentComponent, ...]
    affinities: Tuple[CareerComponentAffinity, ...]


class ReferenceDataCache:
    """
    Process-wide snapshot of the reference catalog.

    Readers get whichever snapshot is current; invalidate() drops it so the
    next reader reloads from its repository.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._snapshot: Optional[ReferenceSnapshot] = None

    def snapshot(self, loader: ReferenceRepository) -> ReferenceSnapshot:
        current = self._snapshot
        if current is not None:
            return current
        with self._lock:
            if self._snapshot is None:
                self._snapshot = self._load(loader)
            return self._snapshot

    def invalidate(self) -> None:
        with self._lock:
            self._snapshot = None
        logger.info("🔄 Reference data cache invalidated")

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    @staticmethod
    def _load(loader: ReferenceRepository) -> ReferenceSnapshot:
        careers = tuple(loader.list_careers())
        components = tuple(loader.list_components())
        affinities = tuple(loader.bulk_affinities(
            [c.id for c in careers],
            [c.id for c in components],
        ))
        logger.info(
            f"📦 Reference data loaded: {len(careers)} careers, "
            f"{len(components)} components, {len(affinities)} affinities"
        )
        return ReferenceSnapshot(
            careers=careers,
            components=components,
            affinities=affinities,
        )


class CachedRepository(ReferenceRepository):
    """Serves the catalog from a ReferenceDataCache, profiles from the source."""

    def __init__(self, source: ReferenceRepository, cache: ReferenceDataCache):
        self.source = source
        self.cache = cache

    def get_profile(self, profile_id: str) -> Optional[StudentProfile]:
        return self.source.get_profile(profile_id)

    def get_country(self, country_id: str) -> Optional[Country]:
        return self.source.get_country(country_id)

    def list_careers(self) -> List[Career]:
        return list(self.cache.snapshot(self.source).careers)

    def list_components(self) -> List[AssessmentComponent]:
        return list(self.cache.snapshot(self.source).components)

    def bulk_affinities(
        self,
        career_ids: Sequence[str],
        component_ids: Sequence[str],
    ) -> List[CareerComponentAffinity]:
        careers, components = set(career_ids), set(component_ids)
        return [
            a for a in self.cache.snapshot(self.source).affinities
            if a.career_id in careers and a.component_id in components
        ]
