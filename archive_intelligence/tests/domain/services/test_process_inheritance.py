"""
Unit Tests for ProcessInheritanceResolver Domain Service
"""

import pytest

from archive_intelligence.domain.archives.services.archive_search import (
    ArchiveSearchGateway,
)
from archive_intelligence.domain.archives.services.process_inheritance import (
    ProcessInheritanceResolver,
    material_change,
)
from archive_intelligence.domain.archives.value_objects.enums import (
    ImplementationComplexity,
)
from archive_intelligence.domain.archives.value_objects.order import TargetPartSpecs
from archive_intelligence.infrastructure.repositories.in_memory_archive_repository import (
    InMemoryArchiveRepository,
)
from archive_intelligence.tests.fixtures import ArchiveFactory


@pytest.fixture
def repository() -> InMemoryArchiveRepository:
    return InMemoryArchiveRepository(
        [
            ArchiveFactory.create(),
            ArchiveFactory.create(
                "plain",
                quality_score=8.0,
                efficiency_rating=7.0,
                setup_sheets=0,
            ),
        ]
    )


@pytest.fixture
def resolver(repository) -> ProcessInheritanceResolver:
    return ProcessInheritanceResolver(ArchiveSearchGateway(repository, timeout_seconds=1.0))


class TestMaterialChange:
    """Test adaptation notes for material changes."""

    def test_different_material(self):
        """Test a new material produces a note naming both materials."""
        note = material_change(
            ArchiveFactory.create(), TargetPartSpecs(part_name="x", material="Ti-6Al-4V")
        )

        assert note == "Material change from Aluminum 7075 to Ti-6Al-4V"

    def test_same_material_ignores_case(self):
        """Test a case-only difference is not a material change."""
        note = material_change(
            ArchiveFactory.create(),
            TargetPartSpecs(part_name="x", material="ALUMINUM 7075"),
        )

        assert note is None

    def test_unspecified_target_material(self):
        """Test no target material means no adaptation."""
        assert material_change(ArchiveFactory.create(), TargetPartSpecs(part_name="x")) is None


class TestProcessInheritanceResolver:
    """Test inheritance records built from one archive."""

    @pytest.mark.asyncio
    async def test_inherits_manufacturing_processes(self, resolver, repository):
        """Test only manufacturing tasks are inherited, with parameters."""
        inheritance = await resolver.inherit(
            "arch-1", TargetPartSpecs(part_name="Bracket RH", material="Ti-6Al-4V")
        )

        assert inheritance is not None
        assert inheritance.source_job_id == "job-arch-1"
        processes = inheritance.inherited_processes
        assert [p.process_type for p in processes] == ["Turning", "3-Axis Milling"]
        assert processes[0].process_parameters == {
            "setup_time": 45,
            "cycle_time": 12,
            "machine_type": "CNC Lathe",
            "tooling": ["turning"],
        }
        assert processes[0].historical_success is True
        assert processes[0].quality_outcome == 9.5
        assert processes[0].adaptation_required is True
        assert processes[0].adaptation_notes == (
            "Material change from Aluminum 7075 to Ti-6Al-4V",
        )

        criteria = repository.searches[0]
        assert criteria.archive_ids == ("arch-1",)
        assert criteria.include_process_data is True
        assert criteria.max_results == 1

    @pytest.mark.asyncio
    async def test_improvements_from_excellent_archive(self, resolver):
        """Test efficiency, quality and setup sheets each add improvements."""
        inheritance = await resolver.inherit("arch-1", TargetPartSpecs(part_name="x"))

        assert [o.process_step for o in inheritance.process_optimizations] == [
            "Setup preparation",
            "Operation sequence",
        ]
        (improvement,) = inheritance.quality_improvements
        assert improvement.quality_aspect == "Dimensional accuracy"
        assert improvement.expected_quality_gain == 0.5
        assert improvement.implementation_complexity == ImplementationComplexity.SIMPLE
        (setup,) = inheritance.setup_optimizations
        assert setup.time_reduction == 15
        assert setup.tooling_requirements == ("Standard tooling per setup sheet",)

    @pytest.mark.asyncio
    async def test_plain_archive_gets_only_setup_preparation(self, resolver):
        """Test an average archive yields the baseline optimization only."""
        inheritance = await resolver.inherit("plain", TargetPartSpecs(part_name="x"))

        assert [o.process_step for o in inheritance.process_optimizations] == [
            "Setup preparation"
        ]
        assert inheritance.quality_improvements == ()
        assert inheritance.setup_optimizations == ()
        assert all(not p.adaptation_required for p in inheritance.inherited_processes)

    @pytest.mark.asyncio
    async def test_missing_archive_returns_none(self, resolver):
        """Test an unknown archive id yields None rather than raising."""
        assert await resolver.inherit("missing", TargetPartSpecs(part_name="x")) is None
