"""
Unit tests for the training service business logic.
"""

import pytest

from backoffice.dal.local_store import LocalManualStore
from backoffice.logic.training_service import TrainingModuleNotFoundError, TrainingService, UnitNotFoundError
from backoffice.models.output import UnitSummary


@pytest.fixture
def service(manual_dir) -> TrainingService:
    return TrainingService(manual_store=LocalManualStore(manual_dir), max_module=5, max_unit=6)


class TestTrainingService:
    """Test cases for TrainingService."""

    def test_get_unit_attaches_reflection(self, service):
        unit = service.get_unit(1, 1)

        assert unit.title == "Welcome to the Team"
        assert unit.reflection == ["What does hospitality mean to you?", "Which value resonates most?"]

    def test_get_unit_without_workbook(self, service):
        unit = service.get_unit(2, 1)

        assert unit.title == "Taking Orders"
        assert unit.trainer == "Demetri"
        assert unit.reflection == []

    def test_missing_module(self, service):
        with pytest.raises(TrainingModuleNotFoundError) as exc_info:
            service.get_unit(4, 1)

        assert exc_info.value.error_code == "RESOURCE_NOT_FOUND"
        assert exc_info.value.resource_id == "4"

    def test_missing_unit(self, service):
        with pytest.raises(UnitNotFoundError) as exc_info:
            service.get_unit(1, 3)

        assert exc_info.value.resource_id == "1.3"

    def test_list_units(self, service):
        assert service.list_units(1) == [
            UnitSummary(unit_number=1, title="Welcome to the Team"),
            UnitSummary(unit_number=2, title="Opening Procedures"),
        ]

    def test_build_all(self, service):
        units = service.build_all()

        assert sorted(units) == ["module_1_unit_1", "module_1_unit_2", "module_2_unit_1"]
        assert units["module_1_unit_2"].reflection == ["What step is easiest to forget?"]

    def test_unit_bounds_limit_listing(self, manual_dir):
        service = TrainingService(manual_store=LocalManualStore(manual_dir), max_module=5, max_unit=1)

        assert [summary.unit_number for summary in service.list_units(1)] == [1]

    def test_default_trainer_is_configurable(self, manual_dir):
        service = TrainingService(manual_store=LocalManualStore(manual_dir), default_trainer="Sam")

        assert service.get_unit(1, 2).trainer == "Sam"
