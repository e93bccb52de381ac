"""
Business Logic Layer for training content.

Coordinates the manual store with the unit and reflection parsers and
raises service errors the handler layer maps to HTTP responses.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from aws_lambda_powertools.metrics import MetricUnit

from backoffice.dal import ManualStore
from backoffice.handlers.utils.errors import ErrorContext, ResourceNotFoundError
from backoffice.handlers.utils.observability import logger, metrics, tracer
from backoffice.logic.reflection import parse_reflection_questions
from backoffice.logic.unit_parser import parse_unit
from backoffice.models.output import UnitSummary
from backoffice.models.unit import ModuleDocument, TrainingUnit


class TrainingModuleNotFoundError(ResourceNotFoundError):
    """Raised when no main document exists for a module."""

    def __init__(self, module_number: int, context: Optional[ErrorContext] = None):
        super().__init__(resource_type="Module", resource_id=str(module_number), context=context)
        self.module_number = module_number


class UnitNotFoundError(ResourceNotFoundError):
    """Raised when a module document has no heading for the unit."""

    def __init__(self, module_number: int, unit_number: int, context: Optional[ErrorContext] = None):
        super().__init__(resource_type="Unit", resource_id=f"{module_number}.{unit_number}", context=context)
        self.module_number = module_number
        self.unit_number = unit_number


class TrainingService:
    """Business logic service for training manual content."""

    def __init__(
        self,
        manual_store: ManualStore,
        max_module: int = 5,
        max_unit: int = 6,
        default_trainer: str = 'Demetri',
    ):
        """
        Initialize training service.

        Args:
            manual_store: Source of module and workbook documents
            max_module: Highest module number in the manual
            max_unit: Highest unit number per module
            default_trainer: Trainer reported when a unit names none
        """
        self.manual_store = manual_store
        self.max_module = max_module
        self.max_unit = max_unit
        self.default_trainer = default_trainer

        logger.info("Training service initialized", extra={
            "max_module": max_module,
            "max_unit": max_unit,
        })

    def _load_module(self, module_number: int, context: Optional[ErrorContext]) -> ModuleDocument:
        module = self.manual_store.get_module(module_number)
        if module is None:
            metrics.add_metric(name="ModuleNotFound", unit=MetricUnit.Count, value=1)
            raise TrainingModuleNotFoundError(module_number, context=context)
        return module

    def _parse(self, document: str, module_number: int, unit_number: int) -> Optional[TrainingUnit]:
        return parse_unit(
            document,
            module_number,
            unit_number,
            max_module=self.max_module,
            max_unit=self.max_unit,
            default_trainer=self.default_trainer,
        )

    @tracer.capture_method
    def get_unit(
        self,
        module_number: int,
        unit_number: int,
        context: Optional[ErrorContext] = None,
    ) -> TrainingUnit:
        """
        Get one training unit with its reflection questions.

        Raises:
            TrainingModuleNotFoundError: If the module has no main document
            UnitNotFoundError: If the module has no heading for the unit
        """
        module = self._load_module(module_number, context)

        unit = self._parse(module.content, module_number, unit_number)
        if unit is None:
            logger.warning("Unit heading not found", extra={
                "module_number": module_number,
                "unit_number": unit_number,
                "document": module.filename,
            })
            metrics.add_metric(name="UnitNotFound", unit=MetricUnit.Count, value=1)
            raise UnitNotFoundError(module_number, unit_number, context=context)

        workbook = self.manual_store.get_workbook(module_number)
        if workbook is not None:
            unit.reflection = parse_reflection_questions(workbook.content, module_number, unit_number)

        logger.info("Unit parsed", extra={
            "module_number": module_number,
            "unit_number": unit_number,
            "content_sections": len(unit.content_sections),
            "activities": len(unit.activities),
            "reflection_questions": len(unit.reflection),
        })
        return unit

    @tracer.capture_method
    def list_units(self, module_number: int, context: Optional[ErrorContext] = None) -> List[UnitSummary]:
        """List the units present in a module, in unit number order."""
        module = self._load_module(module_number, context)

        summaries = []
        for unit_number in range(1, self.max_unit + 1):
            unit = self._parse(module.content, module_number, unit_number)
            if unit is not None:
                summaries.append(UnitSummary(unit_number=unit_number, title=unit.title))
        return summaries

    def iter_all_units(self) -> Iterator[Tuple[int, int, TrainingUnit]]:
        """Yield ``(module, unit, parsed unit)`` for every unit of every module present."""
        for module_number in range(1, self.max_module + 1):
            module = self.manual_store.get_module(module_number)
            if module is None:
                logger.warning("Module document not found, skipping", extra={"module_number": module_number})
                continue

            workbook = self.manual_store.get_workbook(module_number)
            for unit_number in range(1, self.max_unit + 1):
                unit = self._parse(module.content, module_number, unit_number)
                if unit is None:
                    continue
                if workbook is not None:
                    unit.reflection = parse_reflection_questions(workbook.content, module_number, unit_number)
                yield module_number, unit_number, unit

    def build_all(self) -> Dict[str, TrainingUnit]:
        """Parse every unit, keyed by ``module_<m>_unit_<u>``."""
        return {
            f"module_{module_number}_unit_{unit_number}": unit
            for module_number, unit_number, unit in self.iter_all_units()
        }
