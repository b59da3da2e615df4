"""Validator module for airport sets before a graph build."""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional
from pydantic import BaseModel
from .models.airport import Airport
from .config import LATITUDE_RANGE, LONGITUDE_RANGE

logger = logging.getLogger(__name__)


class AirportValidationError(ValueError):
    """Raised when an airport set cannot be used to build a graph."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message)
        self.details = details or {}


class DuplicateAirportCodeError(AirportValidationError):
    """Raised when two airports in the same set share a code."""

    def __init__(self, codes: List[str]):
        super().__init__(
            f"Duplicate airport codes: {', '.join(codes)}",
            details={"codes": codes},
        )
        self.codes = codes


class ValidationReport(BaseModel):
    """Validation report with errors, warnings and duplicate codes."""

    errors: List[str]
    warnings: List[str]
    duplicate_codes: List[str] = []

    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0


class Validator:
    """Validates airport sets before they are turned into a route graph."""

    def validate_airports(self, airports: Iterable[Airport]) -> ValidationReport:
        """
        Validate an airport set.

        Args:
            airports: Airports to check

        Returns:
            ValidationReport with errors and warnings
        """
        airports = list(airports)
        errors = []
        warnings = []

        counts = Counter(airport.code for airport in airports)
        duplicate_codes = sorted(code for code, count in counts.items() if count > 1)
        for code in duplicate_codes:
            errors.append(f"Airport code {code} appears {counts[code]} times")

        for airport in airports:
            if not LATITUDE_RANGE[0] <= airport.lat <= LATITUDE_RANGE[1]:
                errors.append(f"Airport {airport.code}: latitude {airport.lat} out of range")
            if not LONGITUDE_RANGE[0] <= airport.lng <= LONGITUDE_RANGE[1]:
                errors.append(f"Airport {airport.code}: longitude {airport.lng} out of range")
            if airport.fees < 0:
                errors.append(f"Airport {airport.code}: negative fee {airport.fees}")

        if len(airports) < 2:
            warnings.append(
                f"Airport set has {len(airports)} airport(s); no routes can be generated"
            )

        report = ValidationReport(
            errors=errors, warnings=warnings, duplicate_codes=duplicate_codes
        )

        for warning in warnings:
            logger.warning(warning)
        if not report.is_valid():
            logger.error(f"Airport validation failed with {len(errors)} error(s)")

        return report

    def check_airports(self, airports: Iterable[Airport]) -> ValidationReport:
        """
        Validate an airport set and raise on the first class of error found.

        Args:
            airports: Airports to check

        Returns:
            ValidationReport (only when valid)

        Raises:
            DuplicateAirportCodeError: If codes are not unique
            AirportValidationError: On any other validation error
        """
        report = self.validate_airports(airports)
        if report.duplicate_codes:
            raise DuplicateAirportCodeError(report.duplicate_codes)
        if not report.is_valid():
            raise AirportValidationError(
                "; ".join(report.errors), details={"errors": report.errors}
            )
        return report
