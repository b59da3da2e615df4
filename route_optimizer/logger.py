"""Logging and reporting module."""

import json
import logging
import logging.handlers
from pathlib import Path
from typing import Optional
from datetime import datetime

from .models.result import OptimizationResult
from .utils import format_cost, format_distance, format_duration

CONSOLE_HANDLER_NAME = "route_optimizer.console"
FILE_HANDLER_NAME = "route_optimizer.file"
HANDLER_NAMES = (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME)


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path to a rotating log file
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Drop handlers from an earlier call
    for handler in list(root_logger.handlers):
        if handler.get_name() in HANDLER_NAMES:
            root_logger.removeHandler(handler)
            handler.close()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


class QueryLogger:
    """JSON-lines logger for optimization queries."""

    def __init__(self, log_file: str = "queries.jsonl"):
        """
        Initialize query logger.

        Args:
            log_file: Path to JSON lines file
        """
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.file_handle = open(self.log_file, "a")

    def log_query(
        self,
        origin: str,
        destination: str,
        metric: str,
        result: Optional[OptimizationResult],
    ) -> None:
        """
        Log one optimization query in JSON format.

        Args:
            origin: Requested origin code
            destination: Requested destination code
            metric: Requested metric name
            result: Result of the query, or None
        """
        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "origin": origin,
            "destination": destination,
            "metric": metric,
            "found": result is not None,
        }
        if result is not None:
            log_entry.update(
                {
                    "airports": result.airports,
                    "stops": result.stops,
                    "total_distance": result.total_distance,
                    "total_cost": result.total_cost,
                    "total_time": result.total_time,
                }
            )

        json.dump(log_entry, self.file_handle)
        self.file_handle.write("\n")
        self.file_handle.flush()

    def close(self) -> None:
        """Close log file."""
        self.file_handle.close()


def generate_route_report(result: OptimizationResult, output_path: str) -> None:
    """
    Generate a report for one optimization result.

    Writes a JSON file and a text summary next to each other.

    Args:
        result: Optimization result
        output_path: Path to output file (suffix is replaced)
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    report = {
        "summary": {
            "origin": result.origin,
            "destination": result.destination,
            "metric": result.metric.value,
            "airports": result.airports,
            "stops": result.stops,
            "total_distance": result.total_distance,
            "total_cost": result.total_cost,
            "total_time": result.total_time,
        },
        "segments": [route.model_dump() for route in result.path],
    }

    # Write JSON report
    json_path = output_file.with_suffix(".json")
    with open(json_path, "w") as f:
        json.dump(report, f, indent=2)

    # Write text summary
    text_path = output_file.with_suffix(".txt")
    with open(text_path, "w") as f:
        f.write("=" * 80 + "\n")
        f.write("OPTIMIZED ROUTE REPORT\n")
        f.write("=" * 80 + "\n\n")
        f.write(f"Route: {' -> '.join(result.airports)}\n")
        f.write(f"Optimized by: {result.metric.value}\n")
        f.write(f"Stops: {result.stops}\n")
        f.write(f"Total Distance: {format_distance(result.total_distance)}\n")
        f.write(f"Total Cost: {format_cost(result.total_cost)}\n")
        f.write(f"Total Time: {format_duration(result.total_time)}\n\n")
        f.write("Segments:\n")
        for route in result.path:
            f.write(
                f"  {route.id}: {format_distance(route.distance)}, "
                f"{format_cost(route.total_cost)}, {format_duration(route.flight_time)}\n"
            )
        f.write("\n" + "=" * 80 + "\n")

    logging.info(f"Route report generated: {json_path} and {text_path}")
