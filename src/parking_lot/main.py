"""Main application entry point."""

import logging
import sys
from typing import Optional, TextIO

from .config import AppConfig, get_config_path, load_config
from .driver import ParkingDriver
from .metrics import write_metrics
from .state.registry import FacilityRegistry
from .storage.text_store import TextStore

logger = logging.getLogger(__name__)


def configure_logging(config: AppConfig) -> None:
    """Configure root logging from the application config."""
    logging.basicConfig(
        level=getattr(logging, config.logging.level),
        format=config.logging.format,
    )


def resolve_config(argv: list[str]) -> AppConfig:
    """
    Load the config named on the command line, or the default one if present.

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        OSError: If the config file can't be read
        ValueError: If the config is invalid
    """
    if argv:
        return load_config(argv[0])

    default_path = get_config_path()
    if default_path.exists():
        return load_config(default_path)

    return AppConfig()


def run(
    config: AppConfig,
    input_stream: Optional[TextIO] = None,
    output_stream: Optional[TextIO] = None,
) -> int:
    """
    Run one operator session against the configured facility.

    Returns:
        Process exit code
    """
    out = output_stream if output_stream is not None else sys.stdout

    store = TextStore(config.facility.store_path)
    registry = FacilityRegistry(store, capacity=config.facility.capacity)
    if store.found:
        print("Previous data loaded.", file=out)

    driver = ParkingDriver(registry, input_stream, out)
    try:
        driver.run()
    finally:
        print("System shutting down. Goodbye!", file=out)

        if registry.close():
            print("Data saved successfully.", file=out)
        else:
            print("Error: Could not open file for saving.", file=out)

        if config.metrics.enabled:
            try:
                path = write_metrics(config.metrics.output_path)
                logger.info(f"Wrote metrics to {path}")
            except OSError as e:
                logger.error(f"Failed to write metrics: {e}")

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Run the application."""
    args = sys.argv[1:] if argv is None else argv

    if args and args[0] in ("-h", "--help"):
        print("Usage: parking-lot [config_path]")
        print("\nExample:")
        print("  parking-lot config/config.yaml")
        return 0

    try:
        config = resolve_config(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    configure_logging(config)
    logger.info("Starting Parking Lot Manager...")

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
