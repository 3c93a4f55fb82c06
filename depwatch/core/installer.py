"""
Install service implementation for depwatch.

Runs the end-to-end flow behind ``depwatch get``: fetch the package, resolve
and classify its dependency tree, show a report and ask for confirmation when
the footprint is large, then forward the request to the dependency manager.
"""
import json
import logging
from typing import List, Optional, Sequence

from depwatch.classify import DependencyClassifier, should_report
from depwatch.core.config_manager import ConfigManager
from depwatch.forwarder import CommandForwarder
from depwatch.models import ClassificationResult, PackageStats
from depwatch.prompt import ConfirmationPrompt
from depwatch.report import ReportRenderer
from depwatch.resolvers import get_resolver
from depwatch.rich_utils.ui_helpers import get_console
from depwatch.services.stats_service import GoSearchStatsService
from depwatch.utils.exceptions import DepwatchError, ForwardingError, MissingPackageError
from depwatch.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def first_package_argument(args: Sequence[str]) -> Optional[str]:
    """Return the first argument that is not a flag, or None."""
    for arg in args:
        if arg and not arg.startswith("-"):
            return arg
    return None


class InstallService:
    """Coordinates resolution, reporting, confirmation and forwarding."""

    def __init__(self):
        self.config_manager = ConfigManager()
        self.classifier = DependencyClassifier()
        self.console = get_console()
        self.renderer = ReportRenderer(self.console)

    def initialize(self, config_path: Optional[str], assume_yes: bool = False, verbose: bool = False) -> dict:
        """Load configuration, merge CLI flags and set up logging."""
        config = self.config_manager.discover_and_load_config(config_path)
        config = self.config_manager.merge_config_and_args(config, assume_yes=assume_yes, verbose=verbose)

        logging_config = config.get("logging", {})
        configure_logging(logging_config.get("level", "WARNING"), logging_config.get("file"))
        return config

    def analyze(self, package: str, config: dict) -> ClassificationResult:
        """Resolve ``package`` and classify its dependencies."""
        resolver_config = config.get("resolver", {})
        resolver = get_resolver(resolver_config.get("name", "golist"), resolver_config)

        logger.info(f"Resolving {package} with {resolver.name}")
        tree = resolver.resolve(package)
        return self.classifier.classify(tree)

    def fetch_stats(self, package: str, config: dict) -> Optional[PackageStats]:
        """Look up package statistics, or None when disabled in config."""
        stats_config = config.get("stats", {})
        if not stats_config.get("enabled", True):
            logger.info("Stats lookup disabled, skipping")
            return None

        with GoSearchStatsService(stats_config) as service:
            return service.lookup(package)

    def execute_get(
        self,
        args: List[str],
        config_path: Optional[str] = None,
        assume_yes: bool = False,
        verbose: bool = False,
    ) -> int:
        """Execute the complete install workflow and return an exit code."""
        try:
            config = self.initialize(config_path, assume_yes=assume_yes, verbose=verbose)

            package = first_package_argument(args)
            if not package:
                raise MissingPackageError()

            forwarder = CommandForwarder(config.get("forwarding", {}), self.console)
            forwarder.fetch(args)

            result = self.analyze(package, config)
            threshold = config.get("report", {}).get("threshold", 2)

            if should_report(result, threshold):
                # Stats are fetched first so a lookup failure leaves no half-printed report
                stats = self.fetch_stats(package, config)
                self.renderer.render(package, result, stats)

                if config.get("assume_yes"):
                    logger.info("Confirmation skipped (--yes)")
                elif not ConfirmationPrompt(self.console).ask(package):
                    return 0
            else:
                logger.info(f"{package} has {result.total_count} dependencies, skipping report")

            forwarder.ensure(args)
            return 0

        except ForwardingError as e:
            self._report_error(e)
            return e.returncode if e.returncode and e.returncode > 0 else 1
        except DepwatchError as e:
            self._report_error(e)
            return 1
        except KeyboardInterrupt:
            self.console.print("\n⚠️ Interrupted by user")
            return 130

    def execute_inspect(
        self,
        package: str,
        config_path: Optional[str] = None,
        as_json: bool = False,
        with_stats: bool = True,
        verbose: bool = False,
    ) -> int:
        """Resolve and report on ``package`` without prompting or forwarding."""
        try:
            config = self.initialize(config_path, verbose=verbose)
            if not package:
                raise MissingPackageError()

            result = self.analyze(package, config)
            stats = self.fetch_stats(package, config) if with_stats else None

            if as_json:
                payload = {"package": package, **result.to_dict()}
                if stats is not None:
                    payload["stats"] = {
                        "package": stats.package,
                        "star_count": stats.star_count,
                        "imported_count": stats.imported_count,
                        "static_rank": stats.static_rank,
                    }
                self.console.print_json(json.dumps(payload))
            else:
                self.renderer.render(package, result, stats)
            return 0

        except DepwatchError as e:
            self._report_error(e)
            return 1
        except KeyboardInterrupt:
            self.console.print("\n⚠️ Interrupted by user")
            return 130

    def _report_error(self, error: DepwatchError) -> None:
        logger.debug("depwatch failed", exc_info=error)
        self.console.print(f"❌ {error}", markup=False, highlight=False)
