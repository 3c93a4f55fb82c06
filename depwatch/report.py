"""
Human-readable dependency footprint report.
"""
from typing import Optional

from rich.console import Console
from rich.markup import escape

from depwatch.models import ClassificationResult, PackageStats


class ReportRenderer:
    """Prints classification results and package statistics to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, package: str, result: ClassificationResult, stats: Optional[PackageStats] = None) -> None:
        """Print both dependency lists, the summary line and, if given, the stats line."""
        self._render_list("Direct dependencies", result.direct)
        self.console.print()
        self._render_list("Indirect dependencies", result.indirect)
        self.console.print()
        self.render_summary(package, result)
        if stats is not None:
            self.render_stats(stats)

    def render_summary(self, package: str, result: ClassificationResult) -> None:
        self.console.print(
            f"Package [bold]{escape(package)}[/bold] has a total of [bold]{result.total_count}[/bold] "
            f"dependencies, of which [bold]{len(result.direct)}[/bold] are direct dependencies "
            f"and [bold]{len(result.indirect)}[/bold] indirect dependencies",
            soft_wrap=True,
        )

    def render_stats(self, stats: PackageStats) -> None:
        self.console.print(
            f" \\- used in [bold]{stats.imported_count}[/bold] other packages, "
            f"has [bold]{stats.star_count}[/bold] stars and a ranking of [bold]{stats.static_rank}[/bold]",
            soft_wrap=True,
        )

    def _render_list(self, title: str, names) -> None:
        self.console.print(f"[bold]{title} ({len(names)}):[/bold]")
        # names are printed verbatim, never as markup
        self.console.print(" " + ", ".join(names), markup=False, highlight=False, soft_wrap=True)
