# Third-party
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Local imports
from localcas.core.models import ObjectInfo
from localcas.services.object_service import ObjectService

# -----------------------------
# Display Service
# -----------------------------


class DisplayService:
    """Service for Rich console formatting of stored objects."""

    def __init__(
        self,
        object_service: ObjectService,
        console: Console | None = None,
    ) -> None:
        self.object_service: ObjectService = object_service
        self.console = console or Console()

    # -----------------------------
    # Display Operations
    # -----------------------------

    def show_object_info(self, hash_val: str) -> None:
        """Display a panel describing one stored object.

        Args:
            hash_val: Lowercase hex digest
        """
        info: ObjectInfo = self.object_service.info(hash_val)
        self.console.print(self._format_info_panel(info))

    def show_objects_table(self, kind: str | None = None) -> None:
        """Display all stored objects in a rich table.

        Args:
            kind: Optional kind to filter by
        """
        infos: list[ObjectInfo] = self.object_service.list_objects(kind=kind)

        table: Table = Table(
            title="Objects", show_header=True, header_style="bold magenta"
        )
        table.add_column("Digest", style="yellow")
        table.add_column("Kind", style="cyan")
        table.add_column("Size", justify="right", style="white")
        table.add_column("Stored", justify="right", style="white")

        for info in infos:
            table.add_row(
                info.digest,
                info.kind,
                f"{info.size:,}",
                f"{info.stored_size:,}",
            )

        self.console.print(table)

    # -----------------------------
    # Formatting Helpers
    # -----------------------------

    def _format_info_panel(self, info: ObjectInfo) -> Panel:
        ratio: str = f"{info.stored_size / info.size:.2f}" if info.size else "-"
        sections: list[str] = [
            f"[bold cyan]Digest:[/] {info.digest}",
            f"[bold cyan]Kind:[/] {info.kind}",
            f"[bold cyan]Size:[/] {info.size:,} bytes",
            f"[bold cyan]Stored:[/] {info.stored_size:,} bytes (ratio {ratio})",
            f"[bold cyan]Path:[/] {info.path}",
        ]
        return Panel(
            "\n".join(sections),
            title=f"Object: {info.short_digest}",
            border_style="bright_blue",
        )
