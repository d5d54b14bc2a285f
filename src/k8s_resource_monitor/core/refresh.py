"""Fetch, project, and render loop.

One tick fetches the configured kind, projects every item into a display
row, and renders the rows. Without watch mode the loop stops after the first
tick. In watch mode it clears the screen, prints a banner, sleeps for the
interval, and ticks again until the process is interrupted.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import structlog

from k8s_resource_monitor.core.errors import classify_error
from k8s_resource_monitor.core.resources import get_definition
from k8s_resource_monitor.integrations.kubernetes.exceptions import KubernetesError

if TYPE_CHECKING:
    from k8s_resource_monitor.cli.output.formatters import ResourceFormatter
    from k8s_resource_monitor.core.config.models import RefreshConfig
    from k8s_resource_monitor.services.kubernetes.resource_manager import ResourceManager

logger = structlog.get_logger()


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RefreshLoop:
    """Drives repeated fetch-project-render cycles for one resource kind.

    Example:
        >>> loop = RefreshLoop(config, ResourceManager(client), get_formatter("table"))
        >>> loop.run()
    """

    def __init__(
        self,
        config: RefreshConfig,
        manager: ResourceManager,
        formatter: ResourceFormatter,
        *,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the loop.

        Args:
            config: Immutable run settings.
            manager: Fetches resource summaries from the cluster.
            formatter: Renders rows and errors to the console.
            sleep: Delay function used between watch ticks.
            clock: Source of the reference instant for ages.
        """
        self._config = config
        self._manager = manager
        self._formatter = formatter
        self._sleep = sleep
        self._clock = clock
        self._definition = get_definition(config.resource)
        self._log = logger.bind(kind=config.resource.value, namespace=config.namespace)

    @property
    def banner(self) -> str:
        """Status line shown between watch ticks."""
        return (
            f"Watching {self._definition.plural} in namespace "
            f"{self._config.namespace} (Ctrl+C to exit)..."
        )

    def tick(self) -> bool:
        """Run one fetch-project-render cycle.

        Fetch failures are reported through the formatter and do not raise.

        Returns:
            True if a table was rendered, False if the fetch failed.
        """
        try:
            items = self._manager.list_resources(self._config.resource, self._config.namespace)
        except KubernetesError as e:
            self._log.info("refresh_tick_failed", error=str(e), error_kind=e.kind.value)
            self._formatter.format_error(classify_error(e))
            return False

        now = self._clock()
        rows = [item.to_row(now) for item in items]
        self._formatter.format_rows(self._definition, rows)
        return True

    def run(self) -> None:
        """Tick once, or forever in watch mode."""
        console = self._formatter.console
        while True:
            self.tick()
            if not self._config.watch:
                return

            console.clear()
            console.print(self.banner, markup=False, highlight=False, emoji=False)
            self._log.debug("refresh_sleeping", interval=self._config.interval)
            self._sleep(self._config.interval)
