"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy RuleService construction and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from redirectctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from redirectctl.config.settings import RedirectSettings
    from redirectctl.plugins.event_bus import EventBus
    from redirectctl.services.result import ServiceResult
    from redirectctl.services.rules import RuleService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The rule service is
    lazily initialized on first use so ``--help`` and ``--version`` never
    touch the rule file or load plugins.
    """

    def __init__(self, settings: RedirectSettings) -> None:
        self.settings = settings
        self._rules: RuleService | None = None

        from redirectctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            log_changes=settings.plugins.enabled and settings.plugins.log_changes,
        )

    @property
    def rules(self) -> RuleService:
        """The rule service (created lazily on first access)."""
        if self._rules is None:
            from redirectctl.infrastructure.store import RuleStore
            from redirectctl.services.rules import RuleService

            store = RuleStore(self.settings.store_path, key=self.settings.store.key)
            self._rules = RuleService(
                store,
                event_bus=self._build_event_bus(),
                warn_subdomain_mismatch=self.settings.validation.warn_subdomain_mismatch,
            )
        return self._rules

    def _build_event_bus(self) -> EventBus | None:
        plugins = self.settings.plugins
        if not plugins.enabled:
            return None

        from redirectctl.plugins import EventBus, PluginManager

        manager = PluginManager()
        manager.discover_and_load()
        if plugins.log_changes:
            from redirectctl.plugins.builtins.changelog import ChangeLogPlugin

            manager.register_plugin(ChangeLogPlugin(), name="changelog")
        return EventBus(manager)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
