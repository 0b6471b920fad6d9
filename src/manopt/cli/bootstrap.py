"""The "Common options" category every manopt program carries.

``--locale-dir``, ``--logger-type``, ``--help``, ``--version`` and the
hidden roff flag are built here and wired to the shared
:class:`~manopt.core.models.Options` record.

Descriptions are translated while the switches are *built*, so the
caller must have bound the translator (see
:class:`~manopt.core.prescan.Prescanner`) before calling
:meth:`Bootstrapper.install`.
"""

from __future__ import annotations

from typing import NoReturn

from manopt.cli import exit_codes
from manopt.cli.config import ConsoleConfig
from manopt.cli.console import write_stdout
from manopt.core.models import CategoryHeading, Options, Separator, Switch
from manopt.core.protocols import LoggerTypeSource, LoggerVariant, Translator
from manopt.core.registry import OptionRegistry
from manopt.core.renderers import PlainTextRenderer, RoffRenderer
from manopt.exceptions import InvalidChoiceError


class Bootstrapper:
    """Appends the common options to a registry.

    Parameters
    ----------
    config:
        Session settings (option spellings, version, roff visibility).
    translator:
        Catalog used for every user-visible string.
    logger_types:
        Source of selectable logger variants, read once here.
    """

    def __init__(
        self,
        config: ConsoleConfig,
        translator: Translator,
        logger_types: LoggerTypeSource,
    ) -> None:
        self._config: ConsoleConfig = config
        self._translator: Translator = translator
        self._variants: tuple[LoggerVariant, ...] = tuple(logger_types.variants())

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def install(self, registry: OptionRegistry, options: Options) -> None:
        """Append the "Common options" category and the tail switches."""
        _ = self._translator.translate
        registry.append(CategoryHeading(_("Common options")))

        self._install_locale_option(registry, options)
        self._install_logger_option(registry, options)
        self._install_tail_options(registry, options)

    def logger_type_names(self) -> list[str]:
        return [variant.display_name.lower() for variant in self._variants]

    def find_logger_variant(self, name: str) -> LoggerVariant:
        """Return the variant whose display name matches *name*, ignoring case.

        Raises
        ------
        InvalidChoiceError
            If no variant has that name.
        """
        wanted = name.lower()
        for variant in self._variants:
            if variant.display_name.lower() == wanted:
                return variant
        raise InvalidChoiceError(name, tuple(self.logger_type_names()))

    # ------------------------------------------------------------------
    # Option groups
    # ------------------------------------------------------------------

    def _install_locale_option(self, registry: OptionRegistry, options: Options) -> None:
        _ = self._translator.translate

        def on_locale_dir(value: str | None) -> None:
            self._translator.bind(value)
            options.locale_dir = value

        registry.append(
            Switch(
                long_form=self._config.locale_dir_option,
                argument="DIR",
                description=(
                    _("Specify locale dir as [DIR]."),
                    _("(auto)"),
                ),
                handler=on_locale_dir,
            )
        )
        registry.append(Separator(""))

    def _install_logger_option(self, registry: OptionRegistry, options: Options) -> None:
        _ = self._translator.translate

        def on_logger_type(value: str | None) -> None:
            try:
                variant = self.find_logger_variant(value or "")
            except InvalidChoiceError as exc:
                # Unknown names fall back to the default logger instead of failing.
                options.logger = options.default_logger
                options.default_logger.warning(
                    _("Unknown logger type: %s") % exc.value,
                )
                return
            options.logger = variant()

        registry.append(
            Switch(
                long_form="--logger-type",
                argument="TYPE",
                description=(
                    _("Specify logger type as [TYPE]."),
                    _("Select from [%s].") % ", ".join(self.logger_type_names()),
                    _("Note: case insensitive."),
                    f"({options.logger.display_name})",
                ),
                handler=on_logger_type,
            )
        )
        registry.append(Separator(""))

    def _install_tail_options(self, registry: OptionRegistry, options: Options) -> None:
        _ = self._translator.translate

        def on_help(value: str | None) -> None:
            lines = PlainTextRenderer().render(registry)
            self._output_info_and_exit(options, "\n".join(lines) + "\n")

        def on_version(value: str | None) -> None:
            self._output_info_and_exit(options, f"{self._config.version}\n")

        def on_roff(value: str | None) -> None:
            renderer = RoffRenderer(title=self._config.program_name)
            write_stdout("\n".join(renderer.render(registry)) + "\n")
            raise SystemExit(exit_codes.SUCCESS)

        registry.append(
            Switch(long_form="--help", description=(_("Show this message."),), handler=on_help),
            tail=True,
        )
        registry.append(
            Switch(long_form="--version", description=(_("Show version."),), handler=on_version),
            tail=True,
        )
        registry.append(
            Switch(
                long_form=self._config.roff_option,
                description=(_("Print this option summary as a roff manual page."),),
                handler=on_roff,
                hidden=not self._config.show_roff_in_summary,
            ),
            tail=True,
        )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @staticmethod
    def _output_info_and_exit(options: Options, message: str) -> NoReturn:
        """Print *message* and terminate successfully.

        Output goes straight to stdout while the default logger is still
        active; once ``--logger-type`` picked another logger, it goes
        through that logger's info channel instead.
        """
        if options.uses_default_logger:
            write_stdout(message)
        else:
            options.logger.info(message.rstrip("\n"))
        raise SystemExit(exit_codes.SUCCESS)
