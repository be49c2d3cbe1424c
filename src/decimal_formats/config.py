"""Library configuration via environment variables with DECFORMAT_ prefix."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from decimal_formats.models.decimal_format import DecimalFormat, Separator


class Settings(BaseSettings):
    """Decimal format handling configuration.

    All settings are read from environment variables prefixed with
    ``DECFORMAT_``. The ``output_*`` settings describe the house format that
    :func:`decimal_formats.numerals.rendering.format_numeral` renders to.
    """

    model_config = SettingsConfigDict(env_prefix="DECFORMAT_")

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # ── Output format ──────────────────────────────────────────────────────
    output_point: Separator = Separator.PERIOD
    output_group: Separator = Separator.NONE
    output_standard: bool = True

    def output_format(self) -> DecimalFormat:
        """Build the configured output format (raises if point == group)."""
        return DecimalFormat(
            point=self.output_point,
            group=self.output_group,
            standard=self.output_standard,
        )
