"""Options for building hourly-rate reports.

This module provides the single configuration class used by the public API
and the command-line entry point.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from payroll_core.exceptions import ConfigError

DEFAULT_EXTENSIONS = (".csv",)


@dataclass(frozen=True)
class ReportOptions:
    """Tunable behaviour of the payroll aggregation.

    Attributes:
        strict_pay_group: When True, pay groups only match exactly or with a
            single leading zero added/removed. The default keeps the legacy
            substring rules that tolerate partial codes in exports.
        accepted_extensions: File extensions (lower-case, with dot) accepted by
            ``process_payroll_file``.
    """

    strict_pay_group: bool = False
    accepted_extensions: tuple[str, ...] = field(default=DEFAULT_EXTENSIONS)

    def __post_init__(self) -> None:
        if not isinstance(self.strict_pay_group, bool):
            raise ConfigError(
                f"strict_pay_group must be a bool, got {type(self.strict_pay_group).__name__}"
            )
        if not self.accepted_extensions:
            raise ConfigError("accepted_extensions must not be empty")
        for ext in self.accepted_extensions:
            if not isinstance(ext, str) or not ext.startswith("."):
                raise ConfigError(f"Invalid file extension {ext!r}: expected a string like '.csv'")

    @classmethod
    def from_values(
        cls,
        strict_pay_group: bool = False,
        accepted_extensions: list[str] | tuple[str, ...] | None = None,
    ) -> ReportOptions:
        """Create ReportOptions, normalising extensions to lower case.

        Args:
            strict_pay_group: Enable exact/zero-padding-only pay group matching.
            accepted_extensions: Optional extensions, with or without case
                differences (".CSV" becomes ".csv").

        Returns:
            ReportOptions instance.

        Raises:
            ConfigError: If any value is invalid.

        Examples:
            >>> ReportOptions.from_values(accepted_extensions=[".CSV", ".txt"]).accepted_extensions
            ('.csv', '.txt')
        """
        if accepted_extensions is None:
            extensions = DEFAULT_EXTENSIONS
        else:
            extensions = tuple(
                ext.lower() if isinstance(ext, str) else ext for ext in accepted_extensions
            )
        return cls(strict_pay_group=strict_pay_group, accepted_extensions=extensions)

    def accepts(self, file_name: str) -> bool:
        """Return True if ``file_name`` ends with an accepted extension."""
        lowered = file_name.lower()
        return any(lowered.endswith(ext) for ext in self.accepted_extensions)
