"""Domain exceptions for file/config boundaries and CLI diagnostics.

Resolvers and the reclassification engine never raise; these errors only
surface while loading catalogs, budgets, or configuration.
"""

from __future__ import annotations


class CatalogLoadError(RuntimeError):
    """Raised when a locale resource or steps catalog cannot be loaded."""

    def __init__(self, path: object, detail: str) -> None:
        """Initialize a load error bound to the offending source path."""

        super().__init__(f"{path}: {detail}")
        self.path = path
        self.detail = detail


class BudgetFileError(ValueError):
    """Raised when a budget JSON payload does not match the category schema."""


class CommandStageError(RuntimeError):
    """Raised when a specific CLI command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
