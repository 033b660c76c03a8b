"""Domain exceptions raised by the budget engine."""


class BudgetEngineError(Exception):
    """Base class for every error raised by the budget engine."""


class BudgetValidationError(BudgetEngineError):
    """A budget definition violates a creation or update rule.

    Attributes:
        reason: Human-readable description of the violated rule.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidAccountError(BudgetEngineError):
    """An account definition is not acceptable for its account type."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class NotFoundError(BudgetEngineError):
    """A referenced record does not exist or belongs to another household."""


class AccountNotFoundError(NotFoundError):
    """Raised when an account id cannot be resolved."""

    def __init__(self, account_id: str) -> None:
        super().__init__(f"Account {account_id} not found")
        self.account_id = account_id


class BudgetNotFoundError(NotFoundError):
    """Raised when a budget id cannot be resolved."""

    def __init__(self, budget_id: str) -> None:
        super().__init__(f"Budget {budget_id} not found")
        self.budget_id = budget_id


__all__ = [
    "BudgetEngineError",
    "BudgetValidationError",
    "InvalidAccountError",
    "NotFoundError",
    "AccountNotFoundError",
    "BudgetNotFoundError",
]
