"""Alert sink writing alerts to the audit log."""

from budget_engine.application.ports.events import AlertSinkPort
from budget_engine.domain.models.alerts import AlertSeverity, BudgetAlert
from budget_engine.infrastructure.logging.logger import get_audit_logger


class LoggingAlertSink(AlertSinkPort):
    """Surface alerts as audit log lines, one per alert."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_audit_logger()

    def notify(
        self,
        budget_id: str,
        household_id: str,
        alerts: list[BudgetAlert],
    ) -> None:
        for alert in alerts:
            line = (
                f"[{alert.severity.value}] budget={budget_id} "
                f"household={household_id} category={alert.category_name}: "
                f"{alert.message}"
            )
            if alert.severity == AlertSeverity.CRITICAL:
                self._logger.error(line)
            else:
                self._logger.warning(line)


__all__ = ["LoggingAlertSink"]
