"""
Data Quality Core
=================
Report accumulator and status rules for warehouse checks.
"""

from dataclasses import dataclass, field

PASS = "PASS"
WARN = "WARN"
FAIL = "FAIL"

# A check within this many points below its threshold warns instead of failing
WARN_MARGIN = 15


@dataclass(frozen=True)
class CheckResult:
    category: str
    check: str
    status: str
    passed: int
    total: int
    percentage: float
    message: str = ""


@dataclass(frozen=True)
class Statistic:
    category: str
    metric: str
    value: str
    description: str = ""


@dataclass
class ValidationReport:
    """Checks (pass/warn/fail) and informational statistics."""

    checks: list[CheckResult] = field(default_factory=list)
    statistics: list[Statistic] = field(default_factory=list)

    def _count(self, status: str) -> int:
        return sum(1 for c in self.checks if c.status == status)

    @property
    def passed(self) -> int:
        return self._count(PASS)

    @property
    def failed(self) -> int:
        return self._count(FAIL)

    @property
    def warnings(self) -> int:
        return self._count(WARN)

    @property
    def total(self) -> int:
        return len(self.checks)

    def by_status(self, status: str) -> list[CheckResult]:
        return [c for c in self.checks if c.status == status]


def check_status(passed: int, total: int, threshold: int = 100) -> tuple[str, float]:
    """
    Grade a check.

    An empty check (total == 0) passes: there is nothing to violate.

    Returns:
        Tuple of (status, percentage)
    """
    pct = (passed / total * 100) if total > 0 else 100.0

    if pct >= threshold:
        return PASS, pct
    if pct >= threshold - WARN_MARGIN:
        return WARN, pct
    return FAIL, pct


def add_check(
    report: ValidationReport,
    category: str,
    check_name: str,
    passed: int,
    total: int,
    message: str = "",
    threshold: int = 100,
) -> CheckResult:
    """
    Record a check result.

    Args:
        report: ValidationReport to add check to
        category: Check category (e.g., 'REQUIRED_FIELD')
        check_name: Name of the check
        passed: Number of records that passed
        total: Total number of records checked
        message: Optional message
        threshold: Pass threshold percentage (default 100)

    Returns:
        The recorded CheckResult
    """
    status, pct = check_status(passed, total, threshold)
    result = CheckResult(
        category=category,
        check=check_name,
        status=status,
        passed=passed,
        total=total,
        percentage=round(pct, 1),
        message=message,
    )
    report.checks.append(result)
    return result


def add_stat(
    report: ValidationReport,
    category: str,
    metric: str,
    value: str,
    description: str = "",
) -> None:
    """Record a statistic (informational, no pass/fail)."""
    report.statistics.append(Statistic(category, metric, value, description))
