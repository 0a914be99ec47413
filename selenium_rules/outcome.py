from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class OutcomeStatus(Enum):
    PASSED = "passed"
    FAILED = "failed"
    SETUP_FAILED = "failed (setup error)"


@dataclass
class TestOutcome:
    """
    中文：单次用例执行结果，由宿主框架在 teardown 时提供。
    English: Outcome of one test execution, handed to every rule's teardown.
    """

    __test__ = False

    status: OutcomeStatus
    error: Optional[BaseException] = None
    detail: Optional[str] = None
    diagnostics: List[BaseException] = field(default_factory=list)
    teardown_errors: List[BaseException] = field(default_factory=list)

    @classmethod
    def success(cls) -> "TestOutcome":
        return cls(OutcomeStatus.PASSED)

    @classmethod
    def failure(cls, error: BaseException | None = None, detail: str | None = None) -> "TestOutcome":
        return cls(OutcomeStatus.FAILED, error=error, detail=detail or _describe(error))

    @classmethod
    def setup_failure(cls, error: BaseException | None = None, detail: str | None = None) -> "TestOutcome":
        return cls(OutcomeStatus.SETUP_FAILED, error=error, detail=detail or _describe(error))

    @property
    def passed(self) -> bool:
        return self.status is OutcomeStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status is not OutcomeStatus.PASSED

    @property
    def body_failed(self) -> bool:
        return self.status is OutcomeStatus.FAILED


def _describe(error: BaseException | None) -> str | None:
    if error is None:
        return None
    return f"{type(error).__name__}: {error}"
