from selenium_rules.outcome import TestOutcome


class LifecycleRule:
    """
    中文：环绕用例执行的生命周期规则基类。
    English: Base class for rules wrapped around a test execution.

    setup() runs before the test body, teardown() after it with the
    outcome. A rule whose setup() returned normally always gets its
    teardown() call.
    """

    name = "rule"

    def setup(self, description: str) -> None:
        pass

    def teardown(self, outcome: TestOutcome) -> None:
        pass

    def __repr__(self):
        return f"<{type(self).__name__}>"
