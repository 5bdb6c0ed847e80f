from typing import Optional


class NeteroError(Exception):
    """Base class for every failure raised by netero itself."""


class ConfigurationError(NeteroError):
    pass


class UnknownScenarioError(ConfigurationError):
    def __init__(self, scenario: str):
        self.scenario = scenario
        super().__init__(f'Scenario "{scenario}" not found in config.')


class UnknownStepError(ConfigurationError):
    def __init__(self, step: str, scenario: str):
        self.step = step
        self.scenario = scenario
        super().__init__(f'Step "{step}" referenced by scenario "{scenario}" not found in config.')


class CookieFormatError(ConfigurationError):
    pass


class ResolutionError(NeteroError):
    def __init__(self, xpath: str, scope: Optional[str] = None):
        self.xpath = xpath
        where = f" inside {scope!r}" if scope else ""
        super().__init__(f'No element found at "{xpath}"{where}')


class ValueAbsentError(NeteroError):
    pass


class AssertionMismatchError(NeteroError):
    def __init__(self, subject: str, actual: str, expected: str):
        self.subject = subject
        self.actual = actual
        self.expected = expected
        super().__init__(f'Expected {subject} "{actual}" to match "{expected}"')
