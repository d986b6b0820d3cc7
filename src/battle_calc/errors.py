class BattleCalcError(Exception):
    """Base for every error raised by the calculation engine."""


class FormatError(BattleCalcError, ValueError):
    """Malformed generation range expression, Roman numeral or generation ordinal."""


class RangeViolationError(BattleCalcError):
    """A value cannot be brought into its legal range by clamping.

    Not a ValueError, so it leaves pydantic validators unwrapped.
    """


class EVSumError(RangeViolationError):
    def __init__(self, total: int, cap: int):
        super().__init__(f"The total sum of EVs may not exceed {cap}. Got {total}.")
        self.total = total
        self.cap = cap


class UnsupportedStageError(RangeViolationError):
    def __init__(self, stat: str, stage: object, detail: str):
        super().__init__(f"Unsupported stage {stage!r} for '{stat}': {detail}")
        self.stat = stat
        self.stage = stage
        self.detail = detail


class ReadOnlyStatsError(BattleCalcError):
    def __init__(self, policy: str):
        super().__init__(f"'{policy}' stat values cannot be edited after construction")
        self.policy = policy
