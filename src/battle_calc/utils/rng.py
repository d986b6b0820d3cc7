from battle_calc.constants import DAMAGE_RANDOM_MIN, DAMAGE_RANDOM_RANGE


class DamageRng:
    """Seedable source of damage rolls.

    Linear congruential generator: seed = (seed * 1664525 + 1013904223) mod 2^32
    """

    def __init__(self, seed: int = 0):
        self.seed = seed & 0xFFFFFFFF

    def advance(self) -> int:
        """Advance the LCG and return the new 32-bit seed."""
        self.seed = (self.seed * 1664525 + 1013904223) & 0xFFFFFFFF
        return self.seed

    def rand16(self) -> int:
        """Advance and return the upper 16 bits (0..65535)."""
        self.advance()
        return (self.seed >> 16) & 0xFFFF

    def roll_percent(self) -> int:
        """Random damage percentage in [85, 100]."""
        return DAMAGE_RANDOM_MIN + self.rand16() % DAMAGE_RANDOM_RANGE
