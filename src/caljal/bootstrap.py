from __future__ import annotations
from caljal.engines.arithmetic_leap import ArithmeticLeapEngine
from caljal.engines.converter import JalaliJulianConverter
from caljal.engines.leap_oracle import LeapYearOracle
from caljal.engines.normalizer import DateNormalizer
from caljal.engines.specs import AstronomicalLeapParams, ArithmeticLeapParams, BORKOWSKI, BIRASHK

def build_normalizer(
    astronomical: AstronomicalLeapParams = BORKOWSKI,
    arithmetic: ArithmeticLeapParams = BIRASHK,
) -> DateNormalizer:
    oracle = LeapYearOracle(astronomical, ArithmeticLeapEngine(arithmetic))
    return DateNormalizer(JalaliJulianConverter(oracle))
