from formguard.core.validators import password_checks
from formguard.store.models import StrengthScore, StrengthTier

# score -> tier; every satisfied rule is worth exactly one point
_TIERS = {
    0: StrengthTier.WEAK,
    1: StrengthTier.WEAK,
    2: StrengthTier.FAIR,
    3: StrengthTier.FAIR,
    4: StrengthTier.GOOD,
    5: StrengthTier.STRONG,
}


def score_strength(password: str) -> StrengthScore:
    """
    Coarse strength signal for the meter.
    Independent of validate_password: "Abc12345" is GOOD here but still invalid there.
    """
    if not password:
        return StrengthScore(score=0, tier=StrengthTier.UNSET)
    score = sum(1 for ok in password_checks(password).values() if ok)
    return StrengthScore(score=score, tier=_TIERS[score])
