"""PlanStatus value object - safety classification of a profile."""

from enum import Enum
from types import MappingProxyType


class PlanStatus(str, Enum):
    """Outcome of the safety screening.

    - APPROVED: full diet and workout plan
    - DENIED_MINOR: under 18, nothing is computed
    - RESTRICTED_ELDERLY: over 70, diet at TDEE and no exercises
    - RESTRICTED_HEALTH: cardiac risk, diet at TDEE and no exercises
    """

    APPROVED = "approved"
    DENIED_MINOR = "denied_minor"
    RESTRICTED_ELDERLY = "restricted_elderly"
    RESTRICTED_HEALTH = "restricted_health"

    def justification(self) -> tuple:
        """Fixed justification lines shown with the status."""
        return JUSTIFICATIONS[self]


JUSTIFICATIONS = MappingProxyType({
    PlanStatus.APPROVED: (
        "Perfil apto para plano completo.",
    ),
    PlanStatus.DENIED_MINOR: (
        "Este aplicativo é exclusivo para maiores de 18 anos.",
        "O desenvolvimento fisiológico nesta fase requer acompanhamento presencial especializado.",
    ),
    PlanStatus.RESTRICTED_ELDERLY: (
        "Idade acima de 70 anos. Protocolo de segurança ativado.",
        "Exercícios não gerados. Recomendamos avaliação geriátrica.",
    ),
    PlanStatus.RESTRICTED_HEALTH: (
        "Condição cardiovascular detectada. Exercícios físicos suspensos.",
        "Necessária liberação médica por cardiologista.",
    ),
})
