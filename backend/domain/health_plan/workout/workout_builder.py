"""WorkoutBuilder - conditional home workout plan."""

from typing import List, Tuple

from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.health_flags import HealthFlags
from ..core.value_objects.plan_result import Exercise, WorkoutPlan
from ..core.value_objects.plan_status import PlanStatus
from ..core.value_objects.profile import Profile
from .exercise_guide import BURPEE, CRUNCH, EXERCISE_GUIDE, LUNGE, PLANK, PUSH_UP, SQUAT

WORKOUT_TYPE = "Treino em Casa (Peso do Corpo)"
WORKOUT_FOCUS = "Mobilidade, Resistência e Calistenia Básica"
DEFAULT_CARDIO = "Polichinelos, Marcha estacionária ou Dança"
LOW_INTENSITY_CARDIO = "Caminhada leve no local (sem picos de intensidade)."

BREATHING_CAUTION = " Não prenda a respiração."
PLANK_CAUTION = " Evite apnéia."
YOUNG_AGE_LIMIT = 25

# (name, sets, reps, note)
BASE_PROGRAM: Tuple[Tuple[str, str, str, str], ...] = (
    (SQUAT, "3", "12-15", "Mantenha a postura ereta."),
    (PUSH_UP, "3", "8-12", "Contraia o abdômen."),
    (CRUNCH, "3", "15-20", "Movimento curto e controlado."),
    (PLANK, "3", "20-30s", "Corpo alinhado."),
    (LUNGE, "3", "10 cada", "Cuidado com o equilíbrio."),
)
CONDITIONING_EXERCISE = (BURPEE, "3", "8-10", "Para condicionamento.")

CARDIAC_REASON = "Risco cardíaco. Necessária liberação médica."
SENIOR_REASON = "Protocolo sênior: Avaliação presencial recomendada."

BASE_WARNINGS = (
    "Consulte um profissional de educação física antes de iniciar.",
    "Respeite seus limites e pare se sentir dor.",
    "Mantenha a postura correta em todos os exercícios.",
)
VALSALVA_WARNING = "Evite prender a respiração (manobra de Valsalva)."


class WorkoutBuilder:
    """Build the workout section of the plan.

    Only approved profiles get exercises. Hypertensive profiles get
    breathing cautions and low-intensity cardio; profiles under 25
    without hypertension get an extra conditioning exercise.
    """

    def build(self, profile: Profile, flags: HealthFlags, status: PlanStatus) -> WorkoutPlan:
        warnings = self.warnings(flags)

        if status != PlanStatus.APPROVED:
            reason = CARDIAC_REASON if flags.heart_condition else SENIOR_REASON
            return WorkoutPlan(allowed=False, reason=reason, warnings=warnings)

        program: List[Tuple[str, str, str, str]] = list(BASE_PROGRAM)
        if profile.age < YOUNG_AGE_LIMIT and not flags.hypertensive:
            program.append(CONDITIONING_EXERCISE)

        exercises = tuple(
            _exercise(name, sets, reps, note, flags.hypertensive)
            for name, sets, reps, note in program
        )

        return WorkoutPlan(
            allowed=True,
            type=WORKOUT_TYPE,
            frequency="3x semana" if profile.activity_level == ActivityLevel.SEDENTARY else "5x semana",
            exercises=exercises,
            cardio=LOW_INTENSITY_CARDIO if flags.hypertensive else DEFAULT_CARDIO,
            focus=WORKOUT_FOCUS,
            warnings=warnings,
        )

    @staticmethod
    def warnings(flags: HealthFlags) -> Tuple[str, ...]:
        lines = list(BASE_WARNINGS)
        if flags.hypertensive:
            lines.append(VALSALVA_WARNING)
        return tuple(lines)


def _exercise(name: str, sets: str, reps: str, note: str, hypertensive: bool) -> Exercise:
    if hypertensive:
        note += BREATHING_CAUTION
        if name == PLANK:
            note += PLANK_CAUTION
    return Exercise(
        name=name,
        sets=sets,
        reps=reps,
        note=note,
        guide=EXERCISE_GUIDE.get(name),
    )
