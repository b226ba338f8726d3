"""Structured workout models produced by the parser."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from .errors import ParsingIssue

KG_PER_LB = 0.453592
LB_PER_KG = 2.20462
KG_PER_POOD = 16.38
LB_PER_POOD = 36.11
METERS_PER_UNIT = {"m": 1.0, "km": 1000.0, "ft": 0.3048, "mi": 1609.344}


class WorkoutType(str, Enum):
    AMRAP = "amrap"
    FOR_TIME = "for_time"
    EMOM = "emom"
    INTERVALS = "intervals"
    ROUNDS = "rounds"
    TABATA = "tabata"

    @property
    def label(self) -> str:
        return _TYPE_LABELS[self]


_TYPE_LABELS = {
    WorkoutType.AMRAP: "AMRAP",
    WorkoutType.FOR_TIME: "For Time",
    WorkoutType.EMOM: "EMOM",
    WorkoutType.INTERVALS: "Intervals",
    WorkoutType.ROUNDS: "Rounds",
    WorkoutType.TABATA: "Tabata",
}


class RepSchemeType(str, Enum):
    FIXED = "fixed"
    DESCENDING = "descending"
    ASCENDING = "ascending"
    CUSTOM = "custom"


class LoadUnit(str, Enum):
    LB = "lb"
    KG = "kg"
    POOD = "pood"


class DistanceUnit(str, Enum):
    METERS = "m"
    KILOMETERS = "km"
    FEET = "ft"
    MILES = "mi"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Weight(_Frozen):
    """A single load."""

    value: float
    unit: LoadUnit
    original_text: str = ""

    def to_kg(self) -> float:
        if self.unit == LoadUnit.KG:
            return self.value
        if self.unit == LoadUnit.LB:
            return self.value * KG_PER_LB
        return self.value * KG_PER_POOD

    def to_lb(self) -> float:
        if self.unit == LoadUnit.LB:
            return self.value
        if self.unit == LoadUnit.KG:
            return self.value * LB_PER_KG
        return self.value * LB_PER_POOD

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit.value}"


class WeightPair(_Frozen):
    """RX (male) and scaled (female) loads, e.g. ``95/65 lb``."""

    male: Weight
    female: Weight
    original_text: str = ""

    def __str__(self) -> str:
        if self.male.unit == self.female.unit:
            return f"{self.male.value:g}/{self.female}"
        return f"{self.male}/{self.female}"


class PercentageLoad(_Frozen):
    """Load relative to a reference, e.g. ``70% 1RM`` or bodyweight."""

    percentage: float
    reference: str | None = Field(default=None, description="'1RM', 'bodyweight' or None")
    original_text: str = ""


class Distance(_Frozen):
    value: float
    unit: DistanceUnit
    original_text: str = ""

    def to_meters(self) -> float:
        return self.value * METERS_PER_UNIT[self.unit.value]

    def to_kilometers(self) -> float:
        return self.to_meters() / 1000.0

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit.value}"


class CaloriePair(_Frozen):
    male: int
    female: int
    original_text: str = ""

    def __str__(self) -> str:
        return f"{self.male}/{self.female} cal"


class IntervalConfig(_Frozen):
    """Work/rest intervals, e.g. ``5 x 3 min on / 1 min off``."""

    rounds: int
    work_seconds: int
    rest_seconds: int
    original_text: str = ""

    @property
    def total_seconds(self) -> int:
        return self.rounds * (self.work_seconds + self.rest_seconds)


def classify_reps(reps: list[int]) -> RepSchemeType:
    """Classify a rep sequence by its shape."""
    if all(r == reps[0] for r in reps):
        return RepSchemeType.FIXED
    pairs = list(zip(reps, reps[1:]))
    if all(a > b for a, b in pairs):
        return RepSchemeType.DESCENDING
    if all(a < b for a, b in pairs):
        return RepSchemeType.ASCENDING
    return RepSchemeType.CUSTOM


class RepScheme(_Frozen):
    """Reps per round, e.g. 21-15-9."""

    reps: list[int] = Field(min_length=2)
    scheme_type: RepSchemeType
    original_text: str = ""

    @classmethod
    def from_reps(cls, reps: list[int], original_text: str = "") -> "RepScheme":
        return cls(reps=list(reps), scheme_type=classify_reps(reps), original_text=original_text)

    @property
    def total_reps(self) -> int:
        return sum(self.reps)

    def __str__(self) -> str:
        return "-".join(str(r) for r in self.reps)


class MovementIdentity(_Frozen):
    """A movement as known to the dictionary."""

    id: int
    canonical_name: str
    display_name: str
    category: str | None = None


class ParsedMovement(_Frozen):
    """One movement line of a workout."""

    sequence_order: int = Field(ge=1)
    original_text: str
    identity: MovementIdentity | None = None
    name: str = Field(default="", description="Movement name as written")
    reps: int | None = None
    load: Weight | None = None
    load_female: Weight | None = None
    percentage: PercentageLoad | None = None
    distance: Distance | None = None
    calories: int | None = None
    calories_female: int | None = None
    duration_seconds: int | None = None
    height: str | None = None
    notes: str | None = None
    rep_scheme: RepScheme | None = None

    @property
    def is_identified(self) -> bool:
        return self.identity is not None

    @property
    def display_name(self) -> str:
        return self.identity.display_name if self.identity else self.name

    @property
    def load_pair(self) -> WeightPair | None:
        """RX/scaled loads when the line gave both."""
        if self.load is None or self.load_female is None:
            return None
        return WeightPair(male=self.load, female=self.load_female, original_text=self.load.original_text)

    @property
    def calorie_pair(self) -> CaloriePair | None:
        if self.calories is None or self.calories_female is None:
            return None
        return CaloriePair(male=self.calories, female=self.calories_female)

    @property
    def has_quantity(self) -> bool:
        return any(
            v is not None
            for v in (self.reps, self.distance, self.calories, self.duration_seconds)
        )

    @property
    def is_quantified(self) -> bool:
        return self.has_quantity or self.load is not None or self.percentage is not None

    @property
    def has_complete_data(self) -> bool:
        return self.is_identified and self.is_quantified


class ParsedWorkout(_Frozen):
    """A fully structured workout."""

    name: str | None = None
    workout_type: WorkoutType = WorkoutType.FOR_TIME
    time_cap_seconds: int | None = None
    round_count: int | None = None
    interval_seconds: int | None = None
    rep_scheme: RepScheme | None = None
    movements: list[ParsedMovement] = Field(default_factory=list)
    original_text: str = ""
    normalized_text: str | None = None

    @model_validator(mode="after")
    def _check_sequence(self) -> "ParsedWorkout":
        orders = [m.sequence_order for m in self.movements]
        if orders != list(range(1, len(orders) + 1)):
            raise ValueError(f"movement sequence must be 1..n without gaps, got {orders}")
        return self

    @computed_field
    @property
    def description(self) -> str:
        parts = [self.workout_type.label]
        if self.time_cap_seconds:
            parts.append(f"{self.time_cap_seconds // 60} min")
        if self.round_count:
            parts.append(f"{self.round_count} rounds")
        parts.append(f"{len(self.movements)} movement(s)")
        return " - ".join(parts)


class ConfidenceBreakdown(_Frozen):
    """Sub-scores that feed the overall confidence."""

    workout_type_confidence: int = 0
    time_domain_confidence: int = 0
    movement_identification_confidence: int = 0
    movements_identified: int = 0
    total_movement_lines: int = 0
    movements_with_complete_data: int = 0

    @computed_field
    @property
    def identification_rate(self) -> float:
        if self.total_movement_lines == 0:
            return 0.0
        return self.movements_identified / self.total_movement_lines * 100


class IssueRecord(_Frozen):
    """Outward shape of a parsing issue."""

    error_type: str
    code: int
    message: str
    line_number: int = 0
    original_text: str | None = None
    suggestion: str | None = None
    similar_names: list[str] | None = None

    @classmethod
    def from_issue(cls, issue: ParsingIssue) -> "IssueRecord":
        return cls(
            error_type=issue.code.tag,
            code=int(issue.code),
            message=issue.message,
            line_number=issue.line_number or 0,
            original_text=issue.context,
            suggestion=issue.suggestion,
            similar_names=issue.similar_names,
        )


def confidence_level(confidence: int) -> str:
    if confidence >= 100:
        return "Perfect"
    if confidence >= 80:
        return "High"
    if confidence >= 60:
        return "Medium"
    return "Low"


class ParseResult(_Frozen):
    """Everything a caller gets back from ``WorkoutParser.parse``."""

    success: bool
    workout: ParsedWorkout
    confidence: int = Field(ge=0, le=100)
    errors: list[IssueRecord] = Field(default_factory=list)
    warnings: list[IssueRecord] = Field(default_factory=list)
    breakdown: ConfidenceBreakdown = Field(default_factory=ConfidenceBreakdown)
    usable_threshold: int = Field(default=60, exclude=True)

    @computed_field
    @property
    def confidence_level(self) -> str:
        return confidence_level(self.confidence)

    @computed_field
    @property
    def is_usable(self) -> bool:
        return self.success and self.confidence >= self.usable_threshold
