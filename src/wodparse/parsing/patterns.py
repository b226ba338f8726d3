"""Compiled regular expressions for functional-fitness notation.

The table is built once at import and never mutated. Helpers here only match
and pull raw numbers out of text; turning them into models is left to the
callers.
"""

import re
from types import MappingProxyType

_I = re.IGNORECASE
_MIN = r"min(?:ute)?s?"
_SEC = r"sec(?:ond)?s?"
_TIME_UNIT = rf"(?:{_MIN}|{_SEC}|s)"
_LOAD_UNIT = r"(?:lbs?|kgs?|poods?|#)"
_CAL = r"cal(?:orie)?s?"
# a whole digit run of at most six digits; longer runs never match
_N = r"(?<!\d)\d{1,6}(?!\d)"
_DEC = rf"{_N}(?:\.\d{{1,6}}(?!\d))?"

PATTERNS = MappingProxyType(
    {
        # workout type
        "amrap": re.compile(
            rf"({_N})[ \t-]*{_MIN}[ \t]*AMRAP\b"
            rf"|\bAMRAP\b(?:[ \t:]*(?:in[ \t]*)?({_N})(?:[ \t]*{_MIN})?)?",
            _I,
        ),
        "for_time": re.compile(
            rf"({_N})[ \t]*rounds?[ \t]*for[ \t]*time"
            rf"|({_N})[ \t]*RFT\b"
            r"|\bfor[ \t]*time\b"
            r"|\bcomplete[ \t]+as[ \t]+fast[ \t]+as[ \t]+possible",
            _I,
        ),
        "emom": re.compile(
            rf"(?P<total_pre>{_N})[ \t-]*{_MIN}[ \t]*E(?P<every_pre>\d{{0,6}})MOM\b"
            rf"|\bE(?P<every>{_N})MOM\b(?:[ \t]*(?:x|for)?[ \t]*(?P<total_e>{_N})(?:[ \t]*{_MIN})?)?"
            rf"|\bEMOM\b(?:[ \t:]*(?:x|for)?[ \t]*(?P<total_post>{_N})(?:[ \t]*{_MIN})?)?"
            rf"|\bevery[ \t]*(?P<every_n>{_N})?[ \t]*{_MIN}(?:[ \t]*on[ \t]*the[ \t]*{_MIN})?"
            rf"(?:[ \t]*(?:for|x)[ \t]*(?P<total_every>{_N})(?:[ \t]*{_MIN})?)?",
            _I,
        ),
        "tabata": re.compile(
            rf"\btabata\b"
            rf"|\b8[ \t]*(?:x|rounds?)?[ \t]*(?:of[ \t]*)?:?20(?!\d)[ \t]*(?:{_SEC}|s)?[ \t]*(?:on|work)?"
            rf"[ \t]*[/:,]?[ \t]*:?10(?!\d)[ \t]*(?:{_SEC}|s)?[ \t]*(?:off|rest)?",
            _I,
        ),
        "interval": re.compile(
            rf"\b(?P<rounds>{_N})[ \t]*x[ \t]*(?P<work>{_N})[ \t]*(?P<work_unit>{_TIME_UNIT})?[ \t]*(?:on|work)?"
            rf"[ \t]*[/,]?[ \t]*(?P<rest>{_N})[ \t]*(?P<rest_unit>{_TIME_UNIT})?[ \t]*(?:off|rest)\b",
            _I,
        ),
        "interval_trailing": re.compile(
            rf"\b(?P<work>{_N})[ \t]*(?P<work_unit>{_TIME_UNIT})?[ \t]*(?:on|work)[ \t]*[/,]?[ \t]*"
            rf"(?P<rest>{_N})[ \t]*(?P<rest_unit>{_TIME_UNIT})?[ \t]*(?:off|rest)[ \t]*[,]?[ \t]*"
            rf"(?:x|for)[ \t]*(?P<rounds>{_N})",
            _I,
        ),
        "rounds": re.compile(rf"\b({_N})[ \t]*(?:rounds?|sets?)\b", _I),
        "rounds_header": re.compile(
            rf"^({_N})[ \t]*(?:rounds?|sets?)\b[ \t]*(?:of|for[ \t]+quality)?[ \t]*:?$", _I
        ),
        # time
        "time_cap": re.compile(
            rf"(?:\btime[ \t]*cap|\bcap|\bTC)\b[ \t]*[:=]?[ \t]*(?:of[ \t]*)?({_N})(?::(\d{{2}}))?(?:[ \t]*{_MIN})?"
            rf"|({_N})(?::(\d{{2}}))?[ \t]*(?:{_MIN})?[ \t]*(?:time[ \t]*)?cap\b",
            _I,
        ),
        "duration": re.compile(
            rf"(?<![\d.:])({_N})[ \t]*({_MIN}|{_SEC})\b|(?<![\d:]):(\d{{2}})\b", _I
        ),
        "clock": re.compile(r"(?<![\d:])(\d{1,2}):(\d{2})(?![\d:])"),
        # rep schemes
        "rep_scheme": re.compile(rf"^({_N}(?:[ \t]*-[ \t]*{_N})+)[ \t]*(?:reps?)?[ \t]*:?$", _I),
        "dash_sequence": re.compile(rf"(?<![\w-])({_N}(?:-{_N})+)(?![\w-])"),
        "slash_scheme": re.compile(
            rf"^({_N}(?:[ \t]*/[ \t]*{_N}){{2,}})[ \t]*(?:reps?)?[ \t]*:?$", _I
        ),
        "fixed_scheme": re.compile(
            rf"\b({_N})[ \t]*(?:rounds?|sets?)[ \t]*(?:of[ \t]*)?({_N})(?![\d/])[ \t]*(?:reps?\b)?", _I
        ),
        # movement line
        "list_marker": re.compile(r"^(?:[-*•]|\d+[.)])[ \t]+"),
        "notes": re.compile(r"[ \t]*\(([^()]*)\)[ \t]*$"),
        "empty_parens": re.compile(r"[ \t]*\([ \t]*\)"),
        "leading_reps": re.compile(rf"^({_N})(?![\d.:/])(?:[ \t]*(?:x\b|reps?\b))?", _I),
        "trailing_reps": re.compile(rf"(?:\bx[ \t]*({_N})|\b({_N})[ \t]*reps?)[ \t]*$", _I),
        # loads
        "load": re.compile(rf"(?<![\d/.])({_DEC})[ \t]*({_LOAD_UNIT})(?![a-z])", _I),
        "gender_load": re.compile(
            rf"(?<![\d/.])({_DEC})[ \t]*({_LOAD_UNIT})?[ \t]*/[ \t]*({_DEC})[ \t]*({_LOAD_UNIT})?"
            rf"(?![\d.]|[ \t]*(?:/|{_CAL}|in\b|inch|\"|'|m\b|meters?\b|k\b|km\b|ft\b|mi\b|sec|min|%))",
            _I,
        ),
        "percentage": re.compile(
            rf"({_DEC})[ \t]*%[ \t]*(?:of[ \t]*)?(?:(1[ \t]*RM)|(body[ \t]*weight|BW))?", _I
        ),
        "bodyweight": re.compile(r"@[ \t]*(?:body[ \t]*weight|BW)\b|\bBW\b", _I),
        # distance, calories, height
        "distance": re.compile(
            rf"(?<![\d.])({_DEC})[ \t]*(meters?|metres?|m|km|k|ft|feet|foot|miles?|mi)\b", _I
        ),
        "calorie": re.compile(rf"(?<![\d/])({_N})[ \t]*{_CAL}\b", _I),
        "gender_calorie": re.compile(rf"(?<![\d/])({_N})[ \t]*/[ \t]*({_N})[ \t]*{_CAL}\b", _I),
        "height": re.compile(rf"(?<![\d.])({_N}(?:/{_N})?)[ \t]*(?:inch(?:es)?\b|in\b|\"|'')", _I),
        "digit": re.compile(r"\d"),
    }
)

WORKOUT_TYPE_KEYS = ("amrap", "for_time", "emom", "tabata", "rounds")
HEADER_KEYS = (
    "amrap",
    "for_time",
    "emom",
    "tabata",
    "interval",
    "interval_trailing",
    "time_cap",
    "rounds_header",
)

_LOAD_UNITS = {
    "lb": "lb",
    "lbs": "lb",
    "#": "lb",
    "kg": "kg",
    "kgs": "kg",
    "pood": "pood",
    "poods": "pood",
}

_DISTANCE_UNITS = {
    "m": "m",
    "meter": "m",
    "meters": "m",
    "metre": "m",
    "metres": "m",
    "km": "km",
    "k": "km",
    "ft": "ft",
    "feet": "ft",
    "foot": "ft",
    "mi": "mi",
    "mile": "mi",
    "miles": "mi",
}


def contains_workout_type(text: str) -> bool:
    """True if *text* names a workout type (AMRAP, For Time, EMOM, ...)."""
    return any(PATTERNS[key].search(text) for key in WORKOUT_TYPE_KEYS)


def is_header_line(line: str) -> bool:
    """True if *line* describes the workout rather than a movement."""
    return any(PATTERNS[key].search(line) for key in HEADER_KEYS)


def has_digit(text: str) -> bool:
    return PATTERNS["digit"].search(text) is not None


def _split_ints(text: str, sep: str) -> list[int]:
    return [int(part) for part in text.split(sep)]


def rep_sequence(line: str) -> list[int] | None:
    """Reps from a whole dash-separated line such as ``21-15-9``."""
    m = PATTERNS["rep_scheme"].match(line.strip())
    if not m:
        return None
    return _split_ints(m.group(1).replace(" ", "").replace("\t", ""), "-")


def embedded_rep_sequence(text: str) -> list[int] | None:
    """Reps from a dash sequence anywhere in *text*, e.g. ``21-15-9 For Time``."""
    m = PATTERNS["dash_sequence"].search(text)
    if not m:
        return None
    return _split_ints(m.group(1), "-")


def slash_sequence(line: str) -> list[int] | None:
    """Reps from a whole slash-separated line such as ``10/8/6``."""
    m = PATTERNS["slash_scheme"].match(line.strip())
    if not m:
        return None
    return _split_ints(m.group(1).replace(" ", "").replace("\t", ""), "/")


def fixed_sequence(text: str, max_rounds: int = 100) -> list[int] | None:
    """Expand ``5 rounds of 10`` into ``[10, 10, 10, 10, 10]``."""
    m = PATTERNS["fixed_scheme"].search(text)
    if not m:
        return None
    rounds, reps = int(m.group(1)), int(m.group(2))
    if rounds < 2 or rounds > max_rounds or reps <= 0:
        return None
    return [reps] * rounds


def to_seconds(value: int | float, unit: str | None, default_unit: str = "sec") -> int:
    """Convert a number and a time unit to whole seconds."""
    unit = (unit or default_unit).lower()
    if unit.startswith("min"):
        return int(value * 60)
    return int(value)


def clock_seconds(minutes: str, seconds: str | None) -> int:
    return int(minutes) * 60 + int(seconds or 0)


def extract_time_cap(text: str) -> int | None:
    """Time cap in seconds from ``Time Cap: 20``, ``Cap 15:00``, ``20 min cap``."""
    m = PATTERNS["time_cap"].search(text)
    if not m:
        return None
    if m.group(1):
        return clock_seconds(m.group(1), m.group(2))
    return clock_seconds(m.group(3), m.group(4))


def normalize_load_unit(unit: str | None) -> str:
    """Canonical load unit; a missing unit means pounds."""
    if not unit:
        return "lb"
    return _LOAD_UNITS.get(unit.lower(), "lb")


def normalize_distance_unit(unit: str) -> str:
    return _DISTANCE_UNITS.get(unit.lower(), "m")
