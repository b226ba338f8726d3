"""Workout parsing pipeline shared by the CLI and library callers."""

import asyncio
import logging
from typing import Iterable

from .config import Config, config
from .movements import InMemoryMovementDictionary, MovementDictionary
from .parsing.aggregator import IssueAggregator
from .parsing.errors import ParsingErrorCode, ParsingSeverity, create_issue
from .parsing.input_validator import InputValidator
from .parsing.movement_line import MovementLineParser, MovementParseResult
from .parsing.patterns import has_digit
from .parsing.preprocessor import PreprocessedText, TextPreprocessor
from .parsing.result_validator import ResultValidator
from .parsing.schemas import IssueRecord, ParsedMovement, ParsedWorkout, ParseResult
from .parsing.type_detector import TypeDetectionResult, TypeDetector

logger = logging.getLogger(__name__)


class WorkoutParser:
    """Turns free-text workouts into ``ParseResult``s.

    Every call gets its own issue aggregator, so one parser can serve any
    number of concurrent parses.
    """

    def __init__(
        self,
        dictionary: MovementDictionary | None = None,
        settings: Config | None = None,
    ) -> None:
        self.settings = settings or config
        self.dictionary = dictionary if dictionary is not None else InMemoryMovementDictionary()
        self._input_validator = InputValidator(self.settings.parser)
        self._preprocessor = TextPreprocessor()
        self._detector = TypeDetector()
        self._line_parser = MovementLineParser(self.dictionary, self.settings.parser)
        self._result_validator = ResultValidator(self.settings.scoring)

    async def parse(self, text: str | None) -> ParseResult:
        """Parse *text*, bounded by the configured timeout if there is one."""
        timeout = self.settings.parser.parse_timeout_seconds
        if timeout is None:
            return await self._parse(text)
        try:
            return await asyncio.wait_for(self._parse(text), timeout)
        except asyncio.TimeoutError:
            logger.warning("Parse timed out after %.2fs", timeout)
            aggregator = self._new_aggregator()
            aggregator.add(create_issue(ParsingErrorCode.TIMEOUT, ParsingSeverity.ERROR))
            return self._failure(text, aggregator)

    async def parse_many(self, texts: Iterable[str]) -> list[ParseResult]:
        """Parse several workouts concurrently, preserving order."""
        return list(await asyncio.gather(*(self.parse(text) for text in texts)))

    def validate(self, text: str | None) -> list[IssueRecord]:
        """Quick structural checks without running the pipeline."""
        parser = self.settings.parser
        if not text or not text.strip():
            issue = create_issue(ParsingErrorCode.EMPTY_INPUT, ParsingSeverity.ERROR)
        elif len(text.strip()) > parser.max_input_length:
            issue = create_issue(
                ParsingErrorCode.INPUT_TOO_LONG, ParsingSeverity.ERROR, parser.max_input_length
            )
        elif len(text.strip()) < parser.min_input_length:
            issue = create_issue(
                ParsingErrorCode.INPUT_TOO_SHORT, ParsingSeverity.ERROR, context=text.strip()
            )
        elif not has_digit(text):
            issue = create_issue(ParsingErrorCode.NO_WORKOUT_STRUCTURE, ParsingSeverity.ERROR)
        else:
            return []
        return [IssueRecord.from_issue(issue)]

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _new_aggregator(self) -> IssueAggregator:
        return IssueAggregator(max_errors=self.settings.parser.max_error_count)

    async def _parse(self, text: str | None) -> ParseResult:
        aggregator = self._new_aggregator()

        validation = self._input_validator.validate(text)
        if not validation.is_valid:
            aggregator.add_all(validation.errors)
            return self._failure(text, aggregator)
        aggregator.add_all(validation.warnings)

        preprocessed = self._preprocessor.process(validation.sanitized_text)
        detection = self._detector.detect(preprocessed)
        results = await self._parse_lines(preprocessed)
        workout = self._build_workout(text, preprocessed, detection, results)

        result = self._result_validator.validate(workout, detection, results, aggregator)
        logger.info(
            "Parsed %s with %d movement(s), confidence %d",
            workout.workout_type.value,
            len(workout.movements),
            result.confidence,
        )
        return result

    async def _parse_lines(self, preprocessed: PreprocessedText) -> list[MovementParseResult]:
        """Parse movement lines in order; yields to the loop between lines."""
        results: list[MovementParseResult] = []
        parsed = 0
        for index, line in enumerate(preprocessed.movement_lines):
            if index:
                # cancellation checkpoint
                await asyncio.sleep(0)
            result = await self._line_parser.parse(
                line,
                sequence_order=parsed + 1,
                line_number=preprocessed.movement_line_numbers[index],
            )
            if result.success:
                parsed += 1
            results.append(result)
        return results

    @staticmethod
    def _build_workout(
        text: str,
        preprocessed: PreprocessedText,
        detection: TypeDetectionResult,
        results: list[MovementParseResult],
    ) -> ParsedWorkout:
        movements: list[ParsedMovement] = []
        for index, result in enumerate(results):
            if not result.success or result.movement is None:
                continue
            movement = result.movement
            scheme = preprocessed.movement_rep_schemes.get(index)
            if scheme is not None:
                movement = movement.model_copy(update={"rep_scheme": scheme})
            movements.append(movement)

        rep_scheme = preprocessed.rep_scheme
        if rep_scheme is None and not preprocessed.movement_rep_schemes:
            rep_scheme = detection.rep_scheme

        return ParsedWorkout(
            name=preprocessed.title,
            workout_type=detection.workout_type,
            time_cap_seconds=detection.time_cap_seconds,
            round_count=detection.round_count,
            interval_seconds=detection.interval_seconds,
            rep_scheme=rep_scheme,
            movements=movements,
            original_text=text,
            normalized_text=preprocessed.normalized_text,
        )

    @staticmethod
    def _failure(text: str | None, aggregator: IssueAggregator) -> ParseResult:
        return ParseResult(
            success=False,
            workout=ParsedWorkout(original_text=text or ""),
            confidence=0,
            errors=[IssueRecord.from_issue(i) for i in aggregator.errors],
            warnings=[IssueRecord.from_issue(i) for i in aggregator.warnings + aggregator.info],
        )
