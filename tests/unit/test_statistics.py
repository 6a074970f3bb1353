from vectorizer.extraction.models import ExtractedText
from vectorizer.processor.models import ItemResult, JobOutcome
from vectorizer.report.statistics import (
    ExtractionStatistics,
    RunStatistics,
    format_rate,
    round_half_up,
)


def _outcome(
    success: bool = True,
    skipped: bool = False,
    chunks: int = 0,
    extraction: ExtractedText | None = None,
) -> JobOutcome:
    return JobOutcome(
        result=ItemResult(
            file_id="id",
            file_name="doc.pdf",
            success=success,
            skipped=skipped,
            chunks=chunks,
            error=None if success else "err",
        ),
        extraction=extraction,
    )


ACCEPTED = ExtractedText(content="x" * 120, accepted=True, characters=120)
REJECTED = ExtractedText(content="[placeholder]", accepted=False, characters=40)


class TestRunStatistics:
    def test_starts_empty(self) -> None:
        stats = RunStatistics()
        assert (stats.processed, stats.successful, stats.errors) == (0, 0, 0)

    def test_record_returns_new_value(self) -> None:
        initial = RunStatistics()
        updated = initial.record(_outcome())
        assert initial.processed == 0
        assert updated.processed == 1

    def test_counts_success_and_errors(self) -> None:
        stats = RunStatistics()
        for outcome in [_outcome(), _outcome(success=False), _outcome()]:
            stats = stats.record(outcome)
        assert (stats.processed, stats.successful, stats.errors) == (3, 2, 1)

    def test_skip_does_not_add_chunks(self) -> None:
        stats = RunStatistics().record(_outcome(chunks=5)).record(_outcome(skipped=True))
        assert stats.chunks_created == 5
        assert stats.skipped == 1
        assert stats.successful == 2

    def test_rejected_extraction_counts_as_failed(self) -> None:
        stats = RunStatistics().record(_outcome(extraction=REJECTED))
        assert stats.extraction.failed == 1
        assert stats.extraction.successful == 0
        assert stats.extraction.total_characters == 0

    def test_characters_only_from_accepted(self) -> None:
        stats = (
            RunStatistics()
            .record(_outcome(extraction=ACCEPTED))
            .record(_outcome(extraction=REJECTED))
        )
        assert stats.extraction.total_characters == 120

    def test_no_extraction_leaves_extraction_stats(self) -> None:
        stats = RunStatistics().record(_outcome(success=False))
        assert stats.extraction == ExtractionStatistics()

    def test_rates(self) -> None:
        stats = RunStatistics()
        for outcome in [
            _outcome(extraction=ACCEPTED),
            _outcome(extraction=ACCEPTED),
            _outcome(success=False, extraction=REJECTED),
        ]:
            stats = stats.record(outcome)
        assert stats.success_rate == "66.67"
        assert stats.extraction_success_rate == "66.67"

    def test_rates_with_nothing_processed(self) -> None:
        stats = RunStatistics()
        assert stats.success_rate == "0.00"
        assert stats.extraction_success_rate == "0.00"


class TestExtractionStatistics:
    def test_average_is_zero_without_successes(self) -> None:
        assert ExtractionStatistics(failed=3).average_characters == 0

    def test_average_rounds(self) -> None:
        stats = ExtractionStatistics(successful=3, total_characters=100)
        assert stats.average_characters == 33

    def test_average_rounds_half_up(self) -> None:
        stats = ExtractionStatistics(successful=2, total_characters=5)
        assert stats.average_characters == 3


class TestHelpers:
    def test_round_half_up(self) -> None:
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2

    def test_format_rate(self) -> None:
        assert format_rate(1, 3) == "33.33"
        assert format_rate(3, 3) == "100.00"
        assert format_rate(0, 0) == "0.00"
