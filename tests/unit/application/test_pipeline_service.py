"""Unit tests for ReciprocalPipelineService.

Tests cover:
- flat_map pipeline results and short-circuiting
- comprehension and exception-style variants
- message and status code mapping
- report building
"""

from unittest.mock import Mock

import pytest

from disjunction.application import pipeline_service
from disjunction.application.pipeline_service import ReciprocalPipelineService, error_message
from disjunction.domain.errors import NotANumberError, ReciprocalError, ZeroReciprocalError
from disjunction.shared.config import Settings
from disjunction.shared.either import Left, Right


@pytest.fixture
def service() -> ReciprocalPipelineService:
    return ReciprocalPipelineService(Settings())


class TestMagic:
    """Tests for the flat_map pipeline."""

    def test_one(self, service: ReciprocalPipelineService) -> None:
        assert service.magic("1") == Right("1.0")

    def test_two(self, service: ReciprocalPipelineService) -> None:
        assert service.magic("2") == Right("0.5")

    def test_zero(self, service: ReciprocalPipelineService) -> None:
        assert service.magic("0") == Left(ReciprocalError.NO_ZERO_RECIPROCAL)

    def test_not_a_number(self, service: ReciprocalPipelineService) -> None:
        assert service.magic("a") == Left(ReciprocalError.NOT_A_NUMBER)

    @pytest.mark.parametrize("text", ["1" + "0" * 400, "1" * 5000])
    def test_huge_integers_are_not_a_number(
        self, service: ReciprocalPipelineService, text: str
    ) -> None:
        """Test oversized integers give a Left instead of raising."""
        assert service.magic(text) == Left(ReciprocalError.NOT_A_NUMBER)
        assert service.magic_binding(text) == Left(ReciprocalError.NOT_A_NUMBER)
        assert isinstance(service.magic_catching(text).value, NotANumberError)

    def test_parse_failure_skips_later_steps(
        self, service: ReciprocalPipelineService, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test reciprocal and stringify are never called after a parse failure."""
        reciprocal_spy = Mock()
        stringify_spy = Mock()
        monkeypatch.setattr(pipeline_service, "reciprocal", reciprocal_spy)
        monkeypatch.setattr(pipeline_service, "stringify", stringify_spy)

        assert service.magic("a") == Left(ReciprocalError.NOT_A_NUMBER)
        reciprocal_spy.assert_not_called()
        stringify_spy.assert_not_called()

    def test_reciprocal_failure_skips_stringify(
        self, service: ReciprocalPipelineService, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        stringify_spy = Mock()
        monkeypatch.setattr(pipeline_service, "stringify", stringify_spy)

        assert service.magic("0").is_left()
        stringify_spy.assert_not_called()

    def test_failure_logged(
        self, service: ReciprocalPipelineService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("INFO", logger="disjunction"):
            service.magic("a")

        assert "NOT_A_NUMBER" in caplog.text


class TestMagicVariants:
    """Tests for the comprehension and exception-style pipelines."""

    @pytest.mark.parametrize("text", ["1", "2", "5", "-4", "0", "a", ""])
    def test_binding_matches_flat_map(self, service: ReciprocalPipelineService, text: str) -> None:
        assert service.magic_binding(text) == service.magic(text)

    def test_catching_success(self, service: ReciprocalPipelineService) -> None:
        assert service.magic_catching("2") == Right("0.5")

    def test_catching_not_a_number(self, service: ReciprocalPipelineService) -> None:
        result = service.magic_catching("a")

        assert result.is_left()
        assert isinstance(result.value, NotANumberError)

    def test_catching_zero(self, service: ReciprocalPipelineService) -> None:
        result = service.magic_catching("0")

        assert isinstance(result.value, ZeroReciprocalError)
        assert result.value.error is ReciprocalError.NO_ZERO_RECIPROCAL


class TestDescribe:
    """Tests for describe and error_message."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2", "Got reciprocal: 0.5"),
            ("a", "Not a number!"),
            ("0", "Can't take reciprocal of 0!"),
        ],
    )
    def test_describe(self, service: ReciprocalPipelineService, text: str, expected: str) -> None:
        assert service.describe(text) == expected

    def test_every_error_has_a_message(self) -> None:
        for error in ReciprocalError:
            assert error_message(error)


class TestStatusCode:
    """Tests for status code mapping."""

    def test_success(self, service: ReciprocalPipelineService) -> None:
        assert service.status_code("5") == 200

    def test_not_a_number(self, service: ReciprocalPipelineService) -> None:
        assert service.status_code("a") == 400

    def test_zero(self, service: ReciprocalPipelineService) -> None:
        assert service.status_code("0") == 422

    def test_configured_codes(self) -> None:
        settings = Settings(not_a_number_status=418, zero_reciprocal_status=409)
        service = ReciprocalPipelineService(settings)

        assert service.status_code("a") == 418
        assert service.status_code("0") == 409


class TestReport:
    """Tests for report building."""

    def test_success_report(self, service: ReciprocalPipelineService) -> None:
        report = service.report("2")

        assert report.input == "2"
        assert report.value == "0.5"
        assert report.error is None
        assert report.message == "Got reciprocal: 0.5"
        assert report.status_code == 200

    def test_failure_report(self, service: ReciprocalPipelineService) -> None:
        report = service.report("0")

        assert report.value is None
        assert report.error is ReciprocalError.NO_ZERO_RECIPROCAL
        assert report.message == "Can't take reciprocal of 0!"
        assert report.status_code == 422

    def test_default_settings(self) -> None:
        service = ReciprocalPipelineService()
        assert service.settings.not_a_number_status == 400
