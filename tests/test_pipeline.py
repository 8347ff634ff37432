"""
Tests for the IdeaGenerationPipeline.
"""

import json
import pytest
from unittest.mock import MagicMock

from sidehustle.errors import MissingFieldsError, ModelOutputNotJSONError, ModelOutputShapeError
from sidehustle.pipeline import IdeaGenerationPipeline
from sidehustle.services.quality_service import QualityService


@pytest.fixture
def mock_ai_service(sample_idea_set):
    """Fixture providing a mocked AI service returning a valid idea set."""
    mock_service = MagicMock()
    mock_service.generate.return_value = json.dumps(sample_idea_set)
    return mock_service


@pytest.fixture
def pipeline(mock_ai_service):
    """Fixture providing a pipeline with a mocked AI service."""
    return IdeaGenerationPipeline(ai_service=mock_ai_service, quality_service=QualityService())


class TestIdeaGenerationPipeline:
    """Tests for the IdeaGenerationPipeline."""

    def test_run_success(self, pipeline, mock_ai_service, sample_profile):
        result = pipeline.run(sample_profile)

        assert len(result["ideas"]) == 3
        for idea in result["ideas"]:
            assert len(idea["sections"]) == 10
            assert len(idea["firstThreeSteps"]) == 3
            assert 1 <= idea["difficulty"] <= 10
            assert 1 <= idea["worthiness"] <= 10

        mock_ai_service.generate.assert_called_once()
        messages = mock_ai_service.generate.call_args.args[0]
        assert len(messages) == 3

    def test_missing_fields_skip_generation(self, pipeline, mock_ai_service):
        with pytest.raises(MissingFieldsError):
            pipeline.run({"age": 30, "location": "NY"})

        mock_ai_service.generate.assert_not_called()

    def test_scores_are_clamped(self, pipeline, mock_ai_service, sample_profile, sample_idea_set):
        sample_idea_set["ideas"][0]["difficulty"] = 15
        sample_idea_set["ideas"][1]["difficulty"] = "abc"
        sample_idea_set["ideas"][2]["worthiness"] = -2
        mock_ai_service.generate.return_value = json.dumps(sample_idea_set)

        result = pipeline.run(sample_profile)

        assert result["ideas"][0]["difficulty"] == 10
        assert result["ideas"][1]["difficulty"] == 1
        assert result["ideas"][2]["worthiness"] == 1

    def test_duplicate_titles_are_renamed(self, pipeline, mock_ai_service, sample_profile, sample_idea_set):
        sample_idea_set["ideas"][1]["title"] = sample_idea_set["ideas"][0]["title"]
        mock_ai_service.generate.return_value = json.dumps(sample_idea_set)

        result = pipeline.run(sample_profile)

        first, second = result["ideas"][0]["title"], result["ideas"][1]["title"]
        assert first != second
        assert second.endswith("— Alt")

    def test_non_json_output(self, pipeline, mock_ai_service, sample_profile):
        mock_ai_service.generate.return_value = "not json"

        with pytest.raises(ModelOutputNotJSONError) as exc_info:
            pipeline.run(sample_profile)

        assert exc_info.value.to_dict() == {"error": "Invalid model output (not JSON)", "detail": "not json"}

    def test_non_json_output_detail_is_truncated(self, pipeline, mock_ai_service, sample_profile):
        raw_text = "x" * 2000
        mock_ai_service.generate.return_value = raw_text

        with pytest.raises(ModelOutputNotJSONError) as exc_info:
            pipeline.run(sample_profile)

        detail = exc_info.value.detail
        assert len(detail) == 500
        assert raw_text.startswith(detail)

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_are_not_json(
        self, pipeline, mock_ai_service, sample_profile, sample_idea_set, constant
    ):
        raw_text = json.dumps(sample_idea_set).replace("49.999", constant, 1)
        mock_ai_service.generate.return_value = raw_text

        with pytest.raises(ModelOutputNotJSONError) as exc_info:
            pipeline.run(sample_profile)

        assert exc_info.value.error == "Invalid model output (not JSON)"
        assert raw_text.startswith(exc_info.value.detail)
        assert len(exc_info.value.detail) <= 500

    @pytest.mark.parametrize("raw_text", [
        '{"ideas": []}',
        '{"ideas": [{}, {}]}',
        '{"ideas": [{}, {}, {}, {}]}',
        '{"other": 1}',
        '[1, 2, 3]',
        '"ideas"',
    ])
    def test_wrong_shape(self, pipeline, mock_ai_service, sample_profile, raw_text):
        mock_ai_service.generate.return_value = raw_text

        with pytest.raises(ModelOutputShapeError) as exc_info:
            pipeline.run(sample_profile)

        assert exc_info.value.status_code == 500
        assert exc_info.value.to_dict() == {
            "error": "Invalid model output",
            "detail": "Expected `ideas` array with exactly 3 items.",
        }

    def test_upstream_errors_propagate(self, pipeline, mock_ai_service, sample_profile):
        mock_ai_service.generate.side_effect = ConnectionError("upstream down")

        with pytest.raises(ConnectionError):
            pipeline.run(sample_profile)
