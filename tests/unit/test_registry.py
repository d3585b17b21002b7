import pytest

from training_generator.ingestion.models import SupportedFileType
from training_generator.outputs.registry import (
    OUTPUT_REGISTRY,
    OutputType,
    all_output_types,
    applicable_outputs,
    concrete_output_types,
    get_output_config,
    is_output_applicable,
)


class TestRegistry:
    def test_every_output_type_is_registered(self) -> None:
        assert set(OUTPUT_REGISTRY) == set(OutputType)
        assert len(all_output_types()) == 10

    def test_concrete_types_exclude_auto(self) -> None:
        concrete = concrete_output_types()
        assert OutputType.AUTO not in concrete
        assert len(concrete) == 9

    def test_concrete_fragments_describe_summary_and_print(self) -> None:
        for output_type in concrete_output_types():
            fragment = get_output_config(output_type).prompt_fragment
            assert "END SUMMARY" in fragment, output_type
            assert "window.print()" in fragment, output_type

    def test_auto_accepts_everything_with_empty_fragment(self) -> None:
        config = get_output_config(OutputType.AUTO)
        assert config.applicable_inputs == frozenset(SupportedFileType)
        assert config.prompt_fragment == ""


class TestApplicableOutputs:
    def test_csv_outputs_in_declaration_order(self) -> None:
        ids = [c.id for c in applicable_outputs(SupportedFileType.CSV)]
        assert ids == [
            OutputType.COMMISSION_TYCOON,
            OutputType.FLASHCARD_DRILL,
            OutputType.INTERACTIVE_TIMELINE,
            OutputType.SCENARIO_BUILDER,
        ]

    def test_image_outputs(self) -> None:
        ids = [c.id for c in applicable_outputs(SupportedFileType.IMAGE)]
        assert ids == [OutputType.DAMAGE_DETECTIVE, OutputType.INSPECTION_WALKTHROUGH]

    def test_video_only_has_auto(self) -> None:
        assert applicable_outputs(SupportedFileType.VIDEO) == []
        assert is_output_applicable(OutputType.AUTO, SupportedFileType.VIDEO)

    @pytest.mark.parametrize("file_type", list(SupportedFileType))
    def test_never_includes_auto(self, file_type: SupportedFileType) -> None:
        assert all(c.id is not OutputType.AUTO for c in applicable_outputs(file_type))

    def test_is_output_applicable(self) -> None:
        assert is_output_applicable(OutputType.DAMAGE_DETECTIVE, SupportedFileType.PDF)
        assert not is_output_applicable(OutputType.DAMAGE_DETECTIVE, SupportedFileType.CSV)
