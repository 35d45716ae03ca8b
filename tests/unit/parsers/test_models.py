import warnings

import pytest
from pydantic import BaseModel, ConfigDict, ValidationError

from nfo_kit.parsers.models import ParseDiagnostic


def _diagnostic() -> ParseDiagnostic:
    return ParseDiagnostic(
        line_number=3, field="general.chapters", value="forty", message="bad"
    )


class TestParseDiagnostic:
    def test_is_frozen(self) -> None:
        diagnostic = _diagnostic()

        with pytest.raises(ValidationError):
            diagnostic.value = "modified"  # type: ignore

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            ParseDiagnostic(
                line_number=1, field="line", value="", message="", extra="x"
            )  # type: ignore[call-arg]

    def test_is_hashable_and_comparable(self) -> None:
        assert _diagnostic() == _diagnostic()
        assert len({_diagnostic(), _diagnostic()}) == 1

    def test_config_style_raises_no_deprecation_warning(self) -> None:
        """Same model config as ParseDiagnostic, defined under warnings-as-errors."""
        assert ParseDiagnostic.model_config == {"extra": "forbid", "frozen": True}

        with warnings.catch_warnings():
            warnings.simplefilter("error")

            class Sample(BaseModel):
                value: str

                model_config = ConfigDict(**ParseDiagnostic.model_config)

        assert Sample(value="x").value == "x"
