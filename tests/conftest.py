import pytest

from core.copy_builders import generate_creative_package
from core.data_models import FormInputs, FunnelStage, Platform, ToneMode


@pytest.fixture
def fitpro_inputs():
    return FormInputs(
        product_name="FitPro",
        description="A 20+ character description of protein powder.",
        platforms=[Platform.YOUTUBE],
        funnel_stage=FunnelStage.COLD,
        tone_mode=ToneMode.AGGRESSIVE,
    )


@pytest.fixture
def fitpro_package(fitpro_inputs):
    return generate_creative_package(fitpro_inputs)


@pytest.fixture
def data_dir(tmp_path):
    """
    Empty store root for one test.
    """
    d = tmp_path / "store"
    d.mkdir()
    return d
