import sys
import os

import pytest

# Add the project root to sys.path so the package imports without installation
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from chromaramp.palette import PaletteConfig, Section


@pytest.fixture
def primary_section():
    return Section(name="primary", color="#3366ff", generate_contrast=True, inverse=False)


@pytest.fixture
def grey_section():
    return Section(name="grey", color="#808080", generate_contrast=True, inverse=False)


@pytest.fixture
def two_section_config(primary_section):
    return PaletteConfig(
        sections=(primary_section, Section(name="accent", color="#ff8000", generate_contrast=False)),
        strategy="lab-step",
    )
