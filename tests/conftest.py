import matplotlib

matplotlib.use("Agg")

import pytest

from textsum.preprocessing import preprocess_text

PETS_TEXT = "Cats are great. Dogs are great too. Cats and dogs are pets."

ANIMALS_TEXT = (
    "Cats chase mice in the barn. "
    "Cats chase birds in the garden. "
    "Fish swim quietly. "
    "The barn cats sleep after they chase mice. "
    "Nobody knows why!"
)


@pytest.fixture
def pets_text():
    return PETS_TEXT


@pytest.fixture
def animals_text():
    return ANIMALS_TEXT


@pytest.fixture
def pets_doc():
    return preprocess_text(PETS_TEXT)


@pytest.fixture
def animals_doc():
    return preprocess_text(ANIMALS_TEXT, initial_score=1.0)
